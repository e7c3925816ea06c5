"""Erreurs du block engine (frontière fichiers / CLI uniquement)."""


class BlockEngineError(Exception):
    """Entrée illisible : fichier absent, JSON invalide, manifest non conforme."""
    pass
