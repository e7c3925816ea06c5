"""
Configuration du block engine.
Constantes du format + réglages surchargeables par variables d'environnement.
"""
import os

# ── Format block grammar ─────────────────────────────────────────────────────
BLOCK_NAMESPACE = "core/"
DEFAULT_SPACER_HEIGHT = "100px"
DEFAULT_HEADING_LEVEL = 2

# ── theme.json ───────────────────────────────────────────────────────────────
THEME_SCHEMA_URL = "https://schemas.wp.org/trunk/theme.json"
THEME_VERSION = 3

# ── Environnement ────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("BLOCK_ENGINE_LOG_LEVEL", "INFO").upper()
JSON_INDENT = int(os.getenv("BLOCK_ENGINE_JSON_INDENT", "2"))
