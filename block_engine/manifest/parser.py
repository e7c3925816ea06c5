"""
Manifest parser — SiteManifest → blocs racines → markup + theme.json.

Sections désactivées ignorées, tri par `order`, placeholders {clé} résolus
dans la config, layouts manquants tirés selon le secteur (si renseigné).
"""
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ValidationError

from ..core.schemas import BlockNode
from ..errors import BlockEngineError
from ..patterns import create_pattern, is_known_section, normalize_section_type
from ..patterns.variety import select_page_layouts
from ..renderer.serializer import serialize_blocks
from ..theme.generator import generate_theme_json
from .schema import SiteManifest, SectionEntry

log = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class SiteOutput(BaseModel):
    markup: str
    theme: Dict[str, Any]


def resolve_placeholders(text: str, context: Optional[dict] = None) -> str:
    """
    Remplace {city}, {price}… par les valeurs du contexte.
    Les placeholders sans correspondance sont laissés intacts.
    """
    if not context or not text:
        return text
    return _PLACEHOLDER.sub(lambda m: str(context.get(m.group(1), m.group(0))), text)


def _resolve_strings(obj: Any, ctx: dict) -> Any:
    """Parcourt récursivement un dict/list/str et résout les placeholders."""
    if isinstance(obj, str):
        return resolve_placeholders(obj, ctx)
    if isinstance(obj, dict):
        return {k: _resolve_strings(v, ctx) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_resolve_strings(v, ctx) for v in obj]
    return obj


def _build_section(section: SectionEntry, layouts: Dict[str, str], ctx: dict) -> Optional[BlockNode]:
    key = normalize_section_type(section.type)
    if not is_known_section(key):
        log.warning("Section %r ignorée : type inconnu", section.type)
        return None
    layout = section.layout or layouts.get(key)
    return create_pattern(key, _resolve_strings(section.config, ctx), layout)


def build_blocks(manifest: SiteManifest) -> List[BlockNode]:
    """
    Convertit un SiteManifest en blocs racines, dans l'ordre de la page.

    1. Filtre les sections désactivées, trie par `order`
    2. Tire les layouts manquants (industry + seed)
    3. Résout les placeholders puis compose chaque section
    """
    layouts = select_page_layouts(manifest.industry, manifest.seed) if manifest.industry else {}
    blocks = []
    for section in sorted(manifest.sections, key=lambda s: s.order):
        if not section.enabled:
            continue
        node = _build_section(section, layouts, manifest.placeholder_context)
        if node is not None:
            blocks.append(node)
    log.info("Manifest %r : %d section(s) composée(s)", manifest.title, len(blocks))
    return blocks


def render_manifest(manifest: Union[SiteManifest, dict]) -> SiteOutput:
    """Manifest → SiteOutput(markup, theme)."""
    if not isinstance(manifest, SiteManifest):
        manifest = SiteManifest.model_validate(manifest)
    return SiteOutput(
        markup=serialize_blocks(build_blocks(manifest)),
        theme=generate_theme_json(manifest.theme),
    )


def load_json(path: Union[str, Path]) -> Any:
    """Lit un fichier JSON. Fichier absent ou JSON invalide → BlockEngineError."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise BlockEngineError(f"Lecture impossible : {path} ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise BlockEngineError(f"JSON invalide dans {path} : {exc}") from exc


def load_manifest(path: Union[str, Path]) -> SiteManifest:
    data = load_json(path)
    try:
        return SiteManifest.model_validate(data)
    except ValidationError as exc:
        raise BlockEngineError(f"Manifest invalide ({path}) : {exc}") from exc
