"""
Base des patterns de sections.

- SectionConfig / ConfigItem : configs pydantic tolérantes (tout a un défaut,
  alias camelCase acceptés, clés inconnues ignorées)
- helpers de construction de BlockNode (les conteneurs posent eux-mêmes
  leurs placeholders)
- dispatch layout → stratégie avec fallback sur le layout par défaut
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from ..core.schemas import BlockNode

log = logging.getLogger(__name__)

C = TypeVar("C", bound="SectionConfig")


class ConfigItem(BaseModel):
    """Élément de liste d'une section (feature, témoignage, plan…)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """`null` JSON → défaut du champ."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class SectionConfig(ConfigItem):
    """Config de section. `layout` optionnel, surchargé par l'argument explicite."""
    layout: Optional[str] = None

    @classmethod
    def coerce(cls: Type[C], config: Any) -> C:
        """Accepte une instance, un dict (snake_case ou camelCase) ou None."""
        if isinstance(config, cls):
            return config
        return cls.model_validate(config or {})


Strategy = Callable[[Any], BlockNode]


def resolve_layout(
    layouts: Dict[str, Strategy],
    requested: Optional[str],
    default: str,
    section: str = "",
) -> Strategy:
    """Layout demandé → stratégie ; absent ou inconnu → stratégie par défaut."""
    if requested and requested in layouts:
        return layouts[requested]
    if requested:
        log.debug("Layout %r inconnu pour %s, fallback %r", requested, section, default)
    return layouts[default]


# ── Construction de nœuds ────────────────────────────────────────────────────

def leaf(name: str, attributes: Optional[Dict[str, Any]] = None, content: Optional[str] = None) -> BlockNode:
    """Bloc feuille. Sans contenu → inner_content vide (spacer, image, separator)."""
    return BlockNode(
        name=name,
        attributes=attributes or {},
        inner_content=[] if content is None else [content],
    )


def container(name: str, attributes: Optional[Dict[str, Any]] = None, children: Sequence[BlockNode] = ()) -> BlockNode:
    """Bloc conteneur : un placeholder par enfant, dans l'ordre."""
    kids = list(children)
    return BlockNode(
        name=name,
        attributes=attributes or {},
        inner_content=[None] * len(kids),
        inner_blocks=kids,
    )


def heading(text: str, level: int = 2, **attrs: Any) -> BlockNode:
    return leaf("core/heading", {"level": level, **attrs}, text)


def paragraph(text: str, **attrs: Any) -> BlockNode:
    return leaf("core/paragraph", attrs, text)


def spacer(height: str) -> BlockNode:
    return leaf("core/spacer", {"height": height})


def separator(**attrs: Any) -> BlockNode:
    return leaf("core/separator", attrs)


def image(url: str, **attrs: Any) -> BlockNode:
    return leaf("core/image", {"url": url, **attrs})


def button(text: str, url: str, **attrs: Any) -> BlockNode:
    return leaf("core/button", {"url": url, "text": text, **attrs}, text)


def buttons(items: Sequence[BlockNode], justify: Optional[str] = None, **attrs: Any) -> BlockNode:
    if justify:
        attrs = {"layout": {"type": "flex", "justifyContent": justify}, **attrs}
    return container("core/buttons", attrs, items)


def group(children: Sequence[BlockNode], **attrs: Any) -> BlockNode:
    return container("core/group", attrs, children)


def columns(children: Sequence[BlockNode], **attrs: Any) -> BlockNode:
    return container("core/columns", attrs, children)


def column(children: Sequence[BlockNode] = (), **attrs: Any) -> BlockNode:
    return container("core/column", attrs, children)


def link_list(links: Sequence[Any], **attrs: Any) -> BlockNode:
    """Liste de liens (objets avec .text / .url)."""
    items = [leaf("core/list-item", {}, anchor(link.url, link.text)) for link in links]
    return container("core/list", attrs, items)


def anchor(url: str, text: str) -> str:
    return f'<a href="{url}">{text}</a>'


def padding(top: str, bottom: str, left: Optional[str] = None, right: Optional[str] = None) -> Dict[str, Any]:
    """Attribut style.spacing.padding."""
    pad = {"top": top, "bottom": bottom}
    if left is not None:
        pad["left"] = left
    if right is not None:
        pad["right"] = right
    return {"spacing": {"padding": pad}}


def section_group(children: Sequence[BlockNode], top: str = "60px", bottom: str = "60px", **attrs: Any) -> BlockNode:
    """Groupe racine standard d'une section (constrained + padding vertical)."""
    layout = attrs.pop("layout", {"type": "constrained"})
    return group(children, layout=layout, style=padding(top, bottom), **attrs)


def section_header(title: Optional[str], subtitle: Optional[str] = None, spacer_height: Optional[str] = "40px",
                   subtitle_size: Optional[str] = None) -> List[BlockNode]:
    """Titre h2 centré + sous-titre optionnel + spacer. Titre vide → rien."""
    blocks: List[BlockNode] = []
    if title:
        blocks.append(heading(title, level=2, textAlign="center"))
    if subtitle:
        attrs = {"align": "center"}
        if subtitle_size:
            attrs["fontSize"] = subtitle_size
        blocks.append(paragraph(subtitle, **attrs))
    if blocks and spacer_height:
        blocks.append(spacer(spacer_height))
    return blocks


def chunked(items: Sequence[Any], size: int) -> List[List[Any]]:
    """Découpe en lignes de `size` éléments, ordre conservé, dernière ligne éventuellement plus courte."""
    size = max(1, size)
    return [list(items[i:i + size]) for i in range(0, len(items), size)]
