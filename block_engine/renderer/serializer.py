"""
Sérialiseur block grammar — BlockNode → markup Gutenberg.

Format :
    <!-- wp:{short_name} {attrs_json} -->
    {html}
    <!-- /wp:{short_name} -->

Dispatch par nom de bloc (BLOCK_RENDERERS), fallback générique pour les noms
inconnus. Le contenu HTML (inner_content) est considéré comme fiable : aucun
échappement, seul le JSON des attributs est encodé.
"""
import json
import logging
from typing import Any, Callable, Dict, Iterable, Optional

from ..config import BLOCK_NAMESPACE, DEFAULT_HEADING_LEVEL, DEFAULT_SPACER_HEIGHT
from ..core.schemas import BlockNode

log = logging.getLogger(__name__)

BlockRenderer = Callable[[BlockNode, str], str]


# ── Point d'entrée public ───────────────────────────────────────────────────

def serialize_block(block: BlockNode) -> str:
    """
    Sérialise un bloc et tous ses descendants.

    Parcours post-ordre avec pile explicite : la profondeur de l'arbre ne
    consomme pas la pile d'appels Python.
    """
    rendered: Dict[int, str] = {}
    stack = [(block, False)]
    while stack:
        node, expanded = stack.pop()
        children = node.inner_blocks or []
        if expanded or not children:
            inner = "\n".join(rendered[id(child)] for child in children)
            rendered[id(node)] = _renderer_for(node.name)(node, inner)
        else:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(children))
    return rendered[id(block)]


def serialize_blocks(blocks: Iterable[BlockNode]) -> str:
    """Sérialise une suite de blocs racine, séparés par une ligne vide."""
    return "\n\n".join(serialize_block(b) for b in blocks)


# ── Commentaires / attributs ─────────────────────────────────────────────────

def short_name(block_name: str) -> str:
    return block_name.removeprefix(BLOCK_NAMESPACE)


def encode_attributes(attributes: Dict[str, Any]) -> str:
    """
    JSON compact et déterministe des attributs.
    Clés à None ou "" retirées ; None retirés aussi dans les objets imbriqués.
    """
    filtered = {
        key: _drop_none(value)
        for key, value in attributes.items()
        if value is not None and value != ""
    }
    if not filtered:
        return ""
    return json.dumps(filtered, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def open_comment(block_name: str, attributes: Dict[str, Any]) -> str:
    attrs_json = encode_attributes(attributes)
    if not attrs_json:
        return f"<!-- wp:{short_name(block_name)} -->"
    return f"<!-- wp:{short_name(block_name)} {attrs_json} -->"


def close_comment(block_name: str) -> str:
    return f"<!-- /wp:{short_name(block_name)} -->"


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value]
    return value


def _wrap(block: BlockNode, html: str, attributes: Optional[Dict[str, Any]] = None) -> str:
    attrs = block.attributes if attributes is None else attributes
    return f"{open_comment(block.name, attrs)}\n{html}\n{close_comment(block.name)}"


# ── Classes CSS dérivées ─────────────────────────────────────────────────────

def alignment_class(align: Optional[str]) -> str:
    return f"has-text-align-{align}" if align else ""


def background_color_class(color: Optional[str]) -> str:
    return f"has-{color}-background-color" if color else ""


def class_string(*classes: str) -> str:
    """Classe de base d'abord, puis classes dérivées ; contributions vides ignorées."""
    return " ".join(c for c in classes if c)


def _text(block: BlockNode) -> str:
    content = block.inner_content[0] if block.inner_content else None
    return content or ""


# ── Renderers feuilles ───────────────────────────────────────────────────────

def render_heading(block: BlockNode, inner: str) -> str:
    level = block.attributes.get("level") or DEFAULT_HEADING_LEVEL
    classes = class_string("wp-block-heading", alignment_class(block.attributes.get("textAlign")))

    # Le niveau par défaut n'est pas encodé mais pilote toujours la balise
    attrs = dict(block.attributes)
    if level == DEFAULT_HEADING_LEVEL:
        attrs.pop("level", None)

    return _wrap(block, f'<h{level} class="{classes}">{_text(block)}</h{level}>', attrs)


def render_paragraph(block: BlockNode, inner: str) -> str:
    classes = alignment_class(block.attributes.get("align"))
    class_attr = f' class="{classes}"' if classes else ""
    return _wrap(block, f"<p{class_attr}>{_text(block)}</p>")


def render_image(block: BlockNode, inner: str) -> str:
    a = block.attributes
    img_attrs = f'src="{a.get("url") or ""}"'
    if a.get("alt"):
        img_attrs += f' alt="{a["alt"]}"'
    if a.get("width"):
        img_attrs += f' width="{a["width"]}"'
    if a.get("height"):
        img_attrs += f' height="{a["height"]}"'

    caption = a.get("caption")
    figcaption = f'<figcaption class="wp-element-caption">{caption}</figcaption>' if caption else ""
    return _wrap(block, f'<figure class="wp-block-image"><img {img_attrs}/>{figcaption}</figure>')


def render_button(block: BlockNode, inner: str) -> str:
    a = block.attributes
    classes = class_string(
        "wp-block-button__link",
        "wp-element-button",
        background_color_class(a.get("backgroundColor")),
    )
    text = _text(block) or a.get("text") or ""
    href = a.get("url") or "#"
    return _wrap(block, f'<div class="wp-block-button"><a class="{classes}" href="{href}">{text}</a></div>')


def render_spacer(block: BlockNode, inner: str) -> str:
    height = block.attributes.get("height") or DEFAULT_SPACER_HEIGHT
    return _wrap(block, f'<div style="height:{height}" aria-hidden="true" class="wp-block-spacer"></div>')


def render_separator(block: BlockNode, inner: str) -> str:
    classes = class_string("wp-block-separator", block.attributes.get("className") or "")
    return _wrap(block, f'<hr class="{classes}"/>')


def render_list_item(block: BlockNode, inner: str) -> str:
    return _wrap(block, f"<li>{_text(block)}</li>")


# ── Renderers conteneurs ─────────────────────────────────────────────────────

def render_group(block: BlockNode, inner: str) -> str:
    classes = class_string("wp-block-group", background_color_class(block.attributes.get("backgroundColor")))
    return _wrap(block, f'<div class="{classes}">\n{inner}\n</div>')


def render_columns(block: BlockNode, inner: str) -> str:
    return _wrap(block, f'<div class="wp-block-columns">\n{inner}\n</div>')


def render_column(block: BlockNode, inner: str) -> str:
    return _wrap(block, f'<div class="wp-block-column">\n{inner}\n</div>')


def render_buttons(block: BlockNode, inner: str) -> str:
    return _wrap(block, f'<div class="wp-block-buttons">\n{inner}\n</div>')


def render_cover(block: BlockNode, inner: str) -> str:
    a = block.attributes
    classes = class_string("wp-block-cover", background_color_class(a.get("overlayColor")))
    style = f' style="background-image:url({a["url"]})"' if a.get("url") else ""
    dim_ratio = a.get("dimRatio")
    dim_class = f"has-background-dim-{dim_ratio}" if dim_ratio else "has-background-dim"
    html = (
        f'<div class="{classes}"{style}>\n'
        f'<span aria-hidden="true" class="wp-block-cover__background {dim_class}"></span>\n'
        f'<div class="wp-block-cover__inner-container">\n'
        f"{inner}\n"
        f"</div>\n"
        f"</div>"
    )
    return _wrap(block, html)


def render_list(block: BlockNode, inner: str) -> str:
    tag = "ol" if block.attributes.get("ordered") else "ul"
    return _wrap(block, f'<{tag} class="wp-block-list">\n{inner}\n</{tag}>')


def render_quote(block: BlockNode, inner: str) -> str:
    classes = class_string("wp-block-quote", block.attributes.get("className") or "")
    return _wrap(block, f'<blockquote class="{classes}">\n{inner}\n</blockquote>')


def render_details(block: BlockNode, inner: str) -> str:
    summary = block.attributes.get("summary") or ""
    return _wrap(block, f'<details class="wp-block-details"><summary>{summary}</summary>\n{inner}\n</details>')


def render_generic(block: BlockNode, inner: str) -> str:
    """Fallback : chaînes de inner_content concaténées, puis les enfants."""
    content = "".join(c for c in block.inner_content if isinstance(c, str))
    return _wrap(block, f"{content}{inner}")


# ── Registry ─────────────────────────────────────────────────────────────────

BLOCK_RENDERERS: Dict[str, BlockRenderer] = {
    "core/heading":   render_heading,
    "core/paragraph": render_paragraph,
    "core/image":     render_image,
    "core/group":     render_group,
    "core/columns":   render_columns,
    "core/column":    render_column,
    "core/buttons":   render_buttons,
    "core/button":    render_button,
    "core/cover":     render_cover,
    "core/spacer":    render_spacer,
    "core/separator": render_separator,
    "core/list":      render_list,
    "core/list-item": render_list_item,
    "core/quote":     render_quote,
    "core/details":   render_details,
}


def _renderer_for(block_name: str) -> BlockRenderer:
    renderer = BLOCK_RENDERERS.get(block_name)
    if renderer is None:
        log.debug("Bloc sans renderer dédié, rendu générique : %s", block_name)
        return render_generic
    return renderer
