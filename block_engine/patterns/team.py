"""Pattern Team — grille (4 par ligne), cartes (3 par ligne), liste."""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.schemas import BlockNode
from .base import (
    ConfigItem, SectionConfig, resolve_layout, chunked,
    column, columns, heading, image, padding, paragraph, section_group, section_header, spacer,
)

TeamLayout = Literal["grid", "cards", "list"]
DEFAULT_LAYOUT = "grid"


class TeamMember(ConfigItem):
    name: str = ""
    role: Optional[str] = None
    bio: Optional[str] = None
    image: Optional[str] = None


class TeamConfig(SectionConfig):
    title: str = ""
    subtitle: Optional[str] = None
    members: List[TeamMember] = Field(default_factory=list)


def _member_blocks(member: TeamMember, align: Optional[str] = "center", with_photo: bool = True) -> List[BlockNode]:
    p_align = {"align": align} if align else {}
    blocks = []
    if with_photo and member.image:
        blocks.append(image(member.image, alt=member.name, width=160, height=160,
                            className="is-style-rounded", **p_align))
    blocks.append(heading(member.name, level=4, **({"textAlign": align} if align else {})))
    if member.role:
        blocks.append(paragraph(f"<em>{member.role}</em>", fontSize="small", **p_align))
    if member.bio:
        blocks.append(paragraph(member.bio, **p_align))
    return blocks


# ── Stratégies ───────────────────────────────────────────────────────────────

def _member_rows(cfg: TeamConfig, per_row: int, **column_attrs) -> List[BlockNode]:
    return [
        columns([column(_member_blocks(m), **column_attrs) for m in row], isStackedOnMobile=True)
        for row in chunked(cfg.members, per_row)
    ]


def grid_team(cfg: TeamConfig) -> BlockNode:
    blocks = section_header(cfg.title, cfg.subtitle, "40px", subtitle_size="medium")
    return section_group(blocks + _member_rows(cfg, 4))


def card_team(cfg: TeamConfig) -> BlockNode:
    rows = _member_rows(cfg, 3, style={
        "border": {"radius": "8px", "width": "1px", "color": "#e5e7eb"},
        **padding("30px", "30px", "20px", "20px"),
    })
    blocks = section_header(cfg.title, cfg.subtitle, "40px")
    return section_group(blocks + rows, backgroundColor="tertiary")


def list_team(cfg: TeamConfig) -> BlockNode:
    blocks = section_header(cfg.title, cfg.subtitle, "30px")
    for index, member in enumerate(cfg.members):
        photo = [image(member.image, alt=member.name, width=120, height=120, className="is-style-rounded")] \
            if member.image else []
        text = _member_blocks(member, align=None, with_photo=False)
        if index > 0:
            blocks.append(spacer("30px"))
        blocks.append(columns([
            column(photo, width="140px", verticalAlignment="center"),
            column(text, verticalAlignment="center"),
        ], verticalAlignment="center", isStackedOnMobile=True))
    return section_group(blocks, layout={"type": "constrained", "contentSize": "800px"})


LAYOUTS = {
    "grid":  grid_team,
    "cards": card_team,
    "list":  list_team,
}


def create_team_pattern(config, layout: Optional[TeamLayout] = None) -> BlockNode:
    """Section équipe. Layout par défaut : grille 4 colonnes."""
    cfg = TeamConfig.coerce(config)
    strategy = resolve_layout(LAYOUTS, layout or cfg.layout, DEFAULT_LAYOUT, "team")
    return strategy(cfg)
