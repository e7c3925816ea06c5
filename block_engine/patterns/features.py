"""Pattern Features — grilles 2/3/4 colonnes, cartes, alterné, icône à gauche."""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.schemas import BlockNode
from .base import (
    ConfigItem, SectionConfig, resolve_layout, chunked,
    column, columns, heading, image, padding, paragraph, section_group, section_header, spacer,
)

FeaturesLayout = Literal["grid-3", "grid-4", "grid-2", "cards", "alternating", "icon-left"]
DEFAULT_LAYOUT = "grid-3"


class FeatureItem(ConfigItem):
    title: str = ""
    description: str = ""
    icon: Optional[str] = None
    image: Optional[str] = None


class FeaturesConfig(SectionConfig):
    title: str = ""
    subtitle: Optional[str] = None
    features: List[FeatureItem] = Field(default_factory=list)


def _feature_blocks(feature: FeatureItem) -> List[BlockNode]:
    blocks = []
    if feature.icon:
        blocks.append(paragraph(feature.icon, align="center", fontSize="x-large"))
    blocks.append(heading(feature.title, level=3, textAlign="center"))
    blocks.append(paragraph(feature.description, align="center"))
    return blocks


# ── Stratégies ───────────────────────────────────────────────────────────────

def _grid_features(cfg: FeaturesConfig, column_count: int) -> BlockNode:
    rows = [
        columns([column(_feature_blocks(f)) for f in row], isStackedOnMobile=True)
        for row in chunked(cfg.features, column_count)
    ]
    header = section_header(cfg.title, cfg.subtitle, "40px", subtitle_size="medium")
    return section_group(header + rows)


def grid_2_features(cfg: FeaturesConfig) -> BlockNode:
    return _grid_features(cfg, 2)


def grid_3_features(cfg: FeaturesConfig) -> BlockNode:
    return _grid_features(cfg, 3)


def grid_4_features(cfg: FeaturesConfig) -> BlockNode:
    return _grid_features(cfg, 4)


def card_features(cfg: FeaturesConfig) -> BlockNode:
    cards = [
        column(
            _feature_blocks(f),
            style={
                "border": {"radius": "8px", "width": "1px", "color": "#e5e7eb"},
                **padding("30px", "30px", "20px", "20px"),
            },
            backgroundColor="white",
        )
        for f in cfg.features
    ]
    blocks = section_header(cfg.title, cfg.subtitle, "40px")
    blocks.append(columns(cards, isStackedOnMobile=True))
    return section_group(blocks, backgroundColor="tertiary")


def _media_blocks(feature: FeatureItem) -> List[BlockNode]:
    if feature.image:
        return [image(feature.image, alt=feature.title, sizeSlug="large")]
    if feature.icon:
        return [paragraph(feature.icon, align="center", fontSize="x-large")]
    return []


def alternating_features(cfg: FeaturesConfig) -> BlockNode:
    blocks = section_header(cfg.title, cfg.subtitle, "40px")
    for index, feature in enumerate(cfg.features):
        text_col = column(
            [heading(feature.title, level=3), paragraph(feature.description)],
            width="50%", verticalAlignment="center",
        )
        media_col = column(_media_blocks(feature), width="50%", verticalAlignment="center")
        # Index pair → média en premier
        pair = [media_col, text_col] if index % 2 == 0 else [text_col, media_col]
        if index > 0:
            blocks.append(spacer("40px"))
        blocks.append(columns(pair, verticalAlignment="center", isStackedOnMobile=True))
    return section_group(blocks)


def icon_left_features(cfg: FeaturesConfig) -> BlockNode:
    rows = []
    for feature in cfg.features:
        icon = [paragraph(feature.icon, fontSize="large")] if feature.icon else []
        rows.append(columns([
            column(icon, width="60px", verticalAlignment="top"),
            column([heading(feature.title, level=4), paragraph(feature.description)], verticalAlignment="top"),
        ], isStackedOnMobile=False))
    blocks = section_header(cfg.title, cfg.subtitle, "30px")
    return section_group(blocks + rows, layout={"type": "constrained", "contentSize": "800px"})


LAYOUTS = {
    "grid-3":      grid_3_features,
    "grid-2":      grid_2_features,
    "grid-4":      grid_4_features,
    "cards":       card_features,
    "alternating": alternating_features,
    "icon-left":   icon_left_features,
}


def create_features_pattern(config, layout: Optional[FeaturesLayout] = None) -> BlockNode:
    """Section features. Layout par défaut : grille 3 colonnes."""
    cfg = FeaturesConfig.coerce(config)
    strategy = resolve_layout(LAYOUTS, layout or cfg.layout, DEFAULT_LAYOUT, "features")
    return strategy(cfg)
