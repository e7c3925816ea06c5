"""
Schéma du manifest JSON — description d'une page complète.
SiteManifest → build_blocks() → [BlockNode] → serialize_blocks() → markup

Exemple minimal :
{
  "title": "Bistrot {city}",
  "industry": "restaurant",
  "seed": 42,
  "placeholder_context": {"city": "Lyon"},
  "sections": [
    {"type": "hero", "config": {"heading": "Bienvenue à {city}"}},
    {"type": "features", "layout": "cards", "order": 1, "config": {"features": [...]}}
  ],
  "theme": {"colors": {"primary": "#8b0000"}}
}
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..theme.schemas import ThemeConfig


class SectionEntry(BaseModel):
    """Une section de la page (type + layout optionnel + config brute)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str
    layout: Optional[str] = None
    enabled: bool = True
    order: int = 0
    config: Dict[str, Any] = Field(default_factory=dict)


class SiteManifest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = ""
    industry: Optional[str] = None
    seed: Optional[int] = None
    sections: List[SectionEntry] = Field(default_factory=list)
    theme: Optional[ThemeConfig] = None
    placeholder_context: Dict[str, str] = Field(default_factory=dict, alias="placeholderContext")
