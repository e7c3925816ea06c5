"""
Modèle BlockNode — unité de l'arbre de blocs Gutenberg.

Structure récursive : BlockNode → inner_blocks → BlockNode …
Un None dans inner_content marque l'emplacement d'un bloc enfant.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..config import BLOCK_NAMESPACE


class BlockNode(BaseModel):
    """Bloc Gutenberg (valeur immuable, égalité structurelle)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Nom namespacé (core/heading, core/group…)")
    attributes: Dict[str, Any] = Field(default_factory=dict)
    inner_content: List[Optional[str]] = Field(default_factory=list, alias="innerContent")
    inner_blocks: Optional[List["BlockNode"]] = Field(default=None, alias="innerBlocks")

    @property
    def short_name(self) -> str:
        """core/heading → heading (les autres namespaces sont conservés)."""
        return self.name.removeprefix(BLOCK_NAMESPACE)

    @property
    def children(self) -> List["BlockNode"]:
        return list(self.inner_blocks or [])

    def placeholder_count(self) -> int:
        """Nombre d'emplacements enfants (None) déclarés dans inner_content."""
        return sum(1 for c in self.inner_content if c is None)

    def to_dict(self) -> dict:
        """Export au format JSON d'origine (clés camelCase, innerBlocks omis si absent)."""
        data = {
            "name": self.name,
            "attributes": dict(self.attributes),
            "innerContent": list(self.inner_content),
        }
        if self.inner_blocks is not None:
            data["innerBlocks"] = [b.to_dict() for b in self.inner_blocks]
        return data


BlockNode.model_rebuild()
