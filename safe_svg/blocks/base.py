"""
Bloc de base pour safe_svg.
Les attributs arrivent de l'hôte en camelCase → alias Pydantic.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class BlockAttributes(BaseModel):
    """Sous-objet d'attributs : clés camelCase de l'hôte, clés inconnues ignorées."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class BaseBlock(BlockAttributes):
    """Bloc de base (classe parente des blocs rendus côté serveur)."""
    class_name: Optional[str] = Field(default=None, alias="className")
    align: Optional[str] = None
