"""Bloc Features — liste de fonctionnalités (icône + titre + description)."""
from typing import List, Literal, Optional
from .base import BaseBlock, CamelModel

DEFAULT_FEATURE_ICON = "✓"


class FeatureItem(CamelModel):
    icon: Optional[str] = None  # emoji ou caractère
    title: str = ""
    description: str = ""


class FeaturesContent(CamelModel):
    title: Optional[str] = None
    features: List[FeatureItem] = []
    layout: Literal["list", "grid", "columns"] = "list"


class FeaturesBlock(BaseBlock):
    block_type: Literal["features"] = "features"
    content: FeaturesContent = FeaturesContent()
