"""Bloc Footer — coordonnées, désinscription, confidentialité, réseaux sociaux."""
from typing import List, Literal, Optional
from .base import BaseBlock, CamelModel

SocialPlatform = Literal["facebook", "twitter", "instagram", "linkedin", "youtube"]
SOCIAL_PLATFORMS = ("facebook", "twitter", "instagram", "linkedin", "youtube")


class SocialLink(CamelModel):
    platform: SocialPlatform
    url: str = ""


class FooterContent(CamelModel):
    company_name: str = ""
    address: Optional[str] = None  # texte libre, retours à la ligne conservés
    unsubscribe_text: str = ""
    unsubscribe_url: str = ""
    privacy_policy_text: Optional[str] = None
    privacy_policy_url: Optional[str] = None
    social_links: List[SocialLink] = []


class FooterBlock(BaseBlock):
    block_type: Literal["footer"] = "footer"
    content: FooterContent = FooterContent()
