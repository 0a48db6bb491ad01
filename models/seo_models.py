# models/seo_models.py

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# -----------------------------------------
# PageType (clinic page categories)
# -----------------------------------------
class PageType(str, Enum):
    """Page type chosen on the form. Values are the labels shown to the user."""

    DIRECTION = "направление"
    SERVICE = "услуга"
    DISEASE = "заболевание"
    ARTICLE = "статья"

    @property
    def is_commercial(self) -> bool:
        return self in (PageType.DIRECTION, PageType.SERVICE)

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["PageType"]:
        """
        Resolve a form value or an English tag to a member.
        Keys match exactly (no case folding, no trimming).
        Unknown values give None, never an error.
        """
        if raw is None:
            return None
        for member in cls:
            if raw == member.value:
                return member
        return _ALIASES.get(raw)


_ALIASES: Dict[str, PageType] = {
    "direction": PageType.DIRECTION,
    "service": PageType.SERVICE,
    "disease": PageType.DISEASE,
    "article": PageType.ARTICLE,
}


# -----------------------------------------
# UrlPrefixTable
# -----------------------------------------
URL_PREFIXES: Dict[PageType, str] = {
    PageType.DIRECTION: "https://www.emcmos.ru/directions/",
    PageType.SERVICE: "https://www.emcmos.ru/programs_and_services/services/",
    PageType.DISEASE: "https://www.emcmos.ru/disease/",
    PageType.ARTICLE: "https://www.emcmos.ru/articles/",
}


def url_prefix_for(page_type: Optional[str]) -> str:
    """Absolute URL prefix for the page type; "" when the type is unknown."""
    member = PageType.parse(page_type)
    if member is None:
        return ""
    return URL_PREFIXES.get(member, "")


def build_full_url(page_type: Optional[str], slug: str) -> str:
    return url_prefix_for(page_type) + slug


# -----------------------------------------
# Request / result
# -----------------------------------------
class GenerationRequest(BaseModel):
    """One form submission. Not persisted."""

    title: str = Field(..., description="Page title entered by the user")
    page_type: str = Field(..., description="Page type label, kept verbatim")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be empty")
        return v


class SeoResult(BaseModel):
    """Structured answer of the generative service. All four fields are required.

    Attributes:
        url (str): slug only, no domain.
        title (str): title tag, up to 60 chars intended.
        description (str): meta description, up to 160 chars intended.
        keywords (str): 5-7 comma separated keywords.
    """

    model_config = ConfigDict(extra="ignore")

    url: str
    title: str
    description: str
    keywords: str


class RenderedField(BaseModel):
    """One labeled output field. `value` is the unescaped original."""

    label: str
    value: str


class SeoResultView(BaseModel):
    """Response body of /api/generate."""

    page_type: str
    full_url: str
    result: SeoResult
