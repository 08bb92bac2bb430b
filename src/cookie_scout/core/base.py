"""Analysis data model — cookies, trackers, and the per-page result."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class CookieCategory(StrEnum):
    ESSENTIAL = "Essential"
    ANALYTICS = "Analytics"
    MARKETING = "Marketing"
    SOCIAL = "Social"
    UNKNOWN = "Unknown"


class CookieRecord(BaseModel):
    """One cookie set by the page, parsed from a single Set-Cookie header value."""

    model_config = ConfigDict(frozen=True)

    name: str
    domain: str | None = None
    secure: bool = False
    http_only: bool = False
    same_site: str | None = None  # "strict", "lax", "none" or whatever raw text the server sent
    category: CookieCategory = CookieCategory.UNKNOWN


class TrackerMatch(BaseModel):
    """A known tracking service detected somewhere on the page."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    category: str
    description: str


class AnalysisResult(BaseModel):
    """Everything detected on one fetched page."""

    model_config = ConfigDict(frozen=True)

    url: str
    cookies: list[CookieRecord] = Field(default_factory=list)
    trackers: list[TrackerMatch] = Field(default_factory=list)
    third_party_domains: list[str] = Field(default_factory=list)

    def cookies_by_category(self) -> dict[CookieCategory, list[CookieRecord]]:
        """Group cookies by category, in category declaration order."""
        groups: dict[CookieCategory, list[CookieRecord]] = {cat: [] for cat in CookieCategory}
        for cookie in self.cookies:
            groups[cookie.category].append(cookie)
        return groups


class PrivacyScore(BaseModel):
    """Heuristic privacy score derived from an AnalysisResult."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)  # 0 = heavily tracked, 100 = nothing detected
    label: str
    color: str
