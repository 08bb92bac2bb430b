"""Scoring engine — turn detected cookies, trackers and domains into a privacy score.

The score is a heuristic summary of what one page load exposes. It makes no
claim of completeness or accuracy and is not a certified privacy metric.
"""

from __future__ import annotations

from typing import TypedDict

import yaml

from cookie_scout.core.base import AnalysisResult, CookieCategory, PrivacyScore
from cookie_scout.core.paths import SHARED_DIR


class _ScoreTier(TypedDict):
    min: int
    label: str
    color: str


class _Deductions(TypedDict):
    base_score: int
    per_cookie: int
    per_tracker: int
    per_third_party_domain: int


def _load_scoring() -> tuple[_Deductions, dict[CookieCategory, int], list[_ScoreTier]]:
    path = SHARED_DIR / "scoring.yaml"
    with open(path) as f:
        data = yaml.safe_load(f)
    deductions: _Deductions = {
        "base_score": data["base_score"],
        "per_cookie": data["per_cookie"],
        "per_tracker": data["per_tracker"],
        "per_third_party_domain": data["per_third_party_domain"],
    }
    penalties = {
        CookieCategory(name): int(value)
        for name, value in data["cookie_category_penalties"].items()
    }
    tiers = sorted(data["score_tiers"], key=lambda t: t["min"], reverse=True)
    return deductions, penalties, tiers


_DEDUCTIONS, CATEGORY_PENALTIES, _SCORE_TIERS = _load_scoring()


def compute_score(result: AnalysisResult) -> int:
    """Apply every deduction in order, then clamp to 0..100."""
    score = _DEDUCTIONS["base_score"]

    score -= len(result.cookies) * _DEDUCTIONS["per_cookie"]
    for cookie in result.cookies:
        score -= CATEGORY_PENALTIES.get(cookie.category, 0)

    score -= len(result.trackers) * _DEDUCTIONS["per_tracker"]
    score -= len(result.third_party_domains) * _DEDUCTIONS["per_third_party_domain"]

    return max(0, min(100, score))


def get_score_label(score: float) -> str:
    """Return a human-readable label for a score."""
    for tier in _SCORE_TIERS:
        if score >= tier["min"]:
            return str(tier["label"])
    return "CRITICAL"


def get_score_color(score: float) -> str:
    """Return a Rich color name for a score."""
    for tier in _SCORE_TIERS:
        if score >= tier["min"]:
            return str(tier["color"])
    return "red"


def compute_privacy_score(result: AnalysisResult) -> PrivacyScore:
    """Score an analysis result. Pure; recomputed from scratch on every call."""
    score = compute_score(result)
    return PrivacyScore(score=score, label=get_score_label(score), color=get_score_color(score))
