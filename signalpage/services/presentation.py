from enum import Enum


class ScoreBand(str, Enum):
    EXCELLENT = "excellent"
    STRONG = "strong"
    MODERATE = "moderate"
    NEEDS_REVIEW = "needs_review"


EXCELLENT_MIN = 80
STRONG_MIN = 60
MODERATE_MIN = 40

_LABELS = {
    ScoreBand.EXCELLENT: "Excellent Match",
    ScoreBand.STRONG: "Strong Match",
    ScoreBand.MODERATE: "Moderate Match",
    ScoreBand.NEEDS_REVIEW: "Needs Review",
}

_TEXT_COLORS = {
    ScoreBand.EXCELLENT: "text-green-600",
    ScoreBand.STRONG: "text-blue-600",
    ScoreBand.MODERATE: "text-yellow-600",
    ScoreBand.NEEDS_REVIEW: "text-red-600",
}

_BG_COLORS = {
    ScoreBand.EXCELLENT: "bg-green-100",
    ScoreBand.STRONG: "bg-blue-100",
    ScoreBand.MODERATE: "bg-yellow-100",
    ScoreBand.NEEDS_REVIEW: "bg-red-100",
}


def score_band(score: float) -> ScoreBand:
    if score >= EXCELLENT_MIN:
        return ScoreBand.EXCELLENT
    if score >= STRONG_MIN:
        return ScoreBand.STRONG
    if score >= MODERATE_MIN:
        return ScoreBand.MODERATE
    return ScoreBand.NEEDS_REVIEW


def score_label(score: float) -> str:
    return _LABELS[score_band(score)]


def score_color(score: float) -> str:
    """CSS text colour class for a fit score badge."""
    return _TEXT_COLORS[score_band(score)]


def score_bg_color(score: float) -> str:
    """CSS background colour class for a fit score badge."""
    return _BG_COLORS[score_band(score)]
