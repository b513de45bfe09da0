"""Card aggregation, overall score and selection probability."""

import math
from collections.abc import Mapping

from resumegate.scoring.common import round_half_up, to_score
from resumegate.scoring.models import CardScores

CARD_METRICS: dict[str, tuple[str, ...]] = {
    "alignment": ("role_title_match", "experience_relevance"),
    "accomplishments": ("accomplishment_density",),
    "format": ("format_parsability", "section_completeness"),
    "hygiene": ("contact_hygiene", "date_consistency"),
    "risk": ("red_flag_scan",),
}

OVERALL_WEIGHTS: dict[str, float] = {
    "ats_readability": 0.18,
    "keyword_density": 0.22,
    "impact": 0.15,
    "crispness": 0.10,
    "experience_relevance": 0.12,
    "layout_searchability": 0.08,
    "grammar": 0.05,
    "format_parsability": 0.05,
    "section_completeness": 0.03,
}
RED_FLAG_MAX_PENALTY = 8

SELECTION_WEIGHTS = {"overall": 0.5, "keyword_match": 0.3, "ats": 0.2}
LOGISTIC_MIDPOINT = 50
LOGISTIC_SCALE = 10


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def aggregate_card_scores(metrics: Mapping[str, object], ats_score: float = 0) -> CardScores:
    """Average each card's metrics; non-numeric values are skipped, empty cards score 0."""
    cards: dict[str, int] = {}
    for card, names in CARD_METRICS.items():
        values = [metrics[name] for name in names if _is_number(metrics.get(name))]
        cards[card] = to_score(sum(values) / len(values)) if values else 0
    ats = to_score(ats_score) if _is_number(ats_score) else 0
    return CardScores(ats=ats, **cards)


def compute_overall_score(metrics: Mapping[str, object]) -> int:
    """Weighted sum of nine metrics less a red-flag penalty of up to 8 points.

    Missing metrics count as 0; a missing red-flag scan counts as clean.
    """
    weighted = sum(
        float(metrics[name]) * weight
        for name, weight in OVERALL_WEIGHTS.items()
        if _is_number(metrics.get(name))
    )
    red_flag_scan = metrics.get("red_flag_scan", 100)
    if not _is_number(red_flag_scan):
        red_flag_scan = 100
    penalty = (100 - float(red_flag_scan)) / 100 * RED_FLAG_MAX_PENALTY
    return max(0, round_half_up(weighted - penalty))


def logistic(value: float) -> float:
    return 1 / (1 + math.exp(-(value - LOGISTIC_MIDPOINT) / LOGISTIC_SCALE))


def calculate_selection_probability(
    *,
    overall_score: float = 0,
    keyword_match: float = 0,
    ats_score: float = 0,
) -> int:
    """Logistic blend of overall score, keyword match and ATS score, as 0-100."""
    blended = (
        SELECTION_WEIGHTS["overall"] * logistic(overall_score)
        + SELECTION_WEIGHTS["keyword_match"] * logistic(keyword_match)
        + SELECTION_WEIGHTS["ats"] * logistic(ats_score)
    )
    return to_score(blended * 100)
