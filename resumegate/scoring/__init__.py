from resumegate.scoring.ats_metrics import calculate_metrics, compare_metrics, score_rating_label
from resumegate.scoring.additional_metrics import calculate_additional_metrics
from resumegate.scoring.composite import (
    aggregate_card_scores,
    calculate_selection_probability,
    compute_overall_score,
)
from resumegate.scoring.models import JobContext, ScoreBundle
from resumegate.scoring.scorer import score_document

__all__ = [
    "JobContext",
    "ScoreBundle",
    "aggregate_card_scores",
    "calculate_additional_metrics",
    "calculate_metrics",
    "calculate_selection_probability",
    "compare_metrics",
    "compute_overall_score",
    "score_document",
    "score_rating_label",
]
