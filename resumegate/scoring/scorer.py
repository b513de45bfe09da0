from resumegate.logging.logger import Log
from resumegate.scoring.additional_metrics import calculate_additional_metrics
from resumegate.scoring.ats_metrics import ats_score, calculate_metrics, score_rating_label
from resumegate.scoring.composite import (
    aggregate_card_scores,
    calculate_selection_probability,
    compute_overall_score,
)
from resumegate.scoring.models import JobContext, ScoreBundle
from resumegate.scoring.skills import (
    calculate_match_score,
    extract_resume_skills,
    normalize_skill_list_input,
)


def score_document(text: str, job: JobContext | None = None) -> ScoreBundle:
    """Compute every metric, card score and the selection probability for ``text``."""
    job = job or JobContext()
    job_skills = normalize_skill_list_input(job.job_skills)
    resume_skills = extract_resume_skills(text)
    match = calculate_match_score(job_skills, resume_skills)

    ats_metrics = calculate_metrics(text)
    additional = calculate_additional_metrics(
        text,
        job_title=job.job_title,
        job_skills=job_skills,
        resume_skills=resume_skills,
    )
    ats = ats_score(ats_metrics)
    merged = {**ats_metrics.as_dict(), **additional.as_dict()}
    overall = compute_overall_score(merged)
    probability = calculate_selection_probability(
        overall_score=overall,
        keyword_match=match.score,
        ats_score=ats,
    )
    Log.debug(
        "resume_scored",
        ats_score=ats,
        overall_score=overall,
        keyword_match=match.score,
        selection_probability=probability,
    )
    return ScoreBundle(
        ats_metrics=ats_metrics,
        additional_metrics=additional,
        card_scores=aggregate_card_scores(merged, ats),
        ats_score=ats,
        keyword_match=match.score,
        overall_score=overall,
        selection_probability=probability,
        rating=score_rating_label(overall),
        resume_skills=resume_skills,
        missing_skills=match.missing_skills,
    )
