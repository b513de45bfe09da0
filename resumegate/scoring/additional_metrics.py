"""Job-context metrics that complement the text-only ATS metrics."""

import re

from resumegate.scoring.ats_metrics import (
    score_contact_info_completeness,
    score_section_heading_clarity,
)
from resumegate.scoring.common import ratio_score, round_half_up, to_score
from resumegate.scoring.models import AdditionalMetrics

RED_FLAGS = (
    "fired",
    "terminated",
    "arrest",
    "criminal",
    "misconduct",
    "lawsuit",
    "inappropriate",
    "sued",
    "probation",
    "guilty",
    "convicted",
    "layoff",
)
RED_FLAG_PENALTY = 20

_NON_WORD = re.compile(r"\W+")
_LINE_SPLIT = re.compile(r"\n+")
_BULLET = re.compile(r"^\s*[-*•]")
_DIGIT = re.compile(r"\d")
_LAYOUT_ARTIFACTS = re.compile(r"\|{2,}|_{2,}|\t+")
_YEAR = re.compile(r"(?<!\d)(?:19|20)\d{2}(?!\d)")


def score_role_title_match(text: str, job_title: str) -> int:
    words = [word for word in _NON_WORD.split((job_title or "").lower()) if word]
    if not words:
        return 0
    lowered = text.lower()
    return ratio_score(sum(1 for word in words if word in lowered), len(words))


def score_experience_relevance(resume_skills: list[str], job_skills: list[str]) -> int:
    if not job_skills:
        return 0
    available = {skill.lower() for skill in resume_skills}
    matched = sum(1 for skill in job_skills if skill.lower() in available)
    return ratio_score(matched, len(job_skills))


def score_accomplishment_density(text: str) -> int:
    """Share of bullet lines that quantify something with a digit."""
    bullets = [line for line in _LINE_SPLIT.split(text) if _BULLET.match(line.strip())]
    quantified = sum(1 for line in bullets if _DIGIT.search(line))
    return ratio_score(quantified, len(bullets))


def score_format_parsability(text: str) -> int:
    total = len(text) or 1
    artifact_chars = sum(len(match) for match in _LAYOUT_ARTIFACTS.findall(text))
    return to_score(100 - round_half_up(artifact_chars / total * 100))


def score_section_completeness(text: str) -> int:
    return score_section_heading_clarity(text)


def score_contact_hygiene(text: str) -> int:
    return score_contact_info_completeness(text)


def score_date_consistency(text: str) -> int:
    """Penalise adjacent year mentions where a later year precedes an earlier one."""
    years = [int(match) for match in _YEAR.findall(text)]
    if len(years) < 2:
        return 100
    backward = sum(1 for previous, current in zip(years, years[1:]) if previous > current)
    return to_score(100 - round_half_up(backward / (len(years) - 1) * 100))


def score_red_flag_scan(text: str) -> int:
    lowered = text.lower()
    hits = sum(1 for flag in RED_FLAGS if flag in lowered)
    return to_score(100 - hits * RED_FLAG_PENALTY)


def calculate_additional_metrics(
    text: str,
    *,
    job_title: str = "",
    job_skills: list[str] | None = None,
    resume_skills: list[str] | None = None,
) -> AdditionalMetrics:
    text = text or ""
    return AdditionalMetrics(
        role_title_match=score_role_title_match(text, job_title),
        experience_relevance=score_experience_relevance(resume_skills or [], job_skills or []),
        accomplishment_density=score_accomplishment_density(text),
        format_parsability=score_format_parsability(text),
        section_completeness=score_section_completeness(text),
        contact_hygiene=score_contact_hygiene(text),
        date_consistency=score_date_consistency(text),
        red_flag_scan=score_red_flag_scan(text),
    )
