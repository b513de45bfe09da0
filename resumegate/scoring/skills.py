import re
from collections.abc import Iterable, Mapping

from resumegate.scoring.common import ratio_score
from resumegate.scoring.models import MatchScore, SkillMatch

TECHNICAL_TERMS = (
    "javascript",
    "typescript",
    "python",
    "java",
    "c++",
    "c#",
    "go",
    "ruby",
    "php",
    "swift",
    "kotlin",
    "react",
    "angular",
    "vue",
    "node",
    "express",
    "next.js",
    "docker",
    "kubernetes",
    "aws",
    "gcp",
    "azure",
    "sql",
    "mysql",
    "postgresql",
    "mongodb",
    "git",
    "graphql",
    "linux",
    "bash",
    "redis",
    "jenkins",
    "terraform",
    "ansible",
)

# Terms such as "c++" end in punctuation, so word boundaries are expressed as
# "not preceded / followed by an ASCII letter, digit or underscore".
_TERM_PATTERNS = {
    term: re.compile(rf"(?<![A-Za-z0-9_]){re.escape(term)}(?![A-Za-z0-9_])")
    for term in TECHNICAL_TERMS
}
_SKILL_SEPARATORS = re.compile(r"[\n,]")


def extract_resume_skills(text: str) -> list[str]:
    """Technical terms mentioned in ``text``, in vocabulary order."""
    lowered = (text or "").lower()
    return [term for term, pattern in _TERM_PATTERNS.items() if pattern.search(lowered)]


def calculate_match_score(job_skills: list[str], resume_skills: list[str]) -> MatchScore:
    """Share of job skills present (case-insensitively) among the resume skills."""
    available = {skill.lower() for skill in resume_skills}
    table = [SkillMatch(skill=skill, matched=skill.lower() in available) for skill in job_skills]
    matched = sum(1 for entry in table if entry.matched)
    return MatchScore(
        score=ratio_score(matched, len(job_skills)),
        table=table,
        missing_skills=[entry.skill for entry in table if not entry.matched],
    )


def _flatten(value: object) -> Iterable[str]:
    if value is None:
        return
    if isinstance(value, str):
        for token in _SKILL_SEPARATORS.split(value):
            if token.strip():
                yield token.strip()
    elif isinstance(value, Mapping):
        for entry in value.values():
            yield from _flatten(entry)
    elif isinstance(value, (list, tuple, set)):
        for entry in value:
            yield from _flatten(entry)


def normalize_skill_list_input(value: object) -> list[str]:
    """Flatten comma/newline separated strings, lists and mappings into unique skills.

    Duplicates are dropped case-insensitively; the first spelling wins.
    """
    seen: set[str] = set()
    skills = []
    for skill in _flatten(value):
        key = skill.lower()
        if key in seen:
            continue
        seen.add(key)
        skills.append(skill)
    return skills
