"""ATS-style text quality metrics.

Every scorer is a pure function of the plain resume text and returns an
integer in [0, 100].
"""

import re
from dataclasses import fields

from resumegate.scoring.common import clamp, ratio_score, round_half_up, to_score
from resumegate.scoring.models import AtsMetrics, MetricComparison, MetricsComparison

STRONG_VERBS = frozenset({
    "achieved",
    "improved",
    "led",
    "managed",
    "created",
    "developed",
    "increased",
    "reduced",
    "built",
    "designed",
})

SECTION_HEADINGS = ("experience", "education", "skills", "projects", "summary", "contact")

_LINE_SPLIT = re.compile(r"\n+")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_BULLET = re.compile(r"^\s*[-*•]")
_WORD = re.compile(r"\b[a-z]+\b", re.ASCII)
_NON_LETTERS = re.compile(r"[^a-z]")
_VOWEL_GROUP = re.compile(r"[aeiouy]+")
_EMAIL = re.compile(r"[\w.+-]+@[\w.-]+\.[A-Za-z]{2,}", re.ASCII)
_PHONE = re.compile(
    r"\b(?:\+?\d{1,2}[\s-]?)?(?:\(\d{3}\)|\d{3})[\s-]?\d{3}[\s-]?\d{4}\b", re.ASCII
)

CRISP_SENTENCE_WORDS = 12
CRISPNESS_PENALTY_PER_WORD = 3
DENSITY_SCALE = 500


def _sentences(text: str) -> list[str]:
    return [sentence for sentence in _SENTENCE_SPLIT.split(text) if sentence.strip()]


def _lowercase_words(text: str) -> list[str]:
    return _WORD.findall(text.lower())


def count_syllables(word: str) -> int:
    """Vowel-group count with a silent trailing ``e`` correction."""
    letters = _NON_LETTERS.sub("", word.lower())
    if not letters:
        return 0
    count = len(_VOWEL_GROUP.findall(letters)) or 1
    if letters.endswith("e") and count > 1:
        return count - 1
    return count


def score_layout_searchability(text: str) -> int:
    lines = [line for line in _LINE_SPLIT.split(text) if line.strip()]
    bullets = sum(1 for line in lines if _BULLET.match(line))
    return ratio_score(bullets, len(lines))


def score_ats_readability(text: str) -> int:
    """Flesch reading ease, clamped to [0, 100]."""
    words = text.split()
    sentence_count = len(_sentences(text)) or 1
    syllables = sum(count_syllables(word) for word in words)
    words_per_sentence = len(words) / sentence_count
    syllables_per_word = syllables / (len(words) or 1)
    flesch = 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
    return to_score(flesch)


def score_impact(text: str) -> int:
    words = _lowercase_words(text)
    strong = sum(1 for word in words if word in STRONG_VERBS)
    return to_score(strong / (len(words) or 1) * DENSITY_SCALE)


def score_crispness(text: str) -> int:
    """100 less three points per word of average sentence length beyond 12."""
    words = text.split()
    average = len(words) / (len(_sentences(text)) or 1)
    return to_score(100 - max(0.0, average - CRISP_SENTENCE_WORDS) * CRISPNESS_PENALTY_PER_WORD)


def score_keyword_density(text: str) -> int:
    words = _lowercase_words(text)
    if not words:
        return 0
    frequencies: dict[str, int] = {}
    for word in words:
        frequencies[word] = frequencies.get(word, 0) + 1
    repeated = sum(1 for count in frequencies.values() if count > 1)
    return to_score(repeated / len(words) * DENSITY_SCALE)


def score_section_heading_clarity(text: str) -> int:
    lines = [line.lower() for line in _LINE_SPLIT.split(text)]
    found = sum(1 for heading in SECTION_HEADINGS if any(heading in line for line in lines))
    return ratio_score(found, len(SECTION_HEADINGS))


def score_contact_info_completeness(text: str) -> int:
    components = (bool(_EMAIL.search(text)), bool(_PHONE.search(text)))
    return ratio_score(sum(components), len(components))


def score_grammar(text: str) -> int:
    """Share of sentences that open with an uppercase letter."""
    sentences = _sentences(text)
    if not sentences:
        return 0
    errors = sum(1 for sentence in sentences if not sentence.strip()[:1].isupper())
    return to_score(100 - errors / len(sentences) * 100)


def calculate_metrics(text: str) -> AtsMetrics:
    text = text or ""
    return AtsMetrics(
        layout_searchability=score_layout_searchability(text),
        ats_readability=score_ats_readability(text),
        impact=score_impact(text),
        crispness=score_crispness(text),
        keyword_density=score_keyword_density(text),
        section_heading_clarity=score_section_heading_clarity(text),
        contact_info_completeness=score_contact_info_completeness(text),
        grammar=score_grammar(text),
    )


def ats_score(metrics: AtsMetrics) -> int:
    """Rounded mean of the eight ATS metrics."""
    values = list(metrics.as_dict().values())
    return to_score(sum(values) / len(values))


def compare_metrics(original_text: str, improved_text: str) -> MetricsComparison:
    """Score two versions of a resume and tabulate the percent change per metric.

    The improvement is ``(improved - original) / original * 100`` rounded to two
    decimals, or 0 when the original metric is 0.
    """
    original = calculate_metrics(original_text)
    improved = calculate_metrics(improved_text)
    table = []
    for metric in fields(AtsMetrics):
        before = getattr(original, metric.name)
        after = getattr(improved, metric.name)
        improvement = 0.0 if before == 0 else (after - before) / before * 100
        table.append(
            MetricComparison(
                metric=metric.name,
                original=before,
                improved=after,
                improvement=round_half_up(improvement * 100) / 100,
            )
        )
    return MetricsComparison(original=original, improved=improved, table=table)


def score_rating_label(score: float) -> str:
    score = clamp(score, 0, 100)
    if score >= 85:
        return "EXCELLENT"
    if score >= 70:
        return "GOOD"
    return "NEEDS_IMPROVEMENT"
