from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class AtsMetrics:
    """Text-only quality sub-scores, each an integer in [0, 100]."""

    layout_searchability: int
    ats_readability: int
    impact: int
    crispness: int
    keyword_density: int
    section_heading_clarity: int
    contact_info_completeness: int
    grammar: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class AdditionalMetrics:
    """Job-context sub-scores, each an integer in [0, 100]."""

    role_title_match: int
    experience_relevance: int
    accomplishment_density: int
    format_parsability: int
    section_completeness: int
    contact_hygiene: int
    date_consistency: int
    red_flag_scan: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class CardScores:
    ats: int
    alignment: int
    accomplishments: int
    format: int
    hygiene: int
    risk: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class MetricComparison:
    metric: str
    original: int
    improved: int
    improvement: float


@dataclass(frozen=True)
class MetricsComparison:
    original: AtsMetrics
    improved: AtsMetrics
    table: list[MetricComparison] = field(default_factory=list)


@dataclass(frozen=True)
class SkillMatch:
    skill: str
    matched: bool


@dataclass(frozen=True)
class MatchScore:
    score: int
    table: list[SkillMatch] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class JobContext:
    """What the candidate is applying for; both parts are optional."""

    job_title: str = ""
    job_skills: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScoreBundle:
    ats_metrics: AtsMetrics
    additional_metrics: AdditionalMetrics
    card_scores: CardScores
    ats_score: int
    keyword_match: int
    overall_score: int
    selection_probability: int
    rating: str
    resume_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, object]:
        return asdict(self)
