"""Keyword tables used by the heuristic classification stages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordRule:
    description: str
    class_name: str
    keywords: tuple[str, ...]
    threshold: int = 2


DOCUMENT_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        description="a job description document",
        class_name="job_description",
        keywords=(
            "responsibilities",
            "qualifications",
            "job description",
            "what you will do",
            "we are looking for",
            "you will",
            "apply now",
            "employment type",
        ),
    ),
    KeywordRule(
        description="a cover letter",
        class_name="cover_letter",
        keywords=("dear", "sincerely", "cover letter"),
    ),
    KeywordRule(
        description="an invoice document",
        class_name="invoice",
        keywords=("invoice", "bill to", "payment terms", "invoice number"),
    ),
    KeywordRule(
        description="meeting notes",
        class_name="meeting_notes",
        keywords=("meeting notes", "action items", "attendees"),
    ),
    KeywordRule(
        description="an academic paper",
        class_name="academic_paper",
        keywords=("abstract", "introduction", "references"),
    ),
    KeywordRule(
        description="a policy or compliance document",
        class_name="policy_or_compliance",
        keywords=("policy", "scope", "compliance", "procedures"),
    ),
    KeywordRule(
        description="a marketing brochure",
        class_name="marketing_brochure",
        keywords=("call to action", "our services", "clients", "testimonials"),
    ),
    KeywordRule(
        description="a slide deck outline",
        class_name="presentation",
        keywords=("slide", "agenda", "speaker notes"),
    ),
    KeywordRule(
        description="a certificate or award notice",
        class_name="certificate",
        keywords=("certificate of", "awarded to", "this certifies"),
        threshold=1,
    ),
)

JOB_POSTING_PHRASES: tuple[str, ...] = (
    "we are looking for",
    "you will",
    "you must",
    "we offer",
    "apply now",
    "how to apply",
    "company overview",
    "about the role",
    "about the team",
    "about the company",
    "compensation",
    "salary",
    "benefits",
    "job description",
    "job summary",
    "employment type",
    "location:",
    "equal opportunity employer",
    "perks",
)

JOB_POSTING_REQUIREMENT_KEYWORDS: tuple[str, ...] = (
    "responsibilities",
    "qualifications",
    "requirements",
    "desired skills",
    "preferred qualifications",
    "what you will do",
    "what we are looking for",
)

STRONG_NON_RESUME_KEYWORDS: tuple[str, ...] = (
    "job description",
    "job-posting",
    "cover letter",
    "invoice",
    "meeting notes",
    "academic paper",
    "policy",
    "compliance",
    "marketing brochure",
    "slide deck",
    "certificate",
    "does not contain any text",
    "empty document",
)

RESUME_SIGNAL_PAIRS: tuple[tuple[str, ...], ...] = (
    ("experience", "education"),
    ("skills", "summary"),
    ("projects", "experience"),
    ("professional summary",),
)

RESUME_SECTION_HEADINGS: tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "languages",
    "summary",
)

RESUME_TITLE_WORDS = frozenset({"resume", "curriculum", "vitae"})
