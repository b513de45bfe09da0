from dataclasses import dataclass

RESUME_CLASS_NAME = "resume"
RESUME_DESCRIPTION = "a professional resume"
NON_RESUME_CLASS_NAME = "non_resume"


@dataclass(frozen=True)
class ClassificationResult:
    """Verdict on whether a document is a resume.

    ``class_name`` is ``"resume"`` for resumes and a stable snake_case
    category token otherwise. ``confidence`` expresses certainty in a
    non-resume verdict and is always within [0, 1].
    """

    is_resume: bool
    description: str
    class_name: str
    confidence: float
    reason: str | None = None

    @classmethod
    def resume(cls, confidence: float, reason: str | None = None) -> "ClassificationResult":
        return cls(
            is_resume=True,
            description=RESUME_DESCRIPTION,
            class_name=RESUME_CLASS_NAME,
            confidence=confidence,
            reason=reason,
        )


@dataclass(frozen=True)
class RejectionContext:
    """Upload facts the rejection policy weighs besides the verdict itself."""

    file_extension: str = ""
    word_count: int = 0
