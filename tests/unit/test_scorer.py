from resumegate.scoring.models import JobContext
from resumegate.scoring.scorer import score_document

END_TO_END_TEXT = (
    "Experience\n- Engineer at Acme\nEducation\n- State University\nSkills\n- SQL, Python"
)


class TestScoreDocument:
    def test_end_to_end_example(self) -> None:
        bundle = score_document(END_TO_END_TEXT, JobContext(job_skills=["SQL", "Java"]))
        assert bundle.additional_metrics.experience_relevance == 50
        assert bundle.keyword_match == 50
        assert bundle.resume_skills == ["python", "sql"]
        assert bundle.missing_skills == ["Java"]
        assert bundle.ats_score == 43
        assert bundle.overall_score == 40
        assert bundle.selection_probability == 35
        assert bundle.rating == "NEEDS_IMPROVEMENT"

    def test_card_scores(self) -> None:
        bundle = score_document(END_TO_END_TEXT, JobContext(job_skills=["SQL", "Java"]))
        assert bundle.card_scores.as_dict() == {
            "ats": 43,
            "alignment": 25,
            "accomplishments": 0,
            "format": 75,
            "hygiene": 50,
            "risk": 100,
        }

    def test_job_skills_are_normalized(self) -> None:
        bundle = score_document(END_TO_END_TEXT, JobContext(job_skills=["SQL, sql", "Java"]))
        assert bundle.missing_skills == ["Java"]
        assert bundle.keyword_match == 50

    def test_without_job_context(self) -> None:
        bundle = score_document(END_TO_END_TEXT)
        assert bundle.keyword_match == 0
        assert bundle.additional_metrics.role_title_match == 0

    def test_serializable(self) -> None:
        payload = score_document("").as_dict()
        assert set(payload) >= {"ats_metrics", "card_scores", "overall_score"}
        assert all(0 <= value <= 100 for value in payload["ats_metrics"].values())
