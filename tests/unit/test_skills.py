from resumegate.scoring.models import SkillMatch
from resumegate.scoring.skills import (
    calculate_match_score,
    extract_resume_skills,
    normalize_skill_list_input,
)


class TestExtractResumeSkills:
    def test_vocabulary_order(self) -> None:
        text = "Built services in Python, Go and C++ on AWS; also Node.js"
        assert extract_resume_skills(text) == ["python", "c++", "go", "node", "aws"]

    def test_respects_word_boundaries(self) -> None:
        assert extract_resume_skills("JavaScript") == ["javascript"]
        assert extract_resume_skills("gopher mongo") == []

    def test_empty(self) -> None:
        assert extract_resume_skills("") == []


class TestCalculateMatchScore:
    def test_partial_match(self) -> None:
        match = calculate_match_score(["SQL", "Java"], ["sql", "python"])
        assert match.score == 50
        assert match.table == [SkillMatch("SQL", True), SkillMatch("Java", False)]
        assert match.missing_skills == ["Java"]

    def test_no_job_skills(self) -> None:
        match = calculate_match_score([], ["python"])
        assert match.score == 0
        assert match.table == []


class TestNormalizeSkillListInput:
    def test_splits_strings_and_dedupes(self) -> None:
        assert normalize_skill_list_input("Python, SQL\npython") == ["Python", "SQL"]

    def test_flattens_nested_values(self) -> None:
        value = ["Go", ["Rust", {"infra": "Docker, go"}], None, 5]
        assert normalize_skill_list_input(value) == ["Go", "Rust", "Docker"]

    def test_none(self) -> None:
        assert normalize_skill_list_input(None) == []
