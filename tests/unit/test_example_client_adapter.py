"""Tests for ExampleClientAdapter (template/reference adapter)."""

from resumegate.llm.example_client_adapter import ExampleClientAdapter
from resumegate.llm.response_parser import parse_json_response


class TestExampleClientAdapter:
    def test_returns_fenced_classification(self) -> None:
        result = ExampleClientAdapter().generate_content("anything")
        assert result.startswith("```json")
        parsed = parse_json_response(result)
        assert parsed is not None
        assert parsed["type"] == "resume"
        assert parsed["confidence"] == 0.75

    def test_custom_response(self) -> None:
        adapter = ExampleClientAdapter({"type": "non_resume", "probableType": "an invoice"})
        parsed = parse_json_response(adapter.generate_content("p"))
        assert parsed == {"type": "non_resume", "probableType": "an invoice"}

    def test_ignores_prompt(self) -> None:
        adapter = ExampleClientAdapter()
        assert adapter.generate_content("a") == adapter.generate_content("b")
