from unittest.mock import MagicMock

from resumegate.llm.response_parser import extract_json_block, parse_json_response


class TestExtractJsonBlock:
    def test_prefers_fenced_block(self) -> None:
        text = 'Sure! {"ignored": 1}\n```json\n{"type": "resume"}\n```'
        assert extract_json_block(text) == '{"type": "resume"}'

    def test_balances_nested_braces(self) -> None:
        text = 'Answer: {"a": {"b": 1}} trailing }'
        assert extract_json_block(text) == '{"a": {"b": 1}}'

    def test_ignores_braces_inside_strings(self) -> None:
        text = '{"reason": "uses {curly} braces }", "type": "resume"} extra'
        assert extract_json_block(text) == '{"reason": "uses {curly} braces }", "type": "resume"}'

    def test_no_object(self) -> None:
        assert extract_json_block("no json here") is None
        assert extract_json_block(None) is None

    def test_unbalanced(self) -> None:
        assert extract_json_block('{"a": 1') is None


class TestParseJsonResponse:
    def test_parses_plain_json(self) -> None:
        assert parse_json_response('{"type": "resume", "confidence": 0.9}') == {
            "type": "resume",
            "confidence": 0.9,
        }

    def test_tolerates_single_quotes_and_trailing_commas(self) -> None:
        assert parse_json_response("{'type': 'non_resume', 'confidence': 0.4,}") == {
            "type": "non_resume",
            "confidence": 0.4,
        }

    def test_logs_and_returns_none_without_json(self) -> None:
        logger = MagicMock()
        assert parse_json_response("I cannot help with that", logger=logger) is None
        assert logger.error.call_args.args[0] == "ai_response_missing_json"

    def test_logs_and_returns_none_on_invalid_json(self) -> None:
        logger = MagicMock()
        assert parse_json_response("{type: resume resume}", logger=logger) is None
        assert logger.error.call_args.args[0] == "ai_json_parse_failed"

    def test_none_input(self) -> None:
        assert parse_json_response(None, logger=MagicMock()) is None

    def test_deeply_nested_json_returns_none(self) -> None:
        logger = MagicMock()
        text = '{"a": ' + "[" * 5000 + "]" * 5000 + "}"
        assert parse_json_response(text, logger=logger) is None
        assert logger.error.call_args.args[0] == "ai_json_parse_failed"
        assert logger.error.call_args.kwargs["error"]["name"] == "RecursionError"
