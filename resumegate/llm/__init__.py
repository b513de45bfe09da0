from resumegate.llm.client_base import BaseGenerativeModel
from resumegate.llm.factory import GenerativeModelFactory
from resumegate.llm.generation import generate_content_with_retry
from resumegate.llm.response_parser import parse_json_response

__all__ = [
    "BaseGenerativeModel",
    "GenerativeModelFactory",
    "generate_content_with_retry",
    "parse_json_response",
]
