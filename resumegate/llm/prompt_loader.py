from pathlib import Path

from resumegate.llm.exceptions import GenerationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_task_instruction(name: str, prompt_dir: Path | None = None) -> str:
    """Load a bundled task instruction.

    Args:
        name: File stem of the instruction, e.g. "document_classification_task".
        prompt_dir: Directory holding the ``.txt`` files.
                    Defaults to the bundled prompts directory.

    Returns:
        The instruction text with surrounding whitespace removed.

    Raises:
        GenerationError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise GenerationError(f"Failed to load prompt template: {exc}") from exc
