from pathlib import Path

from handnotes.transcription.exceptions import TranscriptionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(name: str, prompt_dir: Path | None = None) -> str:
    """Load a bundled prompt file by name.

    Args:
        name: File name inside the prompt directory, e.g. "transcription_prompt.txt".
        prompt_dir: Directory to read from. Defaults to the bundled prompts/.

    Raises:
        TranscriptionError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise TranscriptionError(f"Failed to load prompt '{name}': {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the structured-output JSON schema.

    Raises:
        TranscriptionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "structured_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TranscriptionError(f"Failed to load JSON schema: {exc}") from exc
