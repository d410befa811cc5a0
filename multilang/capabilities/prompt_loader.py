from pathlib import Path

from multilang.capabilities.exceptions import CapabilityError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a capability prompt template from a file.

    Args:
        name: Capability name; selects the bundled ``{name}_prompt.txt``.
        path: Explicit template path overriding the bundled one.

    Returns:
        The raw template string with placeholders.

    Raises:
        CapabilityError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{name}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CapabilityError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(name: str, path: Path | None = None) -> str:
    """Load a capability response JSON schema from a file.

    Args:
        name: Capability name; selects the bundled ``{name}_schema.json``.
        path: Explicit schema path overriding the bundled one.

    Returns:
        The raw JSON schema string.

    Raises:
        CapabilityError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{name}_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CapabilityError(f"Failed to load JSON schema: {exc}") from exc
