"""Parse and validate YAML project input for Group Design.

Reads a project YAML file, checks it against the ``ProjectInput`` model and
collects every problem into a single ``InputError`` so the user sees all of
them at once.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .inputs import ProjectInput


SAMPLE_INPUT = Path(__file__).resolve().parent.parent.parent / "config" / "sample_input.yaml"


class InputError(Exception):
    """Raised when the YAML input is invalid or incomplete."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


def _format_errors(exc: ValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        msg = err["msg"].removeprefix("Value error, ")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return messages


def parse_config(data: Any) -> ProjectInput:
    """Validate an already-loaded config mapping."""
    if not isinstance(data, dict):
        raise InputError(["Input must be a mapping (key-value pairs)."])
    try:
        return ProjectInput.model_validate(data)
    except ValidationError as exc:
        raise InputError(_format_errors(exc)) from exc


def parse_input(path: Path | str) -> ProjectInput:
    """Read and validate the YAML project file at *path*.

    Raises
    ------
    InputError
        If the file cannot be read, is not valid YAML, or fails validation.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as exc:
        raise InputError([f"Cannot read {path}: {exc}"]) from exc
    except yaml.YAMLError as exc:
        raise InputError([f"YAML syntax error: {exc}"]) from exc
    return parse_config(data)


def load_sample() -> str:
    """Text of the bundled sample input file."""
    return SAMPLE_INPUT.read_text(encoding="utf-8")
