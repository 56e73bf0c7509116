from __future__ import annotations

import json
from typing import Any, BinaryIO, Final

from pydantic import TypeAdapter, ValidationError

from shellcheck_importer.errors import MalformedReport
from shellcheck_importer.models.diagnostic import Diagnostic

# ShellCheck's json1 format wraps the entries in an object under this key.
JSON1_ENTRIES_KEY: Final[str] = "comments"

_DIAGNOSTICS_ADAPTER: Final[TypeAdapter[list[Diagnostic]]] = TypeAdapter(
    list[Diagnostic]
)


def parse_report(stream: BinaryIO) -> list[Diagnostic]:
    """Decode a ShellCheck JSON report.

    Both the ``json`` format (top-level array) and the ``json1`` format
    (object with a ``comments`` array) are accepted. Entry order is kept.

    Args:
        stream: Binary stream holding the UTF-8 encoded report.

    Returns:
        Diagnostics in report order.

    Raises:
        MalformedReport: When the report is not valid JSON, is not a list of
            entries, or an entry lacks ``file`` or holds a value of the wrong type.
    """
    try:
        raw: Any = json.load(stream)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise MalformedReport(f"Report is not valid JSON: {e}") from e

    if isinstance(raw, dict) and JSON1_ENTRIES_KEY in raw:
        raw = raw[JSON1_ENTRIES_KEY]
    if not isinstance(raw, list):
        raise MalformedReport(
            f"Report must be a list of entries, got {type(raw).__name__}"
        )

    try:
        return _DIAGNOSTICS_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise MalformedReport(f"Invalid report entry: {e}") from e
