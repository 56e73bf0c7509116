from shellcheck_importer.models.issue import LineSelection, Location, TextRange


def resolve_location(line: int, column: int, end_line: int, end_column: int) -> Location:
    """Turn ShellCheck's 1-based positions into a host location.

    ShellCheck reports 1-based inclusive columns and often a zero-width span
    for single-point findings. The result uses 0-based half-open columns and
    is widened to one character when the end does not follow the start.

    Args:
        line: Start line, 0 or less when unknown.
        column: Start column, 0 or less when unknown.
        end_line: End line; raised to ``line`` when smaller.
        end_column: End column; moved to ``column + 1`` unless greater than ``column``.

    Returns:
        None when the line is unknown, a whole-line selection when only the
        column is unknown, otherwise a non-empty text range.
    """
    if line <= 0:
        return None
    if column <= 0:
        return LineSelection(line=line)

    end_line = max(end_line, line)
    if end_column <= column:
        end_column = column + 1
    return TextRange(
        start_line=line,
        start_column=column - 1,
        end_line=end_line,
        end_column=end_column - 1,
    )
