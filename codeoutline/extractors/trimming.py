"""Line-span extraction and signature trimming.

All functions take the file as a list of lines and 0-based inclusive row
bounds, and return the text of one outline chunk (already stripped).
"""

from collections.abc import Sequence

# Line endings that close a signature header, across grammars:
# brace blocks, arrow functions, return-type arrows, Python colons and
# bodiless declarations.
SIGNATURE_TERMINATORS = ("{", "=>", "->", ":", ";")

# Terminators whose body marker is cut off the last signature line.
# Colon and semicolon terminated headers are kept as written.
BODY_MARKERS = ("{", "=>", "->")

INHERITANCE_KEYWORDS = ("extends", "implements")


def extract_span(lines: Sequence[str], start_row: int, end_row: int) -> str:
    """Return rows ``start_row..end_row`` joined by newlines, stripped."""
    end_row = min(end_row, len(lines) - 1)
    return "\n".join(lines[start_row:end_row + 1]).strip()


def find_signature_end(lines: Sequence[str], start_row: int, end_row: int) -> tuple[int, str | None]:
    """Find the row that closes a signature header.

    Returns the row and the terminator found on it. When no row in the
    span qualifies, returns ``(end_row, None)`` so the whole span is kept.
    """
    end_row = min(end_row, len(lines) - 1)
    for row in range(start_row, end_row + 1):
        text = lines[row].strip()
        if ")" not in text:
            continue
        for terminator in SIGNATURE_TERMINATORS:
            if text.endswith(terminator):
                return row, terminator
    return end_row, None


def _cut_at(line: str, marker: str) -> str:
    index = line.find(marker)
    if index == -1:
        return line
    return line[:index].rstrip()


def _strip_body_marker(line: str, terminator: str | None) -> str:
    if terminator in BODY_MARKERS:
        return _cut_at(line, terminator)
    if terminator is None:
        # No header terminator found: drop whatever body marker the line has.
        for marker in BODY_MARKERS:
            if marker in line:
                return _cut_at(line, marker)
    return line.rstrip()


def _signature_from_body(lines: Sequence[str], start_row: int, body_start: tuple[int, int]) -> str:
    body_row, body_column = body_start
    selected = list(lines[start_row:body_row + 1])
    # tree-sitter columns count bytes, not characters.
    head = selected[-1].encode("utf-8")[:body_column].decode("utf-8", errors="ignore")
    selected[-1] = head.rstrip()
    return "\n".join(selected).strip()


def trim_signature(
    lines: Sequence[str],
    start_row: int,
    end_row: int,
    body_start: tuple[int, int] | None = None,
) -> str:
    """Return the declaration header of a function or method, body removed.

    When the parser reported where the body node begins, the header is
    everything before it. Otherwise the header ends at the first row that
    contains a closing parenthesis and ends with a terminator from
    ``SIGNATURE_TERMINATORS``; the body marker that terminated it is cut
    off that last row.
    """
    if body_start is not None and start_row <= body_start[0] <= min(end_row, len(lines) - 1):
        signature = _signature_from_body(lines, start_row, body_start)
        if signature:
            return signature

    signature_end, terminator = find_signature_end(lines, start_row, end_row)
    selected = list(lines[start_row:signature_end + 1])
    selected[-1] = _strip_body_marker(selected[-1], terminator)
    return "\n".join(selected).strip()


def trim_class_signature(
    lines: Sequence[str],
    start_row: int,
    end_row: int,
    name_row: int | None = None,
) -> str:
    """Return a class declaration line plus a following inheritance line.

    When the parser reported the row of the class name and it lies inside
    the span, the declaration line is taken from there, which skips
    annotations and decorators written above it.
    """
    if name_row is not None and start_row < name_row <= min(end_row, len(lines) - 1):
        start_row = name_row

    selected = [lines[start_row]]

    if start_row + 1 <= end_row and start_row + 1 < len(lines):
        next_line = lines[start_row + 1].strip()
        if any(keyword in next_line for keyword in INHERITANCE_KEYWORDS):
            selected.append(next_line)

    selected = [line.split("{", 1)[0].strip() for line in selected]
    return "\n".join(selected).strip()
