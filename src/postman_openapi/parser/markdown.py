"""Markdown helpers for request descriptions.

Postman descriptions often document parameters in a markdown table::

    | object | name | description | required | type | example |
    |--------|------|-------------|----------|------|---------|
    | query  | page | Page number | false    | integer | 1    |

:func:`split_description` separates such tables from the prose around them and
:func:`parse_md_table` turns the table text into rows.
"""

import enum
import re

_ALIGNMENT_CELL_RE = re.compile(r"^:?-+:?$")
_DASH_LINE_RE = re.compile(r"^-+$")


class _State(enum.Enum):
    DESCRIPTION = "description"
    TABLE = "table"


def _is_table_line(line: str) -> bool:
    return line.strip().startswith("|")


def _is_alignment_line(line: str) -> bool:
    stripped = line.strip()
    if _DASH_LINE_RE.match(stripped):
        return True
    cells = _split_row(stripped)
    return bool(cells) and all(_ALIGNMENT_CELL_RE.match(cell) for cell in cells)


def _drop_table_preamble(lines: list[str]) -> None:
    """Remove trailing blank and heading lines that introduce a table."""
    while lines and (not lines[-1].strip() or lines[-1].strip().startswith("#")):
        lines.pop()


def split_description(description: str) -> tuple[str, str]:
    """Split ``description`` into (text without tables, table text).

    A line starting with ``|`` opens a table; following ``|`` lines and
    dash alignment rows stay in it, and the first other line closes it
    and goes back to the description. Blank lines and headings right
    before a table are dropped. All tables found are returned, separated
    by a blank line.
    """
    state = _State.DESCRIPTION
    description_lines: list[str] = []
    table_lines: list[str] = []

    for line in description.split("\n"):
        if state is _State.DESCRIPTION:
            if _is_table_line(line):
                _drop_table_preamble(description_lines)
                if table_lines:
                    table_lines.append("")
                table_lines.append(line)
                state = _State.TABLE
            else:
                description_lines.append(line)
        elif state is _State.TABLE:
            if _is_table_line(line) or _is_alignment_line(line):
                table_lines.append(line)
            else:
                description_lines.append(line)
                state = _State.DESCRIPTION

    return "\n".join(description_lines), "\n".join(table_lines)


def _split_row(line: str) -> list[str]:
    stripped = line.strip()
    if stripped.startswith("|"):
        stripped = stripped[1:]
    if stripped.endswith("|"):
        stripped = stripped[:-1]
    return [cell.strip() for cell in stripped.split("|")]


def parse_md_table(markdown: str) -> dict[int, dict[str, str]]:
    """Parse markdown table text into ``{row index: {column: value}}``.

    Column names come from the first row and are lower-cased. Alignment
    rows are skipped, and a later header row (a second table) replaces the
    column names for the rows that follow it. Missing cells are left out.
    """
    rows: dict[int, dict[str, str]] = {}
    headers: list[str] | None = None
    expect_header = True

    for line in markdown.split("\n"):
        if not _is_table_line(line):
            # A gap between tables: the next table brings its own header.
            expect_header = True
            continue
        if _is_alignment_line(line):
            continue
        cells = _split_row(line)
        if expect_header or headers is None:
            headers = [cell.lower() for cell in cells]
            expect_header = False
            continue
        row = {header: cell for header, cell in zip(headers, cells) if header}
        if any(row.values()):
            rows[len(rows)] = row

    return rows
