"""Scan Postman test scripts for the status codes they assert."""

import re

from postman_openapi.parser.base import Item

_STATUS_PATTERNS = [
    re.compile(r"pm\.response\.to\.have\.status\(\s*(\d{3})\s*\)"),
    re.compile(r"pm\.response\.to\.be\.status\(\s*(\d{3})\s*\)"),
    re.compile(r"pm\.expect\(\s*pm\.response\.code\s*\)\.to\.(?:eql|equal|eq)\(\s*(\d{3})\s*\)"),
    re.compile(r"responseCode\.code\s*={2,3}\s*(\d{3})"),
]


def _script_lines(item: Item) -> list[str]:
    lines: list[str] = []
    for event in item.event:
        if event.listen != "test" or event.script is None:
            continue
        source = event.script.exec
        if isinstance(source, str):
            lines.extend(source.split("\n"))
        elif source:
            lines.extend(source)
    return lines


def extract_status_codes_from_tests(item: Item) -> list[int]:
    """Return the distinct status codes asserted by ``item``'s test scripts."""
    codes: list[int] = []
    for line in _script_lines(item):
        for pattern in _STATUS_PATTERNS:
            for match in pattern.finditer(line):
                code = int(match.group(1))
                if code not in codes:
                    codes.append(code)
    return codes
