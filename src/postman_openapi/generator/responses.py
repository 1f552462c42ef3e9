"""Build an operation's responses from the evidence an item carries.

First match wins: status codes asserted in test scripts, then the first
saved example response, then a default ``200``.
"""

from postman_openapi.generator.objects import MediaType, Response
from postman_openapi.parser.base import Item
from postman_openapi.parser.scripts import extract_status_codes_from_tests

DEFAULT_DESCRIPTION = "Successful response"


def _response(description: str) -> Response:
    return Response(description=description, content={"application/json": MediaType()})


def synthesize_responses(item: Item) -> dict[str, Response]:
    codes = extract_status_codes_from_tests(item)
    if codes:
        return {str(code): _response(DEFAULT_DESCRIPTION) for code in codes}

    if item.response:
        first = item.response[0]
        return {str(first.code or 200): _response(first.status or DEFAULT_DESCRIPTION)}

    return {"200": _response(DEFAULT_DESCRIPTION)}
