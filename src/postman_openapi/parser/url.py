"""URL helpers: turn Postman request URLs into OpenAPI path templates."""

import re

_SCHEME_HOST_RE = re.compile(r"^(?P<scheme>[a-zA-Z][a-zA-Z0-9+.-]*://)?(?P<host>[^/?#]*)")
_POSTMAN_VAR_RE = re.compile(r"\{\{([^{}]+)\}\}")
_COLON_PARAM_RE = re.compile(r"(?<=/):([A-Za-z0-9_.-]+)")
_BRACE_PARAM_RE = re.compile(r"\{([^{}]+)\}")


def _looks_like_host(segment: str) -> bool:
    if not segment:
        return False
    if segment.startswith("{{") and segment.endswith("}}"):
        return True
    host = segment.split(":", 1)[0]
    return host == "localhost" or "." in host or bool(re.fullmatch(r"[\d.]+", host))


def _split_host(url: str) -> tuple[str, str]:
    """Split ``url`` into (scheme + host + port, rest)."""
    match = _SCHEME_HOST_RE.match(url)
    if match is None:
        return "", url
    if match.group("scheme") or _looks_like_host(match.group("host")):
        return match.group(0), url[match.end():]
    return "", url


def extract_path_from_url(url: str | None) -> str:
    """Extract the path part of a raw Postman URL.

    The scheme, host and port are removed (a ``{{baseUrl}}`` style host
    counts as a host), as are the query string and fragment. Postman
    variables ``{{name}}`` in the path become ``{name}``. An empty URL
    yields an empty path.
    """
    if not url:
        return ""
    url = url.strip()
    _, rest = _split_host(url)
    path = re.split(r"[?#]", rest, maxsplit=1)[0]
    path = _POSTMAN_VAR_RE.sub(r"{\1}", path).strip()
    path = re.sub(r"/{2,}", "/", path)
    if not path.startswith("/"):
        path = "/" + path
    return path


def extract_server_url(url: str | None) -> str | None:
    """Return scheme + host + port of ``url``, or ``None`` when it has no host.

    Postman variables are left as they are, for the caller to resolve.
    """
    if not url:
        return None
    prefix, _ = _split_host(url.strip())
    if not prefix:
        return None
    return prefix


def normalize_path(path: str) -> str:
    """Rewrite ``:name`` path segments to ``{name}``."""
    return _COLON_PARAM_RE.sub(r"{\1}", path)


def extract_path_parameter_names(path: str) -> list[str]:
    """Return the ``{name}`` placeholders of ``path`` in order of appearance."""
    return _BRACE_PARAM_RE.findall(path)
