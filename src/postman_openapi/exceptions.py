"""Exceptions raised while reading input or options.

The conversion itself never raises: malformed collection nodes are skipped.
Errors come from the edges, where files are read and options are validated.
Each exception carries the process exit code the CLI uses for it.
"""


class PostmanOpenApiError(Exception):
    """Base exception for postman-openapi."""

    exit_code: int = 1

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class CollectionLoadError(PostmanOpenApiError):
    """The collection file could not be read or parsed."""

    exit_code = 3


class NotACollectionError(CollectionLoadError):
    """The document was parsed but is not a Postman collection."""

    exit_code = 4


class ConfigError(PostmanOpenApiError):
    """The options or the config file are invalid."""

    exit_code = 2
