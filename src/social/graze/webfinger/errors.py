"""WebFinger error kinds.

Two independent taxonomies: ResolverError for answering incoming queries and
WebfingerError for fetching remote descriptors.
"""

from enum import IntEnum


class ResolverErrorKind(IntEnum):
    """Failure classes of the serve-side lookup path."""

    invalid_resource = 1
    wrong_domain = 2
    not_found = 3


class WebfingerErrorKind(IntEnum):
    """Failure classes of the fetch-side path."""

    http_error = 1
    parse_error = 2
    json_error = 3


class ResolverError(Exception):
    """
    Exception raised while handling an incoming WebFinger request.

    Use the static methods to create instances; each carries a kind that
    callers can map to a response.
    """

    def __init__(self, kind: ResolverErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @staticmethod
    def invalid_resource(resource: str = "") -> "ResolverError":
        """The requested resource was not correctly formatted."""
        return ResolverError(
            ResolverErrorKind.invalid_resource,
            f"error-webfinger-resolver-1000 Invalid resource: {resource}",
        )

    @staticmethod
    def wrong_domain(domain: str = "") -> "ResolverError":
        """The domain of the resource is not the current instance."""
        return ResolverError(
            ResolverErrorKind.wrong_domain,
            f"error-webfinger-resolver-1001 Wrong domain: {domain}",
        )

    @staticmethod
    def not_found() -> "ResolverError":
        """The requested resource was not found."""
        return ResolverError(
            ResolverErrorKind.not_found,
            "error-webfinger-resolver-1002 Resource not found",
        )


class WebfingerError(Exception):
    """
    Exception raised while fetching a remote WebFinger resource.
    """

    def __init__(self, kind: WebfingerErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @staticmethod
    def http_error(msg: str = "") -> "WebfingerError":
        """The request failed or the server did not answer with a success status."""
        return WebfingerError(
            WebfingerErrorKind.http_error,
            f"error-webfinger-fetch-2000 HTTP error: {msg}",
        )

    @staticmethod
    def parse_error(acct: str = "") -> "WebfingerError":
        """The requested resource couldn't be parsed, and thus couldn't be fetched."""
        return WebfingerError(
            WebfingerErrorKind.parse_error,
            f"error-webfinger-fetch-2001 Cannot find a domain in: {acct}",
        )

    @staticmethod
    def json_error(msg: str = "") -> "WebfingerError":
        """The received body couldn't be decoded into a Webfinger descriptor."""
        return WebfingerError(
            WebfingerErrorKind.json_error,
            f"error-webfinger-fetch-2002 Invalid JRD body: {msg}",
        )
