import logging
from typing import Dict, List, Optional
from aiohttp import web
import sentry_sdk

from social.graze.webfinger.app.config import (
    JRD_CONTENT_TYPE,
    RepositoryAppKey,
    ResolverAppKey,
)
from social.graze.webfinger.errors import ResolverError, ResolverErrorKind

logger = logging.getLogger(__name__)

CORS_HEADERS: Dict[str, str] = {"Access-Control-Allow-Origin": "*"}
"""WebFinger resources are public (RFC 7033 section 5)."""

ERROR_STATUS: Dict[ResolverErrorKind, int] = {
    ResolverErrorKind.invalid_resource: 400,
    ResolverErrorKind.wrong_domain: 404,
    ResolverErrorKind.not_found: 404,
}


def error_response(status: int, error: str) -> web.Response:
    return web.json_response(status=status, data={"error": error}, headers=CORS_HEADERS)


async def handle_webfinger(request: web.Request) -> web.Response:
    """
    Answer a WebFinger query.

    Reads the `resource` query parameter and zero or more `rel` parameters, asks
    the application's resolver for a descriptor, and returns it as a JRD document
    with only the requested relation types.
    """
    resource: Optional[str] = request.query.get("resource", None)
    if resource is None or len(resource) == 0:
        return error_response(400, "Resource not provided")

    rels: List[str] = request.query.getall("rel", [])

    resolver = request.app[ResolverAppKey]
    repository = request.app[RepositoryAppKey]

    try:
        webfinger = await resolver.endpoint(resource, repository, rels)
    except ResolverError as e:
        logger.debug("WebFinger query for %s failed: %s", resource, e)
        return error_response(ERROR_STATUS[e.kind], str(e))
    except Exception as e:
        sentry_sdk.capture_exception(e)
        logger.exception("handle_webfinger: Exception")
        return error_response(500, "Internal Server Error")

    return web.json_response(
        webfinger.filter_rels(rels).to_jrd(),
        content_type=JRD_CONTENT_TYPE,
        headers=CORS_HEADERS,
    )
