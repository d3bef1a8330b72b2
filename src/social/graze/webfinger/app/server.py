import logging
from typing import Any, Optional
from aiohttp import web
import sentry_sdk
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from social.graze.webfinger.app.config import (
    RepositoryAppKey,
    ResolverAppKey,
    Settings,
    SettingsAppKey,
    WEBFINGER_PATH,
)
from social.graze.webfinger.app.handlers.webfinger import handle_webfinger
from social.graze.webfinger.resolve.resolver import AsyncResolver

logger = logging.getLogger(__name__)


def init_sentry(settings: Settings) -> None:
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            send_default_pii=True,
            integrations=[AioHttpIntegration()],
        )


@web.middleware
async def sentry_middleware(request: web.Request, handler):
    try:
        response = await handler(request)
        return response
    except Exception as e:
        sentry_sdk.capture_exception(e)
        raise e


def setup_webfinger(
    app: web.Application,
    resolver: AsyncResolver,
    repository: Any,
    settings: Optional[Settings] = None,
) -> web.Application:
    """
    Mount the WebFinger endpoint on an existing application.

    The host application owns the server, TLS and any other routes; this only
    registers `GET /.well-known/webfinger` and the keys its handler reads.

    Args:
        app: The host application
        resolver: Resolver answering queries for this instance
        repository: Resource repository passed to the resolver on every query
        settings: Optional settings stored under SettingsAppKey

    Returns:
        The same application
    """
    if settings is not None:
        app[SettingsAppKey] = settings
    app[ResolverAppKey] = resolver
    app[RepositoryAppKey] = repository

    app.add_routes([web.get(WEBFINGER_PATH, handle_webfinger)])

    logger.info(
        "WebFinger endpoint mounted at %s for %s",
        WEBFINGER_PATH,
        resolver.instance_domain(),
    )
    return app


def create_webfinger_app(
    resolver: AsyncResolver, repository: Any, settings: Optional[Settings] = None
) -> web.Application:
    """Build an application serving only the WebFinger endpoint, for use as a sub-app or in tests."""
    if settings is None:
        settings = Settings()  # type: ignore
    init_sentry(settings)
    app = web.Application(middlewares=[sentry_middleware])
    return setup_webfinger(app, resolver, repository, settings)
