"""
Configuration Module for WebFinger

This module defines the configuration for WebFinger clients and endpoints, using
Pydantic for settings validation and dependency injection through AppKeys.

The Settings class is loaded from environment variables with defaults suitable
for development. The instance domain is passed explicitly to resolvers built
from these settings; no component reads it from global state.
"""

from typing import Final, Optional
import logging
from aiohttp import web
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from social.graze.webfinger.resolve.resolver import AsyncResolver


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings for WebFinger.

    Environment variables are mapped to settings fields, with aliases where a
    shorter name is common. For example, the instance domain can be set with
    either INSTANCE_DOMAIN or DOMAIN.
    """

    debug: bool = False
    """
    Enable debug mode for verbose logging.
    Set with DEBUG=true environment variable.
    """

    instance_domain: str = Field(
        "localhost",
        validation_alias=AliasChoices("instance_domain", "domain"),
    )
    """
    Domain name served by this instance. Resources for any other domain are rejected.
    Set with INSTANCE_DOMAIN or DOMAIN environment variables.
    """

    with_https: bool = True
    """
    Fetch remote resources over HTTPS. Disable only for local development.
    Set with WITH_HTTPS environment variable.
    """

    request_timeout: float = 10.0
    """
    Total timeout in seconds for remote WebFinger requests.
    Set with REQUEST_TIMEOUT environment variable.
    """

    sentry_dsn: Optional[str] = None
    """
    Sentry DSN for error reporting. Optional, no error reporting if not set.
    Set with SENTRY_DSN environment variable.
    """


WEBFINGER_PATH = "/.well-known/webfinger"
"""Well-known path of the WebFinger endpoint (RFC 7033 section 10.1)."""

JRD_CONTENT_TYPE = "application/jrd+json"
"""Media type of WebFinger responses."""

# Application context keys for dependency injection
SettingsAppKey: Final = web.AppKey("settings", Settings)
"""AppKey for accessing the application settings"""

ResolverAppKey: Final = web.AppKey("webfinger_resolver", AsyncResolver)
"""AppKey for accessing the resolver answering WebFinger queries"""

RepositoryAppKey: Final = web.AppKey("webfinger_repository", object)
"""AppKey for accessing the resource repository handed to the resolver"""
