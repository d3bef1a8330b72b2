"""WebFinger client.

Fetches JSON Resource Descriptors from the `/.well-known/webfinger` endpoint of
the domain hosting a resource.
"""

import asyncio
import logging
from typing import Tuple

import aiohttp
from aiohttp import ClientSession
from pydantic import ValidationError
import sentry_sdk

from social.graze.webfinger.errors import WebfingerError
from social.graze.webfinger.model.jrd import Prefix, Webfinger

logger = logging.getLogger(__name__)

JRD_ACCEPT = "application/jrd+json, application/json"


def url_for(prefix: Prefix, acct: str, with_https: bool = True) -> str:
    """Compute the URL to fetch for a given resource.

    Args:
        prefix: The resource prefix
        acct: The identifier of the resource, e.g. `someone@example.org`
        with_https: Use HTTPS when true, plain HTTP otherwise

    Returns:
        URL such as `https://example.org/.well-known/webfinger?resource=acct:someone@example.org`

    Raises:
        WebfingerError: parse_error if `acct` has no `@`
    """
    parts = acct.split("@")
    if len(parts) < 2:
        raise WebfingerError.parse_error(acct)
    instance = parts[1]
    scheme = "https" if with_https else "http"
    return f"{scheme}://{instance}/.well-known/webfinger?resource={prefix}:{acct}"


async def resolve_with_prefix(
    session: ClientSession, prefix: Prefix, acct: str, with_https: bool = True
) -> Webfinger:
    """Fetch a WebFinger resource identified by a prefix and an account.

    Args:
        session: HTTP client session
        prefix: The resource prefix
        acct: The identifier of the resource, e.g. `someone@example.org`
        with_https: Use HTTPS when true, plain HTTP otherwise

    Returns:
        The decoded Webfinger descriptor

    Raises:
        WebfingerError: parse_error, http_error or json_error
    """
    url = url_for(prefix, acct, with_https)
    logger.debug("Fetching %s", url)
    try:
        async with session.get(url, headers={"Accept": JRD_ACCEPT}) as resp:
            if resp.status < 200 or resp.status >= 300:
                raise WebfingerError.http_error(f"{url} returned {resp.status}")
            body = await resp.read()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        sentry_sdk.capture_exception(e)
        raise WebfingerError.http_error(f"{url}: {type(e).__name__}") from e

    try:
        return Webfinger.from_json(body)
    except ValidationError as e:
        logger.debug("Invalid JRD from %s: %s", url, e)
        raise WebfingerError.json_error(url) from e


def split_identifier(acct: str) -> Tuple[Prefix, str]:
    """Split an identifier into a prefix and an account.

    - `carol@example.com:8080` is an `acct:` identifier: the `:` follows the `@`,
      so it belongs to a port, not a prefix
    - `group:friends@example.com` has the prefix `group` and the account
      `friends@example.com`
    - `carol@example.com` (or anything without `:`) falls back to `acct:`
    """
    first, sep, other = acct.partition(":")
    if "@" in first:
        return Prefix.acct(), acct
    if sep:
        return Prefix.parse(first), other
    return Prefix.acct(), first


async def resolve(
    session: ClientSession, acct: str, with_https: bool = True
) -> Webfinger:
    """Fetch a WebFinger resource.

    If the resource doesn't have a prefix, `acct:` is used.

    Raises:
        WebfingerError: parse_error, http_error or json_error
    """
    prefix, account = split_identifier(acct)
    return await resolve_with_prefix(session, prefix, account, with_https)
