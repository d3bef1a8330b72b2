"""WebFinger resource parsing and domain validation.

Turns a requested resource such as `acct:carol@example.com` into its prefix,
user and domain, and checks that the domain belongs to the current instance.
Both the blocking and the asyncio resolvers use these functions before calling
into their repository.
"""

import logging

from pydantic import BaseModel

from social.graze.webfinger.errors import ResolverError
from social.graze.webfinger.model.jrd import Prefix

logger = logging.getLogger(__name__)


class ParsedResource(BaseModel):
    """Parsed WebFinger resource.

    For `acct:carol@example.com` the prefix is `acct`, the user is `carol` and
    the domain is `example.com`.
    """

    prefix: Prefix
    user: str
    domain: str


def parse_resource(resource: str) -> ParsedResource:
    """Parse a raw resource string of the form `<prefix>:<user>@<domain>`.

    Only the first `:` and the first `@` are separators, so a `:` or `@` later in
    the user or domain stays part of that component.

    Args:
        resource: Value of the `resource` query parameter

    Returns:
        ParsedResource with the normalized prefix

    Raises:
        ResolverError: invalid_resource if there is no `:` or no `@` after it
    """
    prefix_token, sep, remainder = resource.partition(":")
    if not sep:
        raise ResolverError.invalid_resource(resource)
    prefix = Prefix.parse(prefix_token)

    user, sep, domain = remainder.partition("@")
    if not sep:
        raise ResolverError.invalid_resource(resource)

    return ParsedResource(prefix=prefix, user=user, domain=domain)


def check_domain(parsed: ParsedResource, instance_domain: str) -> ParsedResource:
    """Ensure the resource belongs to this instance.

    The comparison is exact; no case folding or IDNA conversion is applied.

    Raises:
        ResolverError: wrong_domain if the domains differ
    """
    if parsed.domain != instance_domain:
        logger.debug(
            "Rejecting resource for domain %s on instance %s",
            parsed.domain,
            instance_domain,
        )
        raise ResolverError.wrong_domain(parsed.domain)
    return parsed


def prepare_lookup(resource: str, instance_domain: str) -> ParsedResource:
    """Parse a resource and validate its domain, ready for a repository lookup."""
    return check_domain(parse_resource(resource), instance_domain)
