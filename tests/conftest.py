"""
Shared test configuration and fixtures for WebFinger tests.

Provides sample resolvers serving a single instance, `instance.tld`, whose
repository is simply the name of the only existing account.
"""

from typing import List, Sequence, Tuple

import pytest

from social.graze.webfinger.errors import ResolverError
from social.graze.webfinger.model.jrd import Link, Prefix, Webfinger
from social.graze.webfinger.resolve.resolver import AsyncResolver, Resolver

INSTANCE_DOMAIN = "instance.tld"


def single_user_webfinger(acct: str) -> Webfinger:
    return Webfinger(
        subject=acct,
        aliases=[acct],
        links=[
            Link(
                rel="http://webfinger.net/rel/profile-page",
                href=f"https://instance.tld/@{acct}/",
            ),
            Link(
                rel="self",
                mime_type="application/activity+json",
                href=f"https://instance.tld/@{acct}/",
            ),
        ],
    )


class SingleUserResolver(Resolver[str]):
    """Only one user, represented by a string, served under the acct prefix."""

    def __init__(self, domain: str = INSTANCE_DOMAIN) -> None:
        super().__init__(domain)
        self.calls: List[Tuple[Prefix, str, Sequence[str], str]] = []

    def find(self, prefix, acct, rels, resource_repo) -> Webfinger:
        self.calls.append((prefix, acct, rels, resource_repo))
        if acct == resource_repo and prefix == Prefix.acct():
            return single_user_webfinger(acct)
        raise ResolverError.not_found()


class AsyncSingleUserResolver(AsyncResolver[str]):
    """Asyncio version of SingleUserResolver."""

    def __init__(self, domain: str = INSTANCE_DOMAIN) -> None:
        super().__init__(domain)
        self.calls: List[Tuple[Prefix, str, Sequence[str], str]] = []

    async def find(self, prefix, acct, rels, resource_repo) -> Webfinger:
        self.calls.append((prefix, acct, rels, resource_repo))
        if acct == resource_repo and prefix == Prefix.acct():
            return single_user_webfinger(acct)
        raise ResolverError.not_found()


@pytest.fixture
def resolver() -> SingleUserResolver:
    return SingleUserResolver()


@pytest.fixture
def async_resolver() -> AsyncSingleUserResolver:
    return AsyncSingleUserResolver()
