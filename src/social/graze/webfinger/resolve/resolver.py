"""WebFinger resolver contracts.

A resolver answers WebFinger queries for the resources of one instance. The
host application subclasses Resolver (blocking) or AsyncResolver (asyncio),
implements find against its own resource repository, and calls endpoint with
the incoming `resource` and `rel` query parameters.

The repository type R is whatever the application looks resources up in, for
example a database session. It is passed through to find for a single call and
never retained.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

from social.graze.webfinger.model.jrd import Prefix, Webfinger
from social.graze.webfinger.resolve.resource import prepare_lookup

R = TypeVar("R")


class Resolver(ABC, Generic[R]):
    """Blocking resolver.

    Args:
        domain: Domain name of the current instance, e.g. `example.com`
    """

    def __init__(self, domain: str) -> None:
        self._domain = domain

    def instance_domain(self) -> str:
        """Return the domain name of the current instance."""
        return self._domain

    @abstractmethod
    def find(
        self,
        prefix: Prefix,
        acct: str,
        rels: Sequence[str],
        resource_repo: R,
    ) -> Webfinger:
        """
        Find a resource in the repository.

        `acct` only contains the identifier of the requested resource, e.g. `carol`
        for `acct:carol@example.com`.

        Args:
            prefix: Prefix of the requested resource
            acct: Local identifier of the requested resource
            rels: Requested relation types, possibly empty
            resource_repo: The resource repository

        Raises:
            ResolverError: not_found if the resource does not exist or the prefix is not served
        """
        ...

    def endpoint(
        self,
        resource: str,
        resource_repo: R,
        rels: Optional[Sequence[str]] = None,
    ) -> Webfinger:
        """
        Return a WebFinger result for a requested resource.

        Args:
            resource: The resource to resolve, e.g. `acct:carol@example.com`
            resource_repo: The resource repository
            rels: Relation types used to restrict the returned links, as described
                in RFC 7033 section 4.3. Zero or more may be given.

        Raises:
            ResolverError: invalid_resource, wrong_domain, or whatever find raises
        """
        parsed = prepare_lookup(resource, self.instance_domain())
        return self.find(parsed.prefix, parsed.user, list(rels or []), resource_repo)


class AsyncResolver(ABC, Generic[R]):
    """Asyncio resolver.

    Parsing and domain validation are the same as Resolver; the only suspension
    point is the call to find.

    Args:
        domain: Domain name of the current instance, e.g. `example.com`
    """

    def __init__(self, domain: str) -> None:
        self._domain = domain

    def instance_domain(self) -> str:
        """Return the domain name of the current instance."""
        return self._domain

    @abstractmethod
    async def find(
        self,
        prefix: Prefix,
        acct: str,
        rels: Sequence[str],
        resource_repo: R,
    ) -> Webfinger:
        """
        Find a resource in the repository.

        Raises:
            ResolverError: not_found if the resource does not exist or the prefix is not served
        """
        ...

    async def endpoint(
        self,
        resource: str,
        resource_repo: R,
        rels: Optional[Sequence[str]] = None,
    ) -> Webfinger:
        """
        Return a WebFinger result for a requested resource.

        Raises:
            ResolverError: invalid_resource, wrong_domain, or whatever find raises
        """
        parsed = prepare_lookup(resource, self.instance_domain())
        return await self.find(
            parsed.prefix, parsed.user, list(rels or []), resource_repo
        )
