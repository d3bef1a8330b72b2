"""
Resource Resolution

This package provides both directions of WebFinger resolution: answering
queries for local resources and fetching descriptors of remote ones.

Key Components:
- resource.py: Parsing of `<prefix>:<user>@<domain>` resources and domain validation
- resolver.py: Resolver and AsyncResolver contracts implemented by host applications
- fetch.py: Client for remote `/.well-known/webfinger` endpoints
- __main__.py: CLI interface for fetching

Serving follows these steps:
1. Split the resource on its first `:` into a prefix and the rest
2. Split the rest on its first `@` into a user and a domain
3. Reject domains other than the instance's own domain
4. Hand the prefix, user and requested rels to the resolver's find method

Any malformed input fails before the repository is consulted, and a foreign
domain is never looked up.
"""

from social.graze.webfinger.resolve.fetch import (
    resolve,
    resolve_with_prefix,
    split_identifier,
    url_for,
)
from social.graze.webfinger.resolve.resolver import AsyncResolver, Resolver
from social.graze.webfinger.resolve.resource import (
    ParsedResource,
    check_domain,
    parse_resource,
    prepare_lookup,
)

__all__ = [
    "AsyncResolver",
    "ParsedResource",
    "Resolver",
    "check_domain",
    "parse_resource",
    "prepare_lookup",
    "resolve",
    "resolve_with_prefix",
    "split_identifier",
    "url_for",
]
