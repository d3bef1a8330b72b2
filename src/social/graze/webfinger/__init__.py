"""
WebFinger - RFC 7033 client and server building blocks

This package implements both sides of the WebFinger protocol: fetching JSON
Resource Descriptors (JRD) for remote resources, and answering WebFinger
queries for resources hosted by the current instance.

Key Components:
- model: JRD data models (Webfinger, Link) and resource prefixes
- resolve: Resource parsing, domain validation, resolver contracts and the fetch client
- app: aiohttp endpoint adapter, configuration and logging setup
- errors: Error kinds for the serve side (ResolverError) and fetch side (WebfingerError)

Architecture Overview:
1. Serving:
   - The host application implements a Resolver (or AsyncResolver) with its own
     resource repository and configured instance domain
   - Incoming resources like acct:carol@example.com are parsed and checked against
     the instance domain before the resolver's find method is called

2. Fetching:
   - Identifiers are turned into https://{domain}/.well-known/webfinger URLs
   - Responses are decoded into Webfinger descriptors

Every request is independent: nothing is cached and no state is shared.
"""
