"""
WebFinger Application Layer

This package adapts the resolver contracts to the aiohttp framework so a host
application can answer WebFinger queries. It does not run a server of its own.

Key Components:
- server.py: Route registration, Sentry setup and middleware
- config.py: Configuration management using Pydantic settings
- handlers/: Request handler for `/.well-known/webfinger`
- cli.py: Logging configuration shared by command line entry points

Responses map resolver outcomes as follows:
- Found: 200 with an `application/jrd+json` body
- Invalid resource: 400
- Wrong domain or not found: 404, with distinct error codes
"""
