"""
Data Models

This package defines the data shapes exchanged by WebFinger clients and servers
using Pydantic models.

Key Models:
- jrd.py: Webfinger (the JSON Resource Descriptor), Link, and the resource Prefix

Serialization rules:
- `aliases` defaults to an empty list when the key is missing
- Link fields that are absent (`href`, `template`, `type`) are omitted, never emitted as null
- `Link.mime_type` is named `type` on the wire

All models are immutable values built per request.
"""

from social.graze.webfinger.model.jrd import Link, Prefix, PrefixKind, Webfinger

__all__ = ["Link", "Prefix", "PrefixKind", "Webfinger"]
