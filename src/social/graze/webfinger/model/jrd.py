"""JSON Resource Descriptor models.

Provides the Webfinger and Link models exchanged with remote servers and
returned to WebFinger clients, and the Prefix of a queried resource.
"""

from enum import IntEnum
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class PrefixKind(IntEnum):
    """Resource prefix enumeration.

    Identifies whether a resource is an account, a group or another URI scheme.
    """

    acct = 1
    group = 2
    custom = 3


class Prefix(BaseModel):
    """Prefix of a WebFinger resource, such as `acct` in `acct:carol@example.com`.

    Prefixes are case-insensitive: the token is lower-cased before matching, and
    custom prefixes keep the lower-cased text.
    """

    model_config = ConfigDict(frozen=True)

    kind: PrefixKind
    text: str

    @classmethod
    def acct(cls) -> "Prefix":
        return cls(kind=PrefixKind.acct, text="acct")

    @classmethod
    def group(cls) -> "Prefix":
        return cls(kind=PrefixKind.group, text="group")

    @classmethod
    def custom(cls, text: str) -> "Prefix":
        return cls(kind=PrefixKind.custom, text=text.lower())

    @model_validator(mode="after")
    def check_canonical(self) -> "Prefix":
        """Keep kind and text consistent so that parsing the text yields the same prefix."""
        if self.text != self.text.lower():
            raise ValueError(f"prefix text must be lower-case: {self.text}")
        if self.kind == PrefixKind.acct and self.text != "acct":
            raise ValueError(f"acct prefix cannot have text {self.text}")
        if self.kind == PrefixKind.group and self.text != "group":
            raise ValueError(f"group prefix cannot have text {self.text}")
        if self.kind == PrefixKind.custom and self.text in ("acct", "group"):
            raise ValueError(f"{self.text} is not a custom prefix")
        return self

    @classmethod
    def parse(cls, token: str) -> "Prefix":
        """Normalize a prefix token. This never fails.

        Args:
            token: Prefix text without the trailing colon

        Returns:
            Prefix for `acct`, `group`, or a custom prefix holding the lower-cased token
        """
        token = token.lower()
        if token == "acct":
            return cls.acct()
        elif token == "group":
            return cls.group()
        return cls.custom(token)

    def __str__(self) -> str:
        return self.text


class Link(BaseModel):
    """WebFinger link.

    A link usually carries either an href or a template, but neither is required.
    """

    model_config = ConfigDict(frozen=True)

    rel: str
    """Relation type, either a registered name or a URI."""

    href: Optional[str] = None
    """The target URL of the link."""

    template: Optional[str] = None
    """A URL template, used instead of an actual URL."""

    mime_type: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("type", "mime_type"),
        serialization_alias="type",
    )
    """Media type of the target, serialized as `type`."""


class Webfinger(BaseModel):
    """WebFinger result, serialized to or deserialized from a JRD document."""

    model_config = ConfigDict(frozen=True)

    subject: str
    """The subject of this result, typically an `acct:` URI."""

    aliases: List[str] = Field(default_factory=list)
    """Other URIs identifying the same subject."""

    links: List[Link]
    """Places where more information about the subject may be found."""

    def filter_rels(self, rels: Optional[Sequence[str]] = None) -> "Webfinger":
        """Restrict links to the requested relation types (RFC 7033 section 4.3).

        Args:
            rels: Relation types to keep. An empty or missing filter keeps every link.

        Returns:
            A Webfinger with only the matching links, in their original order
        """
        if not rels:
            return self
        wanted = set(rels)
        return self.model_copy(
            update={"links": [link for link in self.links if link.rel in wanted]}
        )

    def to_jrd(self) -> Dict[str, Any]:
        """Return the JRD document, omitting absent link fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, body: Union[str, bytes]) -> "Webfinger":
        """Decode a JRD document.

        Raises:
            pydantic.ValidationError: If the body is not JSON or not a valid JRD
        """
        return cls.model_validate_json(body)
