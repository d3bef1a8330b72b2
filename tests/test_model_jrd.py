"""
Unit tests for JRD models in social.graze.webfinger.model.jrd

Tests cover prefix normalization, JRD decoding defaults, omission of absent
link fields on output, and relation type filtering.
"""

import json

import pytest
from pydantic import ValidationError

from social.graze.webfinger.model.jrd import Link, Prefix, PrefixKind, Webfinger

VALID_JRD = """
{
    "subject": "acct:test@example.org",
    "aliases": [
        "https://example.org/@test/"
    ],
    "links": [
        {
            "rel": "http://webfinger.net/rel/profile-page",
            "href": "https://example.org/@test/"
        },
        {
            "rel": "http://schemas.google.com/g/2010#updates-from",
            "type": "application/atom+xml",
            "href": "https://example.org/@test/feed.atom"
        },
        {
            "rel": "self",
            "type": "application/activity+json",
            "href": "https://example.org/@test/"
        }
    ]
}
"""


class TestPrefix:
    """Test suite for Prefix parsing and canonical text."""

    def test_parse_acct(self):
        """Test acct is recognized in any case."""
        assert Prefix.parse("acct") == Prefix.acct()
        assert Prefix.parse("ACCT") == Prefix.acct()
        assert Prefix.parse("aCcT").kind == PrefixKind.acct

    def test_parse_group(self):
        """Test group is recognized in any case."""
        assert Prefix.parse("group") == Prefix.group()
        assert Prefix.parse("Group") == Prefix.group()

    def test_parse_custom_is_lowercased(self):
        """Test unknown prefixes become custom prefixes with lower-cased text."""
        prefix = Prefix.parse("Mailto")
        assert prefix.kind == PrefixKind.custom
        assert prefix == Prefix.custom("mailto")
        assert str(prefix) == "mailto"

    def test_canonical_text(self):
        """Test acct and group always serialize to their lowercase names."""
        assert str(Prefix.acct()) == "acct"
        assert str(Prefix.group()) == "group"
        assert str(Prefix.custom("hey")) == "hey"

    @pytest.mark.parametrize(
        "prefix",
        [Prefix.acct(), Prefix.group(), Prefix.custom("hey"), Prefix.parse("HTTPS")],
    )
    def test_parse_round_trip(self, prefix):
        """Test parsing the canonical text of a prefix yields the same prefix."""
        assert Prefix.parse(str(prefix)) == prefix

    def test_custom_is_lowercased(self):
        """Test custom prefixes built directly are lower-cased like parsed ones."""
        prefix = Prefix.custom("Mailto")
        assert str(prefix) == "mailto"
        assert Prefix.parse(str(prefix)) == prefix

    @pytest.mark.parametrize("text", ["acct", "GROUP"])
    def test_custom_rejects_known_prefixes(self, text):
        """Test acct and group cannot be built as custom prefixes."""
        with pytest.raises(ValidationError):
            Prefix.custom(text)

    @pytest.mark.parametrize(
        "kind, text",
        [
            (PrefixKind.acct, "group"),
            (PrefixKind.group, "Group"),
            (PrefixKind.custom, "Mailto"),
        ],
    )
    def test_inconsistent_kind_and_text(self, kind, text):
        """Test the constructor rejects text that does not match the kind."""
        with pytest.raises(ValidationError):
            Prefix(kind=kind, text=text)

    def test_prefix_is_hashable(self):
        """Test prefixes can be used as dictionary keys."""
        assert {Prefix.acct(): 1}[Prefix.parse("acct")] == 1


class TestWebfingerParsing:
    """Test suite for decoding JRD documents."""

    def test_parse_valid_document(self):
        """Test a complete document decodes into Webfinger and Link models."""
        webfinger = Webfinger.from_json(VALID_JRD)

        assert webfinger.subject == "acct:test@example.org"
        assert webfinger.aliases == ["https://example.org/@test/"]
        assert webfinger.links == [
            Link(
                rel="http://webfinger.net/rel/profile-page",
                href="https://example.org/@test/",
            ),
            Link(
                rel="http://schemas.google.com/g/2010#updates-from",
                mime_type="application/atom+xml",
                href="https://example.org/@test/feed.atom",
            ),
            Link(
                rel="self",
                mime_type="application/activity+json",
                href="https://example.org/@test/",
            ),
        ]

    def test_missing_aliases_defaults_to_empty(self):
        """Test a document without aliases decodes with an empty list."""
        webfinger = Webfinger.from_json(
            '{"subject": "acct:test@example.org", "links": []}'
        )
        assert webfinger.aliases == []

    def test_missing_links_is_invalid(self):
        """Test a document without links is rejected."""
        with pytest.raises(ValidationError):
            Webfinger.from_json('{"subject": "acct:test@example.org"}')

    def test_invalid_json_is_rejected(self):
        """Test a body that is not JSON is rejected."""
        with pytest.raises(ValidationError):
            Webfinger.from_json("<html>not found</html>")

    def test_link_without_href_or_template(self):
        """Test a link with only a rel is accepted."""
        webfinger = Webfinger.from_json(
            '{"subject": "acct:a@b", "links": [{"rel": "self"}]}'
        )
        assert webfinger.links[0] == Link(rel="self")

    def test_structural_equality(self):
        """Test descriptors decoded from the same document are equal."""
        assert Webfinger.from_json(VALID_JRD) == Webfinger.from_json(VALID_JRD)


class TestWebfingerSerialization:
    """Test suite for encoding JRD documents."""

    def test_link_absent_fields_are_omitted(self):
        """Test a link with only rel and href omits template and type."""
        link = Link(rel="self", href="https://example.org/@test/")
        assert link.model_dump(by_alias=True, exclude_none=True) == {
            "rel": "self",
            "href": "https://example.org/@test/",
        }

    def test_mime_type_is_serialized_as_type(self):
        """Test mime_type is named type in the JRD."""
        webfinger = Webfinger(
            subject="acct:test@example.org",
            links=[Link(rel="self", mime_type="application/activity+json")],
        )
        assert webfinger.to_jrd() == {
            "subject": "acct:test@example.org",
            "aliases": [],
            "links": [{"rel": "self", "type": "application/activity+json"}],
        }

    def test_to_json_has_no_nulls(self):
        """Test the JSON output never contains null values."""
        webfinger = Webfinger.from_json(VALID_JRD)
        body = webfinger.to_json()

        assert "null" not in body
        assert json.loads(body)["links"][0] == {
            "rel": "http://webfinger.net/rel/profile-page",
            "href": "https://example.org/@test/",
        }

    def test_template_link(self):
        """Test template links keep their template and drop href."""
        link = Link(rel="lrdd", template="https://example.org/lrdd?uri={uri}")
        assert link.model_dump(by_alias=True, exclude_none=True) == {
            "rel": "lrdd",
            "template": "https://example.org/lrdd?uri={uri}",
        }

    def test_decode_encoded_document(self):
        """Test encoding then decoding keeps the descriptor intact."""
        webfinger = Webfinger.from_json(VALID_JRD)
        assert Webfinger.from_json(webfinger.to_json()) == webfinger


class TestFilterRels:
    """Test suite for relation type filtering."""

    def test_no_filter_keeps_all_links(self):
        """Test an empty filter returns the same descriptor."""
        webfinger = Webfinger.from_json(VALID_JRD)
        assert webfinger.filter_rels([]) is webfinger
        assert webfinger.filter_rels(None) is webfinger

    def test_filter_keeps_matching_links_in_order(self):
        """Test only links with requested rels are kept, in order."""
        webfinger = Webfinger.from_json(VALID_JRD)
        filtered = webfinger.filter_rels(
            ["self", "http://webfinger.net/rel/profile-page"]
        )

        assert [link.rel for link in filtered.links] == [
            "http://webfinger.net/rel/profile-page",
            "self",
        ]
        assert filtered.subject == webfinger.subject
        assert filtered.aliases == webfinger.aliases
        assert len(webfinger.links) == 3

    def test_filter_without_matches(self):
        """Test a filter matching nothing returns no links."""
        webfinger = Webfinger.from_json(VALID_JRD)
        assert webfinger.filter_rels(["unknown"]).links == []
