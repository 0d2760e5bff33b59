"""Tests for media:category, media:credit, media:rating and media:restriction."""

import pytest
from pydantic import ValidationError

from media_rss.metadata import MediaCategory, MediaCredit, MediaRating, MediaRestriction
from media_rss.vocabulary import MediaRestrictionRelationship, MediaRestrictionType


class TestCategory:
    def test_load(self, media_element) -> None:
        element = media_element(
            '<media:category scheme="http://search.yahoo.com/mrss/category_schema" '
            'label="Ace Ventura">music/artist/album/song</media:category>'
        )
        category = MediaCategory()

        assert category.load(element) is True
        assert category.content == "music/artist/album/song"
        assert category.label == "Ace Ventura"
        assert category.scheme == MediaCategory.DEFAULT_SCHEME

    def test_empty_label_not_written(self) -> None:
        element = MediaCategory(content="music").to_element()
        assert "label" not in element.attrib
        assert "scheme" not in element.attrib
        assert element.text == "music"

    def test_scheme_is_case_sensitive(self) -> None:
        first = MediaCategory(content="music", scheme="urn:Genre")
        second = MediaCategory(content="MUSIC", scheme="urn:genre")

        assert first != second
        assert first == MediaCategory(content="MUSIC", scheme="urn:Genre")

    def test_content_is_required(self) -> None:
        with pytest.raises(ValidationError):
            MediaCategory(content=" ")

    def test_round_trip(self) -> None:
        category = MediaCategory(
            content="music/artist/album/song",
            label="Ace Ventura",
            scheme=MediaCategory.DEFAULT_SCHEME,
        )
        loaded = MediaCategory()

        assert loaded.load(category.to_element()) is True
        assert loaded == category
        assert hash(loaded) == hash(category)


class TestCredit:
    def test_load(self, media_element) -> None:
        element = media_element(
            '<media:credit role="Producer" scheme="urn:ebu">entity name</media:credit>'
        )
        credit = MediaCredit()

        assert credit.load(element) is True
        assert credit.entity == "entity name"
        assert credit.role == "producer"
        assert credit.scheme == MediaCredit.EUROPEAN_BROADCASTING_UNION_ROLE_SCHEME

    def test_role_is_lowercased_and_entity_trimmed(self) -> None:
        credit = MediaCredit(entity="  Jane Doe ", role=" Director ")
        assert credit.entity == "Jane Doe"
        assert credit.role == "director"

    def test_entity_is_required(self) -> None:
        with pytest.raises(ValidationError):
            MediaCredit(entity="")

    def test_round_trip(self) -> None:
        credit = MediaCredit(entity="Jane Doe", role="director", scheme="urn:ebu")
        loaded = MediaCredit()

        assert loaded.load(credit.to_element()) is True
        assert loaded == credit
        assert hash(loaded) == hash(credit)


class TestRating:
    def test_load(self, media_element) -> None:
        element = media_element('<media:rating scheme="urn:simple">adult</media:rating>')
        rating = MediaRating()

        assert rating.load(element) is True
        assert rating.content == MediaRating.SIMPLE_ADULT_RATING
        assert rating.scheme == MediaRating.SIMPLE_SCHEME

    def test_ordering(self) -> None:
        adult = MediaRating(content=MediaRating.SIMPLE_ADULT_RATING)
        non_adult = MediaRating(content=MediaRating.SIMPLE_NON_ADULT_RATING)

        assert adult < non_adult
        assert non_adult > adult
        assert adult.compare_to(None) == 1

    def test_round_trip(self) -> None:
        rating = MediaRating(
            content=MediaRating.SIMPLE_NON_ADULT_RATING, scheme=MediaRating.SIMPLE_SCHEME
        )
        loaded = MediaRating()

        assert loaded.load(rating.to_element()) is True
        assert loaded == rating
        assert hash(loaded) == hash(rating)


class TestRestriction:
    def test_load(self, media_element) -> None:
        element = media_element(
            '<media:restriction relationship="allow" type="country">au us</media:restriction>'
        )
        restriction = MediaRestriction()

        assert restriction.load(element) is True
        assert restriction.entities == ["au", "us"]
        assert restriction.relationship is MediaRestrictionRelationship.ALLOW
        assert restriction.entity_type is MediaRestrictionType.COUNTRY

    def test_write_joins_entities_with_spaces(self) -> None:
        restriction = MediaRestriction(
            entities=["au", "us"],
            relationship=MediaRestrictionRelationship.DENY,
            entity_type=MediaRestrictionType.COUNTRY,
        )
        element = restriction.to_element()

        assert element.text == "au us"
        assert element.get("relationship") == "deny"
        assert element.get("type") == "country"

    def test_entities_compare_case_sensitively(self) -> None:
        assert MediaRestriction(entities=["AU"]) != MediaRestriction(entities=["au"])
        assert MediaRestriction(entities=["au"]) == MediaRestriction(entities=["au"])

    def test_empty_element(self, media_element) -> None:
        assert MediaRestriction().load(media_element("<media:restriction/>")) is False

    def test_more_entities_is_greater(self) -> None:
        assert MediaRestriction(entities=["zz"]) < MediaRestriction(entities=["aa", "bb"])

    def test_round_trip(self) -> None:
        restriction = MediaRestriction(
            entities=["au", "us"],
            relationship=MediaRestrictionRelationship.ALLOW,
            entity_type=MediaRestrictionType.COUNTRY,
        )
        loaded = MediaRestriction()

        assert loaded.load(restriction.to_element()) is True
        assert loaded == restriction
        assert hash(loaded) == hash(restriction)
