"""Tests for media:content."""

import logging
from datetime import timedelta
from decimal import Decimal

import pytest

from media_rss.content import MediaContent
from media_rss.group import MediaGroup
from media_rss.metadata import MediaCategory, MediaCredit
from media_rss.namespace import qualified_name
from media_rss.player import MediaThumbnail
from media_rss.text import MediaTextConstruct
from media_rss.vocabulary import MediaExpression, MediaMedium

SCENARIO = (
    '<media:content url="http://example.com/a.mp4" fileSize="12345" type="video/mp4" '
    'medium="video" isDefault="true" bitrate="128"/>'
)


@pytest.fixture
def full_content() -> MediaContent:
    """A content with every attribute and several shared fields set."""
    return MediaContent(
        url="http://example.com/movie.mov",
        file_size=12216320,
        content_type="video/quicktime",
        medium=MediaMedium.VIDEO,
        is_default=True,
        expression=MediaExpression.FULL,
        bitrate=128,
        frame_rate=25,
        sampling_rate=Decimal("44.1"),
        channels=2,
        duration=timedelta(seconds=185.5),
        height=200,
        width=300,
        language="en-US",
        title=MediaTextConstruct(content="The Movie"),
        keywords=["kitty", "cat", "big dog"],
        categories=[MediaCategory(content="film", label="Film")],
        credits=[MediaCredit(entity="Jane Doe", role="director")],
        thumbnails=[MediaThumbnail(url="http://example.com/keyframe.jpg", width=75, height=50)],
    )


class TestLoad:
    def test_scenario_attributes(self, media_element) -> None:
        content = MediaContent()

        assert content.load(media_element(SCENARIO)) is True
        assert content.url == "http://example.com/a.mp4"
        assert content.file_size == 12345
        assert content.content_type == "video/mp4"
        assert content.medium is MediaMedium.VIDEO
        assert content.is_default is True
        assert content.bitrate == 128

    def test_scenario_write_reproduces_element(self, media_element) -> None:
        content = MediaContent()
        content.load(media_element(SCENARIO))

        element = content.to_element()

        assert element.tag == qualified_name("content")
        assert element.attrib == {
            "url": "http://example.com/a.mp4",
            "fileSize": "12345",
            "type": "video/mp4",
            "medium": "video",
            "isDefault": "true",
            "bitrate": "128",
        }

    def test_malformed_attribute_is_skipped(self, media_element) -> None:
        content = MediaContent()
        element = media_element('<media:content url="http://x/a.mp4" framerate="oops"/>')

        assert content.load(element) is True
        assert content.frame_rate is None
        assert content.url == "http://x/a.mp4"

    def test_nothing_recognisable(self, media_element) -> None:
        element = media_element('<media:content medium="hologram" framerate="oops"/>')
        assert MediaContent().load(element) is False

    def test_secondary_attributes(self, media_element) -> None:
        element = media_element(
            '<media:content samplingrate="44.1" channels="2" duration="185" height="200" '
            'width="300" framerate="25" expression="sample" isDefault="false"/>'
        )
        content = MediaContent()

        assert content.load(element) is True
        assert content.sampling_rate == Decimal("44.1")
        assert content.channels == 2
        assert content.duration == timedelta(seconds=185)
        assert content.height == 200
        assert content.width == 300
        assert content.frame_rate == 25
        assert content.expression is MediaExpression.SAMPLE
        assert content.is_default is False

    def test_duration_timespan_literal(self, media_element) -> None:
        content = MediaContent()
        content.load(media_element('<media:content duration="00:03:05"/>'))
        assert content.duration == timedelta(minutes=3, seconds=5)

    @pytest.mark.parametrize("duration", ["99999999999999999999", "99999999999.00:00:00"])
    def test_out_of_range_duration_is_skipped(self, media_element, duration: str) -> None:
        content = MediaContent()
        element = media_element(f'<media:content url="http://x/a.mp4" duration="{duration}"/>')

        assert content.load(element) is True
        assert content.duration is None
        assert content.url == "http://x/a.mp4"

    def test_invalid_language_logs_warning(self, media_element, caplog) -> None:
        element = media_element('<media:content url="http://x/a.mp4" lang="??"/>')
        content = MediaContent()

        with caplog.at_level(logging.WARNING, logger="media_rss"):
            assert content.load(element) is True

        assert content.language is None
        assert "media:content" in caplog.text

    def test_shared_children(self, media_element) -> None:
        element = media_element(
            '<media:content url="http://x/a.mp4">'
            '<media:title type="plain">The Title</media:title>'
            "<media:keywords>kitty, cat, ,big dog</media:keywords>"
            '<media:credit role="producer">Alice</media:credit>'
            '<media:credit role="director">Bob</media:credit>'
            '<media:thumbnail url="http://x/a.jpg"/>'
            "</media:content>"
        )
        content = MediaContent()

        assert content.load(element) is True
        assert content.title is not None
        assert content.title.content == "The Title"
        assert content.keywords == ["kitty", "cat", "big dog"]
        assert [credit.entity for credit in content.credits] == ["Alice", "Bob"]
        assert len(content.thumbnails) == 1


class TestWrite:
    def test_unset_attributes_are_omitted(self) -> None:
        element = MediaContent(url="http://x/a.mp4").to_element()

        assert element.attrib == {"url": "http://x/a.mp4"}
        assert len(element) == 0

    def test_is_default_false_not_written(self) -> None:
        element = MediaContent(url="http://x/a.mp4", is_default=False).to_element()
        assert "isDefault" not in element.attrib

    def test_invariant_formatting(self, full_content: MediaContent) -> None:
        element = full_content.to_element()

        assert element.get("samplingrate") == "44.1"
        assert element.get("duration") == "185.5"
        assert element.get("lang") == "en-US"
        assert element.get("expression") == "full"

    def test_shared_fields_follow_attributes(self, full_content: MediaContent) -> None:
        element = full_content.to_element()
        tags = [child.tag for child in element]

        assert tags == [
            qualified_name("title"),
            qualified_name("keywords"),
            qualified_name("category"),
            qualified_name("credit"),
            qualified_name("thumbnail"),
        ]
        assert element.find(qualified_name("keywords")).text == "kitty,cat,big dog"

    def test_round_trip(self, full_content: MediaContent) -> None:
        loaded = MediaContent()

        assert loaded.load(full_content.to_element()) is True
        assert loaded == full_content
        assert hash(loaded) == hash(full_content)


class TestCompare:
    def test_equality_is_reflexive_and_symmetric(self, full_content: MediaContent) -> None:
        other = full_content.model_copy(
            update={"url": "HTTP://EXAMPLE.COM/movie.mov", "content_type": "Video/QuickTime"}
        )

        assert full_content == full_content
        assert full_content == other
        assert other == full_content
        assert hash(other) == hash(full_content)

    def test_difference_in_shared_fields(self, full_content: MediaContent) -> None:
        other = full_content.model_copy(update={"keywords": ["kitty"]})

        assert full_content != other
        assert other < full_content

    def test_unset_sorts_before_set(self) -> None:
        assert MediaContent() < MediaContent(bitrate=1)

    def test_wrong_type_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            MediaContent().compare_to(MediaGroup())
        assert MediaContent() != "content"
        assert MediaContent().compare_to(None) == 1
