"""Tests for feed scanning."""

import logging

import pytest

from media_rss.feed import parse_media_feed
from media_rss.vocabulary import MediaMedium

RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>Example Podcast</title>
    <link>http://example.com/</link>
    <media:copyright>2024 Example</media:copyright>
    <media:thumbnail url="http://example.com/cover.jpg"/>
    <item>
      <title>Episode 1</title>
      <link>http://example.com/ep1</link>
      <guid>ep-1</guid>
      <media:content url="http://example.com/ep1.mp3" medium="audio" duration="1800"/>
    </item>
    <item>
      <title>Announcement</title>
      <link>http://example.com/news</link>
    </item>
  </channel>
</rss>"""

ATOM = """<feed xmlns="http://www.w3.org/2005/Atom" xmlns:media="http://search.yahoo.com/mrss/">
  <title>Example Videos</title>
  <link rel="self" href="http://example.com/feed.atom"/>
  <link href="http://example.com/"/>
  <entry>
    <id>urn:video:1</id>
    <title>Clip</title>
    <link rel="alternate" href="http://example.com/clip"/>
    <media:group>
      <media:content url="http://example.com/clip-hd.mp4" medium="video"/>
      <media:content url="http://example.com/clip-sd.mp4" medium="video"/>
      <media:title>Clip</media:title>
    </media:group>
  </entry>
</feed>"""


def test_rss_channel_and_items() -> None:
    feed = parse_media_feed(RSS)

    assert feed.title == "Example Podcast"
    assert feed.site_url == "http://example.com/"
    assert feed.extension is not None
    assert feed.extension.context.copyright.text == "2024 Example"
    assert len(feed.extension.context.thumbnails) == 1
    # item-level media does not leak into the channel
    assert feed.extension.context.contents == []

    assert len(feed.items) == 2
    first, second = feed.items
    assert first.guid == "ep-1"
    assert first.url == "http://example.com/ep1"
    assert first.title == "Episode 1"
    assert first.extension.context.contents[0].medium is MediaMedium.AUDIO
    assert second.guid == "http://example.com/news"
    assert second.extension is None
    assert feed.has_media is True


def test_atom_entries() -> None:
    feed = parse_media_feed(ATOM)

    assert feed.title == "Example Videos"
    assert feed.site_url == "http://example.com/"
    assert feed.extension is None

    entry = feed.items[0]
    assert entry.guid == "urn:video:1"
    assert entry.url == "http://example.com/clip"
    group = entry.extension.context.groups[0]
    assert [content.url for content in group.contents] == [
        "http://example.com/clip-hd.mp4",
        "http://example.com/clip-sd.mp4",
    ]
    assert group.title.content == "Clip"


def test_plain_feed_has_no_media() -> None:
    feed = parse_media_feed(
        "<rss><channel><title>Plain</title><item><title>A</title></item></channel></rss>"
    )

    assert feed.extension is None
    assert feed.items[0].extension is None
    assert feed.has_media is False


def test_unknown_root_logs_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="media_rss"):
        feed = parse_media_feed("<opml version='2.0'><body/></opml>")

    assert feed.items == []
    assert feed.extension is None
    assert "no RSS channel" in caplog.text


def test_malformed_xml() -> None:
    with pytest.raises(ValueError):
        parse_media_feed("<rss><channel></rss>")
