"""
Media RSS feed scanning.

Extracts the Media RSS extension from the channel and from every item of an
RSS 2.0 or Atom document.

The document is walked with ElementTree rather than feedparser: feedparser
flattens media:group and drops attributes it does not know, and the
extension has to load from the raw elements.
"""

from xml.etree import ElementTree as ET

from media_rss import get_logger

from .extension import MediaRssExtension
from .namespace import parse_document

logger = get_logger(__name__)

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


def _atom(local_name: str) -> str:
    return f"{{{ATOM_NAMESPACE}}}{local_name}"


def _load_extension(element: ET.Element, declared: dict[str, str]) -> MediaRssExtension | None:
    extension = MediaRssExtension()
    if extension.load(element, declared):
        return extension
    return None


def _atom_link(entry: ET.Element) -> str:
    links = entry.findall(_atom("link"))
    for link in links:
        if link.get("rel", "alternate") == "alternate" and link.get("href"):
            return link.get("href", "")
    if links:
        return links[0].get("href", "")
    return ""


class ParsedMediaItem:
    """Media data of one RSS item or Atom entry."""

    def __init__(self, element: ET.Element, declared: dict[str, str], atom: bool = False):
        """
        Initialize from an item or entry element.

        Args:
            element: The item/entry element.
            declared: Prefix declarations of the document.
            atom: Whether element is an Atom entry.
        """
        if atom:
            self.url = _atom_link(element)
            self.guid = (element.findtext(_atom("id")) or "").strip() or self.url
            self.title = (element.findtext(_atom("title")) or "").strip()
        else:
            self.url = (element.findtext("link") or "").strip()
            self.guid = (element.findtext("guid") or "").strip() or self.url
            self.title = (element.findtext("title") or "").strip()

        # None when the item carries no media data
        self.extension = _load_extension(element, declared)


class ParsedMediaFeed:
    """Media data of a feed document."""

    def __init__(
        self,
        title: str = "",
        site_url: str = "",
        extension: MediaRssExtension | None = None,
        items: list[ParsedMediaItem] | None = None,
    ):
        self.title = title
        self.site_url = site_url
        self.extension = extension
        self.items = items or []

    @property
    def has_media(self) -> bool:
        return self.extension is not None or any(item.extension is not None for item in self.items)


def parse_media_feed(content: str) -> ParsedMediaFeed:
    """
    Parse the Media RSS data of an RSS 2.0 or Atom feed.

    Args:
        content: Feed XML content.

    Returns:
        Channel-level extension and per-item extensions. A document that is
        neither RSS nor Atom yields an empty result.

    Raises:
        ValueError: If the XML is malformed.
    """
    root, declared = parse_document(content)

    if root.tag == _atom("feed"):
        feed = ParsedMediaFeed(
            title=(root.findtext(_atom("title")) or "").strip(),
            site_url=_atom_link(root),
            extension=_load_extension(root, declared),
            items=[
                ParsedMediaItem(entry, declared, atom=True) for entry in root.findall(_atom("entry"))
            ],
        )
    else:
        channel = root.find("channel") if root.tag == "rss" else None
        if channel is None:
            logger.warning("Feed has no RSS channel or Atom feed root", extra={"root": root.tag})
            return ParsedMediaFeed()

        feed = ParsedMediaFeed(
            title=(channel.findtext("title") or "").strip(),
            site_url=(channel.findtext("link") or "").strip(),
            extension=_load_extension(channel, declared),
            items=[ParsedMediaItem(item, declared) for item in channel.findall("item")],
        )

    logger.debug(
        "Parsed media feed",
        extra={
            "items": len(feed.items),
            "media_items": sum(1 for item in feed.items if item.extension is not None),
        },
    )
    return feed
