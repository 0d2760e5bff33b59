"""
Media RSS syndication extension.

MediaRssExtensionContext holds what the extension carries on a channel or
item: media:content and media:group children plus the shared fields.
MediaRssExtension wraps a context with the namespace metadata and the
document-level load/write entry points.
"""

from collections.abc import Callable
from typing import Any
from xml.etree import ElementTree as ET

from pydantic import Field

from media_rss import get_logger

from .common import (
    CommonEntitiesFields,
    common_identity,
    compare_common_object_entities,
    compare_entity_sequence,
    fill_common_object_entities,
    write_common_object_entities,
)
from .comparison import combine
from .config import settings
from .content import MediaContent
from .group import MediaGroup, load_contents
from .namespace import (
    XML_NAMESPACE,
    XML_PREFIX,
    create_namespace_manager,
    known_namespaces,
    namespace_of,
    parse_document,
)

logger = get_logger(__name__)

LoadedCallback = Callable[["MediaRssExtension", ET.Element], None]


class MediaRssExtensionContext(CommonEntitiesFields):
    """Media RSS data attached to a channel or item."""

    contents: list[MediaContent] = Field(default_factory=list)
    groups: list[MediaGroup] = Field(default_factory=list)

    def load(self, element: ET.Element, manager: dict[str, str]) -> bool:
        """
        Populate the context from the media:* children of a channel or item.

        Args:
            element: The channel or item element.
            manager: Prefix map from create_namespace_manager().

        Returns:
            True if any content, group or shared field was loaded.
        """
        was_loaded = False

        for content in load_contents(element, manager):
            self.add_content(content)
            was_loaded = True

        for child in element.findall(f"{XML_PREFIX}:group", manager):
            group = MediaGroup()
            if group.load(child, manager):
                self.add_group(group)
                was_loaded = True

        was_loaded = fill_common_object_entities(self, element, manager) or was_loaded
        return was_loaded

    def write_to(self, parent: ET.Element) -> None:
        """Append contents, then groups, then the shared fields to parent."""
        for content in self.contents:
            content.write_to(parent)
        for group in self.groups:
            group.write_to(parent)
        write_common_object_entities(self, parent)

    def add_content(self, content: MediaContent) -> bool:
        if content is None:
            raise ValueError("content is required")
        self.contents.append(content)
        return True

    def add_group(self, group: MediaGroup) -> bool:
        if group is None:
            raise ValueError("group is required")
        self.groups.append(group)
        return True

    def remove_content(self, content: MediaContent) -> bool:
        """Remove the first content equal to content; False if none matched."""
        if content is None:
            raise ValueError("content is required")
        if content not in self.contents:
            return False
        self.contents.remove(content)
        return True

    def remove_group(self, group: MediaGroup) -> bool:
        """Remove the first group equal to group; False if none matched."""
        if group is None:
            raise ValueError("group is required")
        if group not in self.groups:
            return False
        self.groups.remove(group)
        return True

    def compare_to(self, other: "MediaRssExtensionContext | None") -> int:
        """
        Compare with another context.

        Returns:
            Zero when equal, otherwise the sign of the first differing field.
            Any context is greater than None.

        Raises:
            TypeError: If other is not a MediaRssExtensionContext.
        """
        if other is None:
            return 1
        if not isinstance(other, MediaRssExtensionContext):
            raise TypeError(
                f"other is not of type {MediaRssExtensionContext.__name__}, "
                f"type was found to be '{type(other).__name__}'."
            )
        return combine(
            (
                compare_entity_sequence(self.contents, other.contents),
                compare_entity_sequence(self.groups, other.groups),
                compare_common_object_entities(self, other),
            )
        )

    def identity(self) -> tuple[Any, ...]:
        return (
            tuple(content._identity() for content in self.contents),
            tuple(group._identity() for group in self.groups),
            common_identity(self),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaRssExtensionContext):
            return False
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.identity()))


class MediaRssExtension:
    """
    The Yahoo! Media RSS extension.

    Load it from a channel or item element, or from an XML fragment with
    load_xml(); write it back with write_to(). Callbacks in `loaded` run
    after every load with the extension and the source element.
    """

    XML_PREFIX = XML_PREFIX
    XML_NAMESPACE = XML_NAMESPACE
    VERSION = "1.1.1"
    DOCUMENTATION = "http://search.yahoo.com/mrss"
    NAME = "Yahoo! Media"
    DESCRIPTION = (
        "Extends syndication feeds to provide a means of supplementing "
        "the enclosure capabilities of feeds."
    )

    def __init__(self, context: MediaRssExtensionContext | None = None):
        """
        Initialize the extension.

        Args:
            context: Initial context. A new empty context is created if omitted.
        """
        self._context = context if context is not None else MediaRssExtensionContext()
        self.loaded: list[LoadedCallback] = []

    @property
    def context(self) -> MediaRssExtensionContext:
        return self._context

    @context.setter
    def context(self, value: MediaRssExtensionContext) -> None:
        if value is None:
            raise ValueError("context is required")
        self._context = value

    @staticmethod
    def match_by_type(extension: object) -> bool:
        """Whether extension is a Media RSS extension."""
        return isinstance(extension, MediaRssExtension)

    def create_namespace_manager(
        self, element: ET.Element, declared: dict[str, str] | None = None
    ) -> dict[str, str]:
        return create_namespace_manager(element, declared)

    def exists_in_source(self, element: ET.Element, declared: dict[str, str] | None = None) -> bool:
        """
        Whether a document declares or uses the Media RSS namespace.

        Args:
            element: Element to inspect, usually the document root.
            declared: Prefix declarations collected while parsing. ElementTree
                discards them, so without this map the element tree is
                scanned for media:* elements instead.

        Returns:
            True if the namespace or the media prefix is present.
        """
        namespaces = known_namespaces()
        if declared:
            if any(uri in namespaces for uri in declared.values()):
                return True
            if self.XML_PREFIX in declared:
                return True

        return any(
            isinstance(node.tag, str) and namespace_of(node.tag) in namespaces
            for node in element.iter()
        )

    def write_namespace_declaration(self, namespaces: dict[str, str] | None = None) -> dict[str, str]:
        """
        Declare the media prefix for serialisation.

        ElementTree writes xmlns declarations itself for every namespace in
        use, so declaring means registering the prefix. The prefix is also
        added to namespaces, a prefix map as used by find()/findall().

        Returns:
            The updated prefix map.
        """
        ET.register_namespace(self.XML_PREFIX, self.XML_NAMESPACE)
        namespaces = {} if namespaces is None else namespaces
        namespaces[self.XML_PREFIX] = self.XML_NAMESPACE
        return namespaces

    def load(self, element: ET.Element, declared: dict[str, str] | None = None) -> bool:
        """
        Load the extension from a channel or item element.

        Args:
            element: Element whose media:* children carry the extension.
            declared: Prefix declarations collected while parsing, if known.

        Returns:
            True if anything was loaded.
        """
        if element is None:
            raise ValueError("element is required")

        manager = self.create_namespace_manager(element, declared)
        was_loaded = self.context.load(element, manager)

        logger.debug(
            "Loaded media extension",
            extra={
                "contents": len(self.context.contents),
                "groups": len(self.context.groups),
                "namespace": manager[self.XML_PREFIX],
            },
        )

        for callback in self.loaded:
            callback(self, element)

        return was_loaded

    def load_xml(self, content: str) -> bool:
        """
        Load the extension from an XML document or fragment.

        The root element is treated as the channel or item carrying the
        media:* children.

        Args:
            content: XML text.

        Returns:
            True if anything was loaded.

        Raises:
            ValueError: If the XML is malformed.
        """
        root, declared = parse_document(content)
        return self.load(root, declared)

    def write_to(self, parent: ET.Element) -> None:
        """Append the extension's media:* elements to parent."""
        if parent is None:
            raise ValueError("parent is required")
        self.context.write_to(parent)

    def to_xml(self) -> str:
        """Serialise the extension's media:* elements, one fragment per top-level element."""
        holder = ET.Element("extension")
        self.write_to(holder)

        fragments = []
        for child in holder:
            if settings.indent_output:
                ET.indent(child, space=settings.indent_space)
            fragments.append(ET.tostring(child, encoding="unicode"))
        return "\n".join(fragments)

    def compare_to(self, other: Any) -> int:
        """
        Compare with another extension by contents, groups and shared fields.

        Raises:
            TypeError: If other is not a MediaRssExtension.
        """
        if other is None:
            return 1
        if not isinstance(other, MediaRssExtension):
            raise TypeError(
                f"other is not of type {type(self).__name__}, "
                f"type was found to be '{type(other).__name__}'."
            )
        return self.context.compare_to(other.context)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaRssExtension):
            return False
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.context.identity()))

    def __lt__(self, other: Any) -> bool:
        return self.compare_to(other) < 0

    def __gt__(self, other: Any) -> bool:
        return self.compare_to(other) > 0

    def __str__(self) -> str:
        return self.to_xml()
