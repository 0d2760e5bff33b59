"""
media:group element.
"""

from typing import Any
from xml.etree import ElementTree as ET

from pydantic import Field

from .base import MediaEntity
from .common import (
    CommonEntitiesFields,
    common_identity,
    compare_common_object_entities,
    compare_entity_sequence,
    fill_common_object_entities,
    write_common_object_entities,
)
from .comparison import combine
from .content import MediaContent
from .namespace import XML_PREFIX, create_namespace_manager


def load_contents(element: ET.Element, manager: dict[str, str]) -> list[MediaContent]:
    """Load the immediate media:content children of an element, in document order."""
    contents = []
    for child in element.findall(f"{XML_PREFIX}:content", manager):
        content = MediaContent()
        if content.load(child, manager):
            contents.append(content)
    return contents


class MediaGroup(MediaEntity, CommonEntitiesFields):
    """
    Alternative representations of the same media object.

    A group has no attributes of its own; shared fields set on the group
    apply to every content it holds.
    """

    ELEMENT_NAME = "group"

    contents: list[MediaContent] = Field(default_factory=list)

    def load(self, element: ET.Element, manager: dict[str, str] | None = None) -> bool:
        if manager is None:
            manager = create_namespace_manager(element)

        was_loaded = False

        contents = load_contents(element, manager)
        if contents:
            self.contents.extend(contents)
            was_loaded = True

        was_loaded = fill_common_object_entities(self, element, manager) or was_loaded
        return was_loaded

    def _write_attributes(self, element: ET.Element) -> None:
        for content in self.contents:
            content.write_to(element)
        write_common_object_entities(self, element)

    def _compare(self, other: "MediaGroup") -> int:
        return combine(
            (
                compare_entity_sequence(self.contents, other.contents),
                compare_common_object_entities(self, other),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (tuple(content._identity() for content in self.contents), common_identity(self))
