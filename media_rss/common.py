"""
Fields shared by media:content, media:group and the item-level extension.

Title, description, copyright, player, keywords and the entity collections
are declared once in CommonEntitiesFields. The load, write and compare
helpers work on anything satisfying the CommonObjectEntities protocol.
"""

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar
from xml.etree import ElementTree as ET

from pydantic import BaseModel, ConfigDict, Field

from .base import MediaEntity, element_text
from .comparison import combine, compare_optional, compare_sequence, compare_text, normalize_text
from .hashing import MediaHash
from .metadata import MediaCategory, MediaCredit, MediaRating, MediaRestriction
from .namespace import XML_PREFIX, qualified_name
from .player import MediaPlayer, MediaThumbnail
from .text import MediaCopyright, MediaText, MediaTextConstruct

EntityT = TypeVar("EntityT", bound=MediaEntity)


class CommonObjectEntities(Protocol):
    """Anything carrying the shared media object fields."""

    title: MediaTextConstruct | None
    description: MediaTextConstruct | None
    copyright: MediaCopyright | None
    player: MediaPlayer | None
    keywords: list[str]
    categories: list[MediaCategory]
    credits: list[MediaCredit]
    hashes: list[MediaHash]
    ratings: list[MediaRating]
    restrictions: list[MediaRestriction]
    text_series: list[MediaText]
    thumbnails: list[MediaThumbnail]


class CommonEntitiesFields(BaseModel):
    """Pydantic field declarations satisfying CommonObjectEntities."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    title: MediaTextConstruct | None = None
    description: MediaTextConstruct | None = None
    copyright: MediaCopyright | None = None
    player: MediaPlayer | None = None
    keywords: list[str] = Field(default_factory=list)
    categories: list[MediaCategory] = Field(default_factory=list)
    credits: list[MediaCredit] = Field(default_factory=list)
    hashes: list[MediaHash] = Field(default_factory=list)
    ratings: list[MediaRating] = Field(default_factory=list)
    restrictions: list[MediaRestriction] = Field(default_factory=list)
    text_series: list[MediaText] = Field(default_factory=list)
    thumbnails: list[MediaThumbnail] = Field(default_factory=list)


# (attribute, entity type, element name) in write order
_COLLECTIONS: tuple[tuple[str, type[MediaEntity], str], ...] = (
    ("categories", MediaCategory, "category"),
    ("credits", MediaCredit, "credit"),
    ("hashes", MediaHash, "hash"),
    ("ratings", MediaRating, "rating"),
    ("restrictions", MediaRestriction, "restriction"),
    ("text_series", MediaText, "text"),
    ("thumbnails", MediaThumbnail, "thumbnail"),
)


def _path(local_name: str) -> str:
    return f"{XML_PREFIX}:{local_name}"


def _load_single(
    element: ET.Element, local_name: str, entity_type: type[EntityT], manager: dict[str, str]
) -> EntityT | None:
    child = element.find(_path(local_name), manager)
    if child is None:
        return None
    entity = entity_type()
    if entity.load(child):
        return entity
    return None


def _load_all(
    element: ET.Element, local_name: str, entity_type: type[EntityT], manager: dict[str, str]
) -> list[EntityT]:
    entities = []
    for child in element.findall(_path(local_name), manager):
        entity = entity_type()
        if entity.load(child):
            entities.append(entity)
    return entities


def split_keywords(value: str) -> list[str]:
    """Split a media:keywords value on commas, dropping empty keywords."""
    return [keyword.strip() for keyword in value.split(",") if keyword.strip()]


def fill_common_object_entities(
    target: CommonObjectEntities, element: ET.Element, manager: dict[str, str]
) -> bool:
    """
    Load the shared fields from the media:* children of an element.

    Only immediate children are inspected; a media:title inside a nested
    media:content belongs to that content, not to the parent.

    Args:
        target: Object receiving the fields.
        element: Parent element (media:content, media:group or a feed item).
        manager: Prefix map from create_namespace_manager().

    Returns:
        True if any shared field was loaded.
    """
    was_loaded = False

    for attribute, local_name, entity_type in (
        ("title", "title", MediaTextConstruct),
        ("description", "description", MediaTextConstruct),
        ("copyright", "copyright", MediaCopyright),
        ("player", "player", MediaPlayer),
    ):
        entity = _load_single(element, local_name, entity_type, manager)
        if entity is not None:
            setattr(target, attribute, entity)
            was_loaded = True

    keywords_element = element.find(_path("keywords"), manager)
    if keywords_element is not None:
        keywords = split_keywords(element_text(keywords_element))
        if keywords:
            target.keywords.extend(keywords)
            was_loaded = True

    for attribute, entity_type, local_name in _COLLECTIONS:
        entities = _load_all(element, local_name, entity_type, manager)
        if entities:
            getattr(target, attribute).extend(entities)
            was_loaded = True

    return was_loaded


def write_common_object_entities(source: CommonObjectEntities, parent: ET.Element) -> None:
    """Append the shared fields of source to parent as media:* children."""
    if source.title is not None:
        source.title.write_to(parent, "title")
    if source.description is not None:
        source.description.write_to(parent, "description")
    if source.copyright is not None:
        source.copyright.write_to(parent)
    if source.player is not None:
        source.player.write_to(parent)

    if source.keywords:
        keywords = ET.SubElement(parent, qualified_name("keywords"))
        keywords.text = ",".join(source.keywords)

    for attribute, _, _ in _COLLECTIONS:
        for entity in getattr(source, attribute):
            entity.write_to(parent)


def compare_entities(source: MediaEntity, target: MediaEntity) -> int:
    """Element comparer for entity sequences."""
    return source.compare_to(target)


def compare_entity_sequence(source: Sequence[MediaEntity], target: Sequence[MediaEntity]) -> int:
    return compare_sequence(source, target, compare_entities)


def compare_common_object_entities(
    source: CommonObjectEntities, target: CommonObjectEntities
) -> int:
    """
    Compare the shared fields of two objects.

    The single-valued fields go first (copyright, description, player,
    title; a set field beats an unset one), then the collections under the
    sequence rule where the longer collection is greater.
    """
    return combine(
        (
            compare_optional(source.copyright, target.copyright),
            compare_optional(source.description, target.description),
            compare_optional(source.player, target.player),
            compare_optional(source.title, target.title),
            compare_entity_sequence(source.categories, target.categories),
            compare_entity_sequence(source.credits, target.credits),
            compare_entity_sequence(source.hashes, target.hashes),
            compare_sequence(source.keywords, target.keywords, compare_text),
            compare_entity_sequence(source.ratings, target.ratings),
            compare_entity_sequence(source.restrictions, target.restrictions),
            compare_entity_sequence(source.text_series, target.text_series),
            compare_entity_sequence(source.thumbnails, target.thumbnails),
        )
    )


def _optional_identity(entity: MediaEntity | None) -> tuple[Any, ...] | None:
    return None if entity is None else entity._identity()


def common_identity(source: CommonObjectEntities) -> tuple[Any, ...]:
    """Hashable summary of the shared fields, consistent with compare_common_object_entities."""
    return (
        _optional_identity(source.copyright),
        _optional_identity(source.description),
        _optional_identity(source.player),
        _optional_identity(source.title),
        tuple(normalize_text(keyword) for keyword in source.keywords),
        *(
            tuple(entity._identity() for entity in getattr(source, attribute))
            for attribute, _, _ in _COLLECTIONS
        ),
    )
