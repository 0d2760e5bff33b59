"""
Descriptive elements: media:category, media:credit, media:rating and media:restriction.
"""

from functools import partial
from typing import Any, ClassVar
from xml.etree import ElementTree as ET

from pydantic import Field, field_validator

from .base import MediaEntity, element_text, require_text
from .comparison import (
    combine,
    compare,
    compare_sequence,
    compare_text,
    compare_uri,
    normalize_text,
    normalize_uri,
)
from .parsing import parse_uri
from .vocabulary import MediaRestrictionRelationship, MediaRestrictionType, as_string, by_name


class MediaCategory(MediaEntity):
    """Category or tag of a media object, e.g. music/artist/album/song."""

    ELEMENT_NAME = "category"
    DEFAULT_SCHEME: ClassVar[str] = "http://search.yahoo.com/mrss/category_schema"

    content: str = ""
    label: str = ""
    scheme: str | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return require_text(v, "content")

    @field_validator("label", mode="before")
    @classmethod
    def validate_label(cls, v: str | None) -> str:
        return v.strip() if v else ""

    def load(self, element: ET.Element) -> bool:
        was_loaded = False

        scheme = parse_uri(element.get("scheme", ""))
        if scheme is not None:
            self.scheme = scheme
            was_loaded = True

        label = element.get("label", "")
        if label:
            self.label = label
            was_loaded = True

        value = element_text(element)
        if value.strip():
            self.content = value
            was_loaded = True

        return was_loaded

    def _write_attributes(self, element: ET.Element) -> None:
        if self.scheme is not None:
            element.set("scheme", self.scheme)
        if self.label:
            element.set("label", self.label)
        if self.content:
            element.text = self.content

    def _compare(self, other: "MediaCategory") -> int:
        return combine(
            (
                compare_text(self.content, other.content),
                compare_text(self.label, other.label),
                compare_uri(self.scheme, other.scheme),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (normalize_text(self.content), normalize_text(self.label), normalize_uri(self.scheme))


class MediaCredit(MediaEntity):
    """
    Notable entity and its contribution to a media object.

    Roles are stored lowercased; the scheme names the role vocabulary, urn:ebu
    when omitted by the publisher.
    """

    ELEMENT_NAME = "credit"
    EUROPEAN_BROADCASTING_UNION_ROLE_SCHEME: ClassVar[str] = "urn:ebu"

    entity: str = ""
    role: str = ""
    scheme: str | None = None

    @field_validator("entity")
    @classmethod
    def validate_entity(cls, v: str) -> str:
        return require_text(v, "entity")

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, v: str | None) -> str:
        return v.strip().lower() if v else ""

    def load(self, element: ET.Element) -> bool:
        was_loaded = False

        role = element.get("role", "")
        if role:
            self.role = role
            was_loaded = True

        scheme = parse_uri(element.get("scheme", ""))
        if scheme is not None:
            self.scheme = scheme
            was_loaded = True

        value = element_text(element)
        if value.strip():
            self.entity = value
            was_loaded = True

        return was_loaded

    def _write_attributes(self, element: ET.Element) -> None:
        if self.role:
            element.set("role", self.role)
        if self.scheme is not None:
            element.set("scheme", self.scheme)
        if self.entity:
            element.text = self.entity

    def _compare(self, other: "MediaCredit") -> int:
        return combine(
            (
                compare_text(self.entity, other.entity),
                compare_text(self.role, other.role),
                compare_uri(self.scheme, other.scheme),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (normalize_text(self.entity), normalize_text(self.role), normalize_uri(self.scheme))


class MediaRating(MediaEntity):
    """Permissible audience of a media object."""

    ELEMENT_NAME = "rating"
    SIMPLE_SCHEME: ClassVar[str] = "urn:simple"
    SIMPLE_ADULT_RATING: ClassVar[str] = "adult"
    SIMPLE_NON_ADULT_RATING: ClassVar[str] = "nonadult"

    content: str = ""
    scheme: str | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return require_text(v, "content")

    def load(self, element: ET.Element) -> bool:
        was_loaded = False

        scheme = parse_uri(element.get("scheme", ""))
        if scheme is not None:
            self.scheme = scheme
            was_loaded = True

        value = element_text(element)
        if value.strip():
            self.content = value
            was_loaded = True

        return was_loaded

    def _write_attributes(self, element: ET.Element) -> None:
        if self.scheme is not None:
            element.set("scheme", self.scheme)
        if self.content:
            element.text = self.content

    def _compare(self, other: "MediaRating") -> int:
        return combine(
            (
                compare_text(self.content, other.content),
                compare_uri(self.scheme, other.scheme),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (normalize_text(self.content), normalize_uri(self.scheme))


class MediaRestriction(MediaEntity):
    """
    Countries or URIs where a media object may, or may not, be played.

    Entities are written space separated, e.g. "au us".
    """

    ELEMENT_NAME = "restriction"

    entities: list[str] = Field(default_factory=list)
    entity_type: MediaRestrictionType = MediaRestrictionType.NONE
    relationship: MediaRestrictionRelationship = MediaRestrictionRelationship.NONE

    def load(self, element: ET.Element) -> bool:
        was_loaded = False

        relationship_attribute = element.get("relationship", "")
        if relationship_attribute:
            relationship = by_name(MediaRestrictionRelationship, relationship_attribute)
            if relationship != MediaRestrictionRelationship.NONE:
                self.relationship = relationship
                was_loaded = True

        type_attribute = element.get("type", "")
        if type_attribute:
            entity_type = by_name(MediaRestrictionType, type_attribute)
            if entity_type != MediaRestrictionType.NONE:
                self.entity_type = entity_type
                was_loaded = True

        entities = element_text(element).split()
        if entities:
            self.entities.extend(entities)
            was_loaded = True

        return was_loaded

    def _write_attributes(self, element: ET.Element) -> None:
        if self.relationship != MediaRestrictionRelationship.NONE:
            element.set("relationship", as_string(self.relationship))
        if self.entity_type != MediaRestrictionType.NONE:
            element.set("type", as_string(self.entity_type))
        if self.entities:
            element.text = " ".join(self.entities)

    def _compare(self, other: "MediaRestriction") -> int:
        return combine(
            (
                compare_sequence(
                    self.entities, other.entities, partial(compare_text, ignore_case=False)
                ),
                compare(self.entity_type, other.entity_type),
                compare(self.relationship, other.relationship),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (tuple(self.entities), int(self.entity_type), int(self.relationship))
