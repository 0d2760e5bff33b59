"""
Base model for Media RSS elements.

Every media:* element maps to a MediaEntity: a pydantic model that loads
itself from an ElementTree element, serialises back to one, and defines
equality and ordering through compare_to().
"""

from typing import Any, ClassVar
from xml.etree import ElementTree as ET

from pydantic import BaseModel, ConfigDict

from .config import settings
from .namespace import qualified_name
from .parsing import parse_language


def element_text(element: ET.Element) -> str:
    """Return the concatenated text content of an element and its descendants."""
    return "".join(element.itertext())


def require_text(value: str | None, field_name: str) -> str:
    """Validate a required text field and return it trimmed."""
    if value is None or not value.strip():
        raise ValueError(f"{field_name} must be a non-empty string")
    return value.strip()


def require_language(value: str | None) -> str | None:
    """Validate an optional language tag and return it normalised."""
    if value is None:
        return value
    language = parse_language(value)
    if language is None:
        raise ValueError(f"'{value}' is not a valid language tag")
    return language


class MediaEntity(BaseModel):
    """
    Base class for media:* elements.

    Subclasses set ELEMENT_NAME and implement load(), _write_attributes()
    and the comparison hooks _compare() and _identity().
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    ELEMENT_NAME: ClassVar[str] = ""

    def load(self, element: ET.Element) -> bool:
        """
        Populate this entity from an XML element.

        Args:
            element: Element positioned on the media:* node.

        Returns:
            True if at least one field was read from the element.
        """
        raise NotImplementedError

    def _write_attributes(self, element: ET.Element) -> None:
        raise NotImplementedError

    def to_element(self, element_name: str | None = None) -> ET.Element:
        """Build a detached element in the Media RSS namespace."""
        element = ET.Element(qualified_name(element_name or self.ELEMENT_NAME))
        self._write_attributes(element)
        return element

    def write_to(self, parent: ET.Element, element_name: str | None = None) -> ET.Element:
        """Append this entity to a parent element and return the new child."""
        element = self.to_element(element_name)
        parent.append(element)
        return element

    def to_xml(self, element_name: str | None = None) -> str:
        """Serialise this entity as an XML fragment, optionally under another element name."""
        element = self.to_element(element_name)
        if settings.indent_output:
            ET.indent(element, space=settings.indent_space)
        return ET.tostring(element, encoding="unicode")

    def compare_to(self, other: Any) -> int:
        """
        Compare with another entity of the same type.

        Returns:
            Zero when equal, otherwise the sign of the first differing field.
            Any entity is greater than None.

        Raises:
            TypeError: If other is a different type.
        """
        if other is None:
            return 1
        if not isinstance(other, type(self)):
            raise TypeError(
                f"other is not of type {type(self).__name__}, "
                f"type was found to be '{type(other).__name__}'."
            )
        return self._compare(other)

    def _compare(self, other: Any) -> int:
        raise NotImplementedError

    def _identity(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._identity()))

    def __lt__(self, other: Any) -> bool:
        return self.compare_to(other) < 0

    def __gt__(self, other: Any) -> bool:
        return self.compare_to(other) > 0

    def __str__(self) -> str:
        return self.to_xml()
