"""
media:hash element and hash generation.
"""

import base64
import hashlib
from typing import IO, Any
from xml.etree import ElementTree as ET

from pydantic import field_validator

from .base import MediaEntity, element_text
from .comparison import combine, compare, compare_text
from .vocabulary import MediaHashAlgorithm, as_string, by_name

_HASH_FACTORIES = {
    MediaHashAlgorithm.MD5: hashlib.md5,
    MediaHashAlgorithm.SHA1: hashlib.sha1,
}

_CHUNK_SIZE = 64 * 1024


def generate_hash(source: bytes | IO[bytes], algorithm: MediaHashAlgorithm) -> str:
    """
    Compute a media:hash value.

    Args:
        source: Bytes, or a binary stream read to its end.
        algorithm: MD5 or SHA1.

    Returns:
        Base64 encoded digest.

    Raises:
        ValueError: If algorithm is NONE or source is None.
    """
    if source is None:
        raise ValueError("source is required")
    if algorithm not in _HASH_FACTORIES:
        raise ValueError(f"Unsupported hash algorithm: {algorithm!r}")

    digest = _HASH_FACTORIES[algorithm]()
    if isinstance(source, (bytes, bytearray, memoryview)):
        digest.update(source)
    else:
        for chunk in iter(lambda: source.read(_CHUNK_SIZE), b""):
            digest.update(chunk)

    return base64.b64encode(digest.digest()).decode("ascii")


class MediaHash(MediaEntity):
    """Hash of a media object's binary content; the value is kept verbatim."""

    ELEMENT_NAME = "hash"

    value: str = ""
    algorithm: MediaHashAlgorithm = MediaHashAlgorithm.NONE

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        if v is None or not v.strip():
            raise ValueError("value must be a non-empty string")
        return v

    @classmethod
    def from_content(cls, source: bytes | IO[bytes], algorithm: MediaHashAlgorithm) -> "MediaHash":
        """Build a hash entity by hashing source with algorithm."""
        return cls(value=generate_hash(source, algorithm), algorithm=algorithm)

    def load(self, element: ET.Element) -> bool:
        was_loaded = False

        algo = element.get("algo", "")
        if algo:
            algorithm = by_name(MediaHashAlgorithm, algo)
            if algorithm != MediaHashAlgorithm.NONE:
                self.algorithm = algorithm
                was_loaded = True

        value = element_text(element)
        if value.strip():
            self.value = value
            was_loaded = True

        return was_loaded

    def _write_attributes(self, element: ET.Element) -> None:
        if self.algorithm != MediaHashAlgorithm.NONE:
            element.set("algo", as_string(self.algorithm))
        if self.value:
            element.text = self.value

    def _compare(self, other: "MediaHash") -> int:
        return combine(
            (
                compare(self.algorithm, other.algorithm),
                compare_text(self.value, other.value, ignore_case=False),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (int(self.algorithm), self.value)
