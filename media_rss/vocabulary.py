"""
Media RSS enumerated vocabularies.

Each vocabulary is an IntEnum whose NONE member means "not specified",
paired with a static table of wire tokens. Lookups by token are
case-insensitive and fall back to NONE.
"""

from enum import IntEnum
from typing import TypeVar


class MediaMedium(IntEnum):
    """Type of object described by a media:content element."""

    NONE = 0
    AUDIO = 1
    DOCUMENT = 2
    EXECUTABLE = 3
    IMAGE = 4
    VIDEO = 5


class MediaExpression(IntEnum):
    """Whether a media object is a sample, the full version or a continuous stream."""

    NONE = 0
    FULL = 1
    NONSTOP = 2
    SAMPLE = 3


class MediaTextConstructType(IntEnum):
    """Encoding of a media title, description or text."""

    NONE = 0
    HTML = 1
    PLAIN = 2


class MediaHashAlgorithm(IntEnum):
    """Algorithm used to compute a media:hash value."""

    NONE = 0
    MD5 = 1
    SHA1 = 2


class MediaRestrictionRelationship(IntEnum):
    """Whether a restriction allows or denies the listed entities."""

    NONE = 0
    ALLOW = 1
    DENY = 2


class MediaRestrictionType(IntEnum):
    """Kind of entities listed by a restriction."""

    NONE = 0
    COUNTRY = 1
    URI = 2


VOCABULARY_TOKENS: dict[type[IntEnum], dict[IntEnum, str]] = {
    MediaMedium: {
        MediaMedium.NONE: "",
        MediaMedium.AUDIO: "audio",
        MediaMedium.DOCUMENT: "document",
        MediaMedium.EXECUTABLE: "executable",
        MediaMedium.IMAGE: "image",
        MediaMedium.VIDEO: "video",
    },
    MediaExpression: {
        MediaExpression.NONE: "",
        MediaExpression.FULL: "full",
        MediaExpression.NONSTOP: "nonstop",
        MediaExpression.SAMPLE: "sample",
    },
    MediaTextConstructType: {
        MediaTextConstructType.NONE: "",
        MediaTextConstructType.HTML: "html",
        MediaTextConstructType.PLAIN: "plain",
    },
    MediaHashAlgorithm: {
        MediaHashAlgorithm.NONE: "",
        MediaHashAlgorithm.MD5: "md5",
        MediaHashAlgorithm.SHA1: "sha-1",
    },
    MediaRestrictionRelationship: {
        MediaRestrictionRelationship.NONE: "",
        MediaRestrictionRelationship.ALLOW: "allow",
        MediaRestrictionRelationship.DENY: "deny",
    },
    MediaRestrictionType: {
        MediaRestrictionType.NONE: "",
        MediaRestrictionType.COUNTRY: "country",
        MediaRestrictionType.URI: "uri",
    },
}

# token -> member, built once from the forward tables
_MEMBERS_BY_TOKEN: dict[type[IntEnum], dict[str, IntEnum]] = {
    vocabulary: {token: member for member, token in tokens.items() if token}
    for vocabulary, tokens in VOCABULARY_TOKENS.items()
}

E = TypeVar("E", bound=IntEnum)


def as_string(value: IntEnum) -> str:
    """
    Return the wire token for a vocabulary member.

    Args:
        value: Vocabulary member.

    Returns:
        Lowercase token, or an empty string for NONE.
    """
    return VOCABULARY_TOKENS[type(value)][value]


def by_name(vocabulary: type[E], name: str) -> E:
    """
    Look up a vocabulary member by its wire token.

    Args:
        vocabulary: Vocabulary enum class, e.g. MediaMedium.
        name: Token to look up, compared case-insensitively.

    Returns:
        Matching member, or the vocabulary's NONE member when unrecognised.

    Raises:
        ValueError: If name is None or empty.
    """
    if not name:
        raise ValueError("name must be a non-empty string")

    member = _MEMBERS_BY_TOKEN[vocabulary].get(name.strip().lower())
    if member is None:
        return vocabulary(0)
    return member  # type: ignore[return-value]
