"""
Media RSS package.

Provides the Yahoo! Media RSS syndication extension: element models,
XML load/write, comparison, and feed scanning.
"""

__version__ = "0.1.0"

from .logging_config import init_logging, get_logger

from .content import MediaContent
from .extension import MediaRssExtension, MediaRssExtensionContext
from .feed import ParsedMediaFeed, ParsedMediaItem, parse_media_feed
from .group import MediaGroup
from .hashing import MediaHash, generate_hash
from .metadata import MediaCategory, MediaCredit, MediaRating, MediaRestriction
from .player import MediaPlayer, MediaThumbnail
from .text import MediaCopyright, MediaText, MediaTextConstruct
from .vocabulary import (
    MediaExpression,
    MediaHashAlgorithm,
    MediaMedium,
    MediaRestrictionRelationship,
    MediaRestrictionType,
    MediaTextConstructType,
    as_string,
    by_name,
)

__all__ = [
    "init_logging",
    "get_logger",
    "MediaRssExtension",
    "MediaRssExtensionContext",
    "MediaContent",
    "MediaGroup",
    "MediaCategory",
    "MediaCredit",
    "MediaRating",
    "MediaRestriction",
    "MediaHash",
    "generate_hash",
    "MediaPlayer",
    "MediaThumbnail",
    "MediaCopyright",
    "MediaText",
    "MediaTextConstruct",
    "MediaExpression",
    "MediaHashAlgorithm",
    "MediaMedium",
    "MediaRestrictionRelationship",
    "MediaRestrictionType",
    "MediaTextConstructType",
    "as_string",
    "by_name",
    "parse_media_feed",
    "ParsedMediaFeed",
    "ParsedMediaItem",
]
