"""Global pytest fixtures for testing."""

import contextlib
import logging
from collections.abc import Callable, Generator
from xml.etree import ElementTree as ET

import dotenv
import pytest

from media_rss.namespace import XML_NAMESPACE

with contextlib.suppress(OSError):
    dotenv.load_dotenv()

MEDIA_NS = XML_NAMESPACE


def parse_fragment(fragment: str, namespace: str = MEDIA_NS) -> ET.Element:
    """Parse a media:* fragment and return its first element."""
    root = ET.fromstring(f'<root xmlns:media="{namespace}">{fragment}</root>')
    return root[0]


@pytest.fixture
def media_element() -> Callable[[str], ET.Element]:
    """Build an ElementTree element from a media:* XML fragment."""
    return parse_fragment


@pytest.fixture
def manager() -> dict[str, str]:
    """Prefix map for media:* child selection."""
    return {"media": MEDIA_NS}


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """The media_rss logger, restored to its original state after the test."""
    logger = logging.getLogger("media_rss")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers
