"""
Media RSS XML namespace.

Prefix and namespace constants plus the namespace-manager factory used to
resolve the media: prefix when selecting child elements.
"""

from io import StringIO
from xml.etree import ElementTree as ET

from .config import settings

XML_PREFIX = "media"
XML_NAMESPACE = "http://search.yahoo.com/mrss/"
LEGACY_XML_NAMESPACES = ("http://search.yahoo.com/mrss",)

ET.register_namespace(XML_PREFIX, XML_NAMESPACE)


def qualified_name(local_name: str) -> str:
    """Return the ElementTree name of a media element, e.g. {ns}content."""
    return f"{{{XML_NAMESPACE}}}{local_name}"


def namespace_of(tag: str) -> str:
    """Return the namespace URI of an ElementTree tag, or an empty string."""
    if tag.startswith("{"):
        return tag[1 : tag.index("}")]
    return ""


def known_namespaces() -> tuple[str, ...]:
    """Namespaces recognised as Media RSS during load."""
    if settings.accept_legacy_namespace:
        return (XML_NAMESPACE, *LEGACY_XML_NAMESPACES)
    return (XML_NAMESPACE,)


def resolve_namespace(element: ET.Element) -> str:
    """
    Find the Media RSS namespace in use below an element.

    ElementTree drops prefix declarations, so the namespace is taken from the
    first element in the subtree whose tag lives in a recognised namespace.

    Args:
        element: Element to inspect.

    Returns:
        Namespace URI, XML_NAMESPACE when none is found.
    """
    candidates = known_namespaces()
    for node in element.iter():
        if not isinstance(node.tag, str):
            continue
        namespace = namespace_of(node.tag)
        if namespace in candidates:
            return namespace
    return XML_NAMESPACE


def create_namespace_manager(
    element: ET.Element, declared: dict[str, str] | None = None
) -> dict[str, str]:
    """
    Build the prefix map used for media: child selection.

    Args:
        element: Element whose children will be selected.
        declared: Prefix declarations seen while parsing, if known.

    Returns:
        Mapping of the media prefix to the namespace in scope.
    """
    if declared and declared.get(XML_PREFIX) in known_namespaces():
        return {XML_PREFIX: declared[XML_PREFIX]}
    return {XML_PREFIX: resolve_namespace(element)}


def parse_document(content: str) -> tuple[ET.Element, dict[str, str]]:
    """
    Parse an XML document, keeping its prefix declarations.

    ElementTree drops xmlns declarations from the tree, so they are collected
    from the parser's start-ns events. The first declaration of a prefix wins.

    Args:
        content: XML text.

    Returns:
        Root element and a prefix -> namespace map.

    Raises:
        ValueError: If the XML is malformed.
    """
    declared: dict[str, str] = {}
    root = None
    try:
        for event, item in ET.iterparse(StringIO(content), events=("start-ns", "start")):
            if event == "start-ns":
                prefix, uri = item
                declared.setdefault(prefix, uri)
            elif root is None:
                root = item
    except ET.ParseError as e:
        raise ValueError(f"Invalid XML document: {e}")

    if root is None:
        raise ValueError("Invalid XML document: no root element")
    return root, declared
