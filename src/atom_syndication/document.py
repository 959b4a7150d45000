"""Reading and writing whole Atom documents using lxml."""

import logging
import os

from lxml import etree

from atom_syndication.errors import MalformedDocument, NoTopLevelElement, UnserializableValue
from atom_syndication.mappers import feed_from_node, feed_to_node
from atom_syndication.models import Feed
from atom_syndication.node import render

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

_PARSE_EVENTS = ("start", "end", "pi", "comment")
_LEADING_WHITESPACE = " \t\r\n"


def _huge_tree_default() -> bool:
    return os.environ.get("ATOM_HUGE_TREE", "").strip().lower() in ("1", "true", "yes")


def _new_parser(from_text: bool, huge_tree: bool) -> etree.XMLPullParser:
    return etree.XMLPullParser(
        events=_PARSE_EVENTS,
        # parse() hands str input over as UTF-8 whatever its declaration claims
        encoding="utf-8" if from_text else None,
        resolve_entities=False,
        no_network=True,
        huge_tree=huge_tree,
    )


def _first_top_level_element(data: bytes, parser: etree.XMLPullParser) -> etree._Element:
    """Feed ``data`` to ``parser`` and return the first complete root element.

    Anything after that element is never inspected, so trailing content or
    a second root does not fail the parse.
    """
    depth = 0

    def completed_root() -> etree._Element | None:
        nonlocal depth
        for event, node in parser.read_events():
            if event == "start":
                depth += 1
            elif event == "end":
                depth -= 1
                if depth == 0:
                    return node
            # processing instructions and comments carry no feed data
        return None

    try:
        parser.feed(data)
        root = completed_root()
        if root is None:
            parser.close()
            root = completed_root()
    except etree.XMLSyntaxError as e:
        # events produced before the error are still queued
        root = completed_root()
        if root is None:
            raise MalformedDocument(f"Document is not well-formed XML: {e}") from e
    if root is None:
        raise NoTopLevelElement("Document contains no element")
    return root


def parse(text: str | bytes, huge_tree: bool | None = None) -> Feed:
    """Parse an Atom document into a Feed.

    Args:
        text: The document. ``str`` input is treated as UTF-8 regardless of
            its XML declaration; ``bytes`` input follows its declaration.
        huge_tree: Lift lxml's depth and size limits. Defaults to the
            ``ATOM_HUGE_TREE`` environment variable.

    Returns:
        The Feed read from the first top-level element.

    Raises:
        NoTopLevelElement: If the document holds no element.
        MalformedDocument: If the document is not well-formed XML.
        MissingRequiredField: If the feed lacks a required element.
        NestedConversionFailure: If a nested element lacks a required field.
    """
    if huge_tree is None:
        huge_tree = _huge_tree_default()

    if isinstance(text, str):
        data = text.lstrip("\ufeff" + _LEADING_WHITESPACE).encode("utf-8")
        from_text = True
    else:
        data = text.lstrip(_LEADING_WHITESPACE.encode("ascii"))
        from_text = False
    if not data:
        raise NoTopLevelElement("Document is empty")

    root = _first_top_level_element(data, _new_parser(from_text, huge_tree))
    feed = feed_from_node(root)
    logger.debug("Parsed feed %r with %d entries", feed.id, len(feed.entries))
    return feed


def serialize(feed: Feed, pretty_print: bool = False) -> str:
    """Render a Feed as an Atom document string.

    Raises:
        UnserializableValue: If a field holds characters XML cannot carry,
            such as NUL or other control characters.
    """
    try:
        root = feed_to_node(feed)
    except ValueError as e:
        raise UnserializableValue(f"Feed {feed.id!r} cannot be written as XML: {e}") from e
    body = render(root, pretty_print=pretty_print)
    logger.debug("Serialized feed %r with %d entries", feed.id, len(feed.entries))
    return XML_DECLARATION + body
