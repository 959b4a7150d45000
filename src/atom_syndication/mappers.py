"""Conversion between Atom elements and model objects.

Each entity has a ``<entity>_to_node`` and a ``<entity>_from_node``
function. Readers raise MissingRequiredField for their own required fields
and NestedConversionFailure when a nested element fails.
"""

from collections.abc import Callable
from functools import partial
from typing import TypeVar

from lxml import etree

from atom_syndication.errors import MissingRequiredField, NestedConversionFailure
from atom_syndication.models import Category, Entry, Feed, Generator, Link, Person, Source
from atom_syndication.node import (
    append_child,
    append_text,
    attribute_with_optional_text,
    attribute_with_text,
    child_text,
    get_attribute,
    get_child,
    get_children,
    new_element,
    required_attribute,
    required_child_text,
    tag_with_optional_text,
    tag_with_text,
    text_content,
)

T = TypeVar("T")


def _convert_nested(node: etree._Element, from_node: Callable[[etree._Element], T], step: str) -> T:
    """Run ``from_node``, prefixing any failure with ``step``."""
    try:
        return from_node(node)
    except NestedConversionFailure as e:
        raise NestedConversionFailure(f"{step}/{e.path}", e.cause) from e.cause
    except MissingRequiredField as e:
        raise NestedConversionFailure(step, e) from e


def _optional_nested(
    node: etree._Element, name: str, from_node: Callable[[etree._Element], T]
) -> T | None:
    child = get_child(node, name)
    if child is None:
        return None
    return _convert_nested(child, from_node, name)


def _repeated(
    node: etree._Element, name: str, from_node: Callable[[etree._Element], T]
) -> list[T]:
    return [
        _convert_nested(child, from_node, f"{name}[{index}]")
        for index, child in enumerate(get_children(node, name))
    ]


# Person constructs

def person_to_node(person: Person, tag: str) -> etree._Element:
    elem = new_element(tag)
    tag_with_text(elem, "name", person.name)
    tag_with_optional_text(elem, "uri", person.uri)
    tag_with_optional_text(elem, "email", person.email)
    return elem


def person_from_node(node: etree._Element, tag: str) -> Person:
    return Person(
        name=required_child_text(node, "name", tag),
        uri=child_text(node, "uri"),
        email=child_text(node, "email"),
    )


author_to_node = partial(person_to_node, tag="author")
author_from_node = partial(person_from_node, tag="author")
contributor_to_node = partial(person_to_node, tag="contributor")
contributor_from_node = partial(person_from_node, tag="contributor")


# Leaf elements

def category_to_node(category: Category) -> etree._Element:
    elem = new_element("category")
    attribute_with_text(elem, "term", category.term)
    attribute_with_optional_text(elem, "scheme", category.scheme)
    attribute_with_optional_text(elem, "label", category.label)
    return elem


def category_from_node(node: etree._Element) -> Category:
    return Category(
        term=required_attribute(node, "term", "category"),
        scheme=get_attribute(node, "scheme"),
        label=get_attribute(node, "label"),
    )


def generator_to_node(generator: Generator) -> etree._Element:
    elem = new_element("generator")
    append_text(elem, generator.name)
    attribute_with_optional_text(elem, "uri", generator.uri)
    attribute_with_optional_text(elem, "version", generator.version)
    return elem


def generator_from_node(node: etree._Element) -> Generator:
    name = text_content(node)
    if not name:
        raise MissingRequiredField("name", "generator")
    return Generator(
        name=name,
        uri=get_attribute(node, "uri"),
        version=get_attribute(node, "version"),
    )


def link_to_node(link: Link) -> etree._Element:
    elem = new_element("link")
    attribute_with_text(elem, "href", link.href)
    attribute_with_optional_text(elem, "rel", link.rel)
    attribute_with_optional_text(elem, "type", link.mediatype)
    attribute_with_optional_text(elem, "hreflang", link.hreflang)
    attribute_with_optional_text(elem, "title", link.title)
    attribute_with_optional_text(elem, "length", link.length)
    return elem


def link_from_node(node: etree._Element) -> Link:
    return Link(
        href=required_attribute(node, "href", "link"),
        rel=get_attribute(node, "rel"),
        mediatype=get_attribute(node, "type"),
        hreflang=get_attribute(node, "hreflang"),
        title=get_attribute(node, "title"),
        length=get_attribute(node, "length"),
    )


# Composite elements

def _append_collections(elem: etree._Element, item: Source | Entry | Feed) -> None:
    for link in item.links:
        append_child(elem, link_to_node(link))
    for category in item.categories:
        append_child(elem, category_to_node(category))
    for person in item.authors:
        append_child(elem, author_to_node(person))
    for person in item.contributors:
        append_child(elem, contributor_to_node(person))


def _read_collections(node: etree._Element) -> dict:
    return {
        "links": _repeated(node, "link", link_from_node),
        "categories": _repeated(node, "category", category_from_node),
        "authors": _repeated(node, "author", author_from_node),
        "contributors": _repeated(node, "contributor", contributor_from_node),
    }


def source_to_node(source: Source) -> etree._Element:
    elem = new_element("source")
    tag_with_optional_text(elem, "id", source.id)
    tag_with_optional_text(elem, "title", source.title)
    tag_with_optional_text(elem, "updated", source.updated)
    tag_with_optional_text(elem, "icon", source.icon)
    tag_with_optional_text(elem, "logo", source.logo)
    tag_with_optional_text(elem, "rights", source.rights)
    tag_with_optional_text(elem, "subtitle", source.subtitle)
    if source.generator is not None:
        append_child(elem, generator_to_node(source.generator))
    _append_collections(elem, source)
    return elem


def source_from_node(node: etree._Element) -> Source:
    return Source(
        id=child_text(node, "id"),
        title=child_text(node, "title"),
        updated=child_text(node, "updated"),
        icon=child_text(node, "icon"),
        logo=child_text(node, "logo"),
        rights=child_text(node, "rights"),
        subtitle=child_text(node, "subtitle"),
        generator=_optional_nested(node, "generator", generator_from_node),
        **_read_collections(node),
    )


def entry_to_node(entry: Entry) -> etree._Element:
    elem = new_element("entry")
    tag_with_text(elem, "id", entry.id)
    tag_with_text(elem, "title", entry.title)
    tag_with_text(elem, "updated", entry.updated)
    tag_with_optional_text(elem, "published", entry.published)
    tag_with_optional_text(elem, "summary", entry.summary)
    tag_with_optional_text(elem, "content", entry.content)
    if entry.source is not None:
        append_child(elem, source_to_node(entry.source))
    _append_collections(elem, entry)
    return elem


def entry_from_node(node: etree._Element) -> Entry:
    return Entry(
        id=required_child_text(node, "id", "entry"),
        title=required_child_text(node, "title", "entry"),
        updated=required_child_text(node, "updated", "entry"),
        published=child_text(node, "published"),
        summary=child_text(node, "summary"),
        content=child_text(node, "content"),
        source=_optional_nested(node, "source", source_from_node),
        **_read_collections(node),
    )


def feed_to_node(feed: Feed) -> etree._Element:
    elem = new_element("feed")
    tag_with_text(elem, "id", feed.id)
    tag_with_text(elem, "title", feed.title)
    tag_with_text(elem, "updated", feed.updated)
    tag_with_optional_text(elem, "icon", feed.icon)
    tag_with_optional_text(elem, "logo", feed.logo)
    tag_with_optional_text(elem, "rights", feed.rights)
    tag_with_optional_text(elem, "subtitle", feed.subtitle)
    if feed.generator is not None:
        append_child(elem, generator_to_node(feed.generator))
    _append_collections(elem, feed)
    for entry in feed.entries:
        append_child(elem, entry_to_node(entry))
    return elem


def feed_from_node(node: etree._Element) -> Feed:
    return Feed(
        id=required_child_text(node, "id", "feed"),
        title=required_child_text(node, "title", "feed"),
        updated=required_child_text(node, "updated", "feed"),
        icon=child_text(node, "icon"),
        logo=child_text(node, "logo"),
        rights=child_text(node, "rights"),
        subtitle=child_text(node, "subtitle"),
        generator=_optional_nested(node, "generator", generator_from_node),
        entries=_repeated(node, "entry", entry_from_node),
        **_read_collections(node),
    )
