"""Read and write Atom syndication feeds as typed Python objects."""

from atom_syndication.document import XML_DECLARATION, parse, serialize
from atom_syndication.errors import (
    AtomError,
    MalformedDocument,
    MissingRequiredField,
    NestedConversionFailure,
    NoTopLevelElement,
    UnserializableValue,
)
from atom_syndication.models import Category, Entry, Feed, Generator, Link, Person, Source
from atom_syndication.node import NS

__all__ = [
    "NS",
    "XML_DECLARATION",
    "AtomError",
    "Category",
    "Entry",
    "Feed",
    "Generator",
    "Link",
    "MalformedDocument",
    "MissingRequiredField",
    "NestedConversionFailure",
    "NoTopLevelElement",
    "Person",
    "Source",
    "UnserializableValue",
    "parse",
    "serialize",
]
