"""Data models for Atom feeds (RFC 4287).

Optional fields are ``None`` when the element or attribute is absent and
``""`` when it is present but empty. Repeated children default to empty
lists.

Leaf records (Person, Category, Generator, Link) are hashable. Source,
Entry and Feed hold lists, so they set ``__hash__ = None`` and compare by
value only.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Person:
    """An atom:author or atom:contributor (RFC 4287 §3.2)."""

    name: str
    uri: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class Category:
    """An atom:category element (RFC 4287 §4.2.2)."""

    term: str
    scheme: str | None = None
    label: str | None = None


@dataclass(frozen=True)
class Generator:
    """The agent that produced a feed (RFC 4287 §4.2.4)."""

    name: str
    uri: str | None = None
    version: str | None = None


@dataclass(frozen=True)
class Link:
    """An atom:link element (RFC 4287 §4.2.7).

    ``mediatype`` is read from and written to the ``type`` attribute.
    """

    href: str
    rel: str | None = None
    mediatype: str | None = None
    hreflang: str | None = None
    title: str | None = None
    length: str | None = None


def _find_link(links: list[Link], rel: str) -> Link | None:
    for link in links:
        # a link without rel is an alternate link
        if (link.rel or "alternate") == rel:
            return link
    return None


@dataclass(frozen=True)
class Source:
    """Metadata of the feed an entry was copied from (RFC 4287 §4.2.11)."""

    __hash__ = None

    id: str | None = None
    title: str | None = None
    updated: str | None = None
    icon: str | None = None
    logo: str | None = None
    rights: str | None = None
    subtitle: str | None = None
    generator: Generator | None = None
    links: list[Link] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    authors: list[Person] = field(default_factory=list)
    contributors: list[Person] = field(default_factory=list)

    @classmethod
    def from_feed(cls, feed: "Feed") -> "Source":
        """Summarize ``feed`` for embedding in one of its entries."""
        return cls(
            id=feed.id,
            title=feed.title,
            updated=feed.updated,
            icon=feed.icon,
            logo=feed.logo,
            rights=feed.rights,
            subtitle=feed.subtitle,
            generator=feed.generator,
            links=list(feed.links),
            categories=list(feed.categories),
            authors=list(feed.authors),
            contributors=list(feed.contributors),
        )


@dataclass(frozen=True)
class Entry:
    """A single atom:entry."""

    __hash__ = None

    id: str
    title: str
    updated: str
    published: str | None = None
    source: Source | None = None
    summary: str | None = None
    content: str | None = None
    links: list[Link] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    authors: list[Person] = field(default_factory=list)
    contributors: list[Person] = field(default_factory=list)

    def find_link(self, rel: str = "alternate") -> Link | None:
        """Return the first link with relation ``rel``, or None."""
        return _find_link(self.links, rel)


@dataclass(frozen=True)
class Feed:
    """A complete atom:feed document."""

    __hash__ = None

    id: str
    title: str
    updated: str
    icon: str | None = None
    logo: str | None = None
    rights: str | None = None
    subtitle: str | None = None
    generator: Generator | None = None
    links: list[Link] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    authors: list[Person] = field(default_factory=list)
    contributors: list[Person] = field(default_factory=list)
    entries: list[Entry] = field(default_factory=list)

    def find_link(self, rel: str = "alternate") -> Link | None:
        """Return the first link with relation ``rel``, or None."""
        return _find_link(self.links, rel)
