"""Shared test fixtures for atom_syndication tests."""

import re

import pytest
from lxml import etree

from atom_syndication.models import Category, Entry, Feed, Generator, Link, Person, Source


SAMPLE_ATOM_XML = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <id>urn:uuid:60a76c80-d399-11d9-b91c-0003939e0af6</id>
  <title>Example Feed</title>
  <updated>2003-12-13T18:30:02Z</updated>
  <subtitle>A subtitle.</subtitle>
  <rights>Copyright (c) 2003, Mark Pilgrim</rights>
  <generator uri="http://www.example.com/" version="1.0">Example Toolkit</generator>
  <link href="http://example.org/feed/" rel="self"/>
  <link href="http://example.org/"/>
  <category term="news" scheme="http://example.org/categories" label="News"/>
  <author>
    <name>John Doe</name>
    <email>johndoe@example.com</email>
  </author>
  <contributor>
    <name>Jane Roe</name>
    <uri>http://example.org/jane</uri>
  </contributor>
  <entry>
    <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
    <title>Atom-Powered Robots Run Amok</title>
    <updated>2003-12-13T18:30:02Z</updated>
    <published>2003-12-13T08:29:29-04:00</published>
    <link href="http://example.org/2003/12/13/atom03" rel="alternate" type="text/html" hreflang="en" title="Robots" length="1024"/>
    <summary>Some text.</summary>
    <source>
      <id>urn:uuid:original-feed</id>
      <title>Original Feed</title>
      <link href="http://original.example/feed.atom" rel="self"/>
      <link href="http://original.example/"/>
      <category term="robots"/>
      <category term="ai"/>
    </source>
  </entry>
  <entry>
    <id>urn:uuid:second-entry</id>
    <title>Second</title>
    <updated>2003-12-14T18:30:02Z</updated>
    <content>Body text</content>
  </entry>
</feed>"""

SAMPLE_MINIMAL_XML = """<feed xmlns="http://www.w3.org/2005/Atom">
  <id>urn:minimal</id>
  <title>Minimal</title>
  <updated>2024-01-01T00:00:00Z</updated>
</feed>"""

SAMPLE_NO_NAMESPACE_XML = (
    "<feed><id></id><title>Hello world!</title><updated></updated></feed>"
)


@pytest.fixture
def sample_atom_xml():
    """A feed exercising every mapped element."""
    return SAMPLE_ATOM_XML


@pytest.fixture
def sample_minimal_xml():
    """A feed with only its required elements."""
    return SAMPLE_MINIMAL_XML


@pytest.fixture
def sample_no_namespace_xml():
    """A feed written without an xmlns declaration."""
    return SAMPLE_NO_NAMESPACE_XML


@pytest.fixture
def atom_element():
    """Build an lxml element from a snippet in the Atom default namespace."""

    def build(snippet: str) -> etree._Element:
        declared = re.sub(r"^<([\w-]+)", r'<\1 xmlns="http://www.w3.org/2005/Atom"', snippet.strip(), count=1)
        return etree.fromstring(declared)

    return build


@pytest.fixture
def full_feed():
    """A Feed value populating every field, collection and nested entity."""
    return Feed(
        id="urn:uuid:feed",
        title="My Blog",
        updated="2019-04-01T07:30:00Z",
        icon="http://test.blog/icon.png",
        logo="http://test.blog/logo.png",
        rights="CC-BY",
        subtitle="Notes",
        generator=Generator(name="Blogware", uri="http://blogware.example/", version="2.1"),
        links=[
            Link(href="http://test.blog/blog.atom", rel="self", mediatype="application/atom+xml"),
            Link(href="http://test.blog/", hreflang="en", title="Home", length="0"),
        ],
        categories=[Category(term="tech", scheme="http://test.blog/tags", label="Tech")],
        authors=[Person(name="N. Blogger", uri="http://test.blog/about", email="n@test.blog")],
        contributors=[Person(name="A. Helper")],
        entries=[
            Entry(
                id="urn:uuid:entry-1",
                title="My first post!",
                updated="2019-04-01T07:30:00Z",
                published="2019-03-31T10:00:00Z",
                summary="First",
                content="This is my first post",
                links=[Link(href="http://test.blog/entry", rel="alternate")],
                categories=[Category(term="hello")],
                authors=[Person(name="N. Blogger")],
                contributors=[Person(name="Guest", email="guest@example.com")],
                source=Source(
                    id="urn:uuid:original",
                    title="Original Blog",
                    generator=Generator(name="Other"),
                    links=[
                        Link(href="http://original.blog/feed.atom", rel="self"),
                        Link(href="http://original.blog/", rel="alternate"),
                    ],
                    categories=[Category(term="b"), Category(term="a")],
                    authors=[Person(name="Original Author")],
                ),
            ),
            Entry(id="urn:uuid:entry-2", title="", updated="2019-04-02T07:30:00Z"),
        ],
    )
