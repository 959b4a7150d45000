"""Thin node-tree layer over lxml elements.

Every mapped element lives in the Atom namespace. Lookups also accept
elements in no namespace so that documents written without an ``xmlns``
declaration still read; elements in any other namespace are ignored.
"""

from lxml import etree

from atom_syndication.errors import MissingRequiredField

NS = "http://www.w3.org/2005/Atom"

_ACCEPTED_NAMESPACES = (NS, None)


def new_element(name: str, attrs: dict[str, str] | None = None) -> etree._Element:
    """Create a standalone Atom element declaring the default namespace."""
    elem = etree.Element(etree.QName(NS, name), nsmap={None: NS})
    for key, value in (attrs or {}).items():
        elem.set(key, value)
    return elem


def _matches(node: etree._Element, name: str) -> bool:
    if not isinstance(node.tag, str):
        # comments and processing instructions
        return False
    qname = etree.QName(node)
    return qname.localname == name and qname.namespace in _ACCEPTED_NAMESPACES


def get_child(node: etree._Element, name: str) -> etree._Element | None:
    """Return the first child called ``name``, or None."""
    for child in node:
        if _matches(child, name):
            return child
    return None


def get_children(node: etree._Element, name: str) -> list[etree._Element]:
    """Return every child called ``name`` in document order."""
    return [child for child in node if _matches(child, name)]


def get_attribute(node: etree._Element, name: str) -> str | None:
    """Return an un-namespaced attribute value, or None when absent."""
    return node.get(name)


def set_attribute(node: etree._Element, name: str, value: str) -> None:
    node.set(name, value)


def text_content(node: etree._Element) -> str:
    """Direct character data of ``node``; child elements are skipped."""
    parts = [node.text or ""]
    parts.extend(child.tail or "" for child in node)
    return "".join(parts)


def append_text(node: etree._Element, text: str) -> None:
    """Append character data after any existing content of ``node``."""
    if len(node):
        last = node[-1]
        last.tail = (last.tail or "") + text
    else:
        node.text = (node.text or "") + text


def append_child(node: etree._Element, child: etree._Element) -> None:
    node.append(child)


def render(node: etree._Element, pretty_print: bool = False) -> str:
    return etree.tostring(node, encoding="unicode", pretty_print=pretty_print)


def child_text(node: etree._Element, name: str) -> str | None:
    """Text of the child called ``name``; None when there is no such child.

    A child that is present but empty yields ``""``.
    """
    child = get_child(node, name)
    if child is None:
        return None
    return text_content(child)


def required_child_text(node: etree._Element, name: str, entity: str) -> str:
    value = child_text(node, name)
    if value is None:
        raise MissingRequiredField(name, entity)
    return value


def required_attribute(node: etree._Element, name: str, entity: str) -> str:
    value = get_attribute(node, name)
    if value is None:
        raise MissingRequiredField(name, entity)
    return value


def tag_with_text(node: etree._Element, name: str, text: str) -> None:
    """Append an Atom child element holding ``text``."""
    child = etree.SubElement(node, etree.QName(NS, name))
    # "" keeps an explicit open/close pair instead of a self-closing tag
    child.text = text


def tag_with_optional_text(node: etree._Element, name: str, text: str | None) -> None:
    if text is not None:
        tag_with_text(node, name, text)


def attribute_with_text(node: etree._Element, name: str, value: str) -> None:
    set_attribute(node, name, value)


def attribute_with_optional_text(node: etree._Element, name: str, value: str | None) -> None:
    if value is not None:
        set_attribute(node, name, value)
