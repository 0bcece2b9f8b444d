"""XML re-indentation.

Parsing goes through defusedxml so entity-expansion and external-entity
tricks hidden in a stored value are refused instead of expanded.
"""

from typing import Any
from xml.dom import Node
from xml.parsers.expat import ExpatError
from xml.sax.saxutils import escape

from defusedxml import minidom

from ..base import BaseConverter
from ..config import resolve_settings
from ..enums import FormatTag
from ..exceptions import TextFormatError
from ..registry import register_converter

TEXT_NODES = (Node.TEXT_NODE, Node.CDATA_SECTION_NODE)
ATTRIBUTE_ENTITIES = {'"': "&quot;"}


def _render_text(node: Node) -> str:
    text = node.data.strip()
    return escape(text) if text else ""


def _render_element(node: Node, depth: int, indent: int) -> str:
    pad = " " * (indent * depth)
    attributes = node.attributes
    opening = f"{pad}<{node.tagName}"
    for i in range(attributes.length):
        attr = attributes.item(i)
        opening += f' {attr.name}="{escape(attr.value, ATTRIBUTE_ENTITIES)}"'

    if not node.childNodes:
        return f"{opening} />"

    # Single text child stays on the element's line
    if len(node.childNodes) == 1 and node.firstChild.nodeType in TEXT_NODES:
        return f"{opening}>{_render_text(node.firstChild)}</{node.tagName}>"

    children = []
    child_pad = " " * (indent * (depth + 1))
    for child in node.childNodes:
        if child.nodeType in TEXT_NODES:
            rendered = _render_text(child)
            if rendered:
                children.append(child_pad + rendered)
        else:
            rendered = render_node(child, depth + 1, indent)
            if rendered:
                children.append(rendered)

    body = "\n" + "\n".join(children) + "\n" + pad if children else ""
    return f"{opening}>{body}</{node.tagName}>"


def render_node(node: Node, depth: int = 0, indent: int = 2) -> str:
    """Render a DOM node and its subtree as indented XML.

    Comments, processing instructions and doctype nodes render as nothing.
    """
    if node.nodeType == Node.ELEMENT_NODE:
        return _render_element(node, depth, indent)
    if node.nodeType in TEXT_NODES:
        return _render_text(node)
    if node.nodeType == Node.DOCUMENT_NODE:
        parts = [render_node(child, depth, indent) for child in node.childNodes]
        return "\n".join(part for part in parts if part)
    return ""


@register_converter(FormatTag.XML)
class IndentedXMLConverter(BaseConverter):
    """Parse XML and re-render it with one element per line.

    Whitespace-only text between elements is dropped, so documents whose
    meaning depends on that whitespace are not preserved exactly.
    """

    def render(self, text: str, **context: Any) -> str:
        settings = resolve_settings(context)
        try:
            document = minidom.parseString(text)
        except ExpatError as e:
            raise TextFormatError("Invalid XML") from e
        try:
            return render_node(document, 0, settings.xml_indent)
        finally:
            document.unlink()


__all__ = ["render_node", "IndentedXMLConverter"]
