"""Editable markup documents.

Rendered pages are parsed once into an lxml tree, reference attributes are
rewritten in place and the tree is serialized once at the end. Pages whose
attributes were never changed are not re-serialized.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from lxml import html
from lxml.etree import _Element

from schemas.asset import ReferenceSelector

DOCTYPE_PATTERN = re.compile(r"\s*(?:<\?xml[^>]*>\s*)?<!doctype", re.IGNORECASE)


@dataclass(frozen=True)
class MarkupReference:
    """An element attribute holding an asset reference.

    Attributes:
        element: The element carrying the reference
        attribute: Name of the reference attribute
    """

    element: _Element
    attribute: str

    @property
    def value(self) -> str:
        return self.element.get(self.attribute, "")


class MarkupDocument:
    """A parsed page whose attributes can be rewritten.

    Attributes:
        modified: True once any attribute value has changed
    """

    def __init__(self, content: str):
        # libxml2 invents a doctype for pages that have none
        self.has_doctype = DOCTYPE_PATTERN.match(content) is not None
        # bytes, so pages opening with an XML encoding declaration still parse
        self._root = html.document_fromstring(
            content.encode("utf-8"), parser=html.HTMLParser(encoding="utf-8")
        )
        self.modified = False

    def find_references(
        self, selectors: Iterable[ReferenceSelector]
    ) -> list[MarkupReference]:
        """Collect reference attributes in document order.

        An element matched by several selectors yields one reference per
        matching attribute.
        """
        selectors = tuple(selectors)
        references = []
        for element in self._root.iter():
            if not isinstance(element.tag, str):
                continue
            seen: set[str] = set()
            for selector in selectors:
                if (
                    selector.matches(element.tag)
                    and selector.attribute not in seen
                    and element.get(selector.attribute) is not None
                ):
                    seen.add(selector.attribute)
                    references.append(MarkupReference(element, selector.attribute))
        return references

    def set_attribute(self, element: _Element, name: str, value: str) -> None:
        """Set an attribute, tracking whether the document changed."""
        if element.get(name) != value:
            element.set(name, value)
            self.modified = True

    def serialize(self) -> str:
        """Serialize the document, keeping the doctype it was parsed with."""
        doctype = None
        if self.has_doctype:
            doctype = self._root.getroottree().docinfo.doctype or None
        return html.tostring(
            self._root,
            encoding="unicode",
            method="html",
            doctype=doctype,
        )
