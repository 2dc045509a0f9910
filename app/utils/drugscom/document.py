"""
Drugs.com Document Module

Thin navigation layer over BeautifulSoup. The extraction code only talks to
HtmlNode, so the parser can be swapped without touching the cascade.
"""

import copy
import re
from typing import Callable, Iterator, List, Optional

from bs4 import BeautifulSoup, Tag

WHITESPACE_PATTERN = re.compile(r'\s+')
HEADING_TAGS = ('h1', 'h2', 'h3', 'h4')


def clean_text(text: Optional[str]) -> str:
    """Collapse runs of whitespace into single spaces and trim."""
    if not text:
        return ""
    return WHITESPACE_PATTERN.sub(' ', text).strip()


class HtmlNode:
    """Read-only view of one element in a parsed page."""

    __slots__ = ('_tag',)

    def __init__(self, tag: Tag):
        self._tag = tag

    def __repr__(self) -> str:
        return f"HtmlNode(<{self.name} id={self.id!r}>)"

    def __eq__(self, other) -> bool:
        return isinstance(other, HtmlNode) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    @property
    def name(self) -> str:
        return self._tag.name or ''

    @property
    def id(self) -> Optional[str]:
        return self._tag.get('id')

    @property
    def classes(self) -> List[str]:
        return list(self._tag.get('class') or [])

    def attr(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = self._tag.get(name, default)
        if isinstance(value, list):
            return ' '.join(value)
        return value

    def text(self) -> str:
        """Raw concatenated text of the subtree (not normalized)."""
        return self._tag.get_text()

    def is_tag(self, *names: str) -> bool:
        return self.name in names

    def has_class(self, *classes: str) -> bool:
        own = self.classes
        return any(cls in own for cls in classes)

    # Selection

    def find_by_id(self, element_id: str) -> Optional['HtmlNode']:
        found = self._tag.find(id=element_id)
        return HtmlNode(found) if isinstance(found, Tag) else None

    def select(self, selector: str) -> List['HtmlNode']:
        return [HtmlNode(tag) for tag in self._tag.select(selector)]

    def select_one(self, selector: str) -> Optional['HtmlNode']:
        found = self._tag.select_one(selector)
        return HtmlNode(found) if found is not None else None

    # Navigation

    def next_sibling(self) -> Optional['HtmlNode']:
        """Next element sibling, skipping text and comment nodes."""
        sibling = self._tag.find_next_sibling()
        return HtmlNode(sibling) if sibling is not None else None

    def following_siblings(self) -> Iterator['HtmlNode']:
        for sibling in self._tag.find_next_siblings():
            yield HtmlNode(sibling)

    def siblings(self) -> List['HtmlNode']:
        """All element siblings in document order, excluding this node."""
        parent = self._tag.parent
        if parent is None:
            return []
        return [
            HtmlNode(child) for child in parent.find_all(recursive=False)
            if child is not self._tag
        ]

    def closest(self, predicate: Callable[['HtmlNode'], bool]) -> Optional['HtmlNode']:
        """This node or its nearest ancestor matching predicate."""
        tag = self._tag
        while isinstance(tag, Tag) and not isinstance(tag, BeautifulSoup):
            node = HtmlNode(tag)
            if predicate(node):
                return node
            tag = tag.parent
        return None

    # Detached copies

    def clone(self) -> 'HtmlNode':
        """Deep copy detached from the source document."""
        return HtmlNode(copy.copy(self._tag))

    def remove(self, selector: str) -> None:
        """Drop every descendant matching selector. Only call on clones."""
        for tag in self._tag.select(selector):
            tag.decompose()


def parse_html(markup) -> HtmlNode:
    """Parse raw HTML (str or bytes) into a queryable document root."""
    return HtmlNode(BeautifulSoup(markup, 'html.parser'))
