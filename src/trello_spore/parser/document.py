"""Thin query layer over a BeautifulSoup tree.

Extractors only need to look elements up by tag, attributes and an
arbitrary predicate, and to read rendered text. Keeping those calls
here lets them run against small hand-written HTML in tests.
"""

from collections.abc import Callable, Iterator

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

Predicate = Callable[["HtmlNode"], bool]


def parse_html(markup: str | bytes) -> "HtmlNode":
    """Parse an HTML page into a queryable tree."""
    return HtmlNode(BeautifulSoup(markup, "html.parser"))


class HtmlNode:
    """One element of a parsed page."""

    def __init__(self, element: Tag):
        self.element = element

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HtmlNode) and self.element is other.element

    def __hash__(self) -> int:
        return id(self.element)

    def __repr__(self) -> str:
        return f"<HtmlNode {self.tag} id={self.id!r}>"

    @property
    def tag(self) -> str:
        return self.element.name

    @property
    def id(self) -> str | None:
        return self.element.get("id")

    @property
    def parent(self) -> "HtmlNode | None":
        parent = self.element.parent
        return HtmlNode(parent) if parent is not None else None

    @property
    def text(self) -> str:
        """Visible text of the whole subtree, concatenated as-is."""
        return self.element.get_text()

    @property
    def own_strings(self) -> list[str]:
        """Text nodes that are direct children of this element."""
        return [
            str(child) for child in self.element.children
            if isinstance(child, NavigableString) and not isinstance(child, Comment)
        ]

    def is_child_of(self, other: "HtmlNode") -> bool:
        return self.element.parent is other.element

    def iter_all(self, tag: str | None = None, predicate: Predicate | None = None,
                 recursive: bool = True, **attrs) -> Iterator["HtmlNode"]:
        """Yield matching descendants in document order.

        ``attrs`` uses BeautifulSoup matching, so ``class_="section"``
        matches any element carrying that class.
        """
        for element in self.element.find_all(tag, recursive=recursive, **attrs):
            node = HtmlNode(element)
            if predicate is None or predicate(node):
                yield node

    def find_all(self, tag: str | None = None, predicate: Predicate | None = None,
                 recursive: bool = True, **attrs) -> list["HtmlNode"]:
        return list(self.iter_all(tag, predicate, recursive, **attrs))

    def find(self, tag: str | None = None, predicate: Predicate | None = None,
             recursive: bool = True, **attrs) -> "HtmlNode | None":
        return next(self.iter_all(tag, predicate, recursive, **attrs), None)

    def find_by_id(self, node_id: str) -> "HtmlNode | None":
        """Locate the element with the given id, this element included."""
        if self.id == node_id:
            return self
        return self.find(id=node_id)
