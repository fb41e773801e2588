"""Stylesheet tree: Declaration, Rule, AtRule, Comment and Stylesheet nodes.

The tree is mutable.  Every child keeps a ``parent`` back-reference that its
container maintains, so a node can insert siblings after itself.

Traversal is forward-only: ``walk``, ``walk_rules`` and ``walk_decls``
iterate over a snapshot of each container's children, so nodes inserted
while a walk is in progress are never visited by that walk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Union

__all__ = ["Declaration", "Rule", "AtRule", "Comment", "Stylesheet", "Node"]

_INDENT = "  "


class _Child:
    """Behaviour shared by every node that can live inside a container."""

    parent: _Container | None

    def after(self, node: Node) -> None:
        """Insert *node* immediately after this node in its parent."""
        if self.parent is None:
            raise ValueError(f"{type(self).__name__} has no parent to insert into")
        self.parent.insert_after(self, node)  # type: ignore[arg-type]


class _Container:
    """Behaviour shared by nodes that hold an ordered list of children."""

    nodes: list[Node]

    def _adopt(self) -> None:
        for child in self.nodes:
            child.parent = self

    def append(self, node: Node) -> None:
        node.parent = self
        self.nodes.append(node)

    def index(self, node: Node) -> int:
        for i, child in enumerate(self.nodes):
            if child is node:
                return i
        raise ValueError(f"{type(node).__name__} is not a child of this container")

    def insert_after(self, existing: Node, node: Node) -> None:
        """Insert *node* directly after *existing*, which must be a child."""
        node.parent = self
        self.nodes.insert(self.index(existing) + 1, node)

    def declarations(self) -> list[Declaration]:
        """Return the direct child declarations, in order."""
        return [n for n in self.nodes if isinstance(n, Declaration)]

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first, in document order."""
        for child in list(self.nodes):
            yield child
            if isinstance(child, _Container) and child.nodes is not None:
                yield from child.walk()

    def walk_rules(self, callback: Callable[[Rule], None]) -> None:
        for node in self.walk():
            if isinstance(node, Rule):
                callback(node)

    def walk_decls(self, callback: Callable[[Declaration], None]) -> None:
        for node in self.walk():
            if isinstance(node, Declaration):
                callback(node)


@dataclass(eq=False)
class Declaration(_Child):
    """A single ``prop: value`` pair."""

    prop: str
    value: str
    important: bool = False
    parent: _Container | None = field(default=None, repr=False)

    @property
    def is_custom(self) -> bool:
        return self.prop.startswith("--")

    def clone(self, **overrides: object) -> Declaration:
        values = {"prop": self.prop, "value": self.value, "important": self.important}
        values.update(overrides)
        return Declaration(**values)  # type: ignore[arg-type]

    def to_css(self, depth: int = 0) -> str:
        important = " !important" if self.important else ""
        return f"{_INDENT * depth}{self.prop}: {self.value}{important};"


@dataclass(eq=False)
class Comment(_Child):
    """A ``/* ... */`` comment kept for round-tripping."""

    text: str
    parent: _Container | None = field(default=None, repr=False)

    def clone(self, **overrides: object) -> Comment:
        return Comment(text=str(overrides.get("text", self.text)))

    def to_css(self, depth: int = 0) -> str:
        return f"{_INDENT * depth}/*{self.text}*/"


@dataclass(eq=False)
class Rule(_Child, _Container):
    """A qualified rule: a selector and a block of declarations."""

    selector: str
    nodes: list[Node] = field(default_factory=list)
    parent: _Container | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._adopt()

    def clone(self, **overrides: object) -> Rule:
        """Deep-copy this rule; keyword arguments override fields of the copy."""
        selector = overrides.get("selector", self.selector)
        return Rule(selector=str(selector), nodes=[n.clone() for n in self.nodes])

    def to_css(self, depth: int = 0) -> str:
        pad = _INDENT * depth
        if not self.nodes:
            return f"{pad}{self.selector} {{}}"
        body = "\n".join(n.to_css(depth + 1) for n in self.nodes)
        return f"{pad}{self.selector} {{\n{body}\n{pad}}}"


@dataclass(eq=False)
class AtRule(_Child, _Container):
    """An at-rule such as ``@media``; ``nodes`` is None for ``@import x;``."""

    name: str
    params: str = ""
    nodes: list[Node] | None = None  # type: ignore[assignment]
    parent: _Container | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.nodes is not None:
            self._adopt()

    def walk(self) -> Iterator[Node]:
        if self.nodes is None:
            return iter(())
        return super().walk()

    def clone(self, **overrides: object) -> AtRule:
        nodes = None if self.nodes is None else [n.clone() for n in self.nodes]
        return AtRule(
            name=str(overrides.get("name", self.name)),
            params=str(overrides.get("params", self.params)),
            nodes=nodes,
        )

    def to_css(self, depth: int = 0) -> str:
        pad = _INDENT * depth
        head = f"{pad}@{self.name}" + (f" {self.params}" if self.params else "")
        if self.nodes is None:
            return f"{head};"
        if not self.nodes:
            return f"{head} {{}}"
        body = "\n".join(n.to_css(depth + 1) for n in self.nodes)
        return f"{head} {{\n{body}\n{pad}}}"


@dataclass(eq=False)
class Stylesheet(_Container):
    """The root of a parsed stylesheet."""

    nodes: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._adopt()

    @property
    def rules(self) -> list[Rule]:
        """Every rule in the sheet, nested ones included, in document order."""
        found: list[Rule] = []
        self.walk_rules(found.append)
        return found

    def to_css(self) -> str:
        if not self.nodes:
            return ""
        return "\n\n".join(n.to_css() for n in self.nodes) + "\n"


Node = Union[Declaration, Rule, AtRule, Comment]
