from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator

from .token import Token

if TYPE_CHECKING:
    from ..transformation import Transformation


@dataclass(slots=True)
class MarkupNode:

    def dump(self, depth: int = 0) -> Iterator[str]:
        raise NotImplementedError


@dataclass(slots=True)
class TextNode(MarkupNode):
    value: str
    start: int
    end: int

    def dump(self, depth: int = 0) -> Iterator[str]:
        yield f"{'  ' * depth}TextNode('{self.value}')"


@dataclass(slots=True)
class PlaceholderNode(MarkupNode):
    """A resolved placeholder, textual (``str``) or structured."""
    key: str
    value: Any
    start: int
    end: int

    def dump(self, depth: int = 0) -> Iterator[str]:
        yield f"{'  ' * depth}PlaceholderNode('{self.key}')"


@dataclass(slots=True)
class ElementNode(MarkupNode):
    # Note: subclasses declare `children` themselves, so that it can
    # follow their own required fields

    if TYPE_CHECKING:
        children: list[MarkupNode]

    def add_child(self, child: MarkupNode) -> None:
        # literal text contiguous in the source collapses into one leaf
        if isinstance(child, TextNode) and self.children:
            last = self.children[-1]
            if isinstance(last, TextNode) and last.end == child.start:
                last.value += child.value
                last.end = child.end
                return
        self.children.append(child)

    def header(self) -> str:
        raise NotImplementedError

    def dump(self, depth: int = 0) -> Iterator[str]:
        indent = "  " * depth
        yield f"{indent}{self.header()} {{"
        for child in self.children:
            yield from child.dump(depth + 1)
        yield f"{indent}}}"

    def walk(self) -> Iterator[MarkupNode]:
        """Depth-first iteration over every descendant."""
        for child in self.children:
            yield child
            if isinstance(child, ElementNode):
                yield from child.walk()


@dataclass(slots=True)
class RootNode(ElementNode):
    children: list[MarkupNode] = field(default_factory=list)
    end: int = 0

    def header(self) -> str:
        return "Node"


@dataclass(slots=True)
class TagNode(ElementNode):
    """A tag scope, spanning from its open tag to its (possibly implicit)
    close.
    """
    name: str
    args: list[str]
    start: int
    end: int
    children: list[MarkupNode] = field(default_factory=list)
    token: Token | None = field(default=None, compare=False, repr=False)
    transformation: "Transformation | None" = field(default=None,
                                                    compare=False,
                                                    repr=False)

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end

    @property
    def open_span(self) -> tuple[int, int]:
        if self.token is None:
            return self.start, self.start
        return self.token.start, self.token.end

    def header(self) -> str:
        parts = ", ".join(f"'{part}'" for part in [self.name, *self.args])
        return f"TagNode({parts})"
