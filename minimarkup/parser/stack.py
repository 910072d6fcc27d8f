from typing import Iterator

from .node import TagNode
from .tag import TagDescriptor


class TagStack:
    """The currently open tag scopes, innermost last."""

    def __init__(self) -> None:
        self.stack: list[TagNode] = []

    def __len__(self) -> int:
        return len(self.stack)

    def __bool__(self) -> bool:
        return bool(self.stack)

    def __iter__(self) -> Iterator[TagNode]:
        return iter(self.stack)

    @property
    def top(self) -> TagNode | None:
        return self.stack[-1] if self.stack else None

    def push(self, node: TagNode) -> None:
        self.stack.append(node)

    def find(self, descriptor: TagDescriptor) -> int:
        """Index of the innermost scope closed by `descriptor`, or -1."""
        for index in range(len(self.stack) - 1, -1, -1):
            node = self.stack[index]
            if descriptor.closes(TagDescriptor(node.name, node.args)):
                return index
        return -1

    def pop_to(self, index: int, end: int) -> list[TagNode]:
        """Close every scope from the top down to `index`, inclusive.

        Returns the closed scopes, innermost first.
        """
        closed = self.stack[index:][::-1]
        del self.stack[index:]
        for node in closed:
            node.end = end
        return closed

    def clear(self, end: int) -> list[TagNode]:
        return self.pop_to(0, end)
