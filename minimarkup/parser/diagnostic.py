from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, NamedTuple, Protocol

if TYPE_CHECKING:
    from .node import RootNode


class Span(NamedTuple):
    start: int
    end: int


def underline(start: int, end: int) -> str:
    """Render the caret marker for a span, e.g. ``^~~~^`` for ``<red>``."""
    width = end - start
    if width <= 1:
        return "^"
    return "^" + "~" * (width - 2) + "^"


def arrow(spans: Iterable[Span]) -> str:
    """Render the caret line for all spans, columns counted in characters."""
    chars: list[str] = []
    for start, end in sorted(spans):
        if len(chars) < start:
            chars.extend(" " * (start - len(chars)))
        marker = underline(start, end)
        # overlapping spans overwrite the tail of the previous marker
        chars[start:start + len(marker)] = marker
    return "".join(chars)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    message: str
    markup: str
    spans: tuple[Span, ...] = ()

    @classmethod
    def of(cls, message: str, markup: str,
           *spans: tuple[int, int]) -> "Diagnostic":
        return cls(message, markup, tuple(Span(*span) for span in spans))

    def excerpt(self) -> list[str]:
        if not self.spans:
            return []
        return [f"\t{self.markup}", f"\t{arrow(self.spans)}"]

    def render(self) -> str:
        return "\n".join([self.message, *self.excerpt()])


class DebugSink(Protocol):

    def write(self, text: str, /) -> Any:
        ...


class DebugTrace:
    """Writes the human-readable parse trace to a debug sink.

    The line templates are a stable format: callers match on them.
    """

    def __init__(self, sink: DebugSink | None) -> None:
        self.sink = sink

    def __bool__(self) -> bool:
        return self.sink is not None

    def write(self, line: str) -> None:
        if self.sink is not None:
            self.sink.write(line + "\n")

    def begin(self, message: str) -> None:
        self.write(f"Beginning parsing message {message}")

    def attempt(self, name: str, column: int) -> None:
        self.write(f"Attempting to match node '{name}' at column {column}")

    def matched(self, name: str, transformation: str) -> None:
        self.write(f"Successfully matched node '{name}' "
                   f"to transformation {transformation}")

    def failed(self, name: str, reason: str, diagnostic: Diagnostic) -> None:
        self.write(f"Could not match node '{name}' - {reason}")
        for line in diagnostic.excerpt():
            self.write(line)

    def tree(self, root: "RootNode") -> None:
        self.write("Text parsed into element tree:")
        for line in root.dump():
            self.write(line)
