from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, NamedTuple

from ..placeholder import ParseContext, PlaceholderResolver, ResolveContext
from .token import CLOSE_TAG, ESCAPE, QUOTES, SEPARATOR, TAG_END, TAG_START

RESET = "reset"


class TagDescriptor(NamedTuple):
    name: str
    args: list[str]

    @classmethod
    def parse(cls, raw: str) -> "TagDescriptor":
        """Parse ``<name:arg:'quoted arg'>`` or ``</name>``."""
        inner = raw.removeprefix(TAG_START).removesuffix(TAG_END)
        inner = inner.removeprefix(CLOSE_TAG)
        name, *args = split_parts(inner)
        return cls(name, args)

    def closes(self, other: "TagDescriptor") -> bool:
        """Whether a close tag with this descriptor closes `other`."""
        if self.name != other.name:
            return False
        return self.args == other.args[:len(self.args)]

    @property
    def is_reset(self) -> bool:
        return self.name == RESET


def split_parts(inner: str) -> list[str]:
    # `:` followed by `//` belongs to a url and does not split
    parts: list[str] = []
    buffer: list[str] = []
    quote = ""
    index = 0
    while index < len(inner):
        char = inner[index]
        if char == ESCAPE and index + 1 < len(inner) \
                and inner[index + 1] in QUOTES + ESCAPE + TAG_START + SEPARATOR:
            buffer.append(inner[index + 1])
            index += 2
            continue
        if quote:
            if char == quote:
                quote = ""
            else:
                buffer.append(char)
        elif char in QUOTES:
            quote = char
        elif char == SEPARATOR and not inner.startswith("//", index + 1):
            parts.append("".join(buffer))
            buffer.clear()
        else:
            buffer.append(char)
        index += 1
    parts.append("".join(buffer))
    return parts


class TagKind(Enum):
    TAG = "tag"
    PLACEHOLDER = "placeholder"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True, slots=True)
class Classification:
    kind: TagKind
    descriptor: TagDescriptor
    value: Any = None


class TagClassifier:
    """Decide whether an open tag is a tag, a placeholder, or plain text.

    Tags win: a name both the predicate and the resolver accept is a tag.
    """

    def __init__(
        self,
        tag_predicate: Callable[[str], bool],
        resolver: PlaceholderResolver,
        context: ParseContext,
    ) -> None:
        self.tag_predicate = tag_predicate
        self.resolver = resolver
        self.context = context

    def classify(self, raw: str) -> Classification:
        descriptor = TagDescriptor.parse(raw)
        name = descriptor.name
        if descriptor.is_reset or self.tag_predicate(name):
            return Classification(TagKind.TAG, descriptor)
        # one lookup per placeholder; None is a miss
        value = self.resolver.resolve(ResolveContext(name, self.context))
        if value is not None:
            return Classification(TagKind.PLACEHOLDER, descriptor, value)
        return Classification(TagKind.UNRESOLVED, descriptor)
