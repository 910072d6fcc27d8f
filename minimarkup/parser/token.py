import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator

from .diagnostic import Diagnostic

TAG_START = "<"
TAG_END = ">"
CLOSE_TAG = "/"
ESCAPE = "\\"
SEPARATOR = ":"
QUOTES = "'\""


class TokenType(Enum):
    TEXT = "text"
    OPEN_TAG = "open_tag"
    CLOSE_TAG = "close_tag"


@dataclass(frozen=True, slots=True)
class Token:
    start: int
    end: int
    type: TokenType

    def text(self, message: str) -> str:
        return message[self.start:self.end]


class _State(Enum):
    NORMAL = 0
    TAG = 1
    STRING = 2


class Tokenizer:
    """Split a message into text, open tag and close tag tokens.

    Iterating restarts the scan from the beginning of the message. Tokens
    are ordered, never overlap, and together cover the whole message.
    Anything that cannot form a tag (e.g. ``<3`` or a tag opening that is
    never closed) stays in a text token.
    """

    # what a truncated tag has to start with to count as a malformed tag
    NAME_START = re.compile(r"/?[A-Za-z_#!?]")
    NAME = re.compile(r"/?[!?#]?[\w\-.]*")

    def __init__(
        self,
        message: str,
        on_malformed: Callable[[Diagnostic], None] | None = None,
    ) -> None:
        self.message = message
        self.on_malformed = on_malformed

    def __iter__(self) -> Iterator[Token]:
        message = self.message
        state = _State.NORMAL
        escaped = False
        quote = ""
        marker = -1
        token_end = 0

        for index, char in enumerate(message):
            if escaped:
                escaped = False
                continue
            if char == ESCAPE:
                escaped = True
                continue

            match state:
                case _State.NORMAL:
                    if char == TAG_START:
                        marker = index
                        state = _State.TAG
                case _State.TAG:
                    if char == TAG_END:
                        state = _State.NORMAL
                        if index == marker + 1:
                            # <> is not a tag
                            continue
                        if token_end != marker:
                            yield Token(token_end, marker, TokenType.TEXT)
                        token_end = index + 1
                        if message.startswith(CLOSE_TAG, marker + 1):
                            kind = TokenType.CLOSE_TAG
                        else:
                            kind = TokenType.OPEN_TAG
                        yield Token(marker, token_end, kind)
                    elif char == TAG_START:
                        # start over, the previous `<` was plain text
                        marker = index
                    elif char in QUOTES:
                        quote = char
                        state = _State.STRING
                case _State.STRING:
                    if char == quote:
                        state = _State.TAG

        if state is not _State.NORMAL and self.on_malformed is not None:
            diagnostic = self.malformed(marker, state is _State.STRING)
            if diagnostic is not None:
                self.on_malformed(diagnostic)

        if token_end < len(message):
            yield Token(token_end, len(message), TokenType.TEXT)

    def malformed(self, marker: int, in_string: bool) -> Diagnostic | None:
        """Describe a tag opening that runs into the end of the message.

        Returns None when the leftover is just text that happens to contain
        a ``<``, such as ``<3`` or a bare ``<name``.
        """
        body = self.message[marker + 1:]
        if not self.NAME_START.match(body):
            return None
        parts = _split_unquoted(body)
        name, inners = parts[0], parts[1:-1]
        if not in_string and self.NAME.fullmatch(name):
            return None
        inner_text = ", ".join(f'Token{{type=STRING, value="{inner}"}}'
                               for inner in inners)
        return Diagnostic.of(
            "Expected end sometimes after open tag + name, but got name = "
            f'Token{{type=NAME, value="{name}"}} and inners = [{inner_text}]',
            self.message,
            (marker, len(self.message)),
        )


def _split_unquoted(body: str) -> list[str]:
    parts: list[str] = []
    start = 0
    quote = ""
    for index, char in enumerate(body):
        if quote:
            if char == quote:
                quote = ""
        elif char in QUOTES:
            quote = char
        elif char == SEPARATOR:
            parts.append(body[start:index])
            start = index + 1
    parts.append(body[start:])
    return parts


def unescape(text: str) -> str:
    """Drop the escape character in front of ``<`` and ``\\``."""
    return re.sub(r"\\([<\\])", r"\1", text)


def escape_tokens(message: str) -> str:
    """Escape every tag so that the message parses as plain text."""
    return "".join(
        ESCAPE + token.text(message) if token.type is not TokenType.TEXT else
        token.text(message) for token in Tokenizer(message))


def strip_tokens(message: str) -> str:
    """Remove every tag, leaving only the text in between."""
    return "".join(
        token.text(message) for token in Tokenizer(message)
        if token.type is TokenType.TEXT)
