from ..exception import ParsingError
from ..log import logger_wrapper
from ..transformation import Transformation
from .diagnostic import Diagnostic
from .node import ElementNode, PlaceholderNode, RootNode, TagNode, TextNode
from .stack import TagStack
from .tag import TagDescriptor
from .token import Token, unescape

logger = logger_wrapper("MiniMarkup")


class TreeBuilder:
    """Build the tree of tag scopes from tokens, in document order.

    In lenient mode broken nesting is repaired: closing an outer tag closes
    everything opened inside it, and tags still open at the end of the
    message close there. Strict mode refuses both, as well as ``<reset>``.
    """

    def __init__(self, message: str, strict: bool = False) -> None:
        self.message = message
        self.strict = strict
        self.root = RootNode(end=len(message))
        self.stack = TagStack()

    @property
    def current(self) -> ElementNode:
        return self.stack.top or self.root

    def text(self, token: Token) -> None:
        value = unescape(token.text(self.message))
        self.current.add_child(TextNode(value, token.start, token.end))

    def literal(self, token: Token) -> None:
        """Keep a tag that means nothing here as verbatim text."""
        self.current.add_child(
            TextNode(token.text(self.message), token.start, token.end))

    def placeholder(self, token: Token, key: str, value: object) -> None:
        self.current.add_child(
            PlaceholderNode(key, value, token.start, token.end))

    def open_tag(
        self,
        token: Token,
        descriptor: TagDescriptor,
        transformation: Transformation | None = None,
    ) -> TagNode:
        node = TagNode(descriptor.name,
                       list(descriptor.args),
                       token.start,
                       len(self.message),
                       token=token,
                       transformation=transformation)
        self.current.add_child(node)
        self.stack.push(node)
        return node

    def reset(self, token: Token) -> None:
        if self.strict:
            raise ParsingError(
                Diagnostic.of(
                    "<reset> tags are not allowed when strict mode is enabled",
                    self.message, (token.start, token.end)))
        closed = self.stack.clear(token.start)
        if closed:
            logger.trace(f"<reset> at column {token.start} closed "
                         f"{', '.join(node.name for node in closed)}")

    def close_tag(self, token: Token, descriptor: TagDescriptor) -> bool:
        """Close the innermost scope matching `descriptor`.

        A close tag that matches no open scope is kept as text, or refused
        in strict mode.
        """
        index = self.stack.find(descriptor)
        if index == -1:
            if self.strict:
                raise ParsingError(
                    Diagnostic.of(
                        f"Closing tag {descriptor.name} does not match any "
                        "open tag.", self.message, (token.start, token.end)))
            logger.trace(f"Stray close tag '{descriptor.name}' "
                         f"at column {token.start} kept as text")
            self.literal(token)
            return False

        top = self.stack.top
        assert top is not None
        matched = self.stack.stack[index]
        if top is not matched:
            if self.strict:
                raise ParsingError(
                    Diagnostic.of(
                        f"Unclosed tag encountered; {top.name} is not closed, "
                        f"because {descriptor.name} was closed first.",
                        self.message,
                        matched.open_span,
                        top.open_span,
                        (token.start, token.end),
                    ))
            logger.trace(f"'{descriptor.name}' closed at column "
                         f"{token.start} implicitly closes {top.name}")
        self.stack.pop_to(index, token.end)
        return True

    def finish(self) -> RootNode:
        if self.stack:
            if self.strict:
                names = ", ".join(node.name for node in self.stack)
                raise ParsingError(
                    Diagnostic.of(
                        "All tags must be explicitly closed while in strict "
                        f"mode. End of string found with open tags: {names}",
                        self.message,
                        *(node.open_span for node in self.stack),
                    ))
            self.stack.clear(len(self.message))
        return self.root
