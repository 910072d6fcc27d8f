from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..exception import TransformationError
from ..log import logger_wrapper
from ..transformation import TransformationRegistry
from .builder import TreeBuilder
from .diagnostic import DebugTrace, Diagnostic
from .node import RootNode
from .tag import TagClassifier, TagDescriptor, TagKind
from .token import Token, TokenType

T = TypeVar("T")

logger = logger_wrapper("MiniMarkup")


class MatchedTokenConsumer(ABC, Generic[T]):
    """Receives every token of a message in document order."""

    def __init__(self, message: str) -> None:
        self.message = message

    @abstractmethod
    def accept(self, token: Token) -> None:
        ...

    @abstractmethod
    def result(self) -> T:
        ...


class TreeBuildingConsumer(MatchedTokenConsumer[RootNode]):

    def __init__(
        self,
        message: str,
        classifier: TagClassifier,
        transformations: TransformationRegistry,
        *,
        strict: bool = False,
        trace: DebugTrace | None = None,
    ) -> None:
        super().__init__(message)
        self.classifier = classifier
        self.transformations = transformations
        self.trace = trace or DebugTrace(None)
        self.builder = TreeBuilder(message, strict=strict)

    def accept(self, token: Token) -> None:
        match token.type:
            case TokenType.TEXT:
                self.builder.text(token)
            case TokenType.OPEN_TAG:
                self._open(token)
            case TokenType.CLOSE_TAG:
                descriptor = TagDescriptor.parse(token.text(self.message))
                self.builder.close_tag(token, descriptor)

    def _open(self, token: Token) -> None:
        classification = self.classifier.classify(token.text(self.message))
        name, args = classification.descriptor
        self.trace.attempt(name, token.start)

        match classification.kind:
            case TagKind.TAG if classification.descriptor.is_reset:
                self.builder.reset(token)
                self.trace.matched(name, "ResetTransformation")
            case TagKind.TAG:
                try:
                    transformation = self.transformations.create(name, args)
                except TransformationError as e:
                    self._unmatched(token, name, str(e))
                    return
                self.trace.matched(name, type(transformation).__name__)
                self.builder.open_tag(token, classification.descriptor,
                                      transformation)
            case TagKind.PLACEHOLDER:
                self.trace.matched(name, "PlaceholderTransformation")
                self.builder.placeholder(token, name, classification.value)
            case TagKind.UNRESOLVED:
                self._unmatched(token, name, "Unknown tag or placeholder")

    def _unmatched(self, token: Token, name: str, reason: str) -> None:
        logger.trace(f"Could not match '{name}' at column {token.start}: "
                     f"{reason}")
        self.trace.failed(
            name, reason,
            Diagnostic.of(reason, self.message, (token.start, token.end)))
        self.builder.literal(token)

    def result(self) -> RootNode:
        return self.builder.finish()


class StringResolvingConsumer(MatchedTokenConsumer[str]):
    """Rebuild the message with textual placeholders substituted.

    Tags are inert here and no nesting is validated.
    """

    def __init__(self, message: str, classifier: TagClassifier) -> None:
        super().__init__(message)
        self.classifier = classifier
        self.buffer: list[str] = []

    def accept(self, token: Token) -> None:
        raw = token.text(self.message)
        if token.type is not TokenType.OPEN_TAG:
            self.buffer.append(raw)
            return
        classification = self.classifier.classify(raw)
        if classification.kind is TagKind.PLACEHOLDER \
                and isinstance(classification.value, str):
            self.buffer.append(classification.value)
        else:
            self.buffer.append(raw)

    def result(self) -> str:
        return "".join(self.buffer)
