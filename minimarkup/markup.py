from typing import Any

from .config import ParserConfig
from .exception import ParsingError
from .log import logger_wrapper
from .parser.consumer import StringResolvingConsumer, TreeBuildingConsumer
from .parser.diagnostic import DebugTrace, Diagnostic
from .parser.node import RootNode
from .parser.tag import TagClassifier
from .parser.token import Tokenizer, escape_tokens, strip_tokens
from .placeholder import ParseContext, Placeholder, PlaceholderResolver

logger = logger_wrapper("MiniMarkup")


class MiniMarkup:
    """Parse tag markup such as ``<red>Hello <bold><name></bold>``.

    Options are those of `ParserConfig`, given either as a config or as
    keyword arguments (which then override the config).
    """

    def __init__(self, config: ParserConfig | None = None, **options: Any):
        if config is None:
            config = ParserConfig(**options)
        elif options:
            config = ParserConfig.model_validate({
                **dict(config), **options
            })
        self.config = config

    def _resolver(self,
                  placeholders: tuple[Placeholder, ...]) -> PlaceholderResolver:
        if not placeholders:
            return self.config.placeholder_resolver
        return PlaceholderResolver.combining(
            PlaceholderResolver.placeholders(*placeholders),
            self.config.placeholder_resolver,
        )

    def _classifier(self, message: str,
                    placeholders: tuple[Placeholder, ...]) -> TagClassifier:
        context = ParseContext(message, self.config.strict)
        return TagClassifier(self.config.is_tag, self._resolver(placeholders),
                             context)

    def _malformed(self, diagnostic: Diagnostic) -> None:
        handler = self.config.parsing_error_handler
        if handler is None:
            raise ParsingError(diagnostic)
        handler([diagnostic.message])

    def parse(self, message: str, *placeholders: Placeholder) -> RootNode:
        """Parse `message` into a tree of tag scopes.

        Raises:
            ParsingError: strict mode violation, or a malformed tag when no
                parsing error handler is configured.
        """
        config = self.config
        trace = DebugTrace(config.debug)
        trace.begin(message)
        logger.debug(f"Parsing {message!r} (strict={config.strict})")

        consumer = TreeBuildingConsumer(
            message,
            self._classifier(message, placeholders),
            config.transformations,
            strict=config.strict,
            trace=trace,
        )
        try:
            for token in Tokenizer(message, on_malformed=self._malformed):
                consumer.accept(token)
            root = consumer.result()
        except ParsingError as e:
            logger.debug(f"Failed to parse {message!r}: {e.message}")
            raise

        trace.tree(root)
        logger.debug(f"Parsed {message!r} into {len(root.children)} "
                     "top-level nodes")
        return root

    def resolve_placeholders(self, message: str,
                             *placeholders: Placeholder) -> str:
        """Substitute textual placeholders, leaving every tag untouched."""
        consumer = StringResolvingConsumer(
            message, self._classifier(message, placeholders))
        for token in Tokenizer(message):
            consumer.accept(token)
        return consumer.result()

    @staticmethod
    def escape_tokens(message: str) -> str:
        return escape_tokens(message)

    @staticmethod
    def strip_tokens(message: str) -> str:
        return strip_tokens(message)
