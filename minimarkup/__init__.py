from loguru import logger

from .config import ParserConfig
from .exception import ParsingError, TransformationError
from .markup import MiniMarkup
from .parser import (Diagnostic, PlaceholderNode, RootNode, TagNode, TextNode,
                     Token, Tokenizer, TokenType)
from .placeholder import (ParseContext, Placeholder, PlaceholderResolver,
                          ResolveContext)
from .transformation import Transformation, TransformationRegistry

__all__ = [
    "Diagnostic",
    "MiniMarkup",
    "ParseContext",
    "ParserConfig",
    "ParsingError",
    "Placeholder",
    "PlaceholderNode",
    "PlaceholderResolver",
    "ResolveContext",
    "RootNode",
    "TagNode",
    "TextNode",
    "Token",
    "TokenType",
    "Tokenizer",
    "Transformation",
    "TransformationError",
    "TransformationRegistry",
]

# hosts opt in with logger.enable("minimarkup")
logger.disable("minimarkup")
