from .builder import TreeBuilder
from .consumer import (MatchedTokenConsumer, StringResolvingConsumer,
                       TreeBuildingConsumer)
from .diagnostic import DebugTrace, Diagnostic, Span, arrow, underline
from .node import (ElementNode, MarkupNode, PlaceholderNode, RootNode, TagNode,
                   TextNode)
from .stack import TagStack
from .tag import (Classification, TagClassifier, TagDescriptor, TagKind,
                  split_parts)
from .token import Token, Tokenizer, TokenType, escape_tokens, strip_tokens

__all__ = [
    "Classification",
    "DebugTrace",
    "Diagnostic",
    "ElementNode",
    "MarkupNode",
    "MatchedTokenConsumer",
    "PlaceholderNode",
    "RootNode",
    "Span",
    "StringResolvingConsumer",
    "TagClassifier",
    "TagDescriptor",
    "TagKind",
    "TagNode",
    "TagStack",
    "TextNode",
    "Token",
    "TokenType",
    "Tokenizer",
    "TreeBuilder",
    "TreeBuildingConsumer",
    "arrow",
    "escape_tokens",
    "split_parts",
    "strip_tokens",
    "underline",
]
