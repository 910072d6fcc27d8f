import io

import pytest
from pydantic import ValidationError

from minimarkup import MiniMarkup, ParserConfig, TransformationRegistry


def test_defaults():
    config = ParserConfig()
    assert config.strict is False
    assert config.debug is None
    assert config.tag_predicate is None
    assert not config.is_tag("red")
    assert config.placeholder_resolver.can_resolve("x") is False


def test_is_tag(registry: TransformationRegistry):
    config = ParserConfig(transformations=registry)
    assert config.is_tag("red") and config.is_tag("click")
    assert not config.is_tag("Red")
    config = ParserConfig(transformations=registry,
                          tag_predicate=lambda name: name == "x")
    assert config.is_tag("x") and not config.is_tag("red")


def test_debug_sink():
    ParserConfig(debug=io.StringIO())
    with pytest.raises(ValidationError):
        ParserConfig(debug=object())


def test_frozen():
    config = ParserConfig()
    with pytest.raises(ValidationError):
        config.strict = True  # type: ignore


def test_override(registry: TransformationRegistry):
    base = MiniMarkup(transformations=registry)
    strict = MiniMarkup(base.config, strict=True)
    assert strict.config.transformations is registry
    assert strict.config.strict
    assert MiniMarkup(base.config).config is base.config


def test_registry(registry: TransformationRegistry):
    assert TransformationRegistry.empty().types == []
    extended = TransformationRegistry.empty().with_types(*registry.types)
    assert extended.types == registry.types
    assert extended.find("gold") is registry.types[0]
