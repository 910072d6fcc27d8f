from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .placeholder import PlaceholderResolver
from .transformation import TransformationRegistry


class ParserConfig(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    # refuse implicit closes, unclosed tags and <reset>
    strict: bool = False
    # anything with a write(str) method receives the parse trace
    debug: Any = None  # a DebugSink, checked below
    transformations: TransformationRegistry = Field(
        default_factory=TransformationRegistry.empty)
    placeholder_resolver: PlaceholderResolver = Field(
        default_factory=PlaceholderResolver.empty)
    # decides tag vs placeholder; defaults to the registry
    tag_predicate: Callable[[str], bool] | None = None
    # receives malformed tag reports instead of them being raised
    parsing_error_handler: Callable[[list[str]], None] | None = None

    @field_validator("debug")
    @classmethod
    def _check_debug(cls, value: Any) -> Any:
        if value is not None and not callable(getattr(value, "write", None)):
            raise ValueError("Debug sink must have a write(str) method")
        return value

    def is_tag(self, name: str) -> bool:
        if self.tag_predicate is not None:
            return self.tag_predicate(name)
        return self.transformations.exists(name)
