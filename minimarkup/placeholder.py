from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable


@dataclass(frozen=True, slots=True)
class ParseContext:
    message: str
    strict: bool = False


@dataclass(frozen=True, slots=True)
class ResolveContext:
    """Handed to a resolver for every single placeholder lookup."""
    key: str
    parse_context: ParseContext


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A named value substituted for ``<key>``.

    Textual values are ``str``; anything else is treated as a structured
    (styled) fragment and left to the host. A callable value is evaluated
    lazily on every lookup.
    """
    key: str
    value: Any

    @classmethod
    def text(cls, key: str, value: str | Callable[[], str]) -> "Placeholder":
        return cls(key, value)

    @classmethod
    def component(cls, key: str, value: Any) -> "Placeholder":
        return cls(key, value)

    def get(self) -> Any:
        if callable(self.value):
            return self.value()
        return self.value


class PlaceholderResolver(ABC):

    @abstractmethod
    def can_resolve(self, key: str) -> bool:
        ...

    @abstractmethod
    def resolve(self, context: ResolveContext) -> Any | None:
        """Return the value for ``context.key``, None if there is none."""

    @staticmethod
    def empty() -> "PlaceholderResolver":
        return _MappingResolver({})

    @staticmethod
    def placeholders(*placeholders: Placeholder) -> "PlaceholderResolver":
        return _MappingResolver({p.key: p for p in placeholders})

    @staticmethod
    def combining(*resolvers: "PlaceholderResolver") -> "PlaceholderResolver":
        return _CombiningResolver(resolvers)

    @staticmethod
    def dynamic(
            func: Callable[[str], Any | None]) -> "PlaceholderResolver":
        return _DynamicResolver(func)


class _MappingResolver(PlaceholderResolver):

    def __init__(self, placeholders: dict[str, Placeholder]) -> None:
        self.placeholders = placeholders

    def can_resolve(self, key: str) -> bool:
        return key in self.placeholders

    def resolve(self, context: ResolveContext) -> Any | None:
        placeholder = self.placeholders.get(context.key)
        if placeholder is None:
            return None
        return placeholder.get()


class _CombiningResolver(PlaceholderResolver):

    def __init__(self, resolvers: Iterable[PlaceholderResolver]) -> None:
        self.resolvers = tuple(resolvers)

    def can_resolve(self, key: str) -> bool:
        return any(r.can_resolve(key) for r in self.resolvers)

    def resolve(self, context: ResolveContext) -> Any | None:
        for resolver in self.resolvers:
            value = resolver.resolve(context)
            if value is not None:
                return value
        return None


class _DynamicResolver(PlaceholderResolver):

    def __init__(self, func: Callable[[str], Any | None]) -> None:
        self.func = func

    def can_resolve(self, key: str) -> bool:
        return self.func(key) is not None

    def resolve(self, context: ResolveContext) -> Any | None:
        return self.func(context.key)
