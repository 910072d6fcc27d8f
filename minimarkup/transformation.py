from abc import ABC, abstractmethod
from typing import Any

from typing_extensions import Self

from .exception import TransformationError


class Transformation(ABC):
    """Turns a matched tag into a style mutation on the host's value.

    Subclasses decide which tag names they answer to and validate the tag
    arguments in `load`. Applying the mutation is entirely up to the host.
    """

    def __init__(self, name: str, args: list[str]) -> None:
        self.name = name
        self.args = args

    @classmethod
    @abstractmethod
    def can_parse(cls, name: str) -> bool:
        ...

    def load(self) -> None:
        """Validate the arguments.

        Raises:
            TransformationError: the arguments are not understood.
        """

    @abstractmethod
    def apply(self, target: Any) -> Any:
        ...


class TransformationRegistry:

    def __init__(self, *types: type[Transformation]) -> None:
        self.types = list(types)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    def with_types(self, *types: type[Transformation]) -> Self:
        return type(self)(*self.types, *types)

    def find(self, name: str) -> type[Transformation] | None:
        for type_ in self.types:
            if type_.can_parse(name):
                return type_
        return None

    def exists(self, name: str) -> bool:
        return self.find(name) is not None

    def create(self, name: str, args: list[str]) -> Transformation:
        type_ = self.find(name)
        if type_ is None:
            raise TransformationError(f"Unknown transformation: {name}")
        transformation = type_(name, list(args))
        transformation.load()
        return transformation
