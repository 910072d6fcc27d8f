from typing import Any

import pytest

from minimarkup import (MiniMarkup, Transformation, TransformationError,
                        TransformationRegistry)


class ColorTransformation(Transformation):

    COLORS = {"red", "green", "blue", "yellow", "gray", "gold"}

    @classmethod
    def can_parse(cls, name: str) -> bool:
        return name in cls.COLORS

    def apply(self, target: dict[str, Any]) -> dict[str, Any]:
        return {**target, "color": self.name}


class DecorationTransformation(Transformation):

    @classmethod
    def can_parse(cls, name: str) -> bool:
        return name in {"bold", "italic", "underlined"}

    def apply(self, target: dict[str, Any]) -> dict[str, Any]:
        return {**target, self.name: True}


class ClickTransformation(Transformation):

    ACTIONS = {"open_url", "run_command", "suggest_command"}

    @classmethod
    def can_parse(cls, name: str) -> bool:
        return name == "click"

    def load(self) -> None:
        if len(self.args) != 2 or self.args[0] not in self.ACTIONS:
            raise TransformationError(
                f"Don't know how to turn {self.args} into a click event")

    def apply(self, target: dict[str, Any]) -> dict[str, Any]:
        action, value = self.args
        return {**target, "click": (action, value)}


class HoverTransformation(Transformation):

    @classmethod
    def can_parse(cls, name: str) -> bool:
        return name == "hover"

    def load(self) -> None:
        if len(self.args) != 2:
            raise TransformationError(
                f"Don't know how to turn {self.args} into a hover event")

    def apply(self, target: dict[str, Any]) -> dict[str, Any]:
        return {**target, "hover": tuple(self.args)}


@pytest.fixture
def colors() -> TransformationRegistry:
    return TransformationRegistry(ColorTransformation)


@pytest.fixture
def registry() -> TransformationRegistry:
    return TransformationRegistry(ColorTransformation,
                                  DecorationTransformation,
                                  ClickTransformation, HoverTransformation)


@pytest.fixture
def markup(registry: TransformationRegistry) -> MiniMarkup:
    return MiniMarkup(transformations=registry)


@pytest.fixture
def strict_markup(registry: TransformationRegistry) -> MiniMarkup:
    return MiniMarkup(transformations=registry, strict=True)
