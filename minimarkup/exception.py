from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .parser.diagnostic import Diagnostic


class ParsingError(ValueError):
    """Raised when a message cannot be parsed.

    Carries exactly one diagnostic; ``str()`` is its rendered form.
    """

    def __init__(self, diagnostic: "Diagnostic") -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def markup(self) -> str:
        return self.diagnostic.markup

    def __str__(self) -> str:
        return self.diagnostic.render()


class TransformationError(ValueError):
    """A transformation does not know how to handle the tag arguments."""

    def __str__(self) -> str:
        return self.args[0]
