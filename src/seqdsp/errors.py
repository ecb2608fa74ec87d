from __future__ import annotations


class SeqDSPError(Exception):
    """Base class for sequence operation errors."""

    pass


class SequenceError(SeqDSPError):
    """Raised when an argument cannot be read as a 1-D real sequence.

    Attributes
    ----------
    argument: str
        name of the offending argument, appended to the error message when
        set.
    """

    def __init__(self, *args, argument: str = None) -> None:
        super().__init__(*args)
        self.argument = argument

    def __str__(self) -> str:
        suffix = ""
        if self.argument:
            suffix += " (argument '" + self.argument + "')"
        return super().__str__() + suffix


class ParameterError(SeqDSPError):
    """Raised when a count, width or bound is not an integer."""

    pass
