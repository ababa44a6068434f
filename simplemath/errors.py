"""Error types raised by the numeric algorithms and by expression evaluation."""

from __future__ import annotations


def _quoted(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class AlgorithmError(Exception):
    """Base class of the errors raised by the numeric algorithms."""

    variant = "Unknown"

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        super().__init__(*(() if message is None else (message,)))

    def __str__(self) -> str:
        return self.variant


class Overflow(AlgorithmError):
    """An argument is too large for the algorithm."""

    variant = "OverFlow"


class ComplexInfinity(AlgorithmError):
    """The result is complex infinity."""

    variant = "ComplexInfinity"


class AlgorithmIOError(AlgorithmError):
    """Reading or writing data failed."""

    variant = "IOError"

    def __init__(self, message: str) -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return f"IOError: {self.message}"


class Unimplemented(AlgorithmError):
    """The algorithm does not cover this input."""

    variant = "Unimplemented"


class Indeterminate(AlgorithmError):
    """The result is indeterminate, such as zero to the power zero."""

    variant = "Indeterminate"


class Undefined(AlgorithmError):
    """The function is not defined for this input."""

    variant = "Undefined"

    def __init__(self, message: str) -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return f"Undefined: {self.message}"


class SMError(Exception):
    """Base class of evaluation errors; a bare instance means an unknown error."""

    variant = "Unknown"
    carries_message = False

    def __init__(self, message: str | None = None) -> None:
        if self.carries_message and message is None:
            raise TypeError(f"{type(self).__name__} requires a message")
        self.message = message
        super().__init__(*(() if message is None else (message,)))

    def __str__(self) -> str:
        if self.carries_message:
            return f"{self.variant}({_quoted(self.message or '')})"
        return self.variant


class SMIOError(SMError):
    variant = "IOError"
    carries_message = True


class ParseError(SMError):
    variant = "ParseError"
    carries_message = True


class EmptyContainerError(SMError):
    variant = "EmptyContainer"
    carries_message = True


class SMOverflow(SMError):
    variant = "Overflow"


class SMInfinity(SMError):
    variant = "Infinity"


class SMComplexInfinity(SMError):
    variant = "ComplexInfinity"


class SMUnimplemented(SMError):
    variant = "Unimplemented"
    carries_message = True


class SMUnreachable(SMError):
    variant = "Unreachable"
    carries_message = True


def from_algorithm(error: AlgorithmError) -> SMError:
    """Convert an algorithm error into the matching evaluation error."""
    if isinstance(error, Overflow):
        return SMOverflow()
    if isinstance(error, ComplexInfinity):
        return SMComplexInfinity()
    if isinstance(error, AlgorithmIOError):
        return SMIOError(error.message or "")
    if isinstance(error, Unimplemented):
        return SMUnimplemented("Unimplemented Algorithm")
    return SMError()