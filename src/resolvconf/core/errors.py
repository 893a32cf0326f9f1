"""Exceptions raised while parsing and editing resolv.conf configurations."""

from typing import Iterator, TypeVar

E = TypeVar("E", bound="ResolvConfError")


class ResolvConfError(Exception):
    """Base class for all resolv.conf errors."""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message


# ============================================================================
# Parse Errors
# ============================================================================


class ParseError(ResolvConfError):
    """A line or token could not be parsed."""


class MalformedAddressError(ParseError):
    """Token is not a valid IPv4/IPv6 literal."""


class MalformedNetmaskError(ParseError):
    """Sortlist netmask is not a valid IP literal."""


class UnknownKeywordError(ParseError):
    """First token of a line is not a known keyword."""


class UnknownOptionError(ParseError):
    """Option type is not one of the known resolver options."""


class MalformedOptionValueError(ParseError):
    """Valued option suffix is not a non-negative integer."""


class MissingArgumentError(ParseError):
    """Keyword given without its required argument."""


# ============================================================================
# Admission Errors
# ============================================================================


class CapacityExceededError(ResolvConfError):
    """A per-kind count or length limit would be exceeded."""


class DuplicateItemError(ResolvConfError):
    """An equal item is already stored."""


class AlreadyPresentError(ResolvConfError):
    """A flag option is already set."""


class InvalidValueError(ResolvConfError):
    """Negative value for a valued option."""


class NotFoundError(ResolvConfError):
    """Item to remove or update does not exist."""


class NilItemError(ResolvConfError):
    """None passed where an item was expected."""


class MultiError(ResolvConfError):
    """
    Aggregate of errors collected over a batch.

    Raised by add/remove after every item has been processed, and returned
    by the document reader alongside the configuration.
    """

    def __init__(self, errors: list[ResolvConfError] | None = None):
        self.errors: list[ResolvConfError] = list(errors or [])
        super().__init__(self._format())

    def _format(self) -> str:
        if len(self.errors) == 1:
            return f"1 error occurred:\n\t* {self.errors[0]}"
        points = "\n".join(f"\t* {e}" for e in self.errors)
        return f"{len(self.errors)} errors occurred:\n{points}"

    def append(self, error: ResolvConfError) -> None:
        """Add an error, flattening nested aggregates."""
        if isinstance(error, MultiError):
            self.errors.extend(error.errors)
        else:
            self.errors.append(error)
        self.message = self._format()
        self.args = (self.message,)

    def of_type(self, error_type: type[E]) -> list[E]:
        """Return the collected errors of the given type."""
        return [e for e in self.errors if isinstance(e, error_type)]

    def error_or_none(self) -> "MultiError | None":
        """Return this aggregate if it holds any errors, else None."""
        return self if self.errors else None

    def __str__(self) -> str:
        return self.message

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[ResolvConfError]:
        return iter(self.errors)
