"""Exceptions raised by the multi-tap codec."""

from __future__ import annotations


class MultiTapError(ValueError):
    """Base class for every error raised by this package."""


class ConfigError(MultiTapError):
    pass


class EmptyMappingError(ConfigError):
    def __init__(self, message: str = "Key mapping cannot be empty.") -> None:
        super().__init__(message)


class InvalidGroupError(ConfigError):
    def __init__(self, digit: object, message: str | None = None) -> None:
        super().__init__(message or f"Letter group for key {digit!r} cannot be null or empty.")
        self.digit = digit


class UnknownDigitError(ConfigError):
    def __init__(self, digit: object) -> None:
        super().__init__(f"Key {digit!r} is not part of the key mapping.")
        self.digit = digit


class DecodeError(MultiTapError):
    pass


class MissingInputError(DecodeError):
    def __init__(self, message: str = "Input cannot be None.") -> None:
        super().__init__(message)


class InvalidSymbolError(DecodeError):
    """Raised for a symbol that is neither a mapped digit nor a control symbol.

    ``symbol`` holds the exact offending character.
    """

    def __init__(self, symbol: str, valid_digits: tuple[str, ...] = ()) -> None:
        message = f"Invalid keypad digit: {symbol!r}."
        if valid_digits:
            message += f" Valid digits are: {', '.join(valid_digits)}"
        super().__init__(message)
        self.symbol = symbol


class EncodeError(MultiTapError):
    def __init__(self, letter: str) -> None:
        super().__init__(f"Letter {letter!r} cannot be typed with this keypad.")
        self.letter = letter
