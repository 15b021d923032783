"""Keypad configuration for multi-tap decoding."""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Sequence

from .errors import EmptyMappingError, InvalidGroupError, UnknownDigitError
from .types import KeyMapping, Letter, LetterGroup, Symbol


def _normalize_group(digit: Symbol, group: str | Sequence[Letter] | None) -> LetterGroup:
    if group is None:
        raise InvalidGroupError(digit)
    try:
        letters = tuple(group)
    except TypeError as exc:
        raise InvalidGroupError(digit) from exc
    if not letters:
        raise InvalidGroupError(digit)
    for letter in letters:
        if not isinstance(letter, str) or len(letter) != 1:
            raise InvalidGroupError(digit, f"Letter group for key {digit!r} must hold single characters.")
    return letters


@dataclass(frozen=True, eq=False)
class KeypadConfig:
    """Digit to letter-group mapping plus the three control symbols.

    Groups may be given as strings (``"ABC"``) or sequences of characters;
    they are stored as tuples behind a read-only mapping.
    """

    key_mapping: KeyMapping
    separator: Symbol = " "
    backspace: Symbol = "*"
    terminator: Symbol = "#"

    def __post_init__(self) -> None:
        if not self.key_mapping:
            raise EmptyMappingError()
        groups = {digit: _normalize_group(digit, group) for digit, group in self.key_mapping.items()}
        object.__setattr__(self, "key_mapping", MappingProxyType(groups))

    @property
    def control_symbols(self) -> tuple[Symbol, Symbol, Symbol]:
        return (self.separator, self.backspace, self.terminator)

    @property
    def digits(self) -> tuple[Symbol, ...]:
        return tuple(self.key_mapping)

    def is_valid_digit(self, symbol: Symbol) -> bool:
        return symbol in self.key_mapping

    def is_control_symbol(self, symbol: Symbol) -> bool:
        return symbol == self.separator or symbol == self.backspace or symbol == self.terminator

    def letters_for(self, digit: Symbol) -> LetterGroup:
        try:
            return self.key_mapping[digit]
        except KeyError as exc:
            raise UnknownDigitError(digit) from exc

    def with_controls(
        self,
        separator: Symbol | None = None,
        backspace: Symbol | None = None,
        terminator: Symbol | None = None,
    ) -> KeypadConfig:
        return replace(
            self,
            separator=self.separator if separator is None else separator,
            backspace=self.backspace if backspace is None else backspace,
            terminator=self.terminator if terminator is None else terminator,
        )

    def reverse_mapping(self) -> dict[Letter, tuple[Symbol, int]]:
        """Map each letter to the ``(digit, presses)`` that types it.

        The first digit in mapping order, then the fewest presses, wins when a
        letter is reachable more than one way.
        """
        reverse: dict[Letter, tuple[Symbol, int]] = {}
        for digit, letters in self.key_mapping.items():
            for presses, letter in enumerate(letters, 1):
                reverse.setdefault(letter, (digit, presses))
        return reverse

    def _key(self) -> tuple:
        # Key order matters: it decides which key types a shared letter.
        return (tuple(self.key_mapping.items()), self.control_symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeypadConfig):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


STANDARD_CONFIG = KeypadConfig(
    {
        "2": "ABC",
        "3": "DEF",
        "4": "GHI",
        "5": "JKL",
        "6": "MNO",
        "7": "PQRS",
        "8": "TUV",
        "9": "WXYZ",
    }
)
