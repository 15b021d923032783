"""Utility helpers for multi-tap decoding."""

from __future__ import annotations

from .config import KeypadConfig
from .errors import InvalidSymbolError
from .types import Letter, LetterGroup, Symbol


def letter_index(count: int, group_length: int) -> int:
    return (count - 1) % group_length


def select_letter(group: LetterGroup, count: int) -> Letter:
    return group[letter_index(count, len(group))]


def is_known_symbol(symbol: Symbol, config: KeypadConfig) -> bool:
    return config.is_valid_digit(symbol) or config.is_control_symbol(symbol)


def require_known_symbol(symbol: Symbol, config: KeypadConfig) -> None:
    if not is_known_symbol(symbol, config):
        raise InvalidSymbolError(symbol, config.digits)


def press_sequence(digit: Symbol, presses: int) -> str:
    if presses < 1:
        raise ValueError("Press count must be at least 1.")
    return digit * presses
