"""Text to keypad-sequence encoding, the inverse of :mod:`multitap.decoder`."""

from __future__ import annotations

from typing import Iterable

from .config import STANDARD_CONFIG, KeypadConfig
from .errors import EncodeError, MissingInputError
from .types import Letter, Symbol
from .utils import press_sequence


def build_press_groups(text: Iterable[Letter], config: KeypadConfig) -> list[str]:
    reverse = config.reverse_mapping()
    groups: list[str] = []
    previous: Symbol | None = None
    for letter in text:
        entry = reverse.get(letter)
        if entry is None:
            raise EncodeError(letter)
        digit, presses = entry
        if digit == previous:
            groups.append(config.separator)
        groups.append(press_sequence(digit, presses))
        previous = digit
    return groups


def encode(text: str | None, config: KeypadConfig | None = None) -> str:
    """Encode ``text`` as the key presses that type it, ending with the terminator.

    Consecutive letters on the same key are split by the separator, e.g.
    ``"HELLO"`` becomes ``"4433555 555666#"`` on the standard keypad.
    """
    cfg = config or STANDARD_CONFIG
    if text is None:
        raise MissingInputError("Text cannot be None.")
    return "".join(build_press_groups(text, cfg)) + cfg.terminator
