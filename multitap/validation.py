"""Non-fatal configuration diagnostics."""

from __future__ import annotations

from dataclasses import dataclass

from .config import KeypadConfig


@dataclass(frozen=True)
class ConfigWarning:
    code: str
    message: str


def validate_config(config: KeypadConfig) -> list[ConfigWarning]:
    warnings: list[ConfigWarning] = []
    controls = config.control_symbols

    if len(set(controls)) != len(controls):
        warnings.append(
            ConfigWarning(
                "duplicate-control",
                f"Control symbols are not distinct: separator={config.separator!r}, "
                f"backspace={config.backspace!r}, terminator={config.terminator!r}.",
            )
        )

    for name, symbol in zip(("separator", "backspace", "terminator"), controls):
        if config.is_valid_digit(symbol):
            warnings.append(
                ConfigWarning("control-is-digit", f"The {name} symbol {symbol!r} is also a mapped key.")
            )
        if len(symbol) != 1:
            warnings.append(
                ConfigWarning("multi-char-symbol", f"The {name} symbol {symbol!r} is not a single character.")
            )

    for digit, letters in config.key_mapping.items():
        if not isinstance(digit, str) or len(digit) != 1:
            warnings.append(ConfigWarning("multi-char-symbol", f"Key {digit!r} is not a single character."))
        if not all(letter.isascii() for letter in letters):
            warnings.append(ConfigWarning("non-ascii-letter", f"Letter group for key {digit!r} is not ASCII."))

    return warnings
