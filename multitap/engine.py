"""Decoder objects bound to a keypad configuration."""

from __future__ import annotations

from dataclasses import dataclass
import warnings

from .config import STANDARD_CONFIG, KeypadConfig
from .decoder import decode
from .encoder import encode
from .errors import ConfigError
from .types import SymbolSeq
from .validation import validate_config


@dataclass(frozen=True)
class KeypadDecoder:
    name: str

    def decode(self, sequence: SymbolSeq | None) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class MultiTapDecoder(KeypadDecoder):
    config: KeypadConfig = STANDARD_CONFIG

    def decode(self, sequence: SymbolSeq | None) -> str:
        return decode(sequence, self.config)

    def encode(self, text: str | None) -> str:
        return encode(text, self.config)


def create_decoder(config: KeypadConfig | None) -> MultiTapDecoder:
    if config is None:
        raise ConfigError("Configuration cannot be None.")
    for warning in validate_config(config):
        warnings.warn(warning.message, RuntimeWarning)
    return MultiTapDecoder(name="multi-tap", config=config)


default_decoder = MultiTapDecoder(name="multi-tap")
