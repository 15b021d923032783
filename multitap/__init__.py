"""Multitap: old phone keypad multi-tap decoding."""

from .config import STANDARD_CONFIG, KeypadConfig
from .decoder import decode
from .encoder import encode
from .engine import KeypadDecoder, MultiTapDecoder, create_decoder, default_decoder
from .errors import (
    ConfigError,
    DecodeError,
    EmptyMappingError,
    EncodeError,
    InvalidGroupError,
    InvalidSymbolError,
    MissingInputError,
    MultiTapError,
    UnknownDigitError,
)
from .validation import ConfigWarning, validate_config

__all__ = [
    "decode",
    "encode",
    "KeypadConfig",
    "STANDARD_CONFIG",
    "KeypadDecoder",
    "MultiTapDecoder",
    "create_decoder",
    "default_decoder",
    "ConfigWarning",
    "validate_config",
    "MultiTapError",
    "ConfigError",
    "EmptyMappingError",
    "InvalidGroupError",
    "UnknownDigitError",
    "DecodeError",
    "MissingInputError",
    "InvalidSymbolError",
    "EncodeError",
]
