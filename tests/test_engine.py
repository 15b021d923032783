import warnings

import pytest

from multitap import (
    STANDARD_CONFIG,
    ConfigError,
    KeypadConfig,
    KeypadDecoder,
    MissingInputError,
    MultiTapDecoder,
    create_decoder,
    decode,
    default_decoder,
)


def test_default_decoder_uses_standard_config():
    assert default_decoder.config is STANDARD_CONFIG
    assert default_decoder.decode("44 444#") == "HI"


def test_create_decoder_binds_config(two_key_config):
    decoder = create_decoder(two_key_config)
    assert isinstance(decoder, MultiTapDecoder)
    assert isinstance(decoder, KeypadDecoder)
    assert decoder.config is two_key_config
    assert decoder.decode("2 22 3#") == "ABC"


def test_create_decoder_rejects_none():
    with pytest.raises(ConfigError):
        create_decoder(None)


def test_create_decoder_standard_config_is_silent():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        create_decoder(STANDARD_CONFIG)


def test_create_decoder_warns_on_duplicate_controls():
    config = KeypadConfig({"2": "AB"}, separator="*")
    with pytest.warns(RuntimeWarning, match="not distinct"):
        create_decoder(config)


def test_create_decoder_warns_on_control_digit():
    config = KeypadConfig({"2": "AB", "#": "CD"})
    with pytest.warns(RuntimeWarning, match="also a mapped key"):
        create_decoder(config)


def test_base_decoder_is_abstract():
    with pytest.raises(NotImplementedError):
        KeypadDecoder(name="base").decode("2#")


def test_default_and_created_decoders_agree():
    decoder = create_decoder(STANDARD_CONFIG)
    for sequence in ["2#", "8 88777444666*664#", "222 2 3**#", "***#", ""]:
        assert decoder.decode(sequence) == default_decoder.decode(sequence) == decode(sequence)


def test_decoder_reuse():
    decoder = create_decoder(KeypadConfig({"2": "XYZ"}))
    assert decoder.decode("2#") == "X"
    assert decoder.decode("22#") == "Y"
    assert decoder.decode("2#") == "X"


def test_mixing_default_and_custom_decoders():
    custom = create_decoder(KeypadConfig({"2": "XYZ"}))
    assert default_decoder.decode("2#") == "A"
    assert custom.decode("2#") == "X"
    assert default_decoder.decode("2#") == "A"


def test_decoder_missing_input():
    with pytest.raises(MissingInputError):
        default_decoder.decode(None)


def test_decoder_encode_round_trip(numeric_config):
    decoder = create_decoder(numeric_config)
    assert decoder.encode("2234") == "2-234!"
    assert decoder.decode(decoder.encode("2234")) == "2234"


def test_decoders_are_hashable():
    assert hash(default_decoder) == hash(MultiTapDecoder(name="multi-tap"))
