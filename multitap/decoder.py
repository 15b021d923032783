"""Multi-tap decoding state machine."""

from __future__ import annotations

from .config import STANDARD_CONFIG, KeypadConfig
from .errors import MissingInputError
from .types import Letter, Run, Symbol, SymbolSeq
from .utils import require_known_symbol, select_letter


def _emits_letter(run: Run, next_symbol: Symbol, config: KeypadConfig) -> bool:
    return config.is_valid_digit(run.symbol) and next_symbol != config.backspace


def _deletes_letter(run: Run, next_symbol: Symbol, config: KeypadConfig) -> bool:
    return run.symbol in (config.separator, config.backspace) and next_symbol == config.backspace


def _extends_run(run: Run, next_symbol: Symbol, config: KeypadConfig) -> bool:
    # Backspace presses never coalesce; each one is its own run.
    return next_symbol == run.symbol and run.symbol != config.backspace


def close_run(output: list[Letter], run: Run, next_symbol: Symbol, config: KeypadConfig) -> None:
    """Apply the effect of ``run`` ending because ``next_symbol`` arrived.

    A digit run emits one letter unless the run is cut short by a backspace,
    which cancels it. A separator or backspace run followed by a backspace
    removes the last emitted letter; on empty output that is a no-op. Every
    other transition does nothing.
    """
    if _emits_letter(run, next_symbol, config):
        output.append(select_letter(config.letters_for(run.symbol), run.count))
    elif _deletes_letter(run, next_symbol, config):
        if output:
            output.pop()


def _start_run(symbol: Symbol, config: KeypadConfig) -> Run:
    require_known_symbol(symbol, config)
    return Run(symbol=symbol)


def decode_symbols(symbols: SymbolSeq, config: KeypadConfig) -> list[Letter]:
    if not symbols:
        return []
    output: list[Letter] = []
    run = _start_run(symbols[0], config)
    for next_symbol in symbols[1:]:
        if _extends_run(run, next_symbol, config):
            run.count += 1
            continue
        close_run(output, run, next_symbol, config)
        run = _start_run(next_symbol, config)
    # The trailing run has nothing to close it and is dropped.
    return output


def decode(sequence: SymbolSeq | None, config: KeypadConfig | None = None) -> str:
    cfg = config or STANDARD_CONFIG
    if sequence is None:
        raise MissingInputError()
    return "".join(decode_symbols(sequence, cfg))
