"""Shared types for the multi-tap codec."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

Symbol = str
Letter = str
LetterGroup = tuple[Letter, ...]
KeyMapping = Mapping[Symbol, LetterGroup]
SymbolSeq = Sequence[Symbol]


@dataclass
class Run:
    symbol: Symbol
    count: int = 1
