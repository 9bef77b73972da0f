"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/decisions.py
Parses raw operator input into tagged decisions so that the resolver never
compares strings itself.
"""

from dataclasses import dataclass
from typing import Union

YES_TOKENS = ("y", "yes")
KEEP_ALL_TOKENS = ("a", "all")


# Yes/no confirmation

@dataclass(frozen=True)
class Accept:
    pass


@dataclass(frozen=True)
class Decline:
    pass


Confirmation = Union[Accept, Decline]


# Interactive per-group choice

@dataclass(frozen=True)
class KeepIndex:
    """1-based index into a group's candidate list."""
    index: int


@dataclass(frozen=True)
class KeepAll:
    pass


@dataclass(frozen=True)
class Invalid:
    raw: str


Selection = Union[KeepIndex, KeepAll, Invalid]


def parse_confirmation(line: str) -> Confirmation:
    """Only 'y' or 'yes' (any case) accepts; everything else declines."""
    if line.strip().lower() in YES_TOKENS:
        return Accept()
    return Decline()


def parse_selection(line: str, candidate_count: int) -> Selection:
    """
    Empty input keeps the first (default) candidate, 'a'/'all' keeps every
    copy, a number in [1, candidate_count] keeps that candidate.
    """
    answer = line.strip()
    if not answer:
        return KeepIndex(1)
    if answer.lower() in KEEP_ALL_TOKENS:
        return KeepAll()
    if answer.isdecimal():
        index = int(answer)
        if 1 <= index <= candidate_count:
            return KeepIndex(index)
    return Invalid(answer)
