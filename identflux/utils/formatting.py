"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/utils/formatting.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Formatting helpers for the paper versions of identifiers.
------------------------------------------------------------------------------
"""

from typing import List, Sequence


def group_by(value: str, size: int, separator: str = " ") -> str:
    """
    Splits a string into fixed size groups.
    'NO9386011117947' -> 'NO93 8601 1117 947'
    """
    groups = [value[i:i + size] for i in range(0, len(value), size)]
    return separator.join(groups)


def split_at(value: str, lengths: Sequence[int]) -> List[str]:
    """
    Cuts a string into consecutive parts of the given lengths.
    Characters beyond the sum of the lengths are dropped.
    """
    parts = []
    position = 0
    for length in lengths:
        parts.append(value[position:position + length])
        position += length
    return parts
