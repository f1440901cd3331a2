"""Substring search: Knuth-Morris-Pratt and Rabin-Karp."""

from __future__ import annotations

from typing import List


def lps_table(pattern: str) -> List[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table."""
    table = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return table


def kmp_search(pattern: str, text: str) -> List[int]:
    """Return the start index of every (possibly overlapping) match."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = lps_table(pattern)
    matches: List[int] = []
    matched = 0
    for i, char in enumerate(text):
        while matched and char != pattern[matched]:
            matched = table[matched - 1]
        if char == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            matches.append(i - matched + 1)
            matched = table[matched - 1]
    return matches


def rabin_karp(
    pattern: str, text: str, base: int = 256, modulus: int = 101
) -> List[int]:
    """Return the start index of every match using a rolling hash."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    size, length = len(pattern), len(text)
    if size > length:
        return []

    high = pow(base, size - 1, modulus)
    pattern_hash = window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (base * pattern_hash + ord(p_char)) % modulus
        window_hash = (base * window_hash + ord(t_char)) % modulus

    matches: List[int] = []
    for i in range(length - size + 1):
        if pattern_hash == window_hash and text.startswith(pattern, i):
            matches.append(i)
        if i < length - size:
            window_hash = (
                base * (window_hash - ord(text[i]) * high) + ord(text[i + size])
            ) % modulus
    return matches