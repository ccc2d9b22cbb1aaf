"""Algorithms over strings and lists of strings."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from operator import and_
from typing import Iterator

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    try:
        values = [_ROMAN[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character: {exc.args[0]!r}") from None
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if following > value else value
    return total


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def partition_palindromes(s: str) -> list[list[str]]:
    """Return every way to split ``s`` into palindromic pieces."""

    def walk(start: int) -> Iterator[list[str]]:
        if start == len(s):
            yield []
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if _is_palindrome(piece):
                for rest in walk(end):
                    yield [piece, *rest]

    return list(walk(0))


def num_steps(s: str) -> int:
    """Steps to reduce a binary number to one (halve if even, else add one)."""
    carry = 0
    steps = 0
    for ch in reversed(s[1:]):
        if int(ch) + carry == 1:
            carry = 1
            steps += 2
        else:
            steps += 1
    return steps + carry


def first_palindrome(words: list[str]) -> str:
    """Return the first palindromic word, or an empty string."""
    return next((word for word in words if _is_palindrome(word)), "")


def decode_message(key: str, message: str) -> str:
    """Decode ``message`` using the substitution table given by ``key``."""
    table: dict[str, str] = {}
    for ch in key:
        if ch != " " and ch not in table:
            table[ch] = chr(ord("a") + len(table))
    return "".join(" " if ch == " " else table.get(ch, "") for ch in message)


def is_anagram(s: str, t: str) -> bool:
    """Return True when ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and sorted(s) == sorted(t)


def append_characters(s: str, t: str) -> int:
    """Number of characters to append to ``s`` so that ``t`` becomes a subsequence."""
    matched = 0
    for ch in s:
        if matched == len(t):
            break
        if ch == t[matched]:
            matched += 1
    return len(t) - matched


def is_subsequence(s: str, t: str) -> bool:
    """Return True when ``s`` is a subsequence of ``t``."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def longest_palindrome(s: str) -> int:
    """Length of the longest palindrome that can be built from the letters of ``s``."""
    counts = Counter(s).values()
    length = sum(count - count % 2 for count in counts)
    return length + (1 if any(count % 2 for count in counts) else 0)


def group_anagrams(strs: list[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Count the stones that are jewels (each jewel letter counted as listed)."""
    counts = Counter(stones)
    return sum(counts[ch] for ch in jewels)


def common_chars(words: list[str]) -> list[str]:
    """Characters present in every word, repeated as often as in all of them."""
    if not words:
        raise ValueError("words must not be empty")
    common = reduce(and_, (Counter(word) for word in words[1:]), Counter(words[0]))
    return list(common.elements())