"""String algorithms: parsing, scanning, counting and chaining."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_MORSE = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..", ".---",
    "-.-", ".-..", "--", "-.", "---", ".--.", "--.-", ".-.", "...", "-",
    "..-", "...-", ".--", "-..-", "-.--", "--..",
)


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown characters count as zero."""
    values = [_ROMAN.get(ch, 0) for ch in s]
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += value if value >= following else -value
    return total


def remove_palindrome_sub(s: str) -> int:
    """Return the fewest palindromic subsequence removals that empty ``s``."""
    if not s:
        return 0
    return 1 if s == s[::-1] else 2


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(text1) + 1)
    for ch2 in text2:
        current = [0]
        for j, ch1 in enumerate(text1, start=1):
            if ch1 == ch2:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def repeated_character(s: str) -> Optional[str]:
    """Return the first character whose second occurrence comes earliest, or None."""
    seen: set[str] = set()
    for ch in s:
        if ch in seen:
            return ch
        seen.add(ch)
    return None


def smallest_number(pattern: str) -> str:
    """Return the smallest digit string following an 'I'/'D' pattern."""
    result: list[str] = []
    pending: list[str] = []
    for i in range(len(pattern) + 1):
        pending.append(chr(ord("1") + i))
        if i == len(pattern) or pattern[i] == "I":
            result.extend(reversed(pending))
            pending.clear()
    return "".join(result)


def seconds_to_remove_occurrences(s: str) -> int:
    """Count seconds of simultaneous '01' -> '10' swaps until none remain."""
    seconds = 0
    while "01" in s:
        s = s.replace("01", "10")
        seconds += 1
    return seconds


def robot_with_string(s: str) -> str:
    """Return the lexicographically smallest string a stack robot can write."""
    remaining = Counter(s)
    stack: list[str] = []
    written: list[str] = []
    for ch in s:
        stack.append(ch)
        remaining[ch] -= 1
        if remaining[ch] == 0:
            del remaining[ch]
        smallest = min(remaining) if remaining else None
        while stack and (smallest is None or stack[-1] <= smallest):
            written.append(stack.pop())
    return "".join(written)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Return True if ``ransom_note`` can be built from the letters of ``magazine``."""
    return not (Counter(ransom_note) - Counter(magazine))


def first_uniq_char(s: str) -> int:
    """Return the index of the first non-repeating character, or -1."""
    counts = Counter(s)
    return next((index for index, ch in enumerate(s) if counts[ch] == 1), -1)


def valid_utf8(data: Iterable[int]) -> bool:
    """Return True if the byte values form valid UTF-8 sequences."""
    remaining = 0
    for byte in data:
        if remaining == 0:
            if byte >> 7 == 0:
                continue
            if byte >> 5 == 0b110:
                remaining = 1
            elif byte >> 4 == 0b1110:
                remaining = 2
            elif byte >> 3 == 0b11110:
                remaining = 3
            else:
                return False
        elif byte >> 6 == 0b10:
            remaining -= 1
        else:
            return False
    return remaining == 0


def reverse_str(s: str, k: int) -> str:
    """Reverse the first ``k`` characters of every block of ``2 * k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    return "".join(
        s[start:start + k][::-1] + s[start + k:start + 2 * k]
        for start in range(0, len(s), 2 * k)
    )


def reverse_words(s: str) -> str:
    """Reverse each space-separated word while keeping the spacing."""
    return " ".join(word[::-1] for word in s.split(" "))


def _morse(word: str) -> str:
    if not all("a" <= ch <= "z" for ch in word):
        raise ValueError(f"word must contain only lowercase letters: {word!r}")
    return "".join(_MORSE[ord(ch) - ord("a")] for ch in word)


def unique_morse_representations(words: Iterable[str]) -> int:
    """Return the number of distinct Morse transformations among ``words``."""
    return len({_morse(word) for word in words})


def is_chain(shorter: str, longer: str) -> bool:
    """Return True if ``longer`` is ``shorter`` with exactly one character inserted."""
    if len(longer) != len(shorter) + 1:
        return False
    matched = 0
    skipped = False
    for ch in longer:
        if matched < len(shorter) and ch == shorter[matched]:
            matched += 1
        elif skipped:
            return False
        else:
            skipped = True
    return True


def longest_str_chain(words: Iterable[str]) -> int:
    """Return the length of the longest word chain; at least 1."""
    ordered = sorted(words, key=lambda word: (len(word), word))
    lengths: list[int] = []
    for word in ordered:
        lengths.append(
            max(
                (length + 1 for previous, length in zip(ordered, lengths)
                 if is_chain(previous, word)),
                default=1,
            )
        )
    return max(lengths, default=1)