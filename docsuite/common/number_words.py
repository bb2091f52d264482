"""
number_words.py — Indian-numbering amount-to-words (invoice, salary slip, rent agreement).

Scale: Crore (1,00,00,000) > Lakh (1,00,000) > Thousand > Hundred.
A crore count of 100 or more is itself spelled recursively, so
10,00,00,00,000 reads "One Thousand Crore".

    >>> amount_to_words(1234567)
    'Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven Rupees Only'
"""
from __future__ import annotations

import math

from docsuite.common.errors import CalculationInputError
from docsuite.common.schemas import ErrorDetail

ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]
TENS = [
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
]

CRORE    = 10_000_000
LAKH     = 100_000
THOUSAND = 1_000
HUNDRED  = 100

_SCALES: list[tuple[int, str]] = [
    (CRORE,    "Crore"),
    (LAKH,     "Lakh"),
    (THOUSAND, "Thousand"),
    (HUNDRED,  "Hundred"),
]

AMOUNT_SUFFIX = "Rupees Only"


def _below_hundred(n: int) -> str:
    if n < 20:
        return ONES[n]
    return TENS[n // 10] + (f" {ONES[n % 10]}" if n % 10 else "")


def _spell(n: int) -> list[str]:
    """Words for n > 0, largest scale first."""
    words: list[str] = []
    for value, name in _SCALES:
        if n >= value:
            count, n = divmod(n, value)
            # Only the crore count can exceed 99 — spell it recursively
            words.extend(_spell(count) if count >= 100 else [_below_hundred(count)])
            words.append(name)
    if n:
        words.append(_below_hundred(n))
    return words


def number_to_words(n: int) -> str:
    """Cardinal words for a non-negative integer. 0 → 'Zero'."""
    if n < 0:
        raise ValueError(f"number_to_words expects a non-negative integer, got {n}")
    if n == 0:
        return "Zero"
    return " ".join(_spell(n))


def amount_to_words(amount: float) -> str:
    """
    Rupee amount in words, e.g. 100000 → 'One Lakh Rupees Only'.

    Fractional paise are dropped (floor), matching how the amount line is
    printed on the documents. Negative or non-finite amounts raise
    CalculationInputError.
    """
    if isinstance(amount, bool) or not math.isfinite(amount) or amount < 0:
        raise CalculationInputError([
            ErrorDetail(field="amount", issue="Amount must be a finite, non-negative number"),
        ])
    return f"{number_to_words(math.floor(amount))} {AMOUNT_SUFFIX}"


# ---------------------------------------------------------------------------
# Inverse — words back to an integer
# ---------------------------------------------------------------------------

_WORD_VALUES = {word: i for i, word in enumerate(ONES) if word}
_WORD_VALUES.update({word: i * 10 for i, word in enumerate(TENS) if word})
_SCALE_VALUES = {name: value for value, name in _SCALES}


def words_to_number(text: str) -> int:
    """
    Parse words produced by number_to_words / amount_to_words back to an int.

    Works right-to-left over scale words so a recursively spelled crore count
    ("One Thousand Crore") resolves correctly.
    """
    tokens = text.replace(AMOUNT_SUFFIX, "").split()
    if tokens == ["Zero"]:
        return 0

    total = 0
    current = 0          # running value inside the current crore-count segment
    group = 0            # value accumulated since the last scale word
    for token in tokens:
        if token in _WORD_VALUES:
            group += _WORD_VALUES[token]
        elif token == "Crore":
            total += (current + group) * CRORE
            current = group = 0
        elif token in _SCALE_VALUES:
            current += group * _SCALE_VALUES[token]
            group = 0
        else:
            raise ValueError(f"Unrecognised number word: {token!r}")
    return total + current + group


__all__ = [
    "CRORE",
    "LAKH",
    "number_to_words",
    "amount_to_words",
    "words_to_number",
]
