"""Ordinal and title-case formatting. Neither uses the rule registry."""
from __future__ import annotations

import math
import re
from typing import Any

_NON_SPACE_RE = re.compile(r"\S+")


def _number_text(number: Any):
    """Text of a numeric value, or None when number is not numeric."""
    if isinstance(number, bool) or number is None:
        return None
    if isinstance(number, int):
        return str(number)
    if isinstance(number, float):
        if not math.isfinite(number):
            return None
        if number.is_integer():
            return str(int(number))
        return str(number)
    if isinstance(number, str):
        text = number.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
        return text if math.isfinite(value) else None
    return None


def ordinalize(number: Any) -> Any:
    """
    Append the English ordinal suffix to a number.

    Non-numeric input is returned unchanged.

    Example:
        >>> ordinalize(22)
        '22nd'
        >>> ordinalize(112)
        '112th'
    """
    text = _number_text(number)
    if text is None:
        return number

    if text[-2:] in ('11', '12', '13'):
        return text + 'th'
    last_digit = text[-1]
    if last_digit == '1':
        return text + 'st'
    if last_digit == '2':
        return text + 'nd'
    if last_digit == '3':
        return text + 'rd'
    return text + 'th'


def titleize(words: Any) -> Any:
    """
    Capitalize the first letter of each word, preserving whitespace.

    Non-string input is returned unchanged.

    Example:
        >>> titleize('the  quick fox')
        'The  Quick Fox'
    """
    if not isinstance(words, str):
        return words
    return _NON_SPACE_RE.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:], words)
