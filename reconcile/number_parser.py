#!/usr/bin/env python3
"""
Number Parser - Exact fixed-point parsing of POS quantities
Quantities use '.' or ',' as decimal separator and may contain stray spaces.
Liters are converted to integer milliliters so sums never drift.

Examples:
- "1,5"     -> 1500 ml
- "0.5"     -> 500 ml
- "1,0005"  -> 1001 ml (4th decimal rounds half up)
- "Láhev 0,5 l" -> 500 ml bottle size
"""

import logging
from typing import Optional, Tuple

from .errors import NumberFormatError

logger = logging.getLogger(__name__)

DIGITS = '0123456789'
SEPARATORS = '.,'
BLANKS = ' \t'


def parse_decimal_to_milli(raw: str) -> int:
    """
    Parse decimal text into thousandths (liters -> milliliters)

    Only three fractional digits are kept. The fourth one rounds the
    result half up; anything after it is ignored.

    Args:
        raw: Text such as "1,5", "0.25" or " 2 "

    Returns:
        Value multiplied by 1000 as an int

    Raises:
        NumberFormatError: on a second separator, an unexpected character
                           or when there is no digit at all
    """
    int_part = 0
    frac_part = 0
    frac_digits = 0
    round_digit = -1
    saw_digit = False
    seen_sep = False

    for ch in raw:
        if ch in DIGITS:
            saw_digit = True
            digit = ord(ch) - ord('0')
            if not seen_sep:
                int_part = int_part * 10 + digit
            elif frac_digits < 3:
                frac_part = frac_part * 10 + digit
                frac_digits += 1
            elif round_digit == -1:
                round_digit = digit
        elif ch in SEPARATORS:
            if seen_sep:
                raise NumberFormatError(f"invalid number: {raw}")
            seen_sep = True
        elif ch in BLANKS:
            continue
        else:
            raise NumberFormatError(f"invalid number: {raw}")

    if not saw_digit:
        raise NumberFormatError("empty value")

    while frac_digits < 3:
        frac_part *= 10
        frac_digits += 1

    milli = int_part * 1000 + frac_part
    if round_digit >= 5:
        milli += 1
    return milli


def parse_whole_number(raw: str) -> Tuple[int, bool]:
    """
    Parse text that should hold a whole number

    Args:
        raw: Text such as "2", "2,00" or "1,5"

    Returns:
        Tuple of (integer part, is_whole). "1,5" gives (1, False),
        "2,00" gives (2, True).

    Raises:
        NumberFormatError: same format rules as parse_decimal_to_milli
    """
    int_part = 0
    saw_digit = False
    seen_sep = False
    non_zero_fraction = False

    for ch in raw:
        if ch in DIGITS:
            saw_digit = True
            if not seen_sep:
                int_part = int_part * 10 + (ord(ch) - ord('0'))
            elif ch != '0':
                non_zero_fraction = True
        elif ch in SEPARATORS:
            if seen_sep:
                raise NumberFormatError(f"invalid number: {raw}")
            seen_sep = True
        elif ch in BLANKS:
            continue
        else:
            raise NumberFormatError(f"invalid number: {raw}")

    if not saw_digit:
        raise NumberFormatError("empty value")
    return int_part, not non_zero_fraction


def parse_whole_count(raw: str) -> int:
    """Parse a piece count; fractional counts are rejected"""
    value, is_whole = parse_whole_number(raw)
    if not is_whole:
        raise NumberFormatError(f"expected whole number, got {raw}")
    return value


def parse_liters_from_product(product: str) -> Tuple[int, bool]:
    """
    Find a liter size inside product text

    Scans for digit runs (digits plus '.'/','). A run counts only when it is
    followed, after optional spaces/tabs, by 'l' or 'L'. Runs without the
    liter marker are skipped and the scan goes on.

    Args:
        product: Product label such as "Láhev 1,5 l"

    Returns:
        Tuple of (milliliters, found). (0, False) when no liters pattern exists.

    Raises:
        NumberFormatError: when the matched run itself is malformed ("1,5,0 l")
    """
    i = 0
    n = len(product)
    while i < n:
        if product[i] not in DIGITS:
            i += 1
            continue

        start = i
        i += 1
        while i < n and (product[i] in DIGITS or product[i] in SEPARATORS):
            i += 1
        number_text = product[start:i]

        j = i
        while j < n and product[j] in BLANKS:
            j += 1
        if j < n and product[j] in 'lL':
            return parse_decimal_to_milli(number_text), True

    return 0, False


def parse_bottle_liters_ml(product: str) -> Optional[int]:
    """
    Bottle size in milliliters taken from the product label

    Returns:
        Size in ml, or None when the label carries no liters pattern

    Raises:
        NumberFormatError: when the size is malformed or not positive
    """
    ml, found = parse_liters_from_product(product)
    if not found:
        logger.debug(f"No liters pattern in product '{product}'")
        return None
    if ml <= 0:
        raise NumberFormatError("invalid liters value")
    return ml
