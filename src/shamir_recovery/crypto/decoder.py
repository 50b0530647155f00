import logging
from typing import Iterable

from shamir_recovery.common.constants import DIGITS, MAX_BASE, MIN_BASE
from shamir_recovery.common.errors import MalformedShare
from shamir_recovery.common.types import Point, Share

logger = logging.getLogger(__name__)


def decode(base: int, raw_value: str) -> int:
    """
    Decodes a digit string written in the given base into an integer.

    Digits above 9 are the letters a-z, case-insensitive. Signs, whitespace,
    underscores and radix prefixes are rejected.

    Args:
        base (int): The numeral base, between 2 and 36 inclusive.
        raw_value (str): The digit string to decode.

    Returns:
        int: The decoded value, with arbitrary precision.

    Raises:
        MalformedShare: If the base is out of range or a digit is invalid for it.
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise MalformedShare(base, raw_value, "base must be an integer")
    if not MIN_BASE <= base <= MAX_BASE:
        raise MalformedShare(
            base, raw_value, f"base must be between {MIN_BASE} and {MAX_BASE}"
        )
    if not isinstance(raw_value, str) or not raw_value:
        raise MalformedShare(base, raw_value, "value must be a non-empty string")

    digit_values = {digit: value for value, digit in enumerate(DIGITS[:base])}
    result = 0
    for position, digit in enumerate(raw_value):
        value = digit_values.get(digit.lower())
        if value is None:
            raise MalformedShare(
                base, raw_value, f"invalid digit {digit!r} at position {position}"
            )
        result = result * base + value
    return result


def decode_share(share: Share) -> Point:
    try:
        y = decode(share.base, share.raw_value)
    except MalformedShare as e:
        raise e.with_label(share.x_label) from e
    logger.debug(f"decoded share {share.x_label} from base {share.base}")
    return Point(x=share.x_label, y=y)


def decode_shares(shares: Iterable[Share]) -> list[Point]:
    return [decode_share(share) for share in shares]
