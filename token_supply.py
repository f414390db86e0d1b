# token_supply.py
"""Human supply string -> raw token units, using exact integer math only."""

import re

from errors import ErrorKind, ValidationError

DEFAULT_DECIMALS = 9

# The SPL token program stores amounts in a u64
U64_MAX = 2 ** 64 - 1

_DIGITS = re.compile(r"[0-9]+")


def to_raw_units(supply, decimals: int = DEFAULT_DECIMALS) -> int:
    """Scale a digits-only supply string by 10**decimals.

    Never goes through float, so a supply like "1000000000000000000" with
    9 decimals comes back as exactly 10**27.
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise ValueError(f"decimals must be a non-negative integer, got {decimals!r}")

    if not isinstance(supply, str) or not _DIGITS.fullmatch(supply):
        raise ValidationError("token.supply must be digits only.", ErrorKind.MALFORMED_SUPPLY)

    return int(supply) * 10 ** decimals


def check_mintable(raw_amount: int) -> int:
    if raw_amount > U64_MAX:
        raise ValidationError(
            f"Supply of {raw_amount} raw units exceeds the token program limit of {U64_MAX}.",
            ErrorKind.SUPPLY_OUT_OF_RANGE,
        )
    return raw_amount
