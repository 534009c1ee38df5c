import re
from typing import Any

from core.exceptions import InvalidAddressException

ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")


def is_valid_address(value: Any) -> bool:
    """
    Check that ``value`` is a ``0x``-prefixed 40 hex digit address.

    Never raises, any non-string input is simply not an address.
    """
    return isinstance(value, str) and ADDRESS_PATTERN.fullmatch(value) is not None


def normalize_address(value: str) -> str:
    """Lower-case an address. Does not validate."""
    return value.lower()


def require_address(value: Any) -> str:
    """
    Validate and normalize an address in one step.

    Parameters
    ----------
    value : Any
        Candidate address

    Returns
    -------
    str
        Lower-cased address

    Raises
    ------
    InvalidAddressException
        If ``value`` is not a valid address
    """
    if not is_valid_address(value):
        raise InvalidAddressException()
    return normalize_address(value)
