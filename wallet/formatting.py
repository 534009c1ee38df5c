"""
Display helpers for addresses, amounts and dates.

Amounts stay integers until they reach these functions.
"""
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, localcontext, InvalidOperation
from typing import Any

from web3 import Web3

from wallet.values import to_int, parse_timestamp

EXPLORER_URL = "https://basescan.org"
DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def format_units(value: Any, decimals: int = 18, places: int = 4) -> str:
    """
    Format a raw integer amount as a fixed-point decimal string.

    Parameters
    ----------
    value : Any
        Raw amount (int or decimal string)
    decimals : int
        Fractional digits of the asset
    places : int
        Fractional digits to display

    Returns
    -------
    str
        Amount rounded half-up to ``places`` digits
    """
    raw = to_int(value)
    with localcontext() as ctx:
        ctx.prec = len(str(abs(raw))) + places + 2
        amount = Decimal(raw).scaleb(-decimals)
        return str(amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def format_ether(wei: Any, decimals: int = 18) -> str:
    """Format a wei amount in ETH with four decimals."""
    return format_units(wei, decimals)


def parse_ether(amount: Any) -> int | None:
    """
    Convert an ETH amount string to wei, truncating below one wei.

    Amounts beyond the uint256 wei range are converted exactly rather than
    rejected, no on-chain value can reach them.

    Parameters
    ----------
    amount : Any
        Decimal ETH amount, e.g. "0.5" or "1e3"

    Returns
    -------
    int | None
        Amount in wei, None for anything that is not a finite non-negative number
    """
    if not isinstance(amount, str) or not amount.strip():
        return None
    amount = amount.strip()
    try:
        ether = Decimal(amount)
    except InvalidOperation:
        return None
    if not ether.is_finite() or ether < 0:
        return None

    try:
        return Web3.to_wei(amount, "ether")
    except ValueError:
        with localcontext() as ctx:
            ctx.prec = len(ether.as_tuple().digits) + 2
            return int(ether.scaleb(18))


def truncate_address(address: str, start: int = 6, end: int = 4) -> str:
    if not address or len(address) < start + end:
        return address
    return f"{address[:start]}...{address[-end:]}"


def format_date_only(timestamp: Any) -> str:
    """
    Format a block timestamp as a calendar date in UTC.

    Parameters
    ----------
    timestamp : Any
        Seconds since epoch (int or string) or ISO string

    Returns
    -------
    str
        Date like "January 15, 2024", empty for unparseable input
    """
    seconds = parse_timestamp(timestamp)
    if seconds is None:
        return ""
    date = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return f"{date.strftime('%B')} {date.day}, {date.year}"


def day_name(day: int) -> str:
    if 0 <= day < len(DAY_NAMES):
        return DAY_NAMES[day]
    return "Unknown"


def tx_url(tx_hash: str) -> str:
    return f"{EXPLORER_URL}/tx/{tx_hash}"


def address_url(address: str) -> str:
    return f"{EXPLORER_URL}/address/{address}"
