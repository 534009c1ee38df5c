from typing import Any, Literal, Mapping
from pydantic import BaseModel, ConfigDict, Field, computed_field

from wallet.formatting import address_url, day_name, format_ether, truncate_address, tx_url
from wallet.values import parse_timestamp, to_int


def _lower(value: Any) -> str:
    return value.lower() if isinstance(value, str) else ""


class Transaction(BaseModel):
    """
    Native currency transaction touching the inspected address.

    Attributes
    ----------
    transaction_hash : str
        Transaction hash
    block_number : int
        Block the transaction was included in
    block_timestamp : str
        Block time, seconds since epoch
    from_address : str
        Sender
    to_address : str
        Recipient, empty for contract creation
    value : str
        Amount in wei
    gas_used : str
        Gas used
    gas_price : str
        Gas price in wei
    type : Literal["send", "receive"]
        Direction relative to the inspected address
    """
    transaction_hash: str
    block_number: int
    block_timestamp: str
    from_address: str
    to_address: str
    value: str
    gas_used: str = "0"
    gas_price: str = "0"
    type: Literal["send", "receive"]

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def timestamp(self) -> int:
        return int(self.block_timestamp)

    @property
    def value_wei(self) -> int:
        return int(self.value)

    @computed_field
    @property
    def value_formatted(self) -> str:
        return format_ether(self.value)

    @computed_field
    @property
    def explorer_url(self) -> str:
        return tx_url(self.transaction_hash)

    @classmethod
    def from_row(cls, row: Mapping[str, Any], address: str) -> "Transaction | None":
        """
        Build a transaction from a warehouse row.

        Rows without a hash or a parseable timestamp are skipped (None),
        other malformed fields fall back to defaults.

        Parameters
        ----------
        row : Mapping[str, Any]
            Warehouse row
        address : str
            Normalized inspected address

        Returns
        -------
        Transaction | None
            Parsed transaction or None for unusable rows
        """
        tx_hash = row.get("transaction_hash")
        timestamp = parse_timestamp(row.get("block_timestamp"))
        if not isinstance(tx_hash, str) or not tx_hash or timestamp is None:
            return None

        from_address = _lower(row.get("from_address"))
        return cls(
            transaction_hash=tx_hash,
            block_number=to_int(row.get("block_number")),
            block_timestamp=str(timestamp),
            from_address=from_address,
            to_address=_lower(row.get("to_address")),
            value=str(to_int(row.get("value"))),
            gas_used=str(to_int(row.get("gas_used"))),
            gas_price=str(to_int(row.get("gas_price"))),
            type="send" if from_address == address else "receive",
        )


class TokenTransfer(BaseModel):
    """Token transfer event, aggregation input only."""
    transaction_hash: str = ""
    block_timestamp: str = ""
    contract_address: str
    from_address: str
    to_address: str
    value: int

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TokenTransfer | None":
        contract_address = _lower(row.get("contract_address"))
        if not contract_address:
            return None

        timestamp = parse_timestamp(row.get("block_timestamp"))
        return cls(
            transaction_hash=row.get("transaction_hash") or "",
            block_timestamp="" if timestamp is None else str(timestamp),
            contract_address=contract_address,
            from_address=_lower(row.get("from_address")),
            to_address=_lower(row.get("to_address")),
            value=to_int(row.get("value")),
        )


class TokenBalance(BaseModel):
    """
    Holding of one asset by the inspected address.

    Attributes
    ----------
    contract_address : str
        Token contract, or ``native`` for the chain's base currency
    symbol : str | None
        Token symbol
    name : str | None
        Token name
    balance : str
        Raw balance in the token's smallest unit
    balance_formatted : str
        Human readable balance
    usd_value : float | None
        Value in USD when known
    decimals : int
        Token decimals
    is_native : bool
        True for the base currency entry
    """
    contract_address: str
    symbol: str | None = None
    name: str | None = None
    balance: str
    balance_formatted: str
    usd_value: float | None = None
    decimals: int = 18
    is_native: bool = False

    model_config = ConfigDict(from_attributes=True)


class ActivityHour(BaseModel):
    hour: int = Field(..., ge=0, le=23)
    tx_count: int = Field(..., ge=0)


class ActivityDay(BaseModel):
    """Transactions on one day of week, 0 = Sunday."""
    day: int = Field(..., ge=0, le=6)
    tx_count: int = Field(..., ge=0)

    @computed_field
    @property
    def name(self) -> str:
        return day_name(self.day)


class Counterparty(BaseModel):
    """
    Address on the other side of the inspected address's transactions.

    Attributes
    ----------
    address : str
        Counterparty address
    interaction_count : int
        Number of transactions between the two addresses
    total_value : str
        Cumulative value in wei
    ens_name : str | None
        Resolved name, not resolved yet
    is_contract : bool
        Contract account flag, not detected yet
    """
    address: str
    interaction_count: int = 0
    total_value: str = "0"
    ens_name: str | None = None
    is_contract: bool = False

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def short_address(self) -> str:
        return truncate_address(self.address)

    @computed_field
    @property
    def explorer_url(self) -> str | None:
        if not self.address:
            return None
        return address_url(self.address)


class TransactionFilters(BaseModel):
    """
    Client side transaction filters.

    Attributes
    ----------
    type : Literal["send", "receive", "all"] | None
        Direction filter, None and ``all`` keep everything
    date_from : str | None
        First calendar date (YYYY-MM-DD)
    date_to : str | None
        Last calendar date (YYYY-MM-DD)
    min_amount : str | None
        Minimum value in ETH units
    """
    type: Literal["send", "receive", "all"] | None = None
    date_from: str | None = None
    date_to: str | None = None
    min_amount: str | None = None


class TransactionGroup(BaseModel):
    """
    Transactions of one calendar day.

    Attributes
    ----------
    date : str
        ISO date (YYYY-MM-DD, UTC)
    label : str
        Display date, e.g. "January 15, 2024"
    transactions : list[Transaction]
        Transactions of that day in input order
    """
    date: str
    label: str
    transactions: list[Transaction]
