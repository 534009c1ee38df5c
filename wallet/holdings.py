from typing import Any, Iterable, Mapping

from wallet.entities import TokenBalance, TokenTransfer
from wallet.values import to_int
from wallet.formatting import format_units

NATIVE = "native"


def aggregate_token_balances(
    transfers: Iterable[Mapping[str, Any]],
    address: str,
    native_balance: Any = 0
) -> list[TokenBalance]:
    """
    Fold token transfers into per-contract holdings.

    Incoming transfers add to the contract's running balance, outgoing ones
    subtract. Transfers without a contract or not touching ``address`` are
    ignored. A positive ``native_balance`` adds a ``native`` entry. Only
    strictly positive balances are returned, one per contract.

    Parameters
    ----------
    transfers : Iterable[Mapping[str, Any]]
        Transfer rows in arrival order
    address : str
        Inspected address, any casing
    native_balance : Any
        Net native balance in wei (int or decimal string)

    Returns
    -------
    list[TokenBalance]
        Holdings sorted by USD value when every entry has one, otherwise by
        raw balance, largest first
    """
    address = address.lower()
    balances: dict[str, int] = {}

    for row in transfers:
        transfer = TokenTransfer.from_row(row)
        if transfer is None:
            continue

        if transfer.to_address == address:
            delta = transfer.value
        elif transfer.from_address == address:
            delta = -transfer.value
        else:
            continue

        balances[transfer.contract_address] = balances.get(transfer.contract_address, 0) + delta

    holdings = [
        TokenBalance(
            contract_address=contract,
            balance=str(balance),
            balance_formatted=format_units(balance),
        )
        for contract, balance in balances.items()
        if balance > 0
    ]

    native = to_int(native_balance)
    if native > 0:
        holdings.append(
            TokenBalance(
                contract_address=NATIVE,
                symbol="ETH",
                name="Ethereum",
                balance=str(native),
                balance_formatted=format_units(native),
                is_native=True,
            )
        )

    return sort_holdings(holdings)


def sort_holdings(holdings: list[TokenBalance]) -> list[TokenBalance]:
    """Largest first; ties keep their order."""
    if holdings and all(h.usd_value is not None for h in holdings):
        return sorted(holdings, key=lambda h: h.usd_value, reverse=True)
    return sorted(holdings, key=lambda h: int(h.balance), reverse=True)
