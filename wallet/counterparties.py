from typing import Any, Iterable, Literal, Mapping

from wallet.entities import Counterparty
from wallet.values import to_int

SortBy = Literal["count", "volume"]
SortOrder = Literal["desc", "asc"]


def rank_counterparties(
    rows: Iterable[Mapping[str, Any]],
    sort_by: SortBy = "count",
    order: SortOrder = "desc"
) -> list[Counterparty]:
    """
    Build counterparty entries from pre-aggregated warehouse rows.

    Parameters
    ----------
    rows : Iterable[Mapping[str, Any]]
        Rows with ``counterparty``, ``interaction_count`` and ``total_value``
    sort_by : SortBy
        Rank by interaction count or by cumulative value
    order : SortOrder
        Descending or ascending

    Returns
    -------
    list[Counterparty]
        Ranked counterparties, equal keys keep their input order
    """
    counterparties = []
    for row in rows:
        address = row.get("counterparty")
        counterparties.append(
            Counterparty(
                address=address.lower() if isinstance(address, str) else "",
                interaction_count=max(to_int(row.get("interaction_count")), 0),
                total_value=str(to_int(row.get("total_value"))),
                # name resolution and contract detection are not implemented
                ens_name=None,
                is_contract=False,
            )
        )

    if sort_by == "volume":
        key = lambda c: int(c.total_value)
    else:
        key = lambda c: c.interaction_count

    return sorted(counterparties, key=key, reverse=order == "desc")
