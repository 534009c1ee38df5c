"""
SQL templates for the Base tables of the CDP SQL API.

Every template takes an address that already passed ``require_address``,
so interpolating it into the query text is safe.
"""

ACTIVITY_WINDOW_DAYS = 30


def transactions_sql(address: str, limit: int = 50) -> str:
    return f"""
      SELECT
        transaction_hash,
        block_number,
        block_timestamp,
        from_address,
        to_address,
        value,
        gas_used,
        gas_price
      FROM base.transactions
      WHERE from_address = '{address}' OR to_address = '{address}'
      ORDER BY block_number DESC
      LIMIT {int(limit)}
    """


def token_transfers_sql(address: str, limit: int = 1000) -> str:
    return f"""
      SELECT
        transaction_hash,
        block_timestamp,
        contract_address,
        from_address,
        to_address,
        value
      FROM base.transfers
      WHERE from_address = '{address}' OR to_address = '{address}'
      ORDER BY block_timestamp DESC
      LIMIT {int(limit)}
    """


def native_balance_sql(address: str) -> str:
    """Net native balance: everything received minus everything sent."""
    return f"""
      SELECT
        SUM(CASE WHEN to_address = '{address}' THEN CAST(value AS UInt256) ELSE 0 END) -
        SUM(CASE WHEN from_address = '{address}' THEN CAST(value AS UInt256) ELSE 0 END) as balance
      FROM base.transactions
      WHERE from_address = '{address}' OR to_address = '{address}'
    """


def hourly_activity_sql(address: str) -> str:
    return f"""
      SELECT
        toHour(block_timestamp) as hour,
        count(*) as tx_count
      FROM base.transactions
      WHERE (from_address = '{address}' OR to_address = '{address}')
        AND block_timestamp >= now() - INTERVAL {ACTIVITY_WINDOW_DAYS} DAY
      GROUP BY hour
      ORDER BY hour
    """


def daily_activity_sql(address: str) -> str:
    # toDayOfWeek is 1 (Monday) .. 7 (Sunday); modulo 7 makes Sunday 0
    return f"""
      SELECT
        toDayOfWeek(block_timestamp) % 7 as day,
        count(*) as tx_count
      FROM base.transactions
      WHERE (from_address = '{address}' OR to_address = '{address}')
        AND block_timestamp >= now() - INTERVAL {ACTIVITY_WINDOW_DAYS} DAY
      GROUP BY day
      ORDER BY day
    """


def counterparties_sql(address: str, sort_by: str = "count", limit: int = 10) -> str:
    order_column = "total_value" if sort_by == "volume" else "interaction_count"
    return f"""
      SELECT
        CASE
          WHEN from_address = '{address}' THEN to_address
          ELSE from_address
        END as counterparty,
        count(*) as interaction_count,
        sum(CAST(value AS UInt256)) as total_value
      FROM base.transactions
      WHERE from_address = '{address}' OR to_address = '{address}'
      GROUP BY counterparty
      ORDER BY {order_column} DESC
      LIMIT {int(limit)}
    """
