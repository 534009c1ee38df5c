import pytest

from wallet.entities import Transaction, TransactionFilters
from wallet.transactions import (
    filter_transactions,
    group_by_date,
    paginate,
    parse_transactions,
    total_pages,
)

from sample_data import ADDRESS, OTHER, ONE_ETH, JAN_15, DAY, tx_row


@pytest.fixture
def transactions() -> list[Transaction]:
    rows = [
        tx_row("0x01", ADDRESS, OTHER, ONE_ETH, JAN_15 + 3600),
        tx_row("0x02", OTHER, ADDRESS, ONE_ETH // 4, JAN_15 + 7200),
        tx_row("0x03", OTHER, ADDRESS, 2 * ONE_ETH, JAN_15 - DAY),
        tx_row("0x04", ADDRESS, OTHER, ONE_ETH // 2, JAN_15 + DAY),
        tx_row("0x05", OTHER, ADDRESS, 0, JAN_15 + 2 * DAY),
    ]
    return parse_transactions(rows, ADDRESS)


class TestParseTransactions:

    def test_direction_is_derived(self, transactions):
        directions = {tx.transaction_hash: tx.type for tx in transactions}
        assert directions["0x01"] == "send"
        assert directions["0x02"] == "receive"

    def test_display_fields(self, transactions):
        tx = next(tx for tx in transactions if tx.transaction_hash == "0x02")

        assert tx.value_formatted == "0.2500"
        assert tx.explorer_url == "https://basescan.org/tx/0x02"
        assert tx.model_dump()["value_formatted"] == "0.2500"

    def test_address_case_does_not_matter(self):
        rows = [tx_row("0x01", ADDRESS.upper().replace("0X", "0x"), OTHER, 1)]
        assert parse_transactions(rows, ADDRESS)[0].type == "send"

    def test_rows_without_hash_or_timestamp_are_skipped(self):
        rows = [
            tx_row(None, ADDRESS, OTHER, 1),
            {**tx_row("0x01", ADDRESS, OTHER, 1), "block_timestamp": "not a time"},
            tx_row("0x02", ADDRESS, OTHER, 1),
        ]
        assert [tx.transaction_hash for tx in parse_transactions(rows, ADDRESS)] == ["0x02"]

    @pytest.mark.parametrize("timestamp", [float("nan"), float("inf"), -1, 10 ** 20, "99999999999999999999"])
    def test_unusable_timestamps_skip_only_that_row(self, timestamp):
        rows = [
            {**tx_row("0x01", ADDRESS, OTHER, 1), "block_timestamp": timestamp},
            tx_row("0x02", ADDRESS, OTHER, 1),
        ]
        parsed = parse_transactions(rows, ADDRESS)

        assert [tx.transaction_hash for tx in parsed] == ["0x02"]
        assert [g.date for g in group_by_date(parsed)] == ["2024-01-15"]

    def test_float_timestamps_are_accepted(self):
        rows = [{**tx_row("0x01", ADDRESS, OTHER, 1), "block_timestamp": float(JAN_15)}]
        assert parse_transactions(rows, ADDRESS)[0].timestamp == JAN_15

    def test_iso_timestamps_are_accepted(self):
        rows = [{**tx_row("0x01", ADDRESS, OTHER, 1), "block_timestamp": "2024-01-15 00:00:00"}]
        assert parse_transactions(rows, ADDRESS)[0].timestamp == JAN_15

    def test_missing_to_address_and_value_default(self):
        rows = [{"transaction_hash": "0x01", "block_timestamp": JAN_15, "from_address": ADDRESS}]
        tx = parse_transactions(rows, ADDRESS)[0]
        assert tx.to_address == ""
        assert tx.value == "0"


class TestFilterTransactions:
    """Client side filters."""

    def test_no_filters_keeps_everything(self, transactions):
        assert filter_transactions(transactions, TransactionFilters()) == transactions
        assert filter_transactions(transactions, TransactionFilters(type="all")) == transactions

    def test_type_filter(self, transactions):
        sent = filter_transactions(transactions, TransactionFilters(type="send"))
        assert [tx.transaction_hash for tx in sent] == ["0x01", "0x04"]

    def test_min_amount(self, transactions):
        result = filter_transactions(transactions, TransactionFilters(min_amount="0.5"))

        assert all(tx.value_wei >= 500000000000000000 for tx in result)
        assert [tx.transaction_hash for tx in result] == ["0x01", "0x03", "0x04"]

    def test_min_amount_beyond_any_balance_keeps_nothing(self, transactions):
        assert filter_transactions(transactions, TransactionFilters(min_amount="1e100")) == []

    def test_min_amount_truncates_below_one_wei(self):
        rows = [tx_row("0x01", ADDRESS, OTHER, 1999999999999999999, JAN_15)]
        parsed = parse_transactions(rows, ADDRESS)
        filters = TransactionFilters(min_amount="1.9999999999999999999999999999")
        assert filter_transactions(parsed, filters) == parsed

    def test_date_range_uses_midnight_utc_boundaries(self, transactions):
        filters = TransactionFilters(date_from="2024-01-15", date_to="2024-01-16")
        result = filter_transactions(transactions, filters)
        assert [tx.transaction_hash for tx in result] == ["0x01", "0x02", "0x04"]

    @pytest.mark.parametrize("filters", [
        TransactionFilters(min_amount="lots"),
        TransactionFilters(min_amount=""),
        TransactionFilters(date_from="2024-13-45"),
        TransactionFilters(date_to="yesterday"),
    ])
    def test_malformed_values_are_ignored(self, transactions, filters):
        assert filter_transactions(transactions, filters) == transactions

    def test_adding_a_filter_never_grows_the_result(self, transactions):
        steps = [
            TransactionFilters(),
            TransactionFilters(type="receive"),
            TransactionFilters(type="receive", date_from="2024-01-15"),
            TransactionFilters(type="receive", date_from="2024-01-15", min_amount="0.1"),
        ]
        sizes = [len(filter_transactions(transactions, f)) for f in steps]
        assert sizes == sorted(sizes, reverse=True)


class TestGroupAndPaginate:

    def test_groups_by_date_most_recent_first(self, transactions):
        groups = group_by_date(transactions)

        assert [g.date for g in groups] == ["2024-01-17", "2024-01-16", "2024-01-15", "2024-01-14"]
        assert groups[2].label == "January 15, 2024"
        assert [tx.transaction_hash for tx in groups[2].transactions] == ["0x01", "0x02"]

    def test_pages_cover_every_group_once(self):
        rows = [tx_row(f"0x{i:02x}", ADDRESS, OTHER, 1, JAN_15 + i * DAY) for i in range(45)]
        groups = group_by_date(parse_transactions(rows, ADDRESS))
        pages = total_pages(len(groups))

        assert pages == 3
        collected = [g for page in range(1, pages + 1) for g in paginate(groups, page)]
        assert [g.date for g in collected] == [g.date for g in groups]
        assert len({g.date for g in collected}) == 45

    def test_page_beyond_last_is_empty(self, transactions):
        groups = group_by_date(transactions)
        assert paginate(groups, 2) == []
        assert paginate(groups, 0) == []

    def test_custom_page_size(self, transactions):
        groups = group_by_date(transactions)
        assert [g.date for g in paginate(groups, 2, page_size=3)] == ["2024-01-14"]
        assert total_pages(len(groups), page_size=3) == 2

    def test_no_groups_no_pages(self):
        assert group_by_date([]) == []
        assert total_pages(0) == 0
