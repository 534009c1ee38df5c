from wallet.activity import bucketize_days, bucketize_hours, densify, max_count


class TestBucketizeHours:
    """Hour-of-day densification."""

    def test_single_hour(self):
        hourly = bucketize_hours([{"hour": 3, "tx_count": 5}])

        assert len(hourly) == 24
        assert [h.hour for h in hourly] == list(range(24))
        assert hourly[3].tx_count == 5
        assert sum(h.tx_count for h in hourly) == 5
        assert max_count(hourly) == 5

    def test_empty_input_is_zero_filled(self):
        hourly = bucketize_hours([])
        assert len(hourly) == 24
        assert all(h.tx_count == 0 for h in hourly)
        assert max_count(hourly) == 1

    def test_sum_is_preserved_for_sparse_input(self):
        rows = [{"hour": h, "tx_count": h * 2} for h in (0, 5, 11, 23)]
        hourly = bucketize_hours(rows)
        assert sum(h.tx_count for h in hourly) == sum(r["tx_count"] for r in rows)

    def test_string_encoded_values(self):
        hourly = bucketize_hours([{"hour": "7", "tx_count": "12"}])
        assert hourly[7].tx_count == 12


class TestBucketizeDays:

    def test_always_seven_days(self):
        daily = bucketize_days([{"day": 0, "tx_count": 1}, {"day": 6, "tx_count": 2}])

        assert len(daily) == 7
        assert [d.day for d in daily] == list(range(7))
        assert daily[0].tx_count == 1
        assert daily[6].tx_count == 2
        assert max_count(daily) == 2

    def test_days_are_named_from_sunday(self):
        daily = bucketize_days([])
        assert [d.name for d in daily] == [
            "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
        ]


class TestDensify:

    def test_out_of_range_and_malformed_keys_are_dropped(self):
        rows = [
            {"hour": 24, "tx_count": 3},
            {"hour": -1, "tx_count": 3},
            {"hour": None, "tx_count": 3},
            {"tx_count": 3},
        ]
        assert densify(rows, "hour", 24) == [0] * 24

    def test_malformed_or_negative_counts_are_zero(self):
        rows = [{"day": 1, "tx_count": "abc"}, {"day": 2, "tx_count": -4}, {"day": 3}]
        assert densify(rows, "day", 7) == [0] * 7

    def test_repeated_keys_are_summed(self):
        rows = [{"day": 4, "tx_count": 2}, {"day": 4, "tx_count": 3}]
        assert densify(rows, "day", 7)[4] == 5
