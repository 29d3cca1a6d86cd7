from datetime import datetime, timezone

import pytest

from job_feed.utils import coerce_text, parse_timestamp, string_list, uniq_preserve_order

POSTED = datetime(2024, 5, 1, 10, 40, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "value",
    [
        "2024-05-01T10:40:00Z",
        "2024-05-01T10:40:00+00:00",
        "2024-05-01T12:40:00+02:00",
        "2024-05-01T10:40:00",
        "2024-05-01T10:40:00.000Z",
        " 2024-05-01T10:40:00Z ",
    ],
)
def test_parse_timestamp_accepted_iso_formats(value):
    assert parse_timestamp(value) == POSTED


def test_parse_timestamp_short_fraction_with_z():
    posted = parse_timestamp("2024-05-02T11:00:00.12Z")
    assert posted == datetime(2024, 5, 2, 11, 0, 0, 120000, tzinfo=timezone.utc)


def test_parse_timestamp_date_only_is_midnight_utc():
    assert parse_timestamp("2024-05-01") == datetime(2024, 5, 1, tzinfo=timezone.utc)


def test_parse_timestamp_epoch_seconds_and_millis():
    assert parse_timestamp(1714560000) == POSTED
    assert parse_timestamp(1714560000000) == POSTED
    assert parse_timestamp(1714560000.0) == POSTED


@pytest.mark.parametrize("value", [None, "", "   ", "last tuesday", "1714560000", True, [], {}, 1e30])
def test_parse_timestamp_rejects_unusable_values(value):
    assert parse_timestamp(value) is None


def test_coerce_text():
    assert coerce_text("  Acme ") == "Acme"
    assert coerce_text(42) == "42"
    assert coerce_text(None) == ""
    assert coerce_text(False) == ""
    assert coerce_text({"name": "x"}) == ""


def test_string_list_keeps_order_and_duplicates():
    assert string_list(["a", 1, "b", None, "a"]) == ["a", "b", "a"]
    assert string_list("a,b") == []


def test_uniq_preserve_order_is_exact():
    assert uniq_preserve_order(["Ops", "ops", "", None, "Ops"]) == ["Ops", "ops"]
