"""
Timestamp helper tests
"""

from datetime import datetime, timedelta, timezone

from blog_api.utils.helpers import to_utc, utc_now


def test_naive_timestamp_is_taken_as_utc():
    assert to_utc(datetime(2020, 1, 1, 12, 0)) == datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_aware_timestamp_is_converted_to_utc():
    offset = timezone(timedelta(hours=2))

    converted = to_utc(datetime(2020, 1, 1, 12, 0, tzinfo=offset))

    assert converted.tzinfo == timezone.utc
    assert converted.hour == 10


def test_utc_now_is_aware():
    assert utc_now().tzinfo == timezone.utc
