from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from kintai.common.validators import require_datetime, require_email, require_non_empty
from kintai.core.exceptions import ValidationError


def test_naive_timestamp_is_kept_as_is():
    assert require_datetime("2024-01-01T09:00", "t") == datetime(2024, 1, 1, 9, 0)


def test_offsets_are_converted_to_local_time():
    tokyo = require_datetime("2024-01-01T09:00+09:00", "t")
    utc = require_datetime("2024-01-01T00:00Z", "t")

    assert tokyo == utc
    assert tokyo.tzinfo is None
    assert tokyo == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)


def test_mixed_offsets_keep_the_real_duration():
    start = require_datetime("2024-01-01T09:00+09:00", "t")
    end = require_datetime("2024-01-01T08:00:00Z", "t")

    assert end - start == timedelta(hours=8)


def test_bad_timestamp_is_rejected():
    with pytest.raises(ValidationError):
        require_datetime("2024-01-01 nine", "t")


def test_max_length_is_enforced_after_strip():
    assert require_non_empty("  abc  ", "f", max_length=3) == "abc"
    with pytest.raises(ValidationError):
        require_non_empty("abcd", "f", max_length=3)


def test_email_max_length():
    with pytest.raises(ValidationError):
        require_email("a" * 20 + "@x.com", max_length=10)
