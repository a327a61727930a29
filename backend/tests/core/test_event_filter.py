"""Event Filter — range validation."""

from datetime import datetime

import pytest

from ewm.core.errors import ValidationFailedError
from ewm.core.event_filter import EventFilter


def test_defaults_filter_nothing():
    f = EventFilter()
    f.validate()
    assert f.from_ == 0 and f.size == 10 and f.only_available is False


def test_open_range_is_valid():
    EventFilter(range_start=datetime(2030, 1, 1)).validate()


def test_inverted_range_rejected():
    f = EventFilter(range_start=datetime(2030, 1, 2), range_end=datetime(2030, 1, 1))
    with pytest.raises(ValidationFailedError) as exc:
        f.validate()
    assert exc.value.field == "rangeStart"
