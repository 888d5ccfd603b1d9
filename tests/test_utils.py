from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId
from fastapi import HTTPException

from travelease.utils.object_id import parse_object_id
from travelease.utils.timestamps import utc_timestamp


def test_parse_object_id():
    assert parse_object_id("507f1f77bcf86cd799439011") == ObjectId("507f1f77bcf86cd799439011")


@pytest.mark.parametrize("value", ["", "123", "zzzzzzzzzzzzzzzzzzzzzzzz", "507f1f77bcf86cd79943901"])
def test_parse_object_id_rejects_malformed(value):
    with pytest.raises(HTTPException) as excinfo:
        parse_object_id(value, label="booking")
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail["message"] == "Invalid booking ID format"


def test_utc_timestamp_format():
    moment = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone(timedelta(hours=2)))
    assert utc_timestamp(moment) == "2024-05-01T10:30:15.123Z"


def test_utc_timestamps_sort_chronologically():
    earlier = utc_timestamp(datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc))
    later = utc_timestamp(datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc))
    assert earlier < later
