import logging
from datetime import datetime

import pytest

from runedrakraft.logging_config import PACKAGE_LOGGER, attach_sink, resolve_level
from runedrakraft.utils import clamp, format_timestamp


@pytest.mark.parametrize("moment, expected", [
    (datetime(2026, 10, 19, 15, 4), "10/19/2026, 3:04 PM"),
    (datetime(2026, 1, 5, 0, 7), "1/5/2026, 12:07 AM"),
    (datetime(2026, 1, 5, 12, 30), "1/5/2026, 12:30 PM"),
    (datetime(2026, 12, 31, 11, 59), "12/31/2026, 11:59 AM"),
])
def test_format_timestamp(moment, expected):
    assert format_timestamp(moment) == expected


def test_clamp():
    assert clamp(5, 1, 10) == 5
    assert clamp(-1, 1, 10) == 1
    assert clamp(11, 1, 10) == 10


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING
    with pytest.raises(ValueError):
        resolve_level("loud")


def test_attach_sink_receives_package_records():
    received = []
    handler = attach_sink(lambda level, msg: received.append((level, msg)))
    try:
        logging.getLogger(f"{PACKAGE_LOGGER}.tests").warning("chamber %s", "sealed")
        logging.getLogger("elsewhere").warning("ignored")
    finally:
        logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)
    assert received == [("warning", "chamber sealed")]
