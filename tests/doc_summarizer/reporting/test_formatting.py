#!/usr/bin/env python3
"""
Tests for byte, price and count rendering.
"""
import pytest

from doc_summarizer.core.errors import InvalidArgumentError
from doc_summarizer.reporting.formatting import (
    format_bytes,
    format_number,
    format_percentage,
    format_price,
    format_ratio,
)


@pytest.mark.parametrize("num_bytes, expected", [
    (0, "0 Bytes"),
    (1, "1 Bytes"),
    (1023, "1023 Bytes"),
    (1024, "1 KB"),
    (1536, "1.5 KB"),
    (1024 ** 2, "1 MB"),
    (2.34 * 1024 ** 2, "2.34 MB"),
    (1024 ** 3, "1 GB"),
    (1024 ** 4, "1024 GB"),
    (0.5, "0.5 Bytes"),
])
def test_format_bytes(num_bytes, expected):
    assert format_bytes(num_bytes) == expected


def test_format_bytes_escalates_unit_at_each_boundary():
    units = [format_bytes(1024 ** power).split(" ")[1] for power in range(4)]

    assert units == ["Bytes", "KB", "MB", "GB"]
    assert format_bytes(1024 ** 2 - 1).endswith("KB")


def test_format_bytes_rejects_negative():
    with pytest.raises(InvalidArgumentError):
        format_bytes(-1)


@pytest.mark.parametrize("amount, expected", [
    (0, "$0.0000"),
    (10, "$10.0000"),
    (0.00012, "$0.0001"),
    (1234.5, "$1234.5000"),
])
def test_format_price(amount, expected):
    assert format_price(amount) == expected


def test_format_price_always_has_four_decimals():
    for amount in (0.1, 1 / 3, 2.5e-7, 99999.99999):
        assert len(format_price(amount).split(".")[1]) == 4


def test_format_price_rejects_negative():
    with pytest.raises(InvalidArgumentError):
        format_price(-0.01)


def test_format_number_and_percentage():
    assert format_number(1234567) == "1,234,567"
    assert format_percentage(0.3) == "0.30%"
    assert format_ratio(12.5) == "12.50:1"
    assert format_ratio(None) == "n/a"
