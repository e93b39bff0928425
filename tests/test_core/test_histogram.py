# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tests for ByteHistogram counting and rendering."""

import pytest

from bytehist.histogram import (
    HISTOGRAM_CAPACITY,
    ByteHistogram,
    HistogramLine,
    printable_symbol,
)
from tests.utils import parse_report, report_counts


def test_empty_histogram_renders_zero_counts_and_no_bars() -> None:
    rows = parse_report(ByteHistogram().render())

    assert len(rows) == HISTOGRAM_CAPACITY
    assert all(count == 0 for _, _, count, _ in rows)
    assert all(bar_length == 0 for _, _, _, bar_length in rows)


def test_empty_histogram_exact_lines() -> None:
    lines = ByteHistogram().render().split("\n")

    assert lines[0x00] == "0x00 [?]: 0 "
    assert lines[0x41] == "0x41 [A]: 0 "
    assert lines[-1] == ""


@pytest.mark.parametrize("value, times", [(0x00, 1), (0x41, 3), (0x7F, 10), (0xFF, 123)])
def test_insert_counts_single_value(value: int, times: int) -> None:
    histogram = ByteHistogram()
    for _ in range(times):
        histogram.insert(value)

    counts = report_counts(histogram.render())

    assert counts[value] == times
    assert sum(counts.values()) == times
    assert histogram[value] == times
    assert histogram.total == times


def test_render_is_idempotent() -> None:
    histogram = ByteHistogram()
    histogram.update(b"mississippi")

    first = histogram.render()

    assert histogram.render() == first
    assert str(histogram) == first
    assert histogram.total == 11


def test_lines_are_in_ascending_order() -> None:
    histogram = ByteHistogram()
    histogram.update(bytes(range(255, -1, -1)))

    values = [value for value, _, _, _ in parse_report(histogram.render())]

    assert values == list(range(HISTOGRAM_CAPACITY))


def test_two_values_exact_lines() -> None:
    histogram = ByteHistogram()
    for value in (0x41, 0x41, 0x42):
        histogram.insert(value)

    lines = histogram.render().split("\n")

    assert lines[0x41] == "0x41 [A]: 2 " + "*" * 68
    assert lines[0x42] == "0x42 [B]: 1 " + "*" * 34
    assert lines[0x43] == "0x43 [C]: 0 "
    assert all(len(line) <= 80 for line in lines)


def test_count_column_padded_to_widest_count() -> None:
    histogram = ByteHistogram()
    for _ in range(100):
        histogram.insert(0x00)
    for _ in range(5):
        histogram.insert(0x01)

    lines = histogram.render().split("\n")

    assert histogram.count_width == 3
    assert histogram.max_bar_length == 66
    assert lines[0x00] == "0x00 [?]: 100 " + "*" * 66
    # 5 * 66 // 100
    assert lines[0x01] == "0x01 [?]:   5 ***"
    assert lines[0x02] == "0x02 [?]:   0 "
    assert len(lines[0x00]) == 80


@pytest.mark.parametrize("maximum", [1, 7, 10, 99, 1000, 123456])
def test_maximum_count_gets_full_bar(maximum: int) -> None:
    histogram = ByteHistogram()
    histogram.update(b"z" * maximum + b"a")

    rows = {value: (count, bar) for value, _, count, bar in parse_report(histogram.render())}

    assert rows[ord("z")] == (maximum, histogram.max_bar_length)
    assert histogram.max_bar_length == 80 - 11 - len(str(maximum))


def test_bar_lengths_use_floor_of_ratio() -> None:
    histogram = ByteHistogram()
    histogram.update(b"a" * 3 + b"b" * 2 + b"c")

    lines = {line.value: line for line in histogram.lines()}

    assert lines[ord("a")].bar_length == 68
    assert lines[ord("b")].bar_length == 45
    assert lines[ord("c")].bar_length == 22


@pytest.mark.parametrize("value", [0x00, 0x09, 0x0A, 0x1F, 0x7F, 0x80, 0x85, 0x9F])
def test_control_bytes_render_as_question_mark(value: int) -> None:
    histogram = ByteHistogram()
    histogram.insert(value)

    rows = parse_report(histogram.render())

    assert rows[value][1] == "?"
    assert printable_symbol(value) == "?"


@pytest.mark.parametrize(
    "value, symbol",
    [(0x20, " "), (0x41, "A"), (0x7E, "~"), (0xA0, "\xa0"), (0xE9, "é"), (0xFF, "ÿ")],
)
def test_printable_bytes_render_literally(value: int, symbol: str) -> None:
    assert printable_symbol(value) == symbol
    assert HistogramLine(value=value, count=0, bar_length=0).symbol == symbol


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_insert_rejects_out_of_range_values(value: int) -> None:
    histogram = ByteHistogram()

    with pytest.raises(ValueError, match="out of range"):
        histogram.insert(value)

    assert histogram.total == 0


@pytest.mark.parametrize("value", [-1, -256, 256])
def test_lookup_rejects_out_of_range_values(value: int) -> None:
    histogram = ByteHistogram()
    histogram.insert(0xFF)

    with pytest.raises(ValueError, match="out of range"):
        histogram[value]

    assert histogram[0xFF] == 1


def test_update_matches_repeated_insert() -> None:
    data = bytes([0, 1, 1, 255, 255, 255, 65])
    by_update = ByteHistogram()
    by_insert = ByteHistogram()

    by_update.update(data)
    for value in data:
        by_insert.insert(value)

    assert by_update.counts == by_insert.counts
    assert by_update.render() == by_insert.render()


def test_counts_snapshot_is_read_only_copy() -> None:
    histogram = ByteHistogram()
    histogram.insert(1)

    snapshot = histogram.counts
    histogram.insert(1)

    assert len(histogram) == HISTOGRAM_CAPACITY
    assert snapshot[1] == 1
    assert histogram.counts[1] == 2
    assert repr(histogram) == "ByteHistogram(total=2, max_count=2)"
