# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Byte histogram.

A fixed 256-slot counter table indexed by byte value, plus the ASCII-art
renderer that turns it into one line per byte value:

    0x41 [A]: 2 ********************************************************************
    0x42 [B]: 1 **********************************

Bars are scaled against the largest counter so the report always fits in
``SCREEN_WIDTH`` columns regardless of how many bytes were counted.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

HISTOGRAM_CAPACITY = 256
SCREEN_WIDTH = 80
LINE_PREAMBLE_WIDTH = 11

BAR_CHARACTER = "*"
UNPRINTABLE_CHARACTER = "?"


def is_control_byte(value: int) -> bool:
    """Return True for C0 controls, DEL and C1 controls."""
    return value < 0x20 or 0x7F <= value <= 0x9F


def printable_symbol(value: int) -> str:
    """Single-character representation of a byte value."""
    if is_control_byte(value):
        return UNPRINTABLE_CHARACTER
    return chr(value)


@dataclass(frozen=True)
class HistogramLine:
    """
    One rendered row of the histogram.

    Attributes:
        value: Byte value (0..255)
        count: Number of times the byte was counted
        bar_length: Number of bar characters for this row
    """

    value: int
    count: int
    bar_length: int

    @property
    def symbol(self) -> str:
        return printable_symbol(self.value)

    @property
    def bar(self) -> str:
        return BAR_CHARACTER * self.bar_length

    def format(self, count_width: int) -> str:
        return f"0x{self.value:02x} [{self.symbol}]: {self.count:>{count_width}d} {self.bar}\n"


class ByteHistogram:
    """
    Frequency table of byte values.

    Counters only ever grow: ``insert`` and ``update`` are the sole mutators,
    every other method is a pure read of the current state.
    """

    def __init__(self) -> None:
        self._counts = [0] * HISTOGRAM_CAPACITY

    def insert(self, value: int) -> None:
        """
        Count one occurrence of ``value``.

        Args:
            value: Byte value in the range 0..255

        Raises:
            ValueError: If value is outside the byte range
        """
        if not 0 <= value < HISTOGRAM_CAPACITY:
            raise ValueError(f"Byte value out of range: {value}")
        self._counts[value] += 1

    def update(self, data: bytes) -> None:
        """Count every byte of ``data`` in order."""
        counts = self._counts
        for value in data:
            counts[value] += 1

    def __getitem__(self, value: int) -> int:
        if not 0 <= value < HISTOGRAM_CAPACITY:
            raise ValueError(f"Byte value out of range: {value}")
        return self._counts[value]

    def __len__(self) -> int:
        return HISTOGRAM_CAPACITY

    @property
    def counts(self) -> Tuple[int, ...]:
        return tuple(self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts)

    @property
    def max_count(self) -> int:
        return max(self._counts)

    @property
    def count_width(self) -> int:
        """Width of the count column: digits of the largest counter."""
        return len(str(self.max_count))

    @property
    def max_bar_length(self) -> int:
        return SCREEN_WIDTH - LINE_PREAMBLE_WIDTH - self.count_width

    def lines(self) -> Iterator[HistogramLine]:
        """Yield one ``HistogramLine`` per byte value in ascending order."""
        maximum_count = self.max_count
        maximum_bar_length = self.max_bar_length

        for value, count in enumerate(self._counts):
            if maximum_count == 0:
                bar_length = 0
            else:
                bar_length = count * maximum_bar_length // maximum_count
            yield HistogramLine(value=value, count=count, bar_length=bar_length)

    def render(self) -> str:
        """Render the whole table as 256 newline-terminated lines."""
        count_width = self.count_width
        return "".join(line.format(count_width) for line in self.lines())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(total={self.total}, max_count={self.max_count})"
