# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Utility functions and helpers for bytehist tests.
"""

import re
from typing import Dict, List, Tuple

LINE_PATTERN = re.compile(r"^0x([0-9a-f]{2}) \[(.)\]: +(\d+) (\**)$")


def parse_report(report: str) -> List[Tuple[int, str, int, int]]:
    """Split a rendered report into (value, symbol, count, bar length) rows."""
    assert report.endswith("\n")
    rows = []
    # str.splitlines() would also break on some of the symbols
    for line in report.split("\n")[:-1]:
        match = LINE_PATTERN.match(line)
        assert match is not None, f"Malformed line: {line!r}"
        value, symbol, count, bar = match.groups()
        rows.append((int(value, 16), symbol, int(count), len(bar)))
    return rows


def report_counts(report: str) -> Dict[int, int]:
    return {value: count for value, _, count, _ in parse_report(report)}
