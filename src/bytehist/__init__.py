# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
bytehist - byte value frequency histograms rendered as ASCII bar charts.
"""

from importlib import metadata

from .histogram import ByteHistogram, HistogramLine
from .loader import accumulate, load, resolve_sources
from .types import ExitCode, LoadReport, SourceFailure

__all__ = [
    "ByteHistogram",
    "HistogramLine",
    "accumulate",
    "load",
    "resolve_sources",
    "ExitCode",
    "LoadReport",
    "SourceFailure",
]

try:
    __version__ = metadata.version("bytehist")  # type: ignore[arg-type]
except metadata.PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"
