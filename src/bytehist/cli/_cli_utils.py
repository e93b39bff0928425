# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""CLI utilities for the bytehist command-line interface."""

import logging
from typing import Iterable

from rich.console import Console
from rich.markup import escape

from bytehist.config import LoaderConfig
from bytehist.types import SourceFailure

# Diagnostics only; the histogram itself is written to stdout unstyled
err_console = Console(stderr=True, highlight=False, emoji=False)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: LoaderConfig) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(level=config.log_level_number, format=LOG_FORMAT)
    logging.getLogger("bytehist").setLevel(config.log_level_number)


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def report_failures(failures: Iterable[SourceFailure]) -> None:
    """Write one diagnostic line per failure, in the given order."""
    for failure in failures:
        print_error(failure.describe())
