# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
bytehist CLI entry point.

Counts byte values across the files given on the command line, or standard
input when none are given, and prints the histogram to stdout.
"""

import sys
from typing import List, Optional

import typer

from bytehist.cli._cli_utils import configure_logging, print_error, report_failures
from bytehist.config import LoaderConfig
from bytehist.histogram import ByteHistogram
from bytehist.loader import load
from bytehist.types import ExitCode

app = typer.Typer(
    name="bytehist",
    help="Print a histogram of byte values in files or standard input",
    add_completion=False,
    # File names starting with "-" are paths, not options
    context_settings={"ignore_unknown_options": True},
)


@app.command()
def count(
    paths: Optional[List[str]] = typer.Argument(
        None, help="Files to read (default: standard input)", show_default=False
    ),
) -> None:
    """
    Count every byte of the given sources into one shared histogram.

    If any file cannot be opened, all open failures are reported and nothing
    is read. Read failures are reported too; the histogram is printed only
    when every source was read and closed cleanly.

    Examples:
        $ bytehist notes.txt image.png

        $ cat data.bin | bytehist
    """
    config = LoaderConfig.from_env()
    configure_logging(config)

    histogram = ByteHistogram()
    report = load(paths or [], histogram, config)

    report_failures(report.failures)
    if not report.ok:
        raise typer.Exit(int(report.exit_code))

    typer.echo(histogram.render(), nl=False)


# Entry point for setuptools
def main() -> None:
    """Main entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(ExitCode.INTERRUPTED)
    except Exception as e:
        print_error(str(e))
        sys.exit(ExitCode.UNEXPECTED_ERROR)


if __name__ == "__main__":
    main()
