# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Source loading.

Turns a list of file names (or standard input when the list is empty) into
histogram updates. Failures are collected per source and never stop the rest
of the batch:

1. ``resolve_sources`` opens every named file, recording open failures
2. ``accumulate`` reads each opened source to the end and closes it,
   recording read and close failures
3. ``load`` runs both steps with the fail-fast policy: if any source failed
   to open, the opened ones are closed again and nothing is read
"""

import logging
import sys
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import BinaryIO, List, Optional, Sequence

from .config import DEFAULT_CHUNK_SIZE, LoaderConfig
from .errors import SourceError
from .histogram import ByteHistogram
from .types import STDIN_NAME, FailureStage, LoadReport, SourceFailure

logger = logging.getLogger(__name__)


class Source:
    """
    A named binary stream.

    Unowned sources (standard input) are never closed. A source without a
    stream behaves as an empty one.
    """

    def __init__(self, name: str, stream: Optional[BinaryIO], owned: bool = True):
        self.name = name
        self._stream = stream
        self._owned = owned
        self._closed = False

    @classmethod
    def open(cls, name: str) -> "Source":
        """
        Open a file for binary reading.

        Raises:
            SourceNotFoundError: If the file does not exist
            SourceIOError: If the file exists but cannot be opened
        """
        try:
            stream = open(name, "rb")
        except OSError as exc:
            raise SourceError.from_os_error(name, FailureStage.OPEN, exc) from exc
        logger.debug("Opened source %s", name)
        return cls(name, stream)

    @classmethod
    def stdin(cls) -> "Source":
        """Standard input as a source; missing or closed stdin reads as empty."""
        stream = getattr(sys.stdin, "buffer", None)
        if stream is None or stream.closed:
            logger.debug("Standard input is not available, reading it as empty")
            stream = None
        return cls(STDIN_NAME, stream, owned=False)

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self, size: int) -> bytes:
        if self._stream is None:
            return b""
        try:
            return self._stream.read(size) or b""
        except OSError as exc:
            raise SourceError.from_os_error(self.name, FailureStage.READ, exc) from exc

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if not self._owned or self._stream is None:
            return
        try:
            self._stream.close()
        except OSError as exc:
            raise SourceError.from_os_error(self.name, FailureStage.CLOSE, exc) from exc
        logger.debug("Closed source %s", self.name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, closed={self._closed})"


@dataclass
class Resolution:
    """Sources that opened, and failures for the ones that did not."""

    sources: List[Source] = field(default_factory=list)
    failures: List[SourceFailure] = field(default_factory=list)


def close_sources(sources: Sequence[Source]) -> List[SourceFailure]:
    """Close every source, returning the close failures instead of raising."""
    failures = []
    for source in sources:
        try:
            source.close()
        except SourceError as exc:
            logger.info("Failed to close %s: %s", source.name, exc.reason)
            failures.append(exc.to_failure())
    return failures


def resolve_sources(names: Sequence[str]) -> Resolution:
    """
    Open every named source.

    Args:
        names: File names; an empty sequence selects standard input

    Returns:
        The sources that opened, in order, and one failure per source
        that did not
    """
    if not names:
        return Resolution(sources=[Source.stdin()])

    resolution = Resolution()
    with ExitStack() as stack:
        # Released only if opening is interrupted
        stack.callback(close_sources, resolution.sources)
        for name in names:
            try:
                source = Source.open(name)
            except SourceError as exc:
                logger.info("Failed to open %s: %s", name, exc.reason)
                resolution.failures.append(exc.to_failure())
                continue
            resolution.sources.append(source)
        stack.pop_all()

    return resolution


def _drain(source: Source, histogram: ByteHistogram, chunk_size: int) -> int:
    total = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            return total
        histogram.update(chunk)
        total += len(chunk)


def accumulate(
    sources: Sequence[Source],
    histogram: ByteHistogram,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> List[SourceFailure]:
    """
    Read every source to the end into ``histogram``, closing each one.

    A read failure stops that source only; bytes counted before the failure
    stay in the histogram.

    Returns:
        Read and close failures in processing order (empty on success)
    """
    failures: List[SourceFailure] = []
    with ExitStack() as stack:
        stack.callback(close_sources, sources)
        for source in sources:
            try:
                count = _drain(source, histogram, chunk_size)
                logger.debug("Read %d bytes from %s", count, source.name)
            except SourceError as exc:
                logger.info("Failed to read %s: %s", source.name, exc.reason)
                failures.append(exc.to_failure())
            failures.extend(close_sources([source]))
    return failures


def load(
    names: Sequence[str],
    histogram: ByteHistogram,
    config: Optional[LoaderConfig] = None,
) -> LoadReport:
    """
    Load the named sources (or standard input) into ``histogram``.

    Any open failure aborts the run before a single byte is read; the
    sources that did open are closed and their close failures reported
    alongside.
    """
    if config is None:
        config = LoaderConfig()

    resolution = resolve_sources(names)
    if resolution.failures:
        close_failures = close_sources(resolution.sources)
        return LoadReport(
            open_failures=resolution.failures,
            read_failures=close_failures,
            aborted=True,
        )

    bytes_before = histogram.total
    read_failures = accumulate(resolution.sources, histogram, config.chunk_size)
    failed_reads = sum(1 for f in read_failures if f.stage is FailureStage.READ)

    return LoadReport(
        read_failures=read_failures,
        sources_read=len(resolution.sources) - failed_reads,
        bytes_read=histogram.total - bytes_before,
    )
