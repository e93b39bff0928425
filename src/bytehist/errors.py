# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Custom exceptions for byte source operations."""

from typing import Optional

from .types import FailureKind, FailureStage, SourceFailure


class ByteHistError(Exception):
    """Base exception for all bytehist errors."""

    pass


class SourceError(ByteHistError):
    """
    Raised when opening, reading or closing a source fails.

    The loader never lets these escape a batch: each one is converted into a
    ``SourceFailure`` record with ``to_failure()``.
    """

    kind = FailureKind.IO_ERROR

    def __init__(
        self,
        source: str,
        stage: FailureStage,
        cause: OSError,
        message: Optional[str] = None,
    ):
        self.source = source
        self.stage = stage
        self.cause = cause

        if message is None:
            message = f"{source}: {stage.value} failed: {self.reason}"

        super().__init__(message)

    @property
    def reason(self) -> str:
        return self.cause.strerror or str(self.cause)

    def to_failure(self) -> SourceFailure:
        return SourceFailure(
            source=self.source, kind=self.kind, stage=self.stage, reason=self.reason
        )

    @classmethod
    def from_os_error(
        cls, source: str, stage: FailureStage, exc: OSError
    ) -> "SourceError":
        """Classify an ``OSError`` as not-found or generic I/O failure."""
        if stage is FailureStage.OPEN and isinstance(
            exc, (FileNotFoundError, NotADirectoryError)
        ):
            return SourceNotFoundError(source, exc)
        return SourceIOError(source, stage, exc)


class SourceNotFoundError(SourceError):
    """Raised when a named source does not exist."""

    kind = FailureKind.NOT_FOUND

    def __init__(self, source: str, cause: OSError, message: Optional[str] = None):
        if message is None:
            message = f"{source}: not found"
        super().__init__(source, FailureStage.OPEN, cause, message)


class SourceIOError(SourceError):
    """Raised for any open, read or close failure that is not a not-found."""

    pass
