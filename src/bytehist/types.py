# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from enum import Enum, IntEnum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

STDIN_NAME = "<stdin>"


class ExitCode(IntEnum):
    """Process exit codes of the bytehist command."""

    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    USAGE_ERROR = 2
    OPEN_FAILURE = 3
    READ_FAILURE = 4
    INTERRUPTED = 130


class FailureKind(str, Enum):
    """Classification of a source failure."""

    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"


class FailureStage(str, Enum):
    """Point of a source's lifecycle at which it failed."""

    OPEN = "open"
    READ = "read"
    CLOSE = "close"


class SourceFailure(BaseModel):
    """A failure recorded against a single source."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str = Field(..., description="File name, or <stdin> for standard input")
    kind: FailureKind = Field(..., description="Not-found vs. any other I/O error")
    stage: FailureStage = Field(..., description="Lifecycle stage that failed")
    reason: str = Field(..., description="Underlying operating system message")

    def describe(self) -> str:
        if self.kind is FailureKind.NOT_FOUND:
            return f"{self.source}: not found ({self.reason})"
        return f"{self.source}: {self.stage.value} failed ({self.reason})"


class LoadReport(BaseModel):
    """
    Outcome of loading a batch of sources into a histogram.

    Open failures and read/close failures are kept in two separate ordered
    lists, each in source processing order.
    """

    model_config = ConfigDict(extra="forbid")

    open_failures: List[SourceFailure] = Field(default_factory=list)
    read_failures: List[SourceFailure] = Field(default_factory=list)
    sources_read: int = Field(default=0, ge=0, description="Sources read to the end")
    bytes_read: int = Field(default=0, ge=0, description="Bytes counted into the histogram")
    aborted: bool = Field(
        default=False, description="True when open failures stopped the run before reading"
    )

    @property
    def failures(self) -> List[SourceFailure]:
        return [*self.open_failures, *self.read_failures]

    @property
    def ok(self) -> bool:
        return not self.open_failures and not self.read_failures

    @property
    def exit_code(self) -> ExitCode:
        if self.open_failures:
            return ExitCode.OPEN_FAILURE
        if self.read_failures:
            return ExitCode.READ_FAILURE
        return ExitCode.SUCCESS
