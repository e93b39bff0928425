# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Runtime configuration read from environment variables."""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

CHUNK_SIZE_ENV = "BYTEHIST_CHUNK_SIZE"
LOG_LEVEL_ENV = "BYTEHIST_LOG_LEVEL"

DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_LOG_LEVEL = "WARNING"


class LoaderConfig(BaseModel):
    """Settings for reading sources and for diagnostics logging."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE, gt=0, description="Bytes requested per read call"
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL, description="Name of the logging level"
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoaderConfig":
        """
        Build a config from ``BYTEHIST_*`` environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        if environ is None:
            environ = os.environ

        values = {}
        if environ.get(CHUNK_SIZE_ENV):
            values["chunk_size"] = environ[CHUNK_SIZE_ENV]
        if environ.get(LOG_LEVEL_ENV):
            values["log_level"] = environ[LOG_LEVEL_ENV]

        return cls(**values)
