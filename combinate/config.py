# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("CombinateSettings", "settings")


class CombinateSettings(BaseSettings, frozen=True):
    """Library settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="COMBINATE_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = (
        Field(
            default="WARNING",
            description="Level applied to the 'combinate' package logger",
        )
    )

    COMPOSE_REVERSED_INDEX: bool = Field(
        default=False,
        description=(
            "Report the failing position of compose() arguments in reversed "
            "order, as seen by the underlying sequence()"
        ),
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None


# Create a singleton instance
settings = CombinateSettings()
# Store the instance in the class variable for singleton pattern
CombinateSettings._instance = settings
