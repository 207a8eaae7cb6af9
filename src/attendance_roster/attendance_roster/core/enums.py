from __future__ import annotations

from enum import Enum


class SkipReason(str, Enum):
    """Why an incoming roster record was left out of a batch."""

    EMPTY_NAME = "EMPTY_NAME"
    DUPLICATE_ID = "DUPLICATE_ID"
    DUPLICATE_NAME = "DUPLICATE_NAME"
