"""
Fail-fast termination.

The runtime distinguishes two kinds of trouble:

    Fatal:
        allocation failure, out-of-bounds Array access, Array access
        through a null handle. These are defects in the calling (usually
        generated) code. The process terminates; there is no error code,
        no partial result and no retry.

    Graceful:
        operations on absent or empty Lists, the length of a null Array.
        These return well-defined empty results and never reach this module.

Every fatal condition is funnelled through ``fatal``, which never returns.
"""
from __future__ import annotations

import logging
import os
from enum import Enum
from typing import NoReturn

from oruntime.config import FatalPolicy, get_config
from oruntime.logging_config import get_logger


logger = get_logger("fatal")


class FatalCondition(Enum):
    """Fatal runtime conditions with stable numeric codes."""

    INDEX_OUT_OF_BOUNDS = 2020
    ALLOCATION_FAILURE = 2021
    NULL_ARRAY_ACCESS = 2022

    @property
    def code(self) -> str:
        return f"RE{self.value}"


class RuntimeAbort(BaseException):
    """
    Raised in place of process termination under FatalPolicy.RAISE.

    Derives from BaseException so that ``except Exception`` blocks in
    caller code cannot swallow it.
    """

    def __init__(self, condition: FatalCondition, detail: str):
        super().__init__(f"{condition.code} {condition.name}: {detail}")
        self.condition = condition
        self.detail = detail


def fatal(condition: FatalCondition, detail: str) -> NoReturn:
    """Report ``condition`` and terminate according to the active policy."""
    logger.critical("%s %s: %s", condition.code, condition.name, detail)

    if get_config().fatal_policy is FatalPolicy.RAISE:
        raise RuntimeAbort(condition, detail)

    logging.shutdown()
    os.abort()
