# -*- coding: utf-8 -*-
"""Logger setup for the codeintel package.

Log records go to stderr: when the server runs over stdio, stdout carries
the protocol stream and must stay clean.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

from ..constant import LOG_LEVEL_ENV

_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
_HANDLER_NAME = "codeintel-stderr"


def setup_logger(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Configure the ``codeintel`` logger once and return it.

    *level* falls back to ``CODEINTEL_LOG_LEVEL`` and then ``INFO``.
    Calling again only updates the level.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "info")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("codeintel")
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
