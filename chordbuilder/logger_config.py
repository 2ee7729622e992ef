from __future__ import annotations

import logging

LOGGER_NAME = "chordbuilder"

# Library logger: records propagate to whatever the application configures
# (scripts/print_chords.py calls logging.basicConfig); silent otherwise.
logger = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
