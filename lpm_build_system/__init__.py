"""libpointmatcher build-system helpers (Python-first).

Two parts:
- An entrypoint dispatcher that loads env files, runs the libpointmatcher
  installer with derived flags and hands over to the container command
- Prompt utilities for consistent console output across build scripts

Console text is the prompt utilities' job. Log records stay silent unless
``logging_utils.configure_logging`` attaches a file handler.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = []
