"""Locate ``bfn.toml``.

Lookup order: the file named by ``BFN_CONFIG`` (if set, and only that
file), then ``bfn.toml`` in the start directory and each of its parents.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "bfn.toml"
CONFIG_ENV_VAR = "BFN_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        if not path.is_file():
            logger.debug("%s points at missing file %s", CONFIG_ENV_VAR, path)
            return None
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            logger.debug("Using config %s", candidate)
            return candidate
    return None
