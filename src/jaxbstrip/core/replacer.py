# Author: Bradley R. Kinnard — swap or stay put, nothing in between

"""Atomic rename of the normalized temp file over the original."""

import logging
import os
import shutil
from pathlib import Path

from src.jaxbstrip.core.errors import ReplaceFailed

log = logging.getLogger(__name__)


def replace(temp_path: Path, target: Path) -> None:
    """
    Move temp_path onto target in one rename. Temp must live on the same filesystem.
    On failure target is untouched and ReplaceFailed is raised.
    """
    try:
        # mkstemp makes 0600 files, the replaced source shouldn't inherit that
        shutil.copymode(target, temp_path)
        os.replace(temp_path, target)
    except OSError as e:
        raise ReplaceFailed(target, e) from e
    log.debug(f"replaced {target}")
