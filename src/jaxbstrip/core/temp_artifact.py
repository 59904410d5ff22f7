# Author: Bradley R. Kinnard — one scratch file to rule them all

"""
Scratch file reused for every ObjectFactory in a run. Created next to the targets
so the final rename never crosses filesystems. Gone when the `with` block exits,
whatever happened inside it.
"""

import logging
import os
import tempfile
from pathlib import Path

from src.jaxbstrip.core.errors import TempArtifactFailed

log = logging.getLogger(__name__)

PREFIX = "ObjectFactory"
SUFFIX = ".tmp"


class TempArtifact:
    """context manager. `.path` is truncated by each strip() and consumed by each replace()"""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.path: Path | None = None

    def __enter__(self) -> "TempArtifact":
        try:
            fd, name = tempfile.mkstemp(prefix=PREFIX, suffix=SUFFIX, dir=self.directory)
        except OSError as e:
            raise TempArtifactFailed(self.directory, e) from e
        os.close(fd)
        self.path = Path(name)
        log.debug(f"temp artifact at {self.path}")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.path is None:
            return
        try:
            # may already be gone, replace() moves it onto the target
            self.path.unlink(missing_ok=True)
        except OSError as e:
            log.warning(f"could not delete temp artifact {self.path}: {e}")
        self.path = None
