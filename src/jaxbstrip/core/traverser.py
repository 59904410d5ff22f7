# Author: Bradley R. Kinnard — find the needles, ignore the haystack

"""Walk generated-sources, yield every ObjectFactory.java. Sorted so runs are repeatable."""

import logging
import os
from pathlib import Path
from typing import Iterator

from src.jaxbstrip.core.errors import TraversalFailed
from src.jaxbstrip.core.models import TARGET_NAME

log = logging.getLogger(__name__)


def _raise(err: OSError) -> None:
    # os.walk swallows errors unless told otherwise
    raise TraversalFailed(err.filename or "<unknown>", err) from err


def find_candidates(root: Path, name: str = TARGET_NAME) -> Iterator[Path]:
    """
    Yield regular files named exactly `name` under root.
    Follows directory symlinks, skips any directory already seen (by dev/inode) so cycles end.
    Missing root or non-directory root yields nothing.
    """
    root = Path(root)
    if not root.is_dir():
        log.debug(f"{root} is not a directory, nothing to walk")
        return

    seen: set[tuple[int, int]] = set()

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise, followlinks=True):
        try:
            st = os.stat(dirpath)
        except OSError as e:
            raise TraversalFailed(dirpath, e) from e

        if (st.st_dev, st.st_ino) in seen:
            log.warning(f"symlink loop at {dirpath}, not descending")
            dirnames[:] = []
            continue
        seen.add((st.st_dev, st.st_ino))

        dirnames.sort()  # in place, os.walk honours it
        for fn in sorted(filenames):
            if fn != name:
                continue
            p = Path(dirpath) / fn
            if p.is_file():
                yield p
