# Author: Bradley R. Kinnard — things go wrong, here's how we say so

"""Error kinds. Traversal is fatal, transform/replace are per-file and get logged."""

from pathlib import Path


class StripError(Exception):
    """Base for everything this package raises on purpose. Carries the offending path + cause."""

    kind = "error"

    def __init__(self, path: Path | str, cause: BaseException | str):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.kind} for {self.path}: {cause}")


class TraversalFailed(StripError):
    kind = "traversal_failed"


class TransformFailed(StripError):
    kind = "transform_failed"


class ReplaceFailed(StripError):
    kind = "replace_failed"


class TempArtifactFailed(StripError):
    """couldn't create the scratch file, nothing can happen without it"""
    kind = "temp_artifact_failed"
