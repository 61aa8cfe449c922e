"""Exceptions raised by the renaming engine.

Every error here is fatal to the current run: nothing is retried,
skipped or rolled back.
"""
from pathlib import Path


class RenamerError(Exception):
    """Base class for fatal renaming errors."""
    kind = "error"

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


class ConfigurationError(RenamerError):
    """The root directory or the settings file cannot be used."""
    kind = "configuration"


class OrderingViolation(RenamerError):
    """An explicit episode number is lower than the running count."""
    kind = "ordering"

    def __init__(self, path: Path, episode: int, counter: int):
        super().__init__(
            f"{path} has a lesser episode number ({episode}) "
            f"than the current count ({counter})",
            path,
        )
        self.episode = episode
        self.counter = counter


class DestinationCollision(RenamerError):
    """The computed destination already exists and is another file."""
    kind = "collision"

    def __init__(self, source: Path, dest: Path):
        super().__init__(f"File already exists: {dest} (renaming {source})", dest)
        self.source = source
        self.dest = dest


class MissingSource(RenamerError):
    """The file to rename is gone, e.g. moved by an earlier rename in the run."""
    kind = "missing-source"

    def __init__(self, source: Path, dest: Path):
        super().__init__(f"File to rename no longer exists: {source} (to {dest})", source)
        self.source = source
        self.dest = dest
