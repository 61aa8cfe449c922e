"""Data models for the seasonrenamer package."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

EpisodeKind = Literal["none", "single", "double", "multi"]


@dataclass(frozen=True)
class SeasonFolder:
    """A directory holding one season's episodes."""
    name: str
    number: int
    path: Path


@dataclass(frozen=True)
class EpisodeNumbers:
    """Explicit episode numbers recovered from a file name, in order."""
    numbers: tuple[int, ...] = ()

    @property
    def kind(self) -> EpisodeKind:
        if not self.numbers:
            return "none"
        if len(self.numbers) == 1:
            return "single"
        if len(self.numbers) == 2:
            return "double"
        return "multi"

    @property
    def first(self) -> int | None:
        return self.numbers[0] if self.numbers else None

    @property
    def last(self) -> int | None:
        return self.numbers[-1] if self.numbers else None


@dataclass(frozen=True)
class MediaFile:
    """Represents a video file found in a season folder."""
    file_name: str
    extension: str
    episode_numbers: EpisodeNumbers = field(default_factory=EpisodeNumbers)

    @property
    def base_name(self) -> str:
        """File name without its extension."""
        return self.file_name[:len(self.file_name) - len(self.extension)]


@dataclass(frozen=True)
class SubtitleFile:
    """Represents a subtitle paired with a media file.

    ``language_suffix`` is whatever sits between the media base name and
    the subtitle extension, e.g. ``".en"`` for ``Show - 01x02.en.srt``.
    """
    file_name: str
    language_suffix: str
    extension: str = ".srt"


@dataclass(frozen=True)
class RenameAction:
    """A single source -> destination move."""
    source: Path
    dest: Path

    @property
    def is_noop(self) -> bool:
        return self.source == self.dest


@dataclass(frozen=True)
class RenamePlan:
    """Everything that happens to one media file and its subtitle."""
    media: RenameAction
    label: str
    subtitle: RenameAction | None = None

    def actions(self) -> list[RenameAction]:
        """Actions in the order they are applied (subtitle first)."""
        if self.subtitle is None:
            return [self.media]
        return [self.subtitle, self.media]


@dataclass
class RenameResult:
    """Represents a rename operation result."""
    original_path: str
    new_path: str
    file_type: Literal["video", "subtitle"] = "video"
    skipped: bool = False
    skip_reason: str | None = None


@dataclass
class RenameOptions:
    """Run-wide switches, built from settings and command line flags."""
    dry_run: bool = False
    ignore_filename: bool = False
    media_extensions: tuple[str, ...] = (".mp4", ".mkv")
    subtitle_extension: str = ".srt"
    default_subtitle_language: str = "en"
    language_aliases: dict[str, str] = field(default_factory=lambda: {"eng": "en"})
