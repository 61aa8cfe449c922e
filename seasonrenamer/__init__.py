"""
season-renamer - Episode File Normalizer

Renames the episodes in a show's season folders to SxxxExxx names,
keeping paired subtitles in step.
"""
from .models import (
    SeasonFolder,
    EpisodeNumbers,
    MediaFile,
    SubtitleFile,
    RenameAction,
    RenamePlan,
    RenameResult,
    RenameOptions
)
from .errors import (
    RenamerError,
    ConfigurationError,
    OrderingViolation,
    DestinationCollision,
    MissingSource
)
from .parser import (
    extract_episode_numbers,
    is_media_file,
    is_subtitle_file,
    find_subtitle
)
from .formatter import (
    format_episode_label,
    format_episode_name,
    format_subtitle_name
)
from .numbering import EpisodeCounter, next_episode
from .seasons import find_season_folders
from .renamer import plan_season, process_season, process_show

__version__ = "0.1.0"
__all__ = [
    "SeasonFolder",
    "EpisodeNumbers",
    "MediaFile",
    "SubtitleFile",
    "RenameAction",
    "RenamePlan",
    "RenameResult",
    "RenameOptions",
    "RenamerError",
    "ConfigurationError",
    "OrderingViolation",
    "DestinationCollision",
    "MissingSource",
    "extract_episode_numbers",
    "is_media_file",
    "is_subtitle_file",
    "find_subtitle",
    "format_episode_label",
    "format_episode_name",
    "format_subtitle_name",
    "EpisodeCounter",
    "next_episode",
    "find_season_folders",
    "plan_season",
    "process_season",
    "process_show",
]
