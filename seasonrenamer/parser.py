"""Parser module for recognising episode files and their numbers."""
import re
from pathlib import Path
from typing import Collection, Iterable

from .models import EpisodeNumbers, MediaFile, SubtitleFile


# Default media and subtitle extensions
MEDIA_EXTENSIONS = (".mp4", ".mkv")
SUBTITLE_EXTENSION = ".srt"

# A whitespace, comma, digit or dash, then "E07" / "Episode 7" / "episode7".
# Matches are non-overlapping and collected left to right, so
# "Show 1E03 -E04" yields (3, 4) and "S001E002" yields (2,).
EPISODE_PATTERN = re.compile(r'[\s,\d-](?:E|[Ee]pisode\s*)(\d+)')


def get_extension(file_name: str) -> str:
    """Return the final suffix of *file_name* ("" for dotfiles)."""
    return Path(file_name).suffix


def is_media_file(file_name: str, extensions: Iterable[str] = MEDIA_EXTENSIONS) -> bool:
    """Check if file is a media file based on extension."""
    wanted = {ext.lower() for ext in extensions}
    return get_extension(file_name).lower() in wanted


def is_subtitle_file(file_name: str, extension: str = SUBTITLE_EXTENSION) -> bool:
    """Check if file is a subtitle file based on extension."""
    return file_name.lower().endswith(extension.lower())


def extract_episode_numbers(file_name: str) -> EpisodeNumbers:
    """
    Extract explicit episode numbers from a file name.

    Args:
        file_name: Name of the file (extension included or not)

    Returns:
        EpisodeNumbers holding every match in order of appearance
    """
    numbers = tuple(int(m.group(1)) for m in EPISODE_PATTERN.finditer(file_name))
    return EpisodeNumbers(numbers)


def parse_media_file(file_name: str, ignore_filename: bool = False) -> MediaFile:
    """
    Build a MediaFile from a file name.

    Args:
        file_name: Name of the media file
        ignore_filename: Skip episode number extraction entirely

    Returns:
        MediaFile with extension and explicit episode numbers
    """
    numbers = EpisodeNumbers() if ignore_filename else extract_episode_numbers(file_name)
    return MediaFile(
        file_name=file_name,
        extension=get_extension(file_name),
        episode_numbers=numbers,
    )


def find_subtitle(
    media_base: str,
    file_names: Iterable[str],
    extension: str = SUBTITLE_EXTENSION,
    claimed: Collection[str] = (),
    media_bases: Iterable[str] = ()
) -> str | None:
    """
    Find the subtitle that belongs to a media file.

    The first name in listing order that starts with the media base name
    and ends with the subtitle extension wins.  Subtitles already paired
    with another video are skipped, and so are subtitles that start with
    a longer media base name ("Ep 10.srt" belongs to "Ep 10.mkv", not to
    "Ep 1.mkv").

    Args:
        media_base: Media file name without its extension
        file_names: Sorted listing of the season folder
        extension: Subtitle extension to look for
        claimed: Subtitle names already paired in this season
        media_bases: Base names of every media file in the folder

    Returns:
        The subtitle file name, or None
    """
    longer_bases = [
        base for base in media_bases
        if len(base) > len(media_base) and base.startswith(media_base)
    ]
    for name in file_names:
        if name in claimed:
            continue
        if not name.startswith(media_base) or not is_subtitle_file(name, extension):
            continue
        if any(name.startswith(base) for base in longer_bases):
            continue
        return name
    return None


def parse_subtitle_file(
    file_name: str,
    media_base: str,
    extension: str = SUBTITLE_EXTENSION
) -> SubtitleFile:
    """
    Split a paired subtitle name into its preserved segment and extension.

    For "Show - 01x02.en.srt" paired with "Show - 01x02" the preserved
    segment is ".en".
    """
    suffix = file_name[len(file_name) - len(extension):]
    middle = file_name[len(media_base):len(file_name) - len(extension)]
    return SubtitleFile(file_name=file_name, language_suffix=middle, extension=suffix)
