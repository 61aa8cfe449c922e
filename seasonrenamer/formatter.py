"""Formatter module for generating canonical episode file names."""
from .models import EpisodeNumbers, SubtitleFile


# Width every season and episode number is zero-padded to
NUMBER_WIDTH = 3

DEFAULT_SUBTITLE_LANGUAGE = "en"
LANGUAGE_ALIASES = {"eng": "en"}


def format_episode_number(number: int) -> str:
    """Format a single episode number, e.g. 7 -> "E007"."""
    return f"E{number:0{NUMBER_WIDTH}d}"


def format_episode_label(numbers: EpisodeNumbers, counter_value: int) -> str:
    """
    Choose the episode label for a file.

    Args:
        numbers: Explicit numbers found in the file name
        counter_value: Positional count, used when no number was found

    Returns:
        "E007" for one number, "E003-E004" for two, "E003-E005" (first
        to last) for more than two, and the positional label otherwise.
    """
    if numbers.kind == "none":
        return format_episode_number(counter_value)
    if numbers.kind == "single":
        return format_episode_number(numbers.numbers[0])
    return f"{format_episode_number(numbers.first)}-{format_episode_number(numbers.last)}"


def format_episode_name(season: int, label: str, extension: str = "") -> str:
    """Build "S001E002.mkv" from season 1, label "E002" and ".mkv"."""
    return f"S{season:0{NUMBER_WIDTH}d}{label}{extension}"


def normalize_language_suffix(
    suffix: str,
    default_language: str = DEFAULT_SUBTITLE_LANGUAGE,
    aliases: dict[str, str] | None = None
) -> str:
    """
    Normalize the segment between a subtitle's base name and extension.

    A segment without a dotted tag gets the default language appended;
    a known alias ("eng") is replaced by its short form ("en").

    Examples:
        ".en"     -> ".en"
        ""        -> ".en"
        ".eng"    -> ".en"
        ".forced" -> ".forced"
    """
    if aliases is None:
        aliases = LANGUAGE_ALIASES

    head, dot, tag = suffix.rpartition(".")
    if not dot:
        return f"{suffix}.{default_language}"
    if not tag:
        return f"{head}.{default_language}"

    normalized = aliases.get(tag.lower())
    if normalized is None:
        return suffix
    return f"{head}.{normalized}"


def format_subtitle_name(
    new_base: str,
    subtitle: SubtitleFile,
    default_language: str = DEFAULT_SUBTITLE_LANGUAGE,
    aliases: dict[str, str] | None = None
) -> str:
    """
    Format a subtitle filename to match its renamed video.

    Args:
        new_base: New video filename without extension
        subtitle: Parsed subtitle with its preserved segment
        default_language: Language appended when the subtitle has none
        aliases: Language tag normalizations

    Returns:
        Formatted subtitle filename, e.g. "S001E002.en.srt"
    """
    suffix = normalize_language_suffix(subtitle.language_suffix, default_language, aliases)
    return f"{new_base}{suffix}{subtitle.extension}"
