"""Season folder discovery."""
import logging
from pathlib import Path

from .errors import ConfigurationError
from .models import SeasonFolder

log = logging.getLogger(__name__)

SEASON_PREFIX = "Season "
SPECIALS_NAME = "Specials"


def is_season_folder_name(name: str) -> bool:
    """True for "Season <anything>" and exactly "Specials"."""
    return name.startswith(SEASON_PREFIX) or name == SPECIALS_NAME


def parse_season_number(name: str) -> int | None:
    """
    Get the season number of a season folder name.

    Returns 0 for "Specials", N for "Season N", and None when the name
    does not carry a usable number ("Season Two", "Season -1").
    """
    if name == SPECIALS_NAME:
        return 0
    if not name.startswith(SEASON_PREFIX):
        return None
    digits = name[len(SEASON_PREFIX):].strip()
    if not digits.isdigit() or not digits.isascii():
        return None
    return int(digits)


def find_season_folders(root: Path) -> list[SeasonFolder]:
    """
    Find the season folders directly under a show directory.

    Args:
        root: Show directory

    Returns:
        SeasonFolder list ordered by season number, then name

    Raises:
        ConfigurationError: If root is not an existing, readable directory
    """
    if not root.is_dir():
        raise ConfigurationError(f"No such directory: {root}", root)

    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise ConfigurationError(f"Cannot read {root}: {e}", root) from e

    seasons = []
    for entry in entries:
        # Symlinked folders are not followed
        if entry.is_symlink() or not entry.is_dir():
            continue
        if not is_season_folder_name(entry.name):
            continue

        number = parse_season_number(entry.name)
        if number is None:
            log.warning("Skipping %s: no season number in folder name", entry)
            continue
        seasons.append(SeasonFolder(name=entry.name, number=number, path=entry))

    return sorted(seasons, key=lambda s: (s.number, s.name))


def list_season_files(season: SeasonFolder) -> list[str]:
    """Return the sorted names of the regular files in a season folder."""
    try:
        entries = list(season.path.iterdir())
    except OSError as e:
        raise ConfigurationError(f"Cannot read {season.path}: {e}", season.path) from e
    return sorted(entry.name for entry in entries if entry.is_file())

