#!/usr/bin/env python3
"""
season-renamer - Episode File Normalizer

A CLI tool for renaming the episodes of a show to SxxxExxx names.
"""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterator

from .errors import DestinationCollision, MissingSource, RenamerError
from .formatter import format_episode_name, format_subtitle_name
from .models import RenameAction, RenameOptions, RenamePlan, RenameResult, SeasonFolder
from .numbering import EpisodeCounter, next_episode
from .parser import find_subtitle, is_media_file, parse_media_file, parse_subtitle_file
from .seasons import find_season_folders, list_season_files
from .settings import SettingsManager

log = logging.getLogger(__name__)


class Namespace:
    """Existence view of the filesystem that includes this run's renames.

    In a dry run nothing moves on disk, so the names vacated and taken
    by earlier (simulated) renames are tracked here.  Collision checks
    then see the same namespace a real run would.
    """

    def __init__(self) -> None:
        self._created: set[Path] = set()
        self._removed: set[Path] = set()

    def exists(self, path: Path) -> bool:
        if path in self._created:
            return True
        if path in self._removed:
            return False
        return path.exists()

    def move(self, source: Path, dest: Path) -> None:
        self._created.discard(source)
        self._removed.add(source)
        self._removed.discard(dest)
        self._created.add(dest)


def _is_same_file(source: Path, dest: Path) -> bool:
    """True when *dest* is *source* under another spelling (case-insensitive FS)."""
    try:
        return os.path.samefile(source, dest)
    except OSError:
        return False


def check_destination(action: RenameAction, namespace: Namespace) -> None:
    """
    Make sure a rename does not overwrite an unrelated file.

    Raises:
        MissingSource: If the source was already moved away in this run
        DestinationCollision: If the destination is taken by another file
    """
    if action.is_noop:
        return
    if not namespace.exists(action.source):
        raise MissingSource(action.source, action.dest)
    if namespace.exists(action.dest) and not _is_same_file(action.source, action.dest):
        raise DestinationCollision(action.source, action.dest)


def rename_file(action: RenameAction, namespace: Namespace, dry_run: bool) -> None:
    """
    Rename a file, or only record the rename in a dry run.

    Args:
        action: Source and destination
        namespace: Namespace updated with the move
        dry_run: If True, don't actually rename
    """
    if not dry_run:
        action.source.rename(action.dest)
    namespace.move(action.source, action.dest)
    log.info("%s => %s", action.source, action.dest)


def plan_season(
    season: SeasonFolder,
    file_names: list[str],
    options: RenameOptions
) -> Iterator[RenamePlan]:
    """
    Plan the renames of one season folder.

    Plans are produced lazily, one media file at a time, so a fatal
    error for a file is raised only after every earlier plan has been
    consumed.

    Args:
        season: The season folder
        file_names: Sorted listing of the folder
        options: Run options

    Yields:
        One RenamePlan per media file, in listing order

    Raises:
        OrderingViolation: If a file's episode number is below the count
    """
    counter = EpisodeCounter()
    claimed: set[str] = set()
    media_bases = [
        parse_media_file(name, ignore_filename=True).base_name
        for name in file_names
        if is_media_file(name, options.media_extensions)
    ]

    for file_name in file_names:
        if not is_media_file(file_name, options.media_extensions):
            continue

        media = parse_media_file(file_name, options.ignore_filename)
        source = season.path / file_name

        label, counter = next_episode(counter, media.episode_numbers, source)
        log.debug("%s: numbers=%s label=%s", file_name, media.episode_numbers.numbers, label)

        new_base = format_episode_name(season.number, label)
        media_action = RenameAction(source, season.path / f"{new_base}{media.extension}")

        subtitle_action = None
        subtitle_name = find_subtitle(
            media.base_name,
            file_names,
            options.subtitle_extension,
            claimed=claimed,
            media_bases=media_bases
        )
        if subtitle_name:
            claimed.add(subtitle_name)
            subtitle = parse_subtitle_file(
                subtitle_name, media.base_name, options.subtitle_extension
            )
            new_subtitle_name = format_subtitle_name(
                new_base,
                subtitle,
                options.default_subtitle_language,
                options.language_aliases
            )
            subtitle_action = RenameAction(
                season.path / subtitle_name, season.path / new_subtitle_name
            )

        yield RenamePlan(media=media_action, label=label, subtitle=subtitle_action)


def process_plan(plan: RenamePlan, namespace: Namespace, dry_run: bool) -> list[RenameResult]:
    """
    Apply one plan: subtitle first, then the video.

    Both destinations are checked before either file is touched.

    Returns:
        List of RenameResult, subtitle (if any) before video
    """
    for action in plan.actions():
        check_destination(action, namespace)

    results = []
    for action in plan.actions():
        file_type = "video" if action is plan.media else "subtitle"

        if action.is_noop:
            log.debug("Already named correctly: %s", action.source)
            results.append(RenameResult(
                original_path=str(action.source),
                new_path=str(action.dest),
                file_type=file_type,
                skipped=True,
                skip_reason="Already named correctly"
            ))
            continue

        rename_file(action, namespace, dry_run)
        results.append(RenameResult(
            original_path=str(action.source),
            new_path=str(action.dest),
            file_type=file_type
        ))

    return results


def process_season(
    season: SeasonFolder,
    options: RenameOptions,
    namespace: Namespace | None = None
) -> list[RenameResult]:
    """Rename every episode (and paired subtitle) of one season folder."""
    if namespace is None:
        namespace = Namespace()

    log.debug("Processing %s (season %d)", season.path, season.number)
    file_names = list_season_files(season)

    results = []
    for plan in plan_season(season, file_names, options):
        results.extend(process_plan(plan, namespace, options.dry_run))
    return results


def process_show(root: Path, options: RenameOptions) -> list[RenameResult]:
    """
    Rename the episodes of every season folder under a show directory.

    Raises:
        ConfigurationError: If root is not a directory
        OrderingViolation: On an out-of-order episode number
        DestinationCollision: If a rename would overwrite another file
    """
    seasons = find_season_folders(root)
    if not seasons:
        log.warning("No season folders found in %s", root)

    namespace = Namespace()
    results = []
    for season in seasons:
        results.extend(process_season(season, options, namespace))
    return results


def setup_logging(verbose: bool = False) -> None:
    """Send plain messages to stderr; DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(format="%(message)s")
    logging.getLogger(__package__).setLevel(level)


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="season-renamer",
        description="Rename the episodes in a show's season folders to SxxxExxx names."
    )

    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        help="Show directory containing 'Season N' and 'Specials' folders"
    )
    parser.add_argument(
        "--path", "-p",
        dest="path_option",
        type=Path,
        default=None,
        metavar="PATH",
        help="Show directory, as an alternative to the positional argument"
    )
    parser.add_argument(
        "--dry-run", "-d",
        action="store_true",
        help="Show what would be renamed without actually renaming"
    )
    parser.add_argument(
        "--ignore-filename",
        action="store_true",
        help="Ignore episode numbers in file names and number by position "
             "(useful after a failed renaming attempt)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: platform config directory)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed debug information"
    )

    parsed_args = parser.parse_args(args)
    if parsed_args.path is not None and parsed_args.path_option is not None:
        parser.error("give the show directory either as PATH or with --path, not both")
    root = parsed_args.path or parsed_args.path_option
    if root is None:
        parser.error("the show directory is required (PATH or --path)")

    setup_logging(parsed_args.verbose)

    try:
        settings = SettingsManager(parsed_args.config)
        options = settings.options(
            dry_run=parsed_args.dry_run,
            ignore_filename=parsed_args.ignore_filename
        )

        if options.dry_run:
            log.info("This is just a dry run.")

        results = process_show(root, options)
    except (RenamerError, OSError) as e:
        log.error("Error: %s", e)
        return 1

    renamed = sum(1 for r in results if not r.skipped)
    unchanged = len(results) - renamed

    log.info("-" * 50)
    if options.dry_run:
        log.info("Would rename: %d files", renamed)
    else:
        log.info("Renamed: %d | Unchanged: %d", renamed, unchanged)

    return 0


if __name__ == "__main__":
    sys.exit(main())
