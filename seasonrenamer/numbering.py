"""Episode counter fold.

Within a season every media file is numbered in sorted-name order.  The
counter is an immutable value passed from one file to the next, so the
whole numbering of a season is a left fold over its file list::

    counter = EpisodeCounter()
    for numbers in per_file_numbers:
        label, counter = next_episode(counter, numbers, path)
"""
from dataclasses import dataclass
from pathlib import Path

from .errors import OrderingViolation
from .formatter import format_episode_label
from .models import EpisodeNumbers


@dataclass(frozen=True)
class EpisodeCounter:
    """Running episode count for one season folder."""
    value: int = 0

    def advance(self) -> "EpisodeCounter":
        return EpisodeCounter(self.value + 1)

    def resync(self, number: int) -> "EpisodeCounter":
        return EpisodeCounter(number)


def check_ordering(counter: EpisodeCounter, numbers: EpisodeNumbers, path: Path) -> None:
    """Raise OrderingViolation if any explicit number is below the count.

    A lower number means an earlier, already renamed file would be
    overwritten.
    """
    for number in numbers.numbers:
        if number < counter.value:
            raise OrderingViolation(path, number, counter.value)


def next_episode(
    counter: EpisodeCounter,
    numbers: EpisodeNumbers,
    path: Path
) -> tuple[str, EpisodeCounter]:
    """
    Number one media file.

    Args:
        counter: Counter state after the previous media file
        numbers: Explicit numbers found in this file's name
        path: The file, for error reporting

    Returns:
        Tuple of (episode label, counter state for the next file)

    Raises:
        OrderingViolation: If an explicit number is below the count
    """
    counter = counter.advance()
    check_ordering(counter, numbers, path)

    label = format_episode_label(numbers, counter.value)

    # Continue counting from the real episode number so that gaps in a
    # season do not shift the following positional numbers.
    if numbers.last is not None:
        counter = counter.resync(numbers.last)

    return label, counter
