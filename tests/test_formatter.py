"""Tests for canonical name formatting."""

from seasonrenamer.formatter import (
    format_episode_label,
    format_episode_name,
    format_episode_number,
    format_subtitle_name,
    normalize_language_suffix,
)
from seasonrenamer.models import EpisodeNumbers, SubtitleFile


def test_episode_number_padding() -> None:
    assert format_episode_number(7) == "E007"
    assert format_episode_number(1234) == "E1234"


def test_episode_label() -> None:
    assert format_episode_label(EpisodeNumbers(), 4) == "E004"
    assert format_episode_label(EpisodeNumbers((12,)), 4) == "E012"
    assert format_episode_label(EpisodeNumbers((3, 4)), 1) == "E003-E004"


def test_episode_name() -> None:
    assert format_episode_name(0, "E001", ".mkv") == "S000E001.mkv"
    assert format_episode_name(12, "E003-E004", ".mp4") == "S012E003-E004.mp4"
    assert format_episode_name(1, "E002") == "S001E002"


def test_language_suffix_rules() -> None:
    assert normalize_language_suffix(".en") == ".en"
    assert normalize_language_suffix("") == ".en"
    assert normalize_language_suffix(".eng") == ".en"
    assert normalize_language_suffix(".ENG") == ".en"
    assert normalize_language_suffix(".forced") == ".forced"
    assert normalize_language_suffix(".forced.eng") == ".forced.en"
    assert normalize_language_suffix(" forced") == " forced.en"
    assert normalize_language_suffix(".") == ".en"


def test_language_suffix_custom_default() -> None:
    assert normalize_language_suffix("", default_language="de") == ".de"
    assert normalize_language_suffix(".ger", aliases={"ger": "de"}) == ".de"


def test_subtitle_name() -> None:
    sub = SubtitleFile(file_name="Show - 01x02.en.srt", language_suffix=".en")
    assert format_subtitle_name("S001E002", sub) == "S001E002.en.srt"

    bare = SubtitleFile(file_name="Show - 01x02.srt", language_suffix="")
    assert format_subtitle_name("S001E002", bare) == "S001E002.en.srt"
