#------------------------------------------------------------
#                          models.py
#     Defines enums and dataclasses used by the updater
#                         pipeline.

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple
from .config import (
    DEFAULT_PROGRESS_STYLE,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_TIME_RANGE,
    GIST_TITLES,
    PROGRESS_STYLES,
)

def _normalize_choice(value: Optional[str]) -> str:
    return (value or "").strip().lower()

class TimeRange(Enum):
    YESTERDAY = "yesterday"
    LAST_7_DAYS = "last_7_days"
    LAST_30_DAYS = "last_30_days"
    LAST_YEAR = "last_year"

    # This function does map a raw setting onto a time range.
    # Unset or unrecognized values fall back to the default range.
    @classmethod
    def resolve(cls, value: Optional[str]) -> "TimeRange":
        normalized = _normalize_choice(value)
        for member in cls:
            if member.value == normalized:
                return member
        return cls(DEFAULT_TIME_RANGE)

    # This function does return the gist filename for the range.
    # Every member has an entry in the titles table.
    @property
    def title(self) -> str:
        return GIST_TITLES[self.value]

# Glyph pair and block count that draw one progress bar.
@dataclass(frozen=True)
class BarGlyphs:
    filled: str
    empty: str
    blocks: int

class ProgressStyle(Enum):
    DEFAULT = "default"
    ARROW = "arrow"
    HASH = "hash"

    # This function does map a raw setting onto a bar style.
    # Unset or unrecognized values fall back to the default style.
    @classmethod
    def resolve(cls, value: Optional[str]) -> "ProgressStyle":
        normalized = _normalize_choice(value)
        for member in cls:
            if member.value == normalized:
                return member
        return cls(DEFAULT_PROGRESS_STYLE)

    # This function does look up the glyphs for the style.
    # It unpacks the (filled, empty, blocks) table entry.
    @property
    def glyphs(self) -> BarGlyphs:
        filled, empty, blocks = PROGRESS_STYLES[self.value]
        return BarGlyphs(filled=filled, empty=empty, blocks=blocks)

@dataclass(frozen=True)
class LanguageStat:
    name: str
    total_seconds: int

    # This function does build a language entry from one API object.
    # Fractional seconds are truncated; non-finite or negative totals are rejected.
    @classmethod
    def from_api(cls, item: dict) -> "LanguageStat":
        raw_seconds = float(item["total_seconds"])
        if not math.isfinite(raw_seconds):
            raise ValueError(f"non-finite total_seconds for {item.get('name')!r}: {raw_seconds}")
        seconds = int(raw_seconds)
        if seconds < 0:
            raise ValueError(f"negative total_seconds for {item.get('name')!r}: {seconds}")
        return cls(name=str(item["name"]), total_seconds=seconds)

@dataclass(frozen=True)
class StatsSnapshot:
    languages: Tuple[LanguageStat, ...] = ()

    # This function does sum seconds across every language.
    # Hidden languages count toward the total as well.
    @property
    def total_seconds(self) -> int:
        return sum(language.total_seconds for language in self.languages)

def _parse_languages(items: Any) -> Tuple[LanguageStat, ...]:
    if not isinstance(items, list):
        raise TypeError(f"expected a list of languages, got {type(items).__name__}")
    return tuple(LanguageStat.from_api(item) for item in items)

@dataclass(frozen=True)
class AggregateStatsResponse:
    """Payload of ``/stats/{range}``: ``{"data": {"languages": [...]}}``."""

    languages: Tuple[LanguageStat, ...]
    kind: str = "aggregate"

    @classmethod
    def from_payload(cls, payload: dict) -> "AggregateStatsResponse":
        return cls(languages=_parse_languages(payload["data"]["languages"]))

    def to_snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(languages=self.languages)

@dataclass(frozen=True)
class DailySummariesResponse:
    """Payload of ``/summaries``: ``{"data": [{"languages": [...]}, ...]}``."""

    days: Tuple[Tuple[LanguageStat, ...], ...]
    kind: str = "summaries"

    @classmethod
    def from_payload(cls, payload: dict) -> "DailySummariesResponse":
        days = payload["data"]
        if not isinstance(days, list):
            raise TypeError(f"expected a list of summaries, got {type(days).__name__}")
        return cls(days=tuple(_parse_languages(day.get("languages", [])) for day in days))

    # Only the first day is reported; no days means no languages.
    def to_snapshot(self) -> StatsSnapshot:
        if not self.days:
            return StatsSnapshot()
        return StatsSnapshot(languages=self.days[0])

# One file of the target gist, addressed by its filename.
@dataclass(frozen=True)
class RemoteFile:
    filename: str
    content: str

    # This function does parse the gist files mapping in response order.
    # The mapping key is the filename the PATCH endpoint addresses.
    @classmethod
    def list_from_gist(cls, payload: dict) -> List["RemoteFile"]:
        files = payload["files"]
        if not isinstance(files, dict):
            raise TypeError(f"expected a files mapping, got {type(files).__name__}")
        return [cls(filename=key, content=(entry or {}).get("content") or "") for key, entry in files.items()]

@dataclass
class UpdateConfig:
    wakatime_token: str
    github_token: str
    gist_id: str
    time_range: TimeRange = TimeRange.LAST_7_DAYS
    progress_style: ProgressStyle = ProgressStyle.DEFAULT
    request_timeout_seconds: int = DEFAULT_REQUEST_TIMEOUT_SECONDS
