from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Movie:
    id: int
    original_language: str  # ISO 639-1
    original_title: str
    overview: str
    popularity: float
    release_date: date | None
    title: str
    vote_average: float
    vote_count: int
    poster_path: str | None = None


@dataclass(frozen=True)
class SearchResult:
    page: int
    total_pages: int
    total_results: int
    results: list[Movie] = field(default_factory=list)
