"""Searching genius.com and scraping song lyrics from it."""

from __future__ import annotations

import sys
from typing import Any
from urllib.parse import urlsplit

import requests
from bs4 import BeautifulSoup

SEARCH_URL = "https://api.genius.com/search"
_TIMEOUT = 30
_DELIMITERS = ("(", "{", "[")


class GeniusError(Exception):
    """A lyrics lookup failed."""


class NoResultsFoundError(GeniusError):
    """A search found no matching song."""

    def __init__(self, search: str) -> None:
        super().__init__(f"No lyrics found for `{search}`")
        self.search = search


def _lookup(value: Any, *keys: str) -> Any:
    for key in keys:
        value = value.get(key) if isinstance(value, dict) else None
    return value


def _check_url(url: str) -> None:
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ValueError("URL is invalid")
    if parts.scheme.lower() != "https":
        raise ValueError(f"refusing to fetch non-https URL {url}")


def filter_matches(
    matches: list[Any], artist: str, title: str, max_results: int
) -> list[str]:
    """Return URLs of song hits whose artist and title contain the given text."""
    results: list[str] = []
    for match in matches:
        if len(results) >= max_results:
            break
        if _lookup(match, "type") != "song":
            continue
        if artist:
            names = _lookup(match, "result", "artist_names")
            if not isinstance(names, str) or artist not in names.lower():
                continue
        song_title = _lookup(match, "result", "title_with_featured")
        if not isinstance(song_title, str) or title not in song_title.lower():
            continue
        url = _lookup(match, "result", "url")
        if not isinstance(url, str):
            raise ValueError("failed to deserialize url from results")
        results.append(url)
    return results


def lyrics_from_page(html: str) -> str:
    """Extract the text of every lyrics container, each followed by a newline."""
    page = BeautifulSoup(html, "html.parser")
    return "".join(
        container.get_text() + "\n"
        for container in page.select('div[data-lyrics-container="true"]')
    )


class Genius:
    """Client for the genius.com search API and song pages."""

    def __init__(self, api_token: str, session: requests.Session | None = None) -> None:
        self._api_token = api_token
        self._session = session if session is not None else requests.Session()

    def search_lyrics(self, artist: str, title: str) -> str:
        """Fetch the lyrics of the best search match."""
        results = self.search(artist, title, 1)
        if not results:
            raise NoResultsFoundError(f"{artist} - {title}")
        return self.lyrics_from_url(results[0])

    def lyrics_from_url(self, url: str) -> str:
        """Fetch the lyrics on a genius.com song page."""
        _check_url(url)
        response = self._session.get(url, timeout=_TIMEOUT)
        lyrics = lyrics_from_page(response.text.replace("<br/>", "\n"))
        return f"Lyrics retrieved from {url}\n\n{lyrics}"

    def search(self, artist: str, title: str, max_results: int) -> list[str]:
        """Return up to max_results URLs of songs matching artist and title."""
        artist = artist.lower()
        title = title.lower()
        results = filter_matches(self._query(f"{artist} {title}"), artist, title, max_results)

        # A parenthesised segment such as "(Live)" or "(Ft. Someone)" can spoil the
        # search; retry without it, assuming it sits at the end of the title.
        cut = min((title.find(d) for d in _DELIMITERS if d in title), default=-1)
        if not results and cut >= 0:
            new_title = title[:cut].strip()
            matches = self._query(f"{artist} - {new_title}")
            print(f"INFO: retrying search with `{artist} - {new_title}`", file=sys.stderr)
            results = filter_matches(matches, artist, new_title, max_results)

        return results

    def _query(self, query: str) -> list[Any]:
        response = self._session.get(
            SEARCH_URL,
            params={"q": query, "per_page": "20"},
            headers={"Authorization": f"Bearer {self._api_token}"},
            timeout=_TIMEOUT,
        )
        try:
            data = response.json()
        except ValueError as err:
            raise ValueError("failed to deserialize response") from err
        hits = _lookup(data, "response", "hits")
        if not isinstance(hits, list):
            raise ValueError("failed to deserialize results")
        return hits