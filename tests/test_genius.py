from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from lyrical.genius import (
    SEARCH_URL,
    Genius,
    GeniusError,
    NoResultsFoundError,
    filter_matches,
    lyrics_from_page,
)

SONG_URL = "https://genius.example.com/artist-song-lyrics"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def hit(url, artist="The Artist", title="Song", kind="song"):
    return {
        "type": kind,
        "result": {"artist_names": artist, "title_with_featured": title, "url": url},
    }


def api_body(*hits):
    return {"response": {"hits": list(hits)}}


def test_filter_respects_max_results():
    matches = [hit(f"https://genius.example.com/{n}") for n in range(5)]
    assert filter_matches(matches, "", "song", 2) == [
        "https://genius.example.com/0",
        "https://genius.example.com/1",
    ]


def test_filter_skips_non_songs():
    matches = [hit("https://genius.example.com/a", kind="album"), hit(SONG_URL)]
    assert filter_matches(matches, "", "song", 10) == [SONG_URL]


def test_filter_matches_artist_case_insensitively():
    matches = [hit("https://genius.example.com/x", artist="Other"), hit(SONG_URL)]
    assert filter_matches(matches, "artist", "song", 10) == [SONG_URL]


def test_filter_requires_title():
    assert filter_matches([hit(SONG_URL, title="Different")], "", "song", 10) == []


def test_filter_rejects_missing_url():
    broken = {"type": "song", "result": {"artist_names": "A", "title_with_featured": "Song"}}
    with pytest.raises(ValueError):
        filter_matches([broken], "", "song", 10)


def test_lyrics_from_page_joins_containers():
    html = (
        '<div data-lyrics-container="true">first<i> line</i></div>'
        "<div>ignored</div>"
        '<div data-lyrics-container="true">second</div>'
    )
    assert lyrics_from_page(html) == "first line\nsecond\n"


def test_lyrics_from_page_without_containers():
    assert lyrics_from_page("<p>nothing</p>") == ""


def test_search_sends_query_and_token(mocked):
    mocked.add(responses.GET, SEARCH_URL, json=api_body(hit(SONG_URL)))
    assert Genius("token").search("The Artist", "Song", 5) == [SONG_URL]
    request = mocked.calls[0].request
    params = parse_qs(urlsplit(request.url).query)
    assert params["q"] == ["the artist song"]
    assert params["per_page"] == ["20"]
    assert request.headers["Authorization"] == "Bearer token"


def test_search_retries_without_parenthesised_segment(mocked, capsys):
    mocked.add(responses.GET, SEARCH_URL, json=api_body())
    mocked.add(responses.GET, SEARCH_URL, json=api_body(hit(SONG_URL)))
    assert Genius("token").search("Artist", "Song (Live)", 5) == [SONG_URL]
    params = parse_qs(urlsplit(mocked.calls[1].request.url).query)
    assert params["q"] == ["artist - song"]
    assert "INFO: retrying search with `artist - song`" in capsys.readouterr().err


def test_search_without_results_does_not_retry_plain_title(mocked):
    mocked.add(responses.GET, SEARCH_URL, json=api_body())
    assert Genius("token").search("Artist", "Song", 5) == []
    assert len(mocked.calls) == 1


def test_search_rejects_malformed_response(mocked):
    mocked.add(responses.GET, SEARCH_URL, json={"response": {}})
    with pytest.raises(ValueError):
        Genius("token").search("", "Song", 5)


def test_lyrics_from_url_replaces_line_breaks(mocked):
    mocked.add(
        responses.GET,
        SONG_URL,
        body='<div data-lyrics-container="true">one<br/>two</div>',
    )
    assert Genius("token").lyrics_from_url(SONG_URL) == (
        f"Lyrics retrieved from {SONG_URL}\n\none\ntwo\n"
    )


def test_lyrics_from_url_rejects_invalid_url():
    with pytest.raises(ValueError):
        Genius("token").lyrics_from_url("not a url")


def test_lyrics_from_url_rejects_plain_http():
    with pytest.raises(ValueError):
        Genius("token").lyrics_from_url("http://genius.example.com/song")


def test_search_lyrics_fetches_first_match(mocked):
    mocked.add(responses.GET, SEARCH_URL, json=api_body(hit(SONG_URL)))
    mocked.add(
        responses.GET, SONG_URL, body='<div data-lyrics-container="true">words</div>'
    )
    lyrics = Genius("token").search_lyrics("The Artist", "Song")
    assert lyrics.startswith(f"Lyrics retrieved from {SONG_URL}")
    assert lyrics.endswith("words\n")


def test_search_lyrics_without_results(mocked):
    mocked.add(responses.GET, SEARCH_URL, json=api_body())
    with pytest.raises(NoResultsFoundError) as info:
        Genius("token").search_lyrics("Foo", "Bar")
    assert str(info.value) == "No lyrics found for `Foo - Bar`"
    assert isinstance(info.value, GeniusError)