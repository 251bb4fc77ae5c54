# lyrical

Fetch and print plain text song lyrics from genius.com from the command line.

## Installation

```
pip install .
```

## API token

lyrical uses the Genius API to search for songs. It reads your API token from
the first line of the file

```
$XDG_CONFIG_HOME/lyrical/token
```

If `XDG_CONFIG_HOME` is not set, `$HOME/.config/lyrical/token` is used.

The token file is read on every run, `--help` included. If it cannot be read
or is empty, `lyrical` prints an error to standard error and exits with
status 1.

## Usage

```
lyrical --title "Song Title" --artist "Artist Name"
```

Options:

```
--help                       Print the help text and exit.
--title  <title>  (required) Title of the song to search lyrics for.
--artist <artist> (optional) Restrict search results by the name of the song's
                             artist.
--url    <url>    (optional) Rather than searching, fetch lyrics from this
                             genius.com url directly. If present `--artist`,
                             `--title`, and `--list` will be ignored.
--list   [count]  (optional) Print a list of [count] (default 20) genius.com
                             search results rather than song lyrics.
```

Examples:

```
# Print the lyrics of the best match
lyrical --title "bohemian rhapsody" --artist queen

# List up to 5 matching song pages
lyrical --list 5 --title "bohemian rhapsody"

# Fetch lyrics from a known page
lyrical --url https://genius.com/some-song-lyrics
```

Artist and title are matched case-insensitively: a search hit is kept when its
artist names contain the given artist and its title contains the given title.
If a title contains a parenthesised segment such as `(Live)` or `[Remix]` and
nothing is found, the search is retried without that segment, and a note is
printed to standard error.

Argument errors (an unknown option, a missing value, a `--list` count that is
not a whole number) and "no lyrics found" are printed to standard output.

Only `https` URLs are fetched; any other URL raises `ValueError`.

## Library use

```python
from lyrical.genius import Genius

genius = Genius("token")
print(genius.search_lyrics("queen", "bohemian rhapsody"))
```

- `Genius(api_token, session=None)` takes an optional `requests.Session`.
- `Genius.search(artist, title, max_results)` returns a list of song page URLs.
- `Genius.lyrics_from_url(url)` fetches the lyrics from a single page.
- `Genius.search_lyrics(artist, title)` fetches the lyrics of the best match and
  raises `NoResultsFoundError` when nothing matches.
- `lyrical.genius.filter_matches` and `lyrical.genius.lyrics_from_page` expose
  the search-hit filtering and the page scraping on their own.
- `lyrical.cli.Args.parse(argv)` parses a full argument vector (program name
  first) and raises a subclass of `InvalidArgsError` on bad input.
- `lyrical.token.read_from_file()` loads the API token as described above.

## Running the tests

```
pip install ".[test]"
pytest
```