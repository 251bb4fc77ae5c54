"""Command-line argument parsing."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass

_USAGE = """Fetch and print plain text song lyrics from genius.com.

Available options:

--help                       Print this help text and exit.
--title  <title>  (required) Title of the song to search lyrics for.
--artist <artist> (optional) Restrict search results by the name of the song's
                             artist.
--url    <url>    (optional) Rather than searching, fetch lyrics from this
                             genius.com url directly. If present `--artist`,
                             `--title`, and `--list` will be ignored.
--list   [count]  (optional) Print list of [count] (default 20) genius.com search
                             results, rather than song lyrics. Useful for 
                             further filtering, manually or through external tools.
"""

_VALUE_OPTIONS = ("title", "artist", "url")
_COUNT = re.compile(r"\+?[0-9]+")
_MAX_COUNT = 2**64 - 1


class InvalidArgsError(Exception):
    """The command line could not be parsed."""


class MissingArgumentError(InvalidArgsError):
    """Neither a title nor a URL was given."""

    def __init__(self) -> None:
        super().__init__("At least one of `--title` or `--url` arguments is required")


class UnknownArgumentError(InvalidArgsError):
    """An option that is not recognised."""

    def __init__(self, arg: str) -> None:
        super().__init__(f"Argument `{arg}` unknown")
        self.arg = arg


class MissingValueError(InvalidArgsError):
    """An option that needs a value was given none."""

    def __init__(self, arg: str) -> None:
        super().__init__(f"Argument `{arg}` requires a value")
        self.arg = arg


class InvalidValueError(InvalidArgsError):
    """An option was given a value it cannot take."""

    def __init__(self, arg: str, value: str) -> None:
        super().__init__(f"Argument `{arg}` has invalid value {value}")
        self.arg = arg
        self.value = value


def _option_name(arg: str) -> str:
    while arg.startswith("--"):
        arg = arg[2:]
    return arg


def _chunks(args: Iterable[str]) -> list[list[str]]:
    """Group each option with the value that directly follows it."""
    chunks: list[list[str]] = []
    for arg in args:
        if chunks and chunks[-1][-1].startswith("--") and not arg.startswith("--"):
            chunks[-1].append(arg)
        else:
            chunks.append([arg])
    return chunks


@dataclass
class Args:
    """Options given on the command line."""

    title: str = ""
    artist: str = ""
    url: str | None = None
    list: bool = False
    max_results: int | None = None
    help: bool = False

    @classmethod
    def parse(cls, args: Iterable[str]) -> Args:
        """Parse a full argument vector; its first item is the program name."""
        items = iter(args)
        next(items, None)
        cleaned = [stripped for stripped in (a.strip() for a in items) if stripped]

        chunks = _chunks(cleaned)
        if not chunks:
            usage()
            raise MissingArgumentError()

        parsed = cls()
        for chunk in chunks:
            if len(chunk) == 1:
                parsed._parse_flag(chunk[0])
            else:
                parsed._parse_pair(chunk[0], chunk[1])

        if not parsed.title and parsed.url == "":
            raise MissingArgumentError()
        return parsed

    def _parse_flag(self, flag: str) -> None:
        name = _option_name(flag)
        if name == "list":
            self.list = True
        elif name == "help":
            self.help = True
        elif name in _VALUE_OPTIONS:
            raise MissingValueError(flag)
        else:
            raise UnknownArgumentError(flag)

    def _parse_pair(self, arg: str, value: str) -> None:
        name = _option_name(arg)
        if name in _VALUE_OPTIONS and value == "":
            raise MissingValueError(name)
        if name == "title":
            self.title = value
        elif name == "artist":
            self.artist = value
        elif name == "url":
            self.url = value
        elif name == "list":
            self.list = True
            if not _COUNT.fullmatch(value) or int(value) > _MAX_COUNT:
                raise InvalidValueError(arg, value)
            self.max_results = int(value)
        else:
            raise UnknownArgumentError(name)


def usage() -> str:
    """Write the help text to standard output and return it."""
    text = _USAGE + "\n"
    sys.stdout.write(text)
    return text