"""Command entry point: print lyrics or search results from genius.com."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from lyrical.cli import Args, InvalidArgsError, usage
from lyrical.genius import Genius, GeniusError
from lyrical.token import TokenError, read_from_file

_DEFAULT_MAX_RESULTS = 20


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; argv excludes the program name."""
    full_argv = list(sys.argv) if argv is None else ["lyrical", *argv]
    try:
        args: Args | None = Args.parse(full_argv)
        parse_error: InvalidArgsError | None = None
    except InvalidArgsError as err:
        args, parse_error = None, err

    try:
        api_token = read_from_file()
    except TokenError as err:
        print(f"load Genius API token: {err}", file=sys.stderr)
        return 1

    if args is None:
        print(parse_error)
    elif args.help:
        usage()
    elif args.url is not None:
        print(Genius(api_token).lyrics_from_url(args.url))
    elif args.list:
        max_results = (
            args.max_results if args.max_results is not None else _DEFAULT_MAX_RESULTS
        )
        print("\n".join(Genius(api_token).search(args.artist, args.title, max_results)))
    else:
        try:
            print(Genius(api_token).search_lyrics(args.artist, args.title))
        except GeniusError as err:
            print(err)
    return 0


if __name__ == "__main__":
    sys.exit(main())