"""Loading the Genius API token from the user's configuration directory."""

from __future__ import annotations

import os


class TokenError(Exception):
    """The API token could not be loaded."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class TokenFileUnreadableError(TokenError):
    """The token file could not be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"cannot read token file {path}", path)


class TokenFileEmptyError(TokenError):
    """The token file holds nothing."""

    def __init__(self, path: str) -> None:
        super().__init__(f"token file {path} is empty", path)


def config_directory() -> str:
    """Return $XDG_CONFIG_HOME, or $HOME/.config when it is not set."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg is not None:
        return xdg
    return f"{os.environ.get('HOME', '')}/.config"


def read_from_file() -> str:
    """Read the first line of `<config directory>/lyrical/token`."""
    path = config_directory() + "/lyrical/token"
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as err:
        raise TokenFileUnreadableError(path) from err

    if not text:
        raise TokenFileEmptyError(path)
    return text.split("\n", 1)[0].removesuffix("\r")