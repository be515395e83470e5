"""Print arguments separated by spaces."""

from typing import Sequence

from linekit.errors import ConfigurationError


def echo(words: Sequence[str], omit_newline: bool = False) -> str:
    if not words:
        raise ConfigurationError("echo requires at least one argument")
    return " ".join(words) + ("" if omit_newline else "\n")
