"""
Tag token classification for the text between a pair of angle brackets.
"""

import re
from typing import NamedTuple, Optional, Union

_NAME_END = re.compile(r"[\s/]")


class OpeningTag(NamedTuple):
    name: str


class ClosingTag(NamedTuple):
    name: str


class SelfClosingTag(NamedTuple):
    name: str


TagToken = Union[OpeningTag, ClosingTag, SelfClosingTag]


def classify(inner: str) -> Optional[TagToken]:
    """
    Classify the content found between ``<`` and ``>``.

    Returns None for an empty token (a stray ``<>``). Closing tag names are
    everything after the slash, trimmed; opening and self-closing names stop
    at the first whitespace or slash. No case normalization is done.
    """
    inner = inner.strip()
    if not inner:
        return None

    if inner.startswith("/"):
        return ClosingTag(inner[1:].strip())

    if inner.endswith("/"):
        return SelfClosingTag(_NAME_END.split(inner[:-1].strip(), 1)[0])

    return OpeningTag(_NAME_END.split(inner, 1)[0])
