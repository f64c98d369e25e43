"""Streaming extraction of translated text from gtx response bodies.

The translate endpoint answers with a JSON-like body that no JSON parser
accepts (omitted array elements appear as bare commas)::

    [[["I am not you. ","Mi estas ne vin.",,,0],["You are not me.",...,,,0]],,"eo",...]

The scanner below walks the body once. It emits the first literal of every
element, skips the second literal and the numeric filler until the
``,,,0]`` element boundary, and stops for good at ``,,,0]]``.
"""

from __future__ import annotations

from enum import Enum, auto
from itertools import islice
from typing import Dict, Iterator, List, Tuple

# ``[[["`` is dropped without being looked at.
PREFIX_LENGTH = 4

# Characters swallowed after an element boundary fires: the ``["`` that
# opens the next element's translated literal.
SEPARATOR_LENGTH = 2

SENTINEL = ",,,0]"

SENTINEL_TRANSITIONS: Dict[Tuple[int, str], int] = {
    (0, ","): 1,
    (1, ","): 2,
    (2, ","): 3,
    (3, "0"): 4,
    (4, "]"): 5,
}


class ScanMode(Enum):
    """Operating mode of the scanner."""

    NORMAL = auto()
    ESCAPE = auto()
    SKIPPING = auto()
    POST_SENTINEL = auto()


class Boundary(Enum):
    """Outcome of feeding one character to the sentinel matcher."""

    NONE = auto()
    ELEMENT = auto()
    STREAM = auto()


def sentinel_step(progress: int, character: str) -> Tuple[int, Boundary]:
    """Advance the ``,,,0]`` matcher by one character."""

    if progress == len(SENTINEL):
        if character == "]":
            return progress, Boundary.STREAM
        return 0, Boundary.ELEMENT
    return SENTINEL_TRANSITIONS.get((progress, character), 0), Boundary.NONE


def iter_fragments(raw: str) -> Iterator[str]:
    """Yield the translated literal of each element, in order.

    A literal cut short by the end of ``raw`` is yielded as it stands.
    """

    mode = ScanMode.NORMAL
    progress = 0
    remaining = 0
    fragment: List[str] = []

    for character in islice(raw, PREFIX_LENGTH, None):
        if mode is ScanMode.POST_SENTINEL:
            remaining -= 1
            if remaining == 0:
                mode = ScanMode.NORMAL
        elif mode is ScanMode.SKIPPING:
            progress, boundary = sentinel_step(progress, character)
            if boundary is Boundary.STREAM:
                return
            if boundary is Boundary.ELEMENT:
                mode = ScanMode.POST_SENTINEL
                remaining = SEPARATOR_LENGTH
        elif mode is ScanMode.ESCAPE:
            fragment.append(character)
            mode = ScanMode.NORMAL
        elif character == "\\":
            mode = ScanMode.ESCAPE
        elif character == '"':
            if fragment:
                yield "".join(fragment)
                fragment = []
            mode = ScanMode.SKIPPING
            progress = 0
        else:
            fragment.append(character)

    if fragment:
        yield "".join(fragment)


def extract(raw: str) -> str:
    """Return the translated text contained in a raw response body."""

    return "".join(iter_fragments(raw))
