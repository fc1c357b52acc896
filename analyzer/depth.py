"""
Line-oriented nesting depth tracker.

Each line is trimmed and classified as a tag line (starts with '<') or a text
line. Only the start of a line matters: text following a tag on the same line
is never seen.

Two policies are available:

- COUNTER: a flat depth counter. Closing tags decrement it; the deepest text
  is never discarded once recorded.
- LEVEL_STACK: a stack of per-tag levels. Closing a tag whose level is below
  the recorded deepest level lowers the deepest level to it and clears the
  recorded text. An opening tag pushes the enclosing tag's level plus one,
  not the recorded deepest level plus one, so siblings share a level and a
  nested tag is always one below its parent.
"""

from enum import Enum
from typing import Iterable


class DepthPolicy(str, Enum):
    COUNTER = "counter"
    LEVEL_STACK = "level-stack"

    @classmethod
    def parse(cls, name: str) -> "DepthPolicy":
        key = name.strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == key:
                return policy
        raise ValueError(
            f"Unknown depth policy: {name!r} (expected one of: "
            + ", ".join(p.value for p in cls) + ")"
        )


def _is_tag_line(line: str) -> bool:
    return line.startswith("<")


def _is_closing(line: str) -> bool:
    return line.startswith("</")


def _is_self_closing(line: str) -> bool:
    return line.endswith("/>")


class NestingState:
    """Mutable state of a single scan."""

    def __init__(self):
        self.depth = 0
        self.deepest = 0
        self.deepest_text = ""

    def current(self) -> int:
        return self.depth

    def open_tag(self) -> None:
        self.depth += 1

    def close_tag(self) -> None:
        self.depth -= 1

    def text(self, line: str) -> None:
        level = self.current()
        if level > self.deepest:
            self.deepest = level
            self.deepest_text = line

    def to_dict(self) -> dict:
        return {
            "depth": self.current(),
            "deepest": self.deepest,
            "deepest_text": self.deepest_text,
        }


class LevelStackState(NestingState):
    """Nesting state backed by a stack of levels."""

    def __init__(self):
        super().__init__()
        self.levels: list[int] = []

    def current(self) -> int:
        return self.levels[-1] if self.levels else 0

    def open_tag(self) -> None:
        # Parent level + 1, independent of the deepest level recorded so far
        self.levels.append(self.current() + 1)

    def close_tag(self) -> None:
        # Unbalanced close without prior validation: stay at level 0
        if not self.levels:
            return
        level = self.levels.pop()
        if level < self.deepest:
            self.deepest = level
            self.deepest_text = ""


def new_state(policy: DepthPolicy) -> NestingState:
    if policy is DepthPolicy.LEVEL_STACK:
        return LevelStackState()
    return NestingState()


def scan(lines: Iterable[str], policy: DepthPolicy = DepthPolicy.COUNTER) -> NestingState:
    """Run one tracking pass over lines and return the final state."""
    state = new_state(policy)
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if _is_tag_line(line):
            if _is_closing(line):
                state.close_tag()
            elif not _is_self_closing(line):
                state.open_tag()
        else:
            state.text(line)
    return state


def deepest_text(lines: Iterable[str], policy: DepthPolicy = DepthPolicy.COUNTER) -> str:
    """Text line at the deepest nesting reached, or "" if none went below depth 0."""
    return scan(lines, policy).deepest_text
