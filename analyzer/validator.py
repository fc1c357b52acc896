"""
Stack-based tag balance validator.
Scans raw text for <...> spans and checks that every opening tag is closed
by a tag of the same name, in order. Pure: no logging, no printing.
"""

from enum import Enum

from analyzer.tags import ClosingTag, OpeningTag, classify


class ValidationReason(str, Enum):
    OK = "ok"
    UNCLOSED_BRACKET = "unclosed_bracket"  # '<' with no '>' after it
    UNEXPECTED_CLOSE = "unexpected_close"  # closing tag on an empty stack
    MISMATCHED_CLOSE = "mismatched_close"
    UNCLOSED_TAGS = "unclosed_tags"  # stack not empty at end of input


class Validation:
    """Outcome of one validation scan."""

    def __init__(self, reason: ValidationReason, position: int = -1,
                 open_tags: tuple = (), tag: str = ""):
        self.reason = reason
        self.position = position
        self.open_tags = tuple(open_tags)
        self.tag = tag

    @property
    def valid(self) -> bool:
        return self.reason is ValidationReason.OK

    def __bool__(self) -> bool:
        return self.valid

    def __repr__(self) -> str:
        return f"Validation({self.reason.value!r}, position={self.position})"

    def describe(self) -> str:
        """One-line human readable summary."""
        if self.reason is ValidationReason.OK:
            return "well-formed"
        if self.reason is ValidationReason.UNCLOSED_BRACKET:
            return f"'<' at offset {self.position} is never closed with '>'"
        if self.reason is ValidationReason.UNEXPECTED_CLOSE:
            return f"closing tag </{self.tag}> at offset {self.position} has no open tag"
        if self.reason is ValidationReason.MISMATCHED_CLOSE:
            return (
                f"closing tag </{self.tag}> at offset {self.position} "
                f"does not match <{self.open_tags[-1]}>"
            )
        return "unclosed tags at end of input: " + ", ".join(f"<{t}>" for t in self.open_tags)


def validate(raw_text: str) -> Validation:
    """Scan raw_text and report whether its tags are balanced."""
    stack: list[str] = []
    i = 0
    length = len(raw_text)

    while i < length:
        if raw_text[i] != "<":
            i += 1
            continue

        end = raw_text.find(">", i + 1)
        if end == -1:
            return Validation(ValidationReason.UNCLOSED_BRACKET, i, stack)

        token = classify(raw_text[i + 1:end])
        if isinstance(token, ClosingTag):
            if not stack:
                return Validation(ValidationReason.UNEXPECTED_CLOSE, i, stack, token.name)
            if stack[-1] != token.name:
                return Validation(ValidationReason.MISMATCHED_CLOSE, i, stack, token.name)
            stack.pop()
        elif isinstance(token, OpeningTag):
            stack.append(token.name)

        i = end + 1

    if stack:
        return Validation(ValidationReason.UNCLOSED_TAGS, length, stack)
    return Validation(ValidationReason.OK)


def is_valid(raw_text: str) -> bool:
    """True iff every opening tag in raw_text has a matching, correctly ordered close."""
    return validate(raw_text).valid
