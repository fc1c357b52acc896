"""
Validate-then-extract pipeline over one fetched document.
"""

import logging
from enum import Enum
from typing import Iterable, Optional

from analyzer.depth import DepthPolicy, scan
from analyzer.validator import Validation, validate as run_validation

logger = logging.getLogger("html-analyzer.pipeline")


class Outcome(str, Enum):
    FOUND = "found"
    EMPTY = "empty"  # well-formed (or unchecked) but no nested text
    MALFORMED = "malformed"


class Analysis:
    """Result of analyzing one document."""

    def __init__(self, outcome: Outcome, text: str = "", depth: int = 0,
                 validation: Optional[Validation] = None):
        self.outcome = outcome
        self.text = text
        self.depth = depth
        self.validation = validation

    def __repr__(self) -> str:
        return f"Analysis({self.outcome.value!r}, text={self.text!r}, depth={self.depth})"

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "text": self.text,
            "depth": self.depth,
            "validation": self.validation.reason.value if self.validation else None,
        }


def analyze_lines(
    lines: Iterable[str],
    policy: DepthPolicy = DepthPolicy.COUNTER,
    validate: bool = True,
) -> Analysis:
    """Analyze a document given as a sequence of lines."""
    lines = list(lines)
    validation = None

    if validate:
        validation = run_validation("\n".join(lines))
        if not validation.valid:
            logger.info(f"Rejected malformed document: {validation.describe()}")
            return Analysis(Outcome.MALFORMED, validation=validation)

    state = scan(lines, policy)
    if not state.deepest_text:
        logger.info("No nested text found")
        return Analysis(Outcome.EMPTY, validation=validation)

    logger.debug(f"Deepest text at depth {state.deepest} ({policy.value} policy)")
    return Analysis(Outcome.FOUND, state.deepest_text, state.deepest, validation)


def analyze(
    text: str,
    policy: DepthPolicy = DepthPolicy.COUNTER,
    validate: bool = True,
) -> Analysis:
    """Analyze a document given as a single string."""
    return analyze_lines(text.splitlines(), policy, validate)
