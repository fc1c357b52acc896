"""
Shared fixtures for all tests.
"""

import sys
import pytest
from pathlib import Path

# Ensure the project root is on PYTHONPATH
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Reset analysis settings to their defaults for test isolation."""
    monkeypatch.setattr("analyzer.config.Config.DEPTH_POLICY", "counter")
    monkeypatch.setattr("analyzer.config.Config.VALIDATE", True)
    monkeypatch.setattr("analyzer.config.Config.TIMEOUT", 5.0)


@pytest.fixture
def nested_document():
    """A small well-formed page, one tag or text per line."""
    return "\n".join([
        "<html>",
        "  <head>",
        "    <meta charset=\"utf-8\"/>",
        "  </head>",
        "  <body>",
        "    <div>",
        "      <p>",
        "        Deep text",
        "      </p>",
        "      <br/>",
        "    </div>",
        "    Shallow text",
        "  </body>",
        "</html>",
    ])
