"""Pytest configuration and fixtures."""

import os

import pytest

from scriptmark.config import ScriptMarkSettings, reset_settings, set_settings
from scriptmark.parser import SourceDocument

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import cli_invoke  # noqa: F401


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test with default settings and no stray config sources.

    SCRIPTMARK_* variables, config files in the home or working directory
    and cached settings would otherwise leak into the tests.
    """
    for var in [k for k in os.environ if k.startswith("SCRIPTMARK_")]:
        monkeypatch.delenv(var)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)

    reset_settings()
    set_settings(ScriptMarkSettings())

    yield

    reset_settings()


@pytest.fixture
def office_scene() -> str:
    """Markdown scene with a heading, action and one exchange."""
    return "## INT. OFFICE\n\nSome action.\n\n## JANE\nHello."


@pytest.fixture
def sample_documents() -> list[SourceDocument]:
    """Two markdown scenes as they would be read from a scenes directory."""
    return [
        SourceDocument(
            name="01_opening.md",
            content=(
                "---\nscene: 1\nstatus: draft\n---\n"
                "# Scene 1\n\n"
                "## INT. KITCHEN - NIGHT\n\n"
                "Rain hammers the window. **MAYA** stirs a pot.\n\n"
                "## MAYA\n"
                "(without turning)\n"
                "You're late.\n"
            ),
        ),
        SourceDocument(
            name="02_arrival.md",
            content=(
                "## EXT. STREET - CONTINUOUS\n\n"
                "Tom runs through the rain.\n\n"
                "## TOM (O.S.)\n"
                "I know!\n"
                "I'm sorry.\n"
            ),
        ),
    ]
