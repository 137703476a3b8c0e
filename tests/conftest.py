"""Pytest configuration for the phrasestore test suite.

Hypothesis profiles:
- dev: local runs, 500 examples
- ci: CI runs, 50 examples, derandomized
- verbose: 100 examples with progress output

HYPOTHESIS_PROFILE selects a profile explicitly; CI=true selects "ci";
otherwise "dev" is loaded.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile(
    "dev",
    max_examples=500,
    phases=_PHASES,
)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """Empty directory for document files.

    tmp_path embeds the test name (and parametrize ids), so tests using this
    fixture keep locale names out of their names and ids.
    """
    path = tmp_path / "store"
    path.mkdir()
    return path
