"""Pytest configuration for the localegen test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from localegen.hierarchy import BuildContext

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

# Five locales covering every parent-selection rule that has a parent in data.
SAMPLE_RESOURCES = {
    "en": {
        "okButtonLabel": "OK",
        "cancelButtonLabel": "CANCEL",
        "timeOfDayFormat": "h:mm a",
        "scriptCategory": "English-like",
        "pageRowsInfoTitle": "$firstRow–$lastRow of $rowCount",
    },
    "en_GB": {
        "okButtonLabel": "OK",
        "cancelButtonLabel": "CANCEL",
        "timeOfDayFormat": "HH:mm",
    },
    "zh": {
        "okButtonLabel": "确定",
        "cancelButtonLabel": "取消",
        "timeOfDayFormat": "ah:mm",
        "scriptCategory": "dense",
    },
    "zh_Hant": {
        "okButtonLabel": "確定",
        "cancelButtonLabel": "取消",
        "timeOfDayFormat": "ah:mm",
    },
    "zh_Hant_TW": {
        "okButtonLabel": "確定",
        "cancelButtonLabel": "取消 ",
    },
}

SAMPLE_ATTRIBUTES = {
    "en": {
        "okButtonLabel": {"description": "Confirm button"},
        "cancelButtonLabel": {"description": "Cancel button"},
        "timeOfDayFormat": {"x-flutter-type": "icuShortTimePattern"},
        "scriptCategory": {"x-flutter-type": "scriptCategory"},
        "pageRowsInfoTitle": {"parameters": "firstRow, lastRow, rowCount"},
    },
}


@pytest.fixture
def sample_context() -> BuildContext:
    """BuildContext over en, en_GB, zh, zh_Hant, zh_Hant_TW."""
    return BuildContext(SAMPLE_RESOURCES, SAMPLE_ATTRIBUTES)
