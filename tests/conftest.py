"""Shared pytest fixtures for zoneguard tests."""

import re

import pytest

from zoneguard.domain.models import (
    Policy,
    PrivateFilePattern,
    RestrictedPath,
    Zone,
    ZonePrivateRule,
)

ROOT = "/repo"


@pytest.fixture
def root() -> str:
    """Working directory all sample policies are rooted at."""
    return ROOT


@pytest.fixture
def ui_zone() -> Zone:
    """The ``ui`` zone: may use ``/src/shared`` besides itself."""
    return Zone(name="ui", paths=("/src/ui",), uses=("/src/shared",))


@pytest.fixture
def zone_policy(ui_zone: Zone) -> Policy:
    """Policy with only the ``ui`` zone."""
    return Policy(root="/", zones=(ui_zone,))


@pytest.fixture
def restricted_policy() -> Policy:
    """``/src/internal`` may only be imported from ``/src/core``."""
    return Policy(
        root="/",
        restricted_paths=(
            RestrictedPath(restricted_root="/src/internal", whitelist=("/src/core",)),
        ),
    )


@pytest.fixture
def private_policy() -> Policy:
    """``*.private.*`` files are private to their directory."""
    return Policy(
        root="/",
        private_files=PrivateFilePattern(regexes=(re.compile(r"\.private\."),)),
    )


@pytest.fixture
def zone_private_policy() -> Policy:
    """``_*.py`` files under the billing roots stay inside billing."""
    return Policy(
        root="/repo",
        zone_private_rules=(
            ZonePrivateRule(
                name="billing",
                src=("/repo/src/billing", "/repo/src/invoices"),
                filename_regexps=(re.compile(r"^_"),),
            ),
        ),
    )


@pytest.fixture
def policy_document() -> dict:
    """A policy document exercising all four sections."""
    return {
        "zones": [
            {"name": "ui", "paths": ["src/ui"], "uses": ["src/shared"]},
            {"name": "data", "paths": ["src/data"], "uses": ["src/shared"]},
        ],
        "restricted_paths": [
            {"restricted_root": "src/internal", "whitelist": ["src/core"]},
        ],
        "private_files": {"regexes": [r"\.private\."]},
        "zone_private": [
            {
                "name": "billing",
                "src": ["src/billing"],
                "filename_regexps": ["^_"],
            }
        ],
    }
