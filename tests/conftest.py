"""Shared fixtures for gh-breakout tests."""

import pytest

from gh_breakout.game.bricks import ContributionGrid

LIGHT_GREENS = ("#ebedf0", "#9be9a8", "#40c463", "#30a14e", "#216e39")


@pytest.fixture
def single_brick_grid() -> ContributionGrid:
    """One week with a single active day in the top row."""
    return [["#40c463", None, None, None, None, None, None]]


@pytest.fixture
def empty_grid() -> ContributionGrid:
    """One week without any active day."""
    return [[None] * 7]


@pytest.fixture
def full_column_grid() -> ContributionGrid:
    """One week with every day active."""
    return [[LIGHT_GREENS[day % len(LIGHT_GREENS)] for day in range(7)]]


@pytest.fixture
def multi_week_grid() -> ContributionGrid:
    """A few weeks with a mix of active and missing days."""
    return [
        [LIGHT_GREENS[(week + day) % len(LIGHT_GREENS)] if (week + day) % 3 else None for day in range(7)]
        for week in range(5)
    ]
