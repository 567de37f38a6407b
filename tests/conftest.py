from __future__ import annotations

import pytest

from buy_vs_rent.schemas import DEFAULT_INPUTS, ProjectionInputs


@pytest.fixture()
def make_inputs():
    """Reference scenario with selected fields replaced."""

    def _make(**overrides) -> ProjectionInputs:
        return ProjectionInputs(**{**DEFAULT_INPUTS, **overrides})

    return _make
