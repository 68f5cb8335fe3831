"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def diameters():
    """
    Four samples of unequal size (8, 8, 7, 8).

    Reference output of the procedure on this data (all pairs, alpha 0.05,
    two-sided): df 27, combined variance 0.0022, and

        1-4  0.001314   0.0085  reject
        1-3  0.0078145  0.0102  reject
        1-2  0.055306   0.0127  fail to reject
        2-4  0.12544    -       not evaluated
        2-3  0.35633    -       not evaluated
        3-4  0.56058    -       not evaluated
    """
    return [
        [7.68, 7.69, 7.70, 7.70, 7.72, 7.73, 7.73, 7.76],
        [7.71, 7.73, 7.74, 7.74, 7.78, 7.78, 7.80, 7.81],
        [7.74, 7.75, 7.77, 7.78, 7.80, 7.81, 7.84],
        [7.71, 7.71, 7.74, 7.79, 7.81, 7.85, 7.87, 7.91],
    ]


@pytest.fixture
def diameters_flat(diameters):
    """The same data as one vector plus a grouping vector."""
    x = np.concatenate([np.asarray(g) for g in diameters])
    g = np.concatenate([np.full(len(s), i) for i, s in enumerate(diameters, start=1)])
    return x, g
