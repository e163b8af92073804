"""
Copyright (c) 2019, the Decred developers
Copyright (c) 2026, the ecfield developers
See LICENSE for details
"""

import random

import pytest

from ecfield.math.curve import curve223


@pytest.fixture
def rnd():
    """
    A seeded random generator, so sampled property checks are repeatable.
    """
    return random.Random(0)


@pytest.fixture(scope="session")
def curvePoints223():
    """
    Every finite point of y^2 = x^3 + 7 over GF(223).
    """
    prime = curve223.prime
    roots = {}
    for y in range(prime):
        roots.setdefault(y * y % prime, []).append(y)
    points = []
    for x in range(prime):
        for y in roots.get((x ** 3 + 7) % prime, []):
            points.append(curve223.point(x, y))
    return points
