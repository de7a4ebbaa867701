"""Shared fixtures for the atlas packer test suite."""

import random

import pytest

from atlas_packer import AtlasPacker, AtlasRect


@pytest.fixture
def packer():
    """Packer with the default padding and a small cap so overflow is easy to hit."""
    return AtlasPacker(padding=2, max_size=128)


@pytest.fixture
def unpadded_packer():
    return AtlasPacker(padding=0, max_size=10)


@pytest.fixture
def random_rects():
    """Seeded mix of sprite sizes, including a few invalid and oversized ones."""
    rng = random.Random(1234)
    rects = [AtlasRect.of_size(i, rng.randint(1, 64), rng.randint(1, 64)) for i in range(120)]
    rects.append(AtlasRect.of_size("zero", 0, 12))
    rects.append(AtlasRect.of_size("negative", 5, -3))
    rects.append(AtlasRect.of_size("too_wide", 140, 10))
    return rects
