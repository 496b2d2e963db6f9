"""Pytest fixtures for rigid transform tests."""

from typing import List

import numpy as np
import pytest

from xrspace import RigidTransform


@pytest.fixture
def identity_matrix() -> np.ndarray:
    """4x4 identity transformation matrix."""
    return np.eye(4)


@pytest.fixture
def sample_matrix() -> np.ndarray:
    """Known rotation + translation for testing.

    90-degree rotation around Z-axis, translated by [10, 20, 30].
    """
    return np.array([
        [0, -1, 0, 10],
        [1, 0, 0, 20],
        [0, 0, 1, 30],
        [0, 0, 0, 1]
    ], dtype=np.float64)


@pytest.fixture
def sample_quaternion() -> np.ndarray:
    """Quaternion corresponding to sample_matrix rotation.

    90-degree rotation around Z-axis as (x, y, z, w).
    """
    # 90 degrees around Z: 0, 0, sin(45°), cos(45°)
    angle = np.pi / 2
    return np.array([
        0,                   # x
        0,                   # y
        np.sin(angle / 2),   # z
        np.cos(angle / 2),   # w
    ])


@pytest.fixture
def sample_position() -> np.ndarray:
    """Translation component of sample_matrix."""
    return np.array([10.0, 20.0, 30.0])


@pytest.fixture
def sample_transform(
    sample_position: np.ndarray, sample_quaternion: np.ndarray
) -> RigidTransform:
    """RigidTransform equivalent of sample_matrix."""
    return RigidTransform(position=sample_position, orientation=sample_quaternion)


def make_random_transforms(count: int, seed: int = 0) -> List[RigidTransform]:
    """Seeded random transforms with unit orientations."""
    rng = np.random.default_rng(seed)
    transforms = []
    for _ in range(count):
        quaternion = rng.normal(size=4)
        quaternion /= np.linalg.norm(quaternion)
        position = rng.uniform(-10.0, 10.0, size=3)
        transforms.append(RigidTransform(position=position, orientation=quaternion))
    return transforms


@pytest.fixture
def random_transforms() -> List[RigidTransform]:
    """Twenty reproducible arbitrary rigid transforms."""
    return make_random_transforms(20)
