"""Homogeneous matrix and quaternion utilities.

Quaternion convention: (x, y, z, w) - scalar last, matching both the WebXR
``orientation`` attribute and ``scipy.spatial.transform.Rotation``.

Matrix convention: column vectors, ``p_world = M @ [x, y, z, 1]``. The
translation lives in the last column.
"""

from typing import Sequence, Union

import numpy as np
from scipy.spatial.transform import Rotation

ArrayLike = Union[np.ndarray, Sequence[float]]

# Quaternions within this distance of unit length are stored unchanged
UNIT_NORM_TOLERANCE = 1e-14


class InvalidOrientationError(ValueError):
    """Raised when an orientation quaternion cannot represent a rotation."""

    pass


def as_vector(values: ArrayLike, size: int, name: str) -> np.ndarray:
    """Copy values into a float64 vector of the given length.

    Raises:
        ValueError: If the input does not have exactly ``size`` components.
    """
    vector = np.array(values, dtype=np.float64).reshape(-1)
    if vector.shape != (size,):
        raise ValueError(
            f"{name} must have {size} components, got shape {np.shape(values)}"
        )
    return vector


def translation_matrix(position: ArrayLike) -> np.ndarray:
    """Create a 4x4 pure translation matrix.

    Args:
        position: [x, y, z] translation.

    Returns:
        4x4 homogeneous translation matrix.
    """
    transform = np.eye(4)
    transform[:3, 3] = as_vector(position, 3, "position")
    return transform


def invert_translation(transform: np.ndarray) -> np.ndarray:
    """Invert a 4x4 translation matrix by negating its translation column.

    A pure translation is always invertible, so anything else reaching this
    function is a corrupted matrix and is reported as an ``AssertionError``.
    """
    transform = np.asarray(transform, dtype=np.float64)
    if (
        transform.shape != (4, 4)
        or not np.array_equal(transform[:3, :3], np.eye(3))
        or not np.array_equal(transform[3], [0.0, 0.0, 0.0, 1.0])
    ):
        raise AssertionError("translation matrices should be invertible")

    inverse = np.eye(4)
    inverse[:3, 3] = -transform[:3, 3]
    return inverse


def normalize_quaternion(quaternion: ArrayLike) -> np.ndarray:
    """Scale a quaternion to unit length.

    Args:
        quaternion: [x, y, z, w] (scalar-last convention).

    Returns:
        Unit quaternion [x, y, z, w].

    Raises:
        InvalidOrientationError: If the quaternion has zero length or
            non-finite components.
    """
    quaternion = as_vector(quaternion, 4, "orientation")
    if not np.all(np.isfinite(quaternion)):
        raise InvalidOrientationError(
            f"Orientation has non-finite components: {quaternion.tolist()}"
        )

    if abs(np.linalg.norm(quaternion) - 1.0) <= UNIT_NORM_TOLERANCE:
        return quaternion

    # Scale by the largest component first so the norm neither overflows
    # nor underflows
    scale = np.max(np.abs(quaternion))
    if scale == 0.0:
        raise InvalidOrientationError(
            f"Orientation must have non-zero length, got {quaternion.tolist()}"
        )

    scaled = quaternion / scale
    return scaled / np.linalg.norm(scaled)


def quaternion_conjugate(quaternion: ArrayLike) -> np.ndarray:
    """Conjugate of a quaternion, the inverse rotation for unit input.

    Args:
        quaternion: [x, y, z, w].

    Returns:
        [-x, -y, -z, w].
    """
    x, y, z, w = as_vector(quaternion, 4, "orientation")
    return np.array([-x, -y, -z, w])


def quaternion_to_rotation(quaternion: ArrayLike) -> Rotation:
    """Convert a unit quaternion to a scipy Rotation.

    Args:
        quaternion: [x, y, z, w] (scalar-last, the order scipy expects).

    Returns:
        scipy Rotation.
    """
    return Rotation.from_quat(as_vector(quaternion, 4, "orientation"))


def rotation_to_homogeneous(rotation: Rotation) -> np.ndarray:
    """Embed a rotation in a 4x4 homogeneous matrix with zero translation."""
    transform = np.eye(4)
    transform[:3, :3] = rotation.as_matrix()
    return transform


def compose_transforms(*transforms: np.ndarray) -> np.ndarray:
    """Multiply 4x4 matrices left to right.

    ``compose_transforms(A, B)`` is ``A @ B``: with column vectors, B is
    applied to a point first, then A.

    Args:
        *transforms: Variable number of 4x4 transformation matrices.

    Returns:
        Composed 4x4 transformation matrix.
    """
    if not transforms:
        return np.eye(4)

    result = np.array(transforms[0], dtype=np.float64)
    for t in transforms[1:]:
        result = result @ t

    return result


def is_rigid_matrix(transform: np.ndarray, atol: float = 1e-6) -> bool:
    """Check that a 4x4 matrix is a rotation followed by a translation.

    The upper-left 3x3 block must be orthonormal with determinant +1 and
    the bottom row must be [0, 0, 0, 1].
    """
    transform = np.asarray(transform, dtype=np.float64)
    if transform.shape != (4, 4):
        return False

    rotation = transform[:3, :3]
    return bool(
        np.allclose(transform[3], [0.0, 0.0, 0.0, 1.0], atol=atol)
        and np.allclose(rotation.T @ rotation, np.eye(3), atol=atol)
        and np.isclose(np.linalg.det(rotation), 1.0, atol=atol)
    )
