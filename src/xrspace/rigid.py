"""Rigid transform value type: a rotation followed by a translation.

Example:
    from xrspace import RigidTransform

    grip = RigidTransform(position=[1, 0, 0], orientation=[0, 0, 0.7071068, 0.7071068])
    world_from_grip = grip.matrix()
    grip_from_world = grip.inverse().matrix()
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np
from scipy.spatial.transform import Rotation

from xrspace.geometry.matrix import (
    ArrayLike,
    as_vector,
    compose_transforms,
    invert_translation,
    is_rigid_matrix,
    normalize_quaternion,
    quaternion_conjugate,
    quaternion_to_rotation,
    rotation_to_homogeneous,
    translation_matrix,
)

logger = logging.getLogger(__name__)


def _as_position(position: ArrayLike) -> np.ndarray:
    """Accept [x, y, z] or a homogeneous [x, y, z, 1]."""
    vector = np.array(position, dtype=np.float64).reshape(-1)
    if vector.shape == (4,):
        if vector[3] != 1.0:
            raise ValueError(
                f"position must have homogeneous weight w=1, got w={vector[3]}"
            )
        vector = vector[:3]
    return as_vector(vector, 3, "position")


@dataclass(frozen=True, eq=False)
class RigidTransform:
    """Immutable rotation-then-translation in 3D space.

    The orientation is normalized on construction, so any non-zero
    quaternion yields a proper rotation. A zero-length orientation raises
    ``InvalidOrientationError``.

    Attributes:
        position: [x, y, z] translation (read-only array).
        orientation: [x, y, z, w] unit quaternion (read-only array).
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: np.ndarray = field(
        default_factory=lambda: np.array([0.0, 0.0, 0.0, 1.0])
    )
    _translate: np.ndarray = field(init=False, repr=False)
    _rotate: Rotation = field(init=False, repr=False)

    def __post_init__(self):
        position = _as_position(self.position)
        requested = as_vector(self.orientation, 4, "orientation")
        orientation = normalize_quaternion(requested)
        if not np.allclose(orientation, requested):
            logger.debug(
                "Normalized orientation %s to %s",
                requested.tolist(),
                orientation.tolist(),
            )

        translate = translation_matrix(position)
        for array in (position, orientation, translate):
            array.setflags(write=False)

        # Frozen dataclass: derived state is set once, here
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "orientation", orientation)
        object.__setattr__(self, "_translate", translate)
        object.__setattr__(self, "_rotate", quaternion_to_rotation(orientation))

    @classmethod
    def identity(cls) -> "RigidTransform":
        """Create the identity transform (origin, no rotation)."""
        return cls(
            position=np.array([0.0, 0.0, 0.0]),
            orientation=np.array([0.0, 0.0, 0.0, 1.0]),
        )

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "RigidTransform":
        """Create a transform from a 4x4 rigid transformation matrix.

        Args:
            matrix: 4x4 homogeneous matrix, rotation block orthonormal.

        Returns:
            RigidTransform instance.

        Raises:
            ValueError: If the matrix is not 4x4 or not rigid.
        """
        matrix = np.asarray(matrix, dtype=np.float64)
        if not is_rigid_matrix(matrix):
            raise ValueError(f"Not a rigid 4x4 transformation matrix:\n{matrix}")

        orientation = Rotation.from_matrix(matrix[:3, :3]).as_quat()
        return cls(position=matrix[:3, 3], orientation=orientation)

    @property
    def position_homogeneous(self) -> np.ndarray:
        """Position as a homogeneous point [x, y, z, 1]."""
        return np.append(self.position, 1.0)

    @property
    def rotation(self) -> Rotation:
        """Rotation part as a scipy Rotation."""
        return self._rotate

    def matrix(self) -> np.ndarray:
        """Compose translation and rotation into one 4x4 matrix.

        The rotation is applied to a point first and the translation is
        added afterwards, i.e. ``T @ R``.

        Returns:
            4x4 homogeneous transformation matrix.
        """
        return compose_transforms(
            self._translate, rotation_to_homogeneous(self._rotate)
        )

    def inverse(self) -> "RigidTransform":
        """Return the transform that undoes this one.

        The inverse of ``T @ R`` is ``R^-1 @ T^-1``. Inserting ``R @ R^-1``
        on the right regroups it as ``(R^-1 @ T^-1 @ R) @ R^-1``, and the
        conjugated term ``R^-1 @ T^-1 @ R`` is itself a pure translation.
        That gives the inverse directly as a new (position, orientation).

        Returns:
            New RigidTransform; this instance is not modified.
        """
        orientation = quaternion_conjugate(self.orientation)
        rotate_inv = rotation_to_homogeneous(quaternion_to_rotation(orientation))
        translate_inv = invert_translation(self._translate)

        translate_p = compose_transforms(
            rotate_inv, translate_inv, rotation_to_homogeneous(self._rotate)
        )

        return RigidTransform(position=translate_p[:3, 3], orientation=orientation)

    def transform_point(self, points: ArrayLike) -> np.ndarray:
        """Map points from the local frame into the parent frame.

        Args:
            points: [x, y, z] or (N, 3) array of points.

        Returns:
            Transformed points with the same shape as the input.
        """
        points = np.asarray(points, dtype=np.float64)
        if points.shape[-1:] != (3,) or points.ndim > 2:
            raise ValueError(f"points must be [3] or [N, 3], got shape {points.shape}")

        return self._rotate.apply(points) + self.position

    def is_close(self, other: "RigidTransform", atol: float = 1e-9) -> bool:
        """Check whether two transforms agree within ``atol``.

        Quaternions q and -q describe the same rotation and compare as close.
        """
        if not np.allclose(self.position, other.position, atol=atol):
            return False
        return bool(
            np.allclose(self.orientation, other.orientation, atol=atol)
            or np.allclose(self.orientation, -other.orientation, atol=atol)
        )

    def to_dict(self) -> Dict[str, List[float]]:
        """Convert transform to dictionary for serialization.

        Returns:
            Dictionary with 'position' and 'orientation' keys.
        """
        return {
            "position": self.position.tolist(),
            "orientation": self.orientation.tolist(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, List[float]]) -> "RigidTransform":
        """Create transform from dictionary.

        Args:
            data: Dictionary with 'position' and 'orientation' keys.

        Returns:
            RigidTransform instance.
        """
        return cls(
            position=np.array(data["position"]),
            orientation=np.array(data["orientation"]),
        )

    def __eq__(self, other):
        if not isinstance(other, RigidTransform):
            return NotImplemented
        return bool(
            np.array_equal(self.position, other.position)
            and np.array_equal(self.orientation, other.orientation)
        )

    def __hash__(self):
        return hash((tuple(self.position.tolist()), tuple(self.orientation.tolist())))

    def __repr__(self):
        return (
            f"RigidTransform(position={self.position.tolist()}, "
            f"orientation={self.orientation.tolist()})"
        )
