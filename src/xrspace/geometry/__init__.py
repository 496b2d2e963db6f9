"""Matrix and quaternion helpers backing the rigid transform."""

from .matrix import (
    InvalidOrientationError,
    compose_transforms,
    invert_translation,
    is_rigid_matrix,
    normalize_quaternion,
    quaternion_conjugate,
    quaternion_to_rotation,
    rotation_to_homogeneous,
    translation_matrix,
)

__all__ = [
    "InvalidOrientationError",
    "compose_transforms",
    "invert_translation",
    "is_rigid_matrix",
    "normalize_quaternion",
    "quaternion_conjugate",
    "quaternion_to_rotation",
    "rotation_to_homogeneous",
    "translation_matrix",
]
