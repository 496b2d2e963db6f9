"""Metrics for comparing rigid transforms."""

from .pose import (
    compute_translation_error,
    compute_rotation_error,
    compare_transforms,
    transforms_within_tolerance,
)

__all__ = [
    "compute_translation_error",
    "compute_rotation_error",
    "compare_transforms",
    "transforms_within_tolerance",
]
