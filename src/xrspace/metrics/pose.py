"""How far apart two rigid transforms are.

Used to check a computed transform against an expected one, e.g. that a
double inverse lands back on the original. Thresholds normally come from a
``ToleranceConfig`` loaded with the space configuration.
"""

from typing import Dict

import numpy as np

from xrspace.rigid import RigidTransform


def compute_translation_error(
    transform1: RigidTransform, transform2: RigidTransform
) -> float:
    """Straight-line distance between the two positions.

    Units are whatever the positions are expressed in (meters for XR
    reference spaces).
    """
    return float(np.linalg.norm(transform1.position - transform2.position))


def compute_rotation_error(
    transform1: RigidTransform, transform2: RigidTransform
) -> float:
    """Angle in degrees of the rotation taking one orientation to the other.

    Both orientations are compared as rotations, so a quaternion and its
    negation give zero error.
    """
    relative = transform1.rotation.inv() * transform2.rotation
    return float(np.degrees(relative.magnitude()))


def compare_transforms(
    transform1: RigidTransform, transform2: RigidTransform
) -> Dict[str, float]:
    """Both error measures, keyed ``translation_error`` and ``rotation_error_deg``."""
    return {
        "translation_error": compute_translation_error(transform1, transform2),
        "rotation_error_deg": compute_rotation_error(transform1, transform2),
    }


def transforms_within_tolerance(
    transform1: RigidTransform,
    transform2: RigidTransform,
    translation_tol: float = 1e-6,
    rotation_tol_deg: float = 1e-4,
) -> bool:
    """Whether two transforms agree within the given thresholds.

    The defaults match ``ToleranceConfig()``; pass
    ``config.tolerance.translation_tol`` and ``config.tolerance.rotation_tol_deg``
    to use configured values. Both limits are inclusive.
    """
    errors = compare_transforms(transform1, transform2)
    if errors["translation_error"] > translation_tol:
        return False
    return errors["rotation_error_deg"] <= rotation_tol_deg
