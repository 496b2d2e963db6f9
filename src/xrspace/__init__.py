"""Rigid spatial transforms for converting between XR coordinate spaces."""

__version__ = "0.1.0"

from xrspace.geometry.matrix import InvalidOrientationError
from xrspace.rigid import RigidTransform

__all__ = ["RigidTransform", "InvalidOrientationError"]
