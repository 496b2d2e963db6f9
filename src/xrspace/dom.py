"""WebXR-style boundary objects wrapping ``RigidTransform``.

These mirror the ``XRRigidTransform`` and ``DOMPointReadOnly`` interfaces so
a host environment can expose transforms with browser semantics: init
dictionaries with defaults, ``TypeError`` for invalid points, and a flat
column-major ``matrix``. The underlying value type stays plain and
independently constructible.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Mapping, Optional, Union

import numpy as np

from xrspace.geometry.matrix import InvalidOrientationError
from xrspace.rigid import RigidTransform

logger = logging.getLogger(__name__)


class InvalidStateError(Exception):
    """Raised when an orientation cannot be normalized (zero length)."""

    pass


@dataclass(frozen=True)
class DOMPointReadOnly:
    """Read-only homogeneous point or quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_init(
        cls, init: Optional[Mapping[str, float]] = None
    ) -> "DOMPointReadOnly":
        """Create a point from a DOMPointInit-style mapping.

        Missing members take the defaults x=y=z=0, w=1.
        """
        init = init or {}
        return cls(
            x=float(init.get("x", 0.0)),
            y=float(init.get("y", 0.0)),
            z=float(init.get("z", 0.0)),
            w=float(init.get("w", 1.0)),
        )

    def to_list(self) -> List[float]:
        return [self.x, self.y, self.z, self.w]

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self.to_list())


PointInit = Union[DOMPointReadOnly, Mapping[str, float], None]


def _to_point(value: PointInit) -> DOMPointReadOnly:
    if isinstance(value, DOMPointReadOnly):
        return value
    return DOMPointReadOnly.from_init(value)


class XRRigidTransform:
    """Host-facing rigid transform with WebXR attribute semantics.

    Args:
        position: Point init; ``w`` must be 1. Defaults to the origin.
        orientation: Quaternion init (x, y, z, w). Normalized on
            construction. Defaults to the identity rotation.

    Raises:
        TypeError: If a component is non-finite or ``position.w != 1``.
        InvalidStateError: If the orientation has zero length.
    """

    def __init__(self, position: PointInit = None, orientation: PointInit = None):
        position = _to_point(position)
        orientation = _to_point(orientation)

        if position.w != 1.0:
            raise TypeError(f"position.w must be 1, got {position.w}")
        if not position.is_finite() or not orientation.is_finite():
            raise TypeError("position and orientation must be finite")

        try:
            transform = RigidTransform(
                position=[position.x, position.y, position.z],
                orientation=orientation.to_list(),
            )
        except InvalidOrientationError as e:
            raise InvalidStateError(str(e)) from e

        self._wrap(transform)

    def _wrap(self, transform: RigidTransform) -> None:
        # position and orientation are the same objects on every access
        x, y, z = transform.position.tolist()
        self._transform = transform
        self._position = DOMPointReadOnly(x, y, z, 1.0)
        self._orientation = DOMPointReadOnly(*transform.orientation.tolist())
        self._inverse: Optional["XRRigidTransform"] = None

    @classmethod
    def from_rigid(cls, transform: RigidTransform) -> "XRRigidTransform":
        """Wrap an existing value without re-validating it."""
        wrapper = cls.__new__(cls)
        wrapper._wrap(transform)
        return wrapper

    @classmethod
    def identity(cls) -> "XRRigidTransform":
        return cls.from_rigid(RigidTransform.identity())

    @property
    def transform(self) -> RigidTransform:
        """The wrapped value."""
        return self._transform

    @property
    def position(self) -> DOMPointReadOnly:
        return self._position

    @property
    def orientation(self) -> DOMPointReadOnly:
        return self._orientation

    @property
    def matrix(self) -> List[float]:
        """The 4x4 matrix as 16 single-precision values in column-major order.

        Each access returns a new list.
        """
        matrix = self._transform.matrix().astype(np.float32)
        return matrix.flatten(order="F").tolist()

    @property
    def inverse(self) -> "XRRigidTransform":
        """The inverse transform, created on first access and then reused.

        The inverse's own ``inverse`` is this object.
        """
        if self._inverse is None:
            inverse = XRRigidTransform.from_rigid(self._transform.inverse())
            inverse._inverse = self
            self._inverse = inverse
            logger.debug("Computed inverse of %r", self._transform)
        return self._inverse

    def __repr__(self):
        return (
            f"XRRigidTransform(position={self.position}, "
            f"orientation={self.orientation})"
        )
