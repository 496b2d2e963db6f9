"""Reference space configuration dataclasses."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union

import numpy as np
import yaml

from xrspace.rigid import RigidTransform

logger = logging.getLogger(__name__)


@dataclass
class TransformConfig:
    """Configuration for a single rigid transform."""

    position: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    orientation: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 1.0])

    @property
    def position_array(self) -> np.ndarray:
        """Position as numpy array."""
        return np.array(self.position, dtype=np.float64)

    @property
    def orientation_array(self) -> np.ndarray:
        """Orientation quaternion [x, y, z, w] as numpy array."""
        return np.array(self.orientation, dtype=np.float64)

    def to_transform(self) -> RigidTransform:
        """Build the rigid transform described by this entry."""
        return RigidTransform(
            position=self.position_array, orientation=self.orientation_array
        )

    @classmethod
    def from_transform(cls, transform: RigidTransform) -> "TransformConfig":
        """Capture an existing transform as a config entry."""
        return cls(**transform.to_dict())


@dataclass
class ToleranceConfig:
    """Tolerances used when comparing transforms."""

    translation_tol: float = 1e-6
    rotation_tol_deg: float = 1e-4


@dataclass
class SpaceConfig:
    """Named reference space offsets plus comparison tolerances.

    Example YAML::

        transforms:
          grip:
            position: [0.0, 0.0, -0.05]
            orientation: [0.0, 0.0, 0.0, 1.0]
        tolerance:
          translation_tol: 1.0e-6
          rotation_tol_deg: 1.0e-4
    """

    transforms: Dict[str, TransformConfig] = field(default_factory=dict)
    tolerance: ToleranceConfig = field(default_factory=ToleranceConfig)

    def get_transform(self, name: str) -> RigidTransform:
        """Build the named transform.

        Raises:
            KeyError: If no transform with that name is configured.
        """
        if name not in self.transforms:
            raise KeyError(
                f"Unknown transform '{name}'. "
                f"Configured transforms: {', '.join(sorted(self.transforms)) or 'none'}"
            )
        return self.transforms[name].to_transform()

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SpaceConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            SpaceConfig instance.
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        logger.debug("Loaded space configuration from %s", path)
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict) -> "SpaceConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            SpaceConfig instance.
        """
        config = cls()

        if "transforms" in data:
            config.transforms = {
                name: TransformConfig(**entry)
                for name, entry in (data["transforms"] or {}).items()
            }

        if "tolerance" in data:
            config.tolerance = ToleranceConfig(**data["tolerance"])

        return config

    def to_dict(self) -> dict:
        """Convert configuration to dictionary.

        Returns:
            Configuration as dictionary.
        """
        return {
            "transforms": {
                name: {
                    "position": list(entry.position),
                    "orientation": list(entry.orientation),
                }
                for name, entry in self.transforms.items()
            },
            "tolerance": {
                "translation_tol": self.tolerance.translation_tol,
                "rotation_tol_deg": self.tolerance.rotation_tol_deg,
            },
        }

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file.

        Args:
            path: Output path for YAML file.
        """
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

        logger.debug("Saved space configuration to %s", path)
