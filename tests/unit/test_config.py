"""Unit tests for space configuration loading and saving."""

from pathlib import Path

import numpy as np
import pytest
import yaml

from xrspace import RigidTransform
from xrspace.config import SpaceConfig, ToleranceConfig, TransformConfig


class TestTransformConfig:
    """Tests for single transform entries."""

    def test_defaults(self):
        """Default entry is the identity."""
        config = TransformConfig()

        assert config.to_transform() == RigidTransform.identity()

    def test_arrays(self):
        """List fields are exposed as numpy arrays."""
        config = TransformConfig(position=[1, 2, 3], orientation=[0, 0, 1, 0])

        np.testing.assert_array_equal(config.position_array, [1, 2, 3])
        np.testing.assert_array_equal(config.orientation_array, [0, 0, 1, 0])

    def test_from_transform(self, sample_transform):
        """Capturing a transform round-trips through the entry."""
        config = TransformConfig.from_transform(sample_transform)

        assert config.position == [10.0, 20.0, 30.0]
        assert config.to_transform() == sample_transform


class TestSpaceConfig:
    """Tests for the full configuration."""

    def test_from_dict(self):
        """Dictionary sections populate the dataclasses."""
        config = SpaceConfig.from_dict({
            "transforms": {
                "grip": {"position": [0, 0, -0.05], "orientation": [0, 0, 0, 1]},
            },
            "tolerance": {"translation_tol": 0.001, "rotation_tol_deg": 0.5},
        })

        assert set(config.transforms) == {"grip"}
        assert config.tolerance == ToleranceConfig(0.001, 0.5)
        np.testing.assert_array_equal(
            config.get_transform("grip").position, [0, 0, -0.05]
        )

    def test_from_dict_partial(self):
        """Missing sections keep defaults."""
        config = SpaceConfig.from_dict({})

        assert config.transforms == {}
        assert config.tolerance == ToleranceConfig()

    def test_unknown_transform(self):
        """Unknown names raise KeyError listing what exists."""
        config = SpaceConfig(transforms={"head": TransformConfig()})

        with pytest.raises(KeyError, match="head"):
            config.get_transform("grip")

    def test_unknown_field_rejected(self):
        """Typos in an entry are not silently ignored."""
        with pytest.raises(TypeError):
            SpaceConfig.from_dict({"transforms": {"grip": {"postion": [0, 0, 0]}}})

    def test_yaml_round_trip(self, tmp_path: Path, sample_transform):
        """to_yaml / from_yaml preserves transforms and tolerances."""
        config = SpaceConfig(
            transforms={"sample": TransformConfig.from_transform(sample_transform)},
            tolerance=ToleranceConfig(translation_tol=0.01, rotation_tol_deg=0.1),
        )
        path = tmp_path / "spaces.yaml"

        config.to_yaml(path)
        loaded = SpaceConfig.from_yaml(path)

        assert loaded.to_dict() == config.to_dict()
        assert loaded.get_transform("sample") == sample_transform

    def test_from_yaml_file(self, tmp_path: Path):
        """Hand-written YAML loads."""
        path = tmp_path / "spaces.yaml"
        path.write_text(
            "transforms:\n"
            "  offset:\n"
            "    position: [1.0, 2.0, 3.0]\n"
            "    orientation: [0.0, 0.0, 0.0, 1.0]\n"
        )

        config = SpaceConfig.from_yaml(path)

        np.testing.assert_array_equal(
            config.get_transform("offset").inverse().position, [-1, -2, -3]
        )

    def test_empty_yaml_file(self, tmp_path: Path):
        """An empty file gives the default configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert SpaceConfig.from_yaml(path).to_dict() == SpaceConfig().to_dict()

    def test_missing_file(self, tmp_path: Path):
        """Missing files propagate FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            SpaceConfig.from_yaml(tmp_path / "missing.yaml")

    def test_to_dict_is_yaml_safe(self, sample_transform):
        """Dumped dictionaries contain only plain types."""
        config = SpaceConfig(
            transforms={"sample": TransformConfig.from_transform(sample_transform)}
        )

        text = yaml.safe_dump(config.to_dict())

        assert "sample" in text
