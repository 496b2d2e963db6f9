#!/usr/bin/env python
"""Example: Invert a rigid transform and map points between spaces.

This example builds a transform from the command line (or a named entry in
a YAML space configuration), prints its matrix and inverse, and converts a
point from local space to world space and back.

Usage:
    python examples/invert_pose.py --position 1 0 0 --orientation 0 0 0.7071 0.7071
    python examples/invert_pose.py --config spaces.yaml --name grip
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add project paths if running from repo root
_project_root = Path(__file__).parent.parent
sys.path.insert(0, str(_project_root / "src"))

from xrspace import InvalidOrientationError, RigidTransform
from xrspace.config import SpaceConfig


def main():
    parser = argparse.ArgumentParser(
        description="Invert a rigid transform and convert a point through it."
    )
    parser.add_argument(
        "--position", type=float, nargs=3, default=[0.0, 0.0, 0.0],
        help="Translation x y z (default: 0 0 0)",
    )
    parser.add_argument(
        "--orientation", type=float, nargs=4, default=[0.0, 0.0, 0.0, 1.0],
        help="Quaternion x y z w (default: 0 0 0 1)",
    )
    parser.add_argument("--config", help="YAML space configuration")
    parser.add_argument("--name", help="Transform name within --config")
    parser.add_argument(
        "--point", type=float, nargs=3, default=[0.0, 0.0, 0.0],
        help="Local-space point to convert (default: 0 0 0)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.config:
            if not args.name:
                print("Error: --name is required with --config")
                return 1
            transform = SpaceConfig.from_yaml(args.config).get_transform(args.name)
        else:
            transform = RigidTransform(args.position, args.orientation)
    except (FileNotFoundError, KeyError, InvalidOrientationError) as e:
        print(f"Error: {e}")
        return 1

    inverse = transform.inverse()
    world = transform.transform_point(args.point)
    local = inverse.transform_point(world)

    np.set_printoptions(precision=4, suppress=True)
    print("=" * 60)
    print(f"Transform: {transform}")
    print(f"Matrix:\n{transform.matrix()}")
    print(f"Inverse:   {inverse}")
    print(f"Inverse matrix:\n{inverse.matrix()}")
    print()
    print(f"  Local point {args.point} -> world {world}")
    print(f"  Back to local: {local}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
