"""
Factories for 2D affine transforms in homogeneous coordinates.

The resulting matrices act on 3-component vectors whose last component
is 1 for points and 0 for free vectors. Translations move points but
leave free vectors unchanged.
"""

from math import cos, sin

from .matrix3 import Matrix3
from .vector2 import Vector2


__all__ = ["rotation", "translation", "scaling", "basis_change"]


def rotation(angle: float) -> Matrix3:
    """Counter-clockwise rotation by ``angle`` radians."""
    c = cos(angle)
    s = sin(angle)
    return Matrix3(
        [
            [c, -s, 0],
            [s, c, 0],
            [0, 0, 1],
        ]
    )


def translation(displacement: Vector2) -> Matrix3:
    return Matrix3(
        [
            [1, 0, displacement.x],
            [0, 1, displacement.y],
            [0, 0, 1],
        ]
    )


def scaling(factor: Vector2) -> Matrix3:
    """Axis-aligned scaling by ``factor.x`` and ``factor.y``."""
    return Matrix3(
        [
            [factor.x, 0, 0],
            [0, factor.y, 0],
            [0, 0, 1],
        ]
    )


def basis_change(center: Vector2, basis1: Vector2, basis2: Vector2) -> Matrix3:
    """Map coordinates relative to ``center`` in the basis (``basis1``, ``basis2``)
    to the ambient coordinate system.
    """
    return Matrix3(
        [
            [basis1.x, basis2.x, center.x],
            [basis1.y, basis2.y, center.y],
            [0, 0, 1],
        ]
    )
