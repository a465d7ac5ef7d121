# flake8: noqa

"""
Linear Algebra Routines

Matrix3 and the small vector types it works with, plus factories for
2D affine transforms in homogeneous coordinates.
"""

from .utils import *
from .vector2 import *
from .vector3 import *
from .matrix3 import *
from .affine import *

from . import utils, vector2, vector3, matrix3, affine

__all__ = [
    *utils.__all__,
    *vector2.__all__,
    *vector3.__all__,
    *matrix3.__all__,
    *affine.__all__,
]
