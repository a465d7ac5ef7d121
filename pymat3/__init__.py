"""A 3x3 matrix type for 2D affine transforms in homogeneous coordinates."""

# ruff: noqa: F401, F403

from ._version import __version__, version_info
from . import utils
from .utils import logger

from .linalg import *
