"""
Versioning for pymat3. The version number is hard-coded and bumped by hand
before each release; setup.py reads it from this file.
"""

__version__ = "0.1.0"

version_info = tuple(int(i) for i in __version__.split("."))
