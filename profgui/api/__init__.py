# profgui/api/__init__.py
# This file makes the api directory a Python package.

from . import admin
from . import auth
from . import reference
from . import register
from . import teachers

__all__ = [
    "admin",
    "auth",
    "reference",
    "register",
    "teachers",
]
