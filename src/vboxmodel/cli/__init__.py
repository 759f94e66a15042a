"""CLI package.

The ``cli`` sub-package contains the Click application and its
commands. Heavy imports happen inside each command so that
``vboxmodel --help`` stays fast.
"""
from __future__ import annotations
