"""Host platform detection."""
from __future__ import annotations

import sys


class Platform:
    """Classify the host operating system from its platform identifier."""

    @classmethod
    def platform(cls) -> str:
        """Return the lowercased host platform identifier, e.g. ``"linux"``."""
        return sys.platform.lower()

    @classmethod
    def mac(cls) -> bool:
        return "darwin" in cls.platform()

    @classmethod
    def windows(cls) -> bool:
        name = cls.platform()
        return name.startswith("win") or any(
            marker in name for marker in ("mswin", "mingw", "cygwin")
        )

    @classmethod
    def linux(cls) -> bool:
        return "linux" in cls.platform()

    @classmethod
    def solaris(cls) -> bool:
        name = cls.platform()
        return "solaris" in name or "sunos" in name
