"""Unit tests for vboxmodel.platform."""
from __future__ import annotations

import sys
from unittest.mock import patch

import pytest

from vboxmodel.platform import Platform


class TestPlatformIdentifier:
    def test_defaults_to_sys_platform(self) -> None:
        assert Platform.platform() == sys.platform.lower()


class TestPlatformDetection:
    @pytest.mark.parametrize(
        ("identifier", "mac", "windows", "linux", "solaris"),
        [
            ("darwin", True, False, False, False),
            ("win32", False, True, False, False),
            ("cygwin", False, True, False, False),
            ("i386-mingw32", False, True, False, False),
            ("linux", False, False, True, False),
            ("sunos5", False, False, False, True),
            ("solaris2.10", False, False, False, True),
            ("freebsd13", False, False, False, False),
        ],
    )
    def test_classification(
        self, identifier: str, mac: bool, windows: bool, linux: bool, solaris: bool
    ) -> None:
        with patch.object(Platform, "platform", return_value=identifier):
            assert Platform.mac() is mac
            assert Platform.windows() is windows
            assert Platform.linux() is linux
            assert Platform.solaris() is solaris
