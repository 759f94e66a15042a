"""Construction and execution of ``VBoxManage`` command lines.

Models build command strings themselves and escape every user-supplied
fragment with :meth:`Command.shell_escape` before handing them to
:meth:`Command.vboxmanage`.
"""
from __future__ import annotations

import logging
import os
import shlex
import subprocess

from vboxmodel.exceptions import CommandFailedError
from vboxmodel.platform import Platform

logger = logging.getLogger(__name__)

VBOXMANAGE_ENV_VAR = "VBOXMANAGE"


class Command:
    """Thin wrapper around the shell used to drive VirtualBox."""

    @classmethod
    def vboxmanage_binary(cls) -> str:
        """Return the ``VBoxManage`` executable to invoke.

        The ``VBOXMANAGE`` environment variable takes precedence; otherwise
        the platform default is used.
        """
        override = os.environ.get(VBOXMANAGE_ENV_VAR)
        if override:
            return override
        return "VBoxManage.exe" if Platform.windows() else "VBoxManage"

    @classmethod
    def shell_escape(cls, value: object) -> str:
        """Quote ``value`` so it is passed to the shell as a single argument."""
        return shlex.quote(str(value))

    @classmethod
    def vboxmanage(cls, command: str) -> str:
        """Run ``VBoxManage <command>`` and return its standard output."""
        return cls.execute(f"{cls.shell_escape(cls.vboxmanage_binary())} {command}")

    @classmethod
    def execute(cls, command: str) -> str:
        """Run ``command`` through the shell and return its standard output.

        Raises
        ------
        CommandFailedError
            If the command exits with a non-zero status.
        """
        logger.debug("Executing: %s", command)
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            raise CommandFailedError(command, result.returncode, result.stderr or result.stdout)
        return result.stdout
