"""Parser for ``VBoxManage showvminfo --machinereadable`` output.

The dump is one ``key=value`` pair per line, with either side optionally
wrapped in double quotes::

    name="Ubuntu Server"
    memory=1024
    "IDE Controller-0-0"="/vms/ubuntu.vdi"

Keys are lowercased so that models can look them up without caring
how VirtualBox capitalized controller names.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def _unquote(text: str) -> str:
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1]
    return text


def parse_machine_readable(text: str) -> dict[str, str]:
    """Parse a machine-readable VM dump into a flat attribute mapping.

    Parameters
    ----------
    text:
        Raw output of ``showvminfo --machinereadable``.

    Returns
    -------
    dict[str, str]
        Lowercased keys mapped to unquoted string values. When a key
        repeats, the last occurrence wins.
    """
    data: dict[str, str] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        key, sep, value = line.partition("=")
        if not sep:
            logger.debug("Skipping line %d without '=': %r", lineno, line)
            continue
        data[_unquote(key).lower()] = _unquote(value)
    return data
