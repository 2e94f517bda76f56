"""Invocation of the external ``pyspelling`` checker and its prerequisites."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Callable

from .errors import MissingDependencyError
from .spell_check_config import DICTIONARY_BACKENDS, FAILURE_MARKER, PYSPELLING_BINARY

LOGGER = logging.getLogger(__name__)

CheckerRunner = Callable[[str, str], str]
BinaryLookup = Callable[[str], bool]


def binary_installed(name: str) -> bool:
    """Return True when ``name`` resolves to an executable on PATH."""
    return shutil.which(name) is not None


def pyspelling_installed(lookup: BinaryLookup = binary_installed) -> bool:
    return lookup(PYSPELLING_BINARY)


def dictionary_backends_installed(
    *,
    require_all: bool = False,
    lookup: BinaryLookup = binary_installed,
) -> bool:
    """Return True when aspell or hunspell is available.

    With ``require_all`` both backends must be present.
    """
    found = [lookup(backend) for backend in DICTIONARY_BACKENDS]
    return all(found) if require_all else any(found)


def check_for_dependencies(
    *,
    require_all_backends: bool = False,
    lookup: BinaryLookup = binary_installed,
) -> None:
    """Raise :class:`MissingDependencyError` unless the checker can run."""
    if not pyspelling_installed(lookup):
        raise MissingDependencyError(
            "pyspelling is not in the users PATH, or it failed to install. "
            "Install it with `pip install pyspelling`."
        )
    if not dictionary_backends_installed(require_all=require_all_backends, lookup=lookup):
        wanted = " and ".join(DICTIONARY_BACKENDS) if require_all_backends else " or ".join(DICTIONARY_BACKENDS)
        raise MissingDependencyError(
            f"{wanted} must be installed in order for pyspelling to work."
        )


def run_pyspelling(profile_name: str, file_path: str) -> str:
    """Run pyspelling for one source and return its combined output.

    The exit status is only logged. Callers decide success or failure from
    the text, which contains ``FAILURE_MARKER`` when misspellings are found.
    """
    command = [PYSPELLING_BINARY, "--name", profile_name, "--source", file_path]
    result = subprocess.run(command, capture_output=True, text=True, check=False)
    output = (result.stdout or "") + (result.stderr or "")
    if result.returncode != 0 and FAILURE_MARKER not in output:
        LOGGER.warning(
            "pyspelling exited with status %d for %s without reporting misspellings",
            result.returncode,
            file_path,
        )
    else:
        LOGGER.debug("pyspelling exited with status %d for %s", result.returncode, file_path)
    return output
