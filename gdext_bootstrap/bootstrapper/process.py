from __future__ import annotations

import contextlib
import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Iterator, List, Protocol, Sequence

from ..errors import BootstrapError, CommandFailedError, ErrorKind


logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def __call__(self, command: Sequence[str]) -> None: ...


def run_command(command: Sequence[str]) -> None:
    """Run an external program with stdout/stderr passed through to the terminal.

    The program is resolved on PATH first so a missing tool is reported as a
    missing dependency rather than an OSError. No timeout, no retries.
    """

    args: List[str] = list(command)
    program = shutil.which(args[0])
    if program is None:
        raise BootstrapError(ErrorKind.MISSING_DEPENDENCY, f"executable not found on PATH: {args[0]}")

    logger.info("$ %s", " ".join(args))
    result = subprocess.run([program, *args[1:]], check=False)
    if result.returncode != 0:
        raise CommandFailedError(args, result.returncode, cwd=os.getcwd())


@contextlib.contextmanager
def working_directory(path: str | Path) -> Iterator[Path]:
    """Change into ``path`` for the duration of the block.

    The previous working directory is restored on every exit path.
    """

    previous = os.getcwd()
    try:
        os.chdir(path)
    except OSError as e:
        raise BootstrapError(ErrorKind.FILESYSTEM, f"cannot change directory to {path}: {e}") from e
    logger.debug("cwd -> %s", path)
    try:
        yield Path(os.getcwd())
    finally:
        os.chdir(previous)
        logger.debug("cwd <- %s", previous)
