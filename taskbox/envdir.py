"""Run a command with environment variables read from a directory."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Environment = dict[str, "EnvValue"]


@dataclass(frozen=True)
class EnvValue:
    """A variable's value; ``need_remove`` marks a variable to be unset."""

    value: str
    need_remove: bool = False


def read_dir(directory: str | os.PathLike[str]) -> Environment:
    """Read variables from ``directory``: each file's name is a variable, its first line the value.

    An empty file marks the variable for removal. NUL bytes in the value become
    newlines and trailing spaces and tabs are dropped.
    """
    directory = os.path.normpath(directory)
    env: Environment = {}
    with os.scandir(directory) as entries:
        for entry in sorted(entries, key=lambda item: item.name):
            try:
                if not entry.is_file(follow_symlinks=False):
                    logger.warning("file '%s' is not regular", entry.name)
                    continue
                size = entry.stat(follow_symlinks=False).st_size
            except OSError as error:
                logger.warning("info file '%s': %s", entry.name, error)
                continue

            if size == 0:
                env[entry.name] = EnvValue("", need_remove=True)
                continue

            try:
                line = _first_line(entry.path)
            except OSError as error:
                logger.warning("read file '%s': %s", entry.path, error)
                continue

            value = line.replace(b"\x00", b"\n").decode("utf-8", errors="surrogateescape")
            env[entry.name] = EnvValue(value.rstrip(" \t"))
    return env


def _first_line(path: str) -> bytes:
    with open(path, "rb") as handle:
        line = handle.readline()
    if line.endswith(b"\n"):
        line = line[:-1]
    if line.endswith(b"\r"):
        line = line[:-1]
    return line


def set_env(env: Mapping[str, EnvValue]) -> None:
    """Apply ``env`` to the current process environment."""
    for name, entry in env.items():
        if entry.need_remove:
            os.environ.pop(name, None)
            continue
        if not name or "=" in name or "\x00" in name or "\x00" in entry.value:
            raise ValueError("setenv: invalid argument")
        os.environ[name] = entry.value


def run_cmd(cmd: Sequence[str], env: Mapping[str, EnvValue]) -> int:
    """Run ``cmd`` with ``env`` applied and return its exit code.

    Returns 0 for an empty command, 127 if the environment cannot be set and
    -1 if the command could not be started or was killed by a signal.
    """
    if not cmd:
        return 0
    try:
        set_env(env)
    except ValueError as error:
        logger.error("SetEnv: %s", error)
        return 0x7F

    try:
        completed = subprocess.run(list(cmd), check=False)
    except OSError as error:
        logger.error("error Run: %s", error)
        return -1
    if completed.returncode < 0:
        return -1
    return completed.returncode


def main(argv: Sequence[str] | None = None) -> int:
    """Read the environment directory and run the command; return its exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        program = os.path.basename(sys.argv[0])
        print(f"usage: {program} <path_to_env_dir> <command> [arg1 arg2 ...]")
        return 0

    env: Environment
    try:
        env = read_dir(args[0])
    except OSError as error:
        print("ReadDir:", error)
        env = {}

    return run_cmd(args[1:], env)


if __name__ == "__main__":
    sys.exit(main())