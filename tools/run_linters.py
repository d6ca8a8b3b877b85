# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations

from os import environ
from pathlib import Path
from subprocess import CalledProcessError, run
from sys import executable, stderr

from .base import (
    BUILD_DIR,
    PROJECT_ROOT_PATH,
    PYTHON_SOURCES,
    SOURCE_DIR,
    TEST_DIR,
)
from .run_format import format_with_black, format_with_isort


def run_linter(args: list[str | Path], env: dict[str, str] | None = None) -> bool:
    print("Running:", args[0], file=stderr)
    try:
        run(
            args=args,
            cwd=PROJECT_ROOT_PATH,
            check=True,
            env=env,
        )
    except CalledProcessError:
        return True

    return False


def run_pyflakes() -> bool:
    return run_linter(["pyflakes", *PYTHON_SOURCES])


def run_mypy() -> bool:
    cache_dir = BUILD_DIR / "mypy_cache"
    mypy_args: list[str | Path] = [
        "mypy",
        "--pretty",
        "--strict",
        "--cache-dir",
        cache_dir,
        "--ignore-missing-imports",
        SOURCE_DIR / "nestx",
    ]

    return run_linter(mypy_args)


def run_black() -> bool:
    print("Running: black", file=stderr)
    try:
        format_with_black(check=True)
    except CalledProcessError:
        return True

    return False


def run_isort() -> bool:
    print("Running: isort", file=stderr)
    try:
        format_with_isort(check=True)
    except CalledProcessError:
        return True

    return False


def run_unittests() -> bool:
    test_env = environ.copy()
    test_env["PYTHONPATH"] = str(SOURCE_DIR)
    return run_linter(
        [executable, "-m", "unittest", "discover", "--start-directory", TEST_DIR],
        env=test_env,
    )


def main() -> None:
    BUILD_DIR.mkdir(exist_ok=True)

    has_failed = False

    has_failed |= run_pyflakes()
    has_failed |= run_mypy()
    has_failed |= run_black()
    has_failed |= run_isort()
    has_failed |= run_unittests()

    if has_failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
