# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations

from subprocess import run

from .base import PROJECT_ROOT_PATH, PYTHON_SOURCES

# Formatter options live in pyproject.toml
FORMATTERS: dict[str, tuple[str, ...]] = {
    "isort": ("isort",),
    "black": ("black",),
}


def formatter_args(formatter: str, check: bool) -> list[str]:
    args = list(FORMATTERS[formatter])

    if check:
        args.extend(("--check", "--diff"))

    args.extend(map(str, PYTHON_SOURCES))
    return args


def run_formatter(formatter: str, check: bool = False) -> None:
    run(
        args=formatter_args(formatter, check),
        cwd=PROJECT_ROOT_PATH,
        check=check,
    )


def format_with_black(check: bool = False) -> None:
    run_formatter("black", check)


def format_with_isort(check: bool = False) -> None:
    run_formatter("isort", check)


if __name__ == "__main__":
    for formatter_name in FORMATTERS:
        run_formatter(formatter_name)
