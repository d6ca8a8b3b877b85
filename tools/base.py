# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations

from pathlib import Path

PROJECT_ROOT_PATH = Path(__file__).parent.parent
BUILD_DIR = PROJECT_ROOT_PATH / "build"
SOURCE_DIR = PROJECT_ROOT_PATH / "src"
TEST_DIR = PROJECT_ROOT_PATH / "test"
PYTHON_SOURCES: list[Path] = [
    SOURCE_DIR,
    PROJECT_ROOT_PATH / "tools",
    TEST_DIR,
]

__all__ = (
    "PROJECT_ROOT_PATH",
    "BUILD_DIR",
    "SOURCE_DIR",
    "TEST_DIR",
    "PYTHON_SOURCES",
)
