# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


NESTX_OPTIONS: dict[str, dict[str, Any]] = {
    "--config": {
        "type": Path,
        "help": (
            "Read settings from the specified file instead of "
            "$XDG_CONFIG_HOME/nestx/nestx.toml."
        ),
        "metavar": "config_path",
    },
    "--dry-run": {
        "action": "store_true",
        "help": "Prints the xinit arguments instead of running.",
    },
    "--print-config": {
        "action": "store_true",
        "help": "Prints effective settings as TOML and exits.",
    },
}

NESTX_DESCRIPTION = (
    "Starts xinit with a nested Xephyr server and the xinitrc "
    "installed beside nestx."
)
