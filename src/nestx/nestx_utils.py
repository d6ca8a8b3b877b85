# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations

FILE_NAME_CONFIG = "nestx.toml"
FILE_NAME_XINITRC = "xinitrc"


class NestxBuildInfo:
    VERSION: str = "0.1.0"
    CONFIG_DIR_NAME: str = "nestx"
