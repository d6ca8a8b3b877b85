# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations

from .nestx_cli import nestx_main

if __name__ == "__main__":
    nestx_main()
