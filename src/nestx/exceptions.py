# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations


class NestxException(Exception): ...


class NestxConfigError(NestxException): ...


class NestxLaunchError(NestxException): ...
