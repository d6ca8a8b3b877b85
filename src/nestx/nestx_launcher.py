# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations

from dataclasses import dataclass
from os import execvp
from pathlib import Path
from shutil import which
from sys import stderr, stdout
from typing import TYPE_CHECKING

from .exceptions import NestxLaunchError
from .nestx_settings import NestxSettings
from .nestx_utils import FILE_NAME_XINITRC

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import NoReturn


@dataclass(frozen=True, slots=True)
class LaunchCommand:
    xinit: str
    xinitrc: str
    server_path: str
    server_args: tuple[str, ...]

    def iter_args(self) -> Iterator[str]:
        yield self.xinit
        yield self.xinitrc
        yield "--"
        yield self.server_path
        yield from self.server_args

    def to_args(self) -> list[str]:
        return list(self.iter_args())


def resolve_server_executable(
    program: str = "Xephyr",
    search_path: str | None = None,
) -> str:
    # Empty string is passed down to xinit if the server is missing
    server_path = which(program, path=search_path)
    if server_path is None:
        return ""

    return str(Path(server_path).absolute())


def launcher_directory() -> Path:
    return Path(__file__).resolve().parent


def companion_xinitrc(directory: Path | None = None) -> Path:
    if directory is None:
        directory = launcher_directory()

    return directory / FILE_NAME_XINITRC


def build_launch_command(
    settings: NestxSettings | None = None,
    search_path: str | None = None,
) -> LaunchCommand:
    if settings is None:
        settings = NestxSettings()

    server_path = resolve_server_executable(
        settings.server.program,
        search_path=search_path,
    )

    if settings.session.xinitrc:
        xinitrc_path = Path(settings.session.xinitrc).expanduser().absolute()
    else:
        xinitrc_path = companion_xinitrc()

    return LaunchCommand(
        xinit=settings.session.xinit,
        xinitrc=str(xinitrc_path),
        server_path=server_path,
        server_args=tuple(settings.server.iter_args()),
    )


def launch(command: LaunchCommand) -> NoReturn:
    args = command.to_args()

    # Anything buffered would be lost after exec
    stdout.flush()
    stderr.flush()

    try:
        execvp(args[0], args)
    except OSError as e:
        raise NestxLaunchError(f"Failed to execute {args[0]}: {e.strerror}") from e
