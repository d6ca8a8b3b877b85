# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations

from argparse import ArgumentParser
from shlex import join as shlex_join
from sys import stderr, stdout
from typing import TYPE_CHECKING

from .exceptions import NestxConfigError, NestxLaunchError
from .nestx_cli_metadata import NESTX_DESCRIPTION, NESTX_OPTIONS
from .nestx_launcher import build_launch_command, launch
from .nestx_settings import NestxSettings, display_socket_path
from .nestx_utils import NestxBuildInfo

if TYPE_CHECKING:
    from pathlib import Path

    from .nestx_launcher import LaunchCommand


def print_dry_run(command: LaunchCommand, settings: NestxSettings) -> None:
    print("Command would be executed:", file=stderr)
    print(shlex_join(command.to_args()), file=stderr)

    if not command.server_path:
        print(
            f"{settings.server.program} was not found in PATH.",
            file=stderr,
        )

    if socket_path := display_socket_path(settings.server.display):
        print(f"Display socket: {socket_path}", file=stderr)


def run_nestx(
    config: Path | None,
    dry_run: bool,
    print_config: bool,
) -> None:
    try:
        settings = NestxSettings.load(config)
    except NestxConfigError as e:
        print(e, file=stderr)
        raise SystemExit(1)

    if print_config:
        stdout.write(settings.dumps())
        return

    command = build_launch_command(settings)

    if dry_run:
        print_dry_run(command, settings)
        return

    try:
        launch(command)
    except NestxLaunchError as e:
        print(e, file=stderr)
        raise SystemExit(127)


def create_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="nestx",
        description=NESTX_DESCRIPTION,
    )
    for arg_name, arg_options in NESTX_OPTIONS.items():
        parser.add_argument(
            arg_name,
            **arg_options,
        )

    parser.add_argument(
        "--version",
        action="version",
        version=NestxBuildInfo.VERSION,
    )

    return parser


def nestx_main(arg_list: list[str] | None = None) -> None:
    parser = create_arg_parser()
    args_dict = vars(parser.parse_args(arg_list))
    run_nestx(**args_dict)
