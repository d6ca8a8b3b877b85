# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations

from dataclasses import dataclass, field
from functools import cache
from pathlib import Path
from tomllib import TOMLDecodeError
from tomllib import load as toml_load
from typing import TYPE_CHECKING, Any

from xdg import BaseDirectory

from .exceptions import NestxConfigError
from .nestx_utils import FILE_NAME_CONFIG, NestxBuildInfo

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cattrs import Converter


def parse_decimal(text: str, what: str) -> int:
    # ASCII digits only
    if not (text.isascii() and text.isdecimal()):
        raise ValueError(f"Invalid {what}: {text!r}")

    return int(text)


def parse_display_name(display: str) -> tuple[str, int, int | None]:
    # See https://man.archlinux.org/man/X.7#DISPLAY_NAMES
    # protocol/hostname:displaynumber.screennumber
    match display.split("/"):
        case [protocol, remainder]:
            if protocol != "unix":
                hostname_prefix = protocol + "/"
            else:
                hostname_prefix = ""
            display = remainder
        case [remainder]:
            hostname_prefix = ""
            display = remainder
        case _:
            raise ValueError(f"Invalid display name: {display!r}")

    # hostname:displaynumber.screennumber
    match display.rsplit(":", maxsplit=1):
        case [hostname, remainder]:
            display = remainder
        case _:
            raise ValueError(f"Display name missing colon: {display!r}")

    # displaynumber.screennumber
    match display.split("."):
        case [displaynumber, screennumber]:
            screen: int | None = parse_decimal(screennumber, "screen number")
        case [displaynumber]:
            screen = None
        case _:
            raise ValueError(f"Invalid display number: {display!r}")

    number = parse_decimal(displaynumber, "display number")

    return hostname_prefix + hostname, number, screen


def display_socket_path(display: str) -> Path | None:
    hostname, displaynumber, _ = parse_display_name(display)
    if hostname not in ("", "unix"):
        return None

    return Path(f"/tmp/.X11-unix/X{displaynumber}")


def parse_screen_geometry(screen: str) -> tuple[int, ...]:
    # WIDTHxHEIGHT or WIDTHxHEIGHTxDEPTH
    parts = screen.split("x")
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid screen geometry: {screen!r}")

    values = tuple(parse_decimal(x, "screen geometry") for x in parts)
    if any(x <= 0 for x in values):
        raise ValueError(f"Screen geometry must be positive: {screen!r}")

    return values


@dataclass(slots=True)
class ServerSettings:
    program: str = "Xephyr"
    display: str = ":100"
    disable_access_control: bool = True
    screen: str = "800x600"
    host_cursor: bool = True
    extra_args: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.program:
            raise ValueError("Server program can't be empty")

        parse_display_name(self.display)
        parse_screen_geometry(self.screen)

    def iter_args(self) -> Iterator[str]:
        yield self.display

        if self.disable_access_control:
            yield "-ac"

        yield "-screen"
        yield self.screen

        if self.host_cursor:
            yield "-host-cursor"

        yield from self.extra_args


@dataclass(slots=True)
class SessionSettings:
    xinit: str = "xinit"
    # Empty means the xinitrc installed beside the launcher
    xinitrc: str = ""

    def __post_init__(self) -> None:
        if not self.xinit:
            raise ValueError("Session initializer can't be empty")


@dataclass(slots=True)
class NestxSettings:
    server: ServerSettings = field(default_factory=ServerSettings)
    session: SessionSettings = field(default_factory=SessionSettings)

    @staticmethod
    def default_config_path() -> Path:
        return (
            Path(BaseDirectory.xdg_config_home)
            / NestxBuildInfo.CONFIG_DIR_NAME
            / FILE_NAME_CONFIG
        )

    @classmethod
    def from_dict(cls, conf_dict: dict[str, Any]) -> NestxSettings:
        from cattrs.errors import BaseValidationError, ForbiddenExtraKeysError

        try:
            return get_cattrs_converter().structure(conf_dict, cls)
        except (
            BaseValidationError,
            ForbiddenExtraKeysError,
            ValueError,
            TypeError,
        ) as e:
            raise NestxConfigError(f"Invalid configuration: {e}") from e

    @classmethod
    def load(cls, config_path: Path | None = None) -> NestxSettings:
        """Load settings from TOML file.

        Without explicit path the file in XDG config home is used and
        missing file means default settings. Explicitly given file
        must exist.
        """
        if config_path is None:
            config_path = cls.default_config_path()
            if not config_path.exists():
                return cls()

        try:
            with open(config_path, mode="rb") as f:
                conf_dict = toml_load(f)
        except OSError as e:
            raise NestxConfigError(
                f"Failed to read config {config_path}: {e.strerror}"
            ) from e
        except TOMLDecodeError as e:
            raise NestxConfigError(f"Failed to parse config {config_path}: {e}") from e

        return cls.from_dict(conf_dict)

    def to_dict(self) -> dict[str, Any]:
        conf_dict: dict[str, Any] = get_cattrs_converter().unstructure(self)
        return conf_dict

    def dumps(self) -> str:
        from tomli_w import dumps as toml_dumps

        return toml_dumps(self.to_dict())


@cache
def get_cattrs_converter() -> Converter:
    from cattrs import Converter

    new_converter = Converter(forbid_extra_keys=True)

    def structure_strict_str(val: Any, _: Any) -> str:
        if not isinstance(val, str):
            raise TypeError(f"Expected string, got {val!r}")

        return val

    def structure_strict_bool(val: Any, _: Any) -> bool:
        if not isinstance(val, bool):
            raise TypeError(f"Expected boolean, got {val!r}")

        return val

    def structure_list_str(val: Any, _: Any) -> list[str]:
        if not isinstance(val, list):
            raise TypeError(f"Expected list of strings, got {val!r}")

        return [structure_strict_str(x, str) for x in val]

    new_converter.register_structure_hook(str, structure_strict_str)
    new_converter.register_structure_hook(bool, structure_strict_bool)
    new_converter.register_structure_hook_func(
        lambda t: t == list[str], structure_list_str
    )

    return new_converter
