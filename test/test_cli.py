# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024 igo95862
from __future__ import annotations

from io import StringIO
from pathlib import Path
from tempfile import TemporaryDirectory
from tomllib import loads as toml_loads
from unittest import TestCase
from unittest import main as unittest_main
from unittest.mock import MagicMock, patch

from nestx.nestx_cli import create_arg_parser, nestx_main
from nestx.nestx_cli_metadata import NESTX_OPTIONS
from nestx.nestx_launcher import companion_xinitrc


class TestCli(TestCase):
    def setUp(self) -> None:
        self.temp_dir = TemporaryDirectory(prefix="nestx_test_cli")
        self.addCleanup(self.temp_dir.cleanup)
        self.temp_dir_path = Path(self.temp_dir.name)

        self.stdout = StringIO()
        self.stderr = StringIO()
        self.execvp_mock = MagicMock()

        for patcher in (
            patch("xdg.BaseDirectory.xdg_config_home", str(self.temp_dir_path)),
            patch("nestx.nestx_cli.stdout", self.stdout),
            patch("nestx.nestx_cli.stderr", self.stderr),
            patch("nestx.nestx_launcher.execvp", self.execvp_mock),
        ):
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_parser_options(self) -> None:
        parser = create_arg_parser()
        option_strings = {
            x for action in parser._actions for x in action.option_strings
        }
        for option_name in NESTX_OPTIONS:
            self.assertIn(option_name, option_strings)

        args = vars(parser.parse_args([]))
        self.assertEqual(
            args,
            {"config": None, "dry_run": False, "print_config": False},
        )

    def test_no_arguments_launches(self) -> None:
        nestx_main([])

        self.execvp_mock.assert_called_once()
        program, args = self.execvp_mock.call_args.args
        self.assertEqual(program, "xinit")
        self.assertEqual(args[:3], ["xinit", str(companion_xinitrc()), "--"])
        self.assertEqual(
            args[-5:],
            [":100", "-ac", "-screen", "800x600", "-host-cursor"],
        )

    def test_dry_run(self) -> None:
        nestx_main(["--dry-run"])

        self.execvp_mock.assert_not_called()
        output = self.stderr.getvalue()
        self.assertIn("xinit", output)
        self.assertIn("-host-cursor", output)
        self.assertIn("/tmp/.X11-unix/X100", output)

    def test_print_config(self) -> None:
        nestx_main(["--print-config"])

        self.execvp_mock.assert_not_called()
        printed = toml_loads(self.stdout.getvalue())
        self.assertEqual(printed["server"]["program"], "Xephyr")
        self.assertEqual(printed["server"]["screen"], "800x600")
        self.assertEqual(printed["session"]["xinit"], "xinit")

    def test_custom_config(self) -> None:
        config_path = self.temp_dir_path / "custom.toml"
        with open(config_path, mode="x") as f:
            f.write('[server]\ndisplay = ":42"\n')

        nestx_main(["--config", str(config_path)])

        _, args = self.execvp_mock.call_args.args
        self.assertIn(":42", args)
        self.assertNotIn(":100", args)

    def test_bad_config_exits(self) -> None:
        config_path = self.temp_dir_path / "bad.toml"
        with open(config_path, mode="x") as f:
            f.write('[server]\nscreen = "huge"\n')

        with self.assertRaises(SystemExit) as cm:
            nestx_main(["--config", str(config_path)])

        self.assertEqual(cm.exception.code, 1)
        self.execvp_mock.assert_not_called()
        self.assertIn("Invalid configuration", self.stderr.getvalue())

    def test_bad_default_config_exits(self) -> None:
        config_dir = self.temp_dir_path / "nestx"
        config_dir.mkdir()
        with open(config_dir / "nestx.toml", mode="x") as f:
            f.write("[server\n")

        with self.assertRaises(SystemExit) as cm:
            nestx_main([])

        self.assertEqual(cm.exception.code, 1)
        self.execvp_mock.assert_not_called()
        self.assertIn("Failed to parse config", self.stderr.getvalue())

    def test_launch_failure_exits(self) -> None:
        self.execvp_mock.side_effect = FileNotFoundError(
            2, "No such file or directory"
        )

        with self.assertRaises(SystemExit) as cm:
            nestx_main([])

        self.assertEqual(cm.exception.code, 127)
        self.assertIn("Failed to execute xinit", self.stderr.getvalue())


if __name__ == "__main__":
    unittest_main()
