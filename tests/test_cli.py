"""Tests for command-line parsing."""

import pytest

from sxs import cli
from sxs.cli import args_to_overrides, build_parser


class TestParser:
    def test_defaults_are_unset(self):
        args = build_parser().parse_args([])
        assert args_to_overrides(args) == {}

    def test_original_flags(self):
        args = build_parser().parse_args([
            "--input1", "a.mp4",
            "--input2", "b.mp4",
            "--input1_start_frame", "4",
            "--input2_start_frame", "10",
            "--adapt_first",
            "--output", "out.mp4",
            "--fourcc_codec", "avc1",
        ])
        assert args_to_overrides(args) == {
            "input1": "a.mp4",
            "input2": "b.mp4",
            "input1_start_frame": 4,
            "input2_start_frame": 10,
            "adapt_first": True,
            "output": "out.mp4",
            "fourcc_codec": "avc1",
        }

    def test_extra_flags(self):
        args = build_parser().parse_args(
            ["--no_preview", "--progress_interval", "5", "-v", "--config", "x.yaml"]
        )
        assert args.config == "x.yaml"
        assert args_to_overrides(args) == {
            "preview": False,
            "progress_interval": 5,
            "logging.level": "DEBUG",
        }

    def test_no_adapt_first(self):
        args = build_parser().parse_args(["--no-adapt_first"])
        assert args_to_overrides(args) == {"adapt_first": False}

    def test_start_frame_must_be_int(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--input1_start_frame", "ten"])


class TestMain:
    def test_flags_override_yaml(self, tmp_path, monkeypatch):
        config_file = tmp_path / "run.yaml"
        config_file.write_text(
            "input1: a.mp4\n"
            "input2: b.mp4\n"
            "output: yaml.mp4\n"
            "fourcc_codec: mjpg\n"
        )
        seen = {}

        def fake_run(config):
            seen["config"] = config
            return cli.RunSummary("o", 0, (1, 1), 1.0, None)

        monkeypatch.setattr(cli, "run_side_by_side", fake_run)
        cli.main(["--config", str(config_file), "--output", "cli.mp4", "--no_preview"])

        config = seen["config"]
        assert config.input1 == "a.mp4"
        assert config.output == "cli.mp4"
        assert config.fourcc_codec == "mjpg"
        assert config.preview is False
        assert config.adapt_first is False

    def test_cli_turns_off_yaml_adapt_first(self, tmp_path, monkeypatch):
        config_file = tmp_path / "run.yaml"
        config_file.write_text("adapt_first: true\n")
        seen = {}

        def fake_run(config):
            seen["config"] = config
            return cli.RunSummary("o", 0, (1, 1), 1.0, None)

        monkeypatch.setattr(cli, "run_side_by_side", fake_run)
        cli.main(["--config", str(config_file), "--no-adapt_first", "--no_preview"])

        assert seen["config"].adapt_first is False

    def test_run_cli_returns_none(self, monkeypatch):
        monkeypatch.setattr(
            cli, "run_side_by_side",
            lambda config: cli.RunSummary("o", 0, (1, 1), 1.0, None),
        )
        monkeypatch.setattr("sys.argv", ["video-sxs", "--no_preview"])
        assert cli.run_cli() is None
