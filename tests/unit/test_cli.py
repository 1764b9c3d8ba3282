"""Tests for CLI module."""

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from a11y_checklist.backends.stub import StubBackend
from a11y_checklist.cli import build_config, main, read_actions, run
from a11y_checklist.models.config import ChecklistConfig
from a11y_checklist.session import Action, ChecklistSession

from .conftest import FakeBackend


def test_read_actions_skips_blank_lines_and_comments() -> None:
    """Parses one action per non-empty line."""
    actions = read_actions(["run-all\n", "\n", "# reset\n", "labels=Login\n"])

    assert actions == [
        Action(kind="run-all"),
        Action(kind="labels", screen_id="Login"),
    ]


class TestBuildConfig:
    """Tests for build_config function."""

    def test_defaults_without_file(self) -> None:
        """Uses the default configuration when no file is given."""
        assert build_config(None) == ChecklistConfig()

    def test_overrides_file_values(self, tmp_path: Path) -> None:
        """Command line options take precedence over the file."""
        path = tmp_path / "a11y.yaml"
        path.write_text("backend: stub\nsettings:\n  show_touch_targets: true\n")

        config = build_config(path, backend="device", backend_config_json='{"x": 1}')

        assert config.backend == "device"
        assert config.backend_config == {"x": 1}
        assert config.settings.show_touch_targets

    @pytest.mark.parametrize("backend_config", ["[1]", '"x"', "3"])
    def test_rejects_backend_config_that_is_not_an_object(
        self, backend_config: str
    ) -> None:
        """Backend config overrides are validated like the config file."""
        with pytest.raises(ValidationError):
            build_config(None, backend_config_json=backend_config)


class TestRun:
    """Tests for run function."""

    def test_returns_zero_when_all_checks_pass(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Returns 0 and prints JSON results when everything passes."""
        exit_code = run(ChecklistConfig(), [Action(kind="run-all")])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["total"] == 14
        assert output["passed"] == 14
        assert output["results"][0]["screen"] == "Add Feeding"

    def test_returns_zero_with_no_actions(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """An untouched session reports no results."""
        exit_code = run(ChecklistConfig(), [])

        assert exit_code == 0
        assert '"total": 0' in capsys.readouterr().out

    def test_returns_one_when_any_check_warns(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Returns 1 when a stored result is not a success."""
        session = ChecklistSession(
            backend=FakeBackend(small_targets=frozenset({"Tracking"}))
        )

        with patch(
            "a11y_checklist.cli.ChecklistSession.from_config", return_value=session
        ):
            exit_code = run(ChecklistConfig(), [Action(kind="run-all")])

        assert exit_code == 1
        output = json.loads(capsys.readouterr().out)
        assert output["warnings"] == 1

    def test_clear_resets_exit_code(self) -> None:
        """Clearing after a failing run leaves nothing to report."""
        session = ChecklistSession(
            backend=FakeBackend(missing_labels=frozenset({"Login"}))
        )

        with patch(
            "a11y_checklist.cli.ChecklistSession.from_config", return_value=session
        ):
            exit_code = run(
                ChecklistConfig(), [Action(kind="run-all"), Action(kind="clear")]
            )

        assert exit_code == 0

    def test_text_output_with_detail(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints the text rendering and the detail view."""
        run(
            ChecklistConfig(),
            [Action(kind="contrast", screen_id="Dashboard")],
            detail_screen="Dashboard",
            text=True,
        )

        out = capsys.readouterr().out
        assert out.startswith("Accessibility Testing")
        assert "Test Color Contrast" in out
        assert "Colors meet WCAG AA contrast requirements" in out

    def test_json_output_with_detail(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Adds the detail screen's last result to the JSON output."""
        run(ChecklistConfig(), [], detail_screen="Login")

        output = json.loads(capsys.readouterr().out)
        assert output["detail"] == {"screen": "Login", "status": None, "message": None}


class TestMain:
    """Tests for main CLI entry point."""

    def test_exits_with_run_result(self) -> None:
        """Main function exits with the result from run()."""
        with (
            patch("sys.argv", ["cli", "run-all", "labels=Dashboard"]),
            patch("a11y_checklist.cli.run", return_value=0) as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 0
        actions = mock_run.call_args.kwargs["actions"]
        assert actions == [
            Action(kind="run-all"),
            Action(kind="labels", screen_id="Dashboard"),
        ]

    def test_reads_actions_from_stdin(self) -> None:
        """Reads actions from stdin when none are given."""
        with (
            patch("sys.argv", ["cli"]),
            patch("sys.stdin", io.StringIO("toggle-labels\nclear\n")),
            patch("a11y_checklist.cli.run", return_value=0) as mock_run,
            pytest.raises(SystemExit),
        ):
            main()

        assert mock_run.call_args.kwargs["actions"] == [
            Action(kind="toggle-labels"),
            Action(kind="clear"),
        ]

    def test_exits_two_for_unknown_screen(self) -> None:
        """Unknown screens are reported as usage errors."""
        with (
            patch("sys.argv", ["cli", "labels=Checkout"]),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 2

    def test_exits_two_for_invalid_action(self) -> None:
        """Malformed actions are reported as usage errors."""
        with (
            patch("sys.argv", ["cli", "explode"]),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 2

    def test_exits_two_for_unknown_backend(self) -> None:
        """Unknown backends are reported as usage errors."""
        with (
            patch("sys.argv", ["cli", "--backend", "nope", "run-all"]),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 2

    def test_exits_two_for_backend_config_not_an_object(self) -> None:
        """A backend config that is not a JSON object is a usage error."""
        with (
            patch("sys.argv", ["cli", "--backend-config", "[1]", "run-all"]),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 2

    def test_uses_stub_backend_by_default(self) -> None:
        """The default configuration resolves to the stub backend."""
        session = ChecklistSession.from_config(build_config(None))

        assert isinstance(session.backend, StubBackend)
