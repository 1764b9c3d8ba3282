"""CLI entry point for the accessibility checklist."""

import argparse
import json
import logging
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from a11y_checklist.backends.loading import BackendNotFoundError, InvalidBackendError
from a11y_checklist.catalog import ScreenNotFoundError
from a11y_checklist.config_loader import load_config
from a11y_checklist.models.config import ChecklistConfig
from a11y_checklist.presentation import (
    detail_view,
    format_output,
    log_results_summary,
    render_detail,
    render_text,
)
from a11y_checklist.session import Action, ChecklistSession, parse_action

EXIT_USAGE_ERROR = 2


def read_actions(lines: Iterable[str]) -> Sequence[Action]:
    """Parse one action per line, skipping blank lines and comments."""
    return [
        parse_action(line)
        for line in lines
        if line.strip() and not line.lstrip().startswith("#")
    ]


def build_config(
    config_path: Path | None,
    backend: str | None = None,
    backend_config_json: str | None = None,
) -> ChecklistConfig:
    """Combine the config file with command line overrides.

    Raises:
        ValueError: If an override is not valid JSON or fails validation

    """
    config = load_config(config_path) if config_path else ChecklistConfig()

    overrides: dict[str, object] = {}
    if backend:
        overrides["backend"] = backend
    if backend_config_json:
        overrides["backend_config"] = json.loads(backend_config_json)

    if not overrides:
        return config
    return ChecklistConfig.model_validate({**config.model_dump(), **overrides})


def run(
    config: ChecklistConfig,
    actions: Sequence[Action],
    detail_screen: str | None = None,
    text: bool = False,
) -> int:
    """Apply actions in a fresh session and return exit code."""
    log = logging.getLogger("a11y_checklist")

    session = ChecklistSession.from_config(config)
    log.info("Applying %d action(s)...", len(actions))

    snapshot = session.snapshot()
    for action in actions:
        snapshot = session.apply(action)

    log_results_summary(log, snapshot)

    view = None
    if detail_screen:
        view = detail_view(snapshot, session.screen(detail_screen))

    if text:
        lines = list(render_text(snapshot))
        if view is not None:
            lines += ["", *render_detail(view)]
        print("\n".join(lines))
    else:
        output = format_output(snapshot)
        if view is not None:
            last = view.last_result
            output["detail"] = {
                "screen": view.screen.id,
                "status": last.status if last else None,
                "message": last.message if last else None,
            }
        print(json.dumps(output, indent=2, ensure_ascii=False))

    has_issues = any(not result.passed for result in snapshot.results.values())
    return 1 if has_issues else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run the debug accessibility checklist against the app screens"
    )
    parser.add_argument(
        "actions",
        nargs="*",
        help=(
            "Actions to apply in order: run-all, clear, toggle-touch-targets, "
            "toggle-labels, or <labels|touch-targets|dynamic-type|contrast>=<screen>. "
            "Read one per line from stdin when omitted."
        ),
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--backend",
        default=None,
        help="Measurement backend key (overrides the config file)",
    )
    parser.add_argument(
        "--backend-config",
        default=None,
        help="JSON configuration for the backend (overrides the config file)",
    )
    parser.add_argument(
        "--screen",
        default=None,
        help="Also show the detail view of this screen",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Print a text rendering instead of JSON",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    log = logging.getLogger("a11y_checklist")

    try:
        config = build_config(args.config, args.backend, args.backend_config)
        actions = (
            read_actions(args.actions) if args.actions else read_actions(sys.stdin)
        )
        exit_code = run(
            config=config,
            actions=actions,
            detail_screen=args.screen,
            text=args.text,
        )
    except (
        BackendNotFoundError,
        InvalidBackendError,
        ScreenNotFoundError,
        FileNotFoundError,
        ValueError,
    ) as e:
        log.error("%s", e)
        exit_code = EXIT_USAGE_ERROR

    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
