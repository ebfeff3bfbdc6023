#!/usr/bin/env python3
"""Replay a voting session from a JSON script.

Builds a workflow from SessionConfig (environment, optionally a .env file),
applies every step of the script and prints the step outcomes and the final
session snapshot as JSON. The run is tagged with a correlation ID that
appears both in the report and in every log entry on stderr.

Script format:
    {
        "stop_on_error": true,
        "steps": [
            {"action": "start_proposals_registration", "caller": "owner"},
            {"action": "add_proposal", "caller": "voter-1", "description": "A"},
            {"action": "end_proposals_registration", "caller": "owner"},
            {"action": "start_voting_session", "caller": "owner"},
            {"action": "cast_vote", "caller": "voter-2", "proposal_id": 1},
            {"action": "end_voting_session", "caller": "owner"},
            {"action": "tally_votes", "caller": "owner"}
        ]
    }

Usage:
    python scripts/run_session.py session.json
    python scripts/run_session.py session.json --output result.json
    python scripts/run_session.py session.json --no-seed -v
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from pydantic import ValidationError  # noqa: E402

from ballotbox.application.dtos.session_script import (  # noqa: E402
    SessionReport,
    SessionScript,
)
from ballotbox.application.services.session_script_runner import (  # noqa: E402
    SessionScriptRunner,
)
from ballotbox.bootstrap import (  # noqa: E402
    configure_structlog,
    correlation_scope,
    create_session_workflow,
)
from ballotbox.config.session_config import SessionConfig  # noqa: E402


def _load_script(path: Path) -> SessionScript:
    with open(path, encoding="utf-8") as f:
        return SessionScript.model_validate(json.load(f))


def _save_json(path: Path, obj: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2)


def build_report(
    script: SessionScript,
    config: SessionConfig,
    correlation_id: str | None = None,
) -> SessionReport:
    """Run a script against a fresh workflow and collect the results.

    Every log entry of the run carries the report's correlation ID.

    Args:
        script: Validated session script.
        config: Configuration the workflow is created from.
        correlation_id: ID to tag the run with. Generated when omitted.

    Returns:
        SessionReport with the step outcomes and the final snapshot.
    """
    with correlation_scope(correlation_id) as scoped_id:
        workflow = create_session_workflow(config)
        outcomes = SessionScriptRunner(workflow).run(script)
        return SessionReport(
            correlation_id=scoped_id,
            outcomes=outcomes,
            session=workflow.snapshot(),
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Replay a voting session script")
    parser.add_argument(
        "script",
        type=Path,
        help="Path to the JSON session script",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start with an empty whitelist instead of the configured seed voters",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Human-readable console logs instead of JSON",
    )
    args = parser.parse_args(argv)

    configure_structlog("development" if args.verbose else "production")

    if not args.script.exists():
        print(f"Error: Script not found: {args.script}", file=sys.stderr)
        return 2

    try:
        script = _load_script(args.script)
    except (json.JSONDecodeError, ValidationError) as e:
        print(f"Error: Invalid session script {args.script}: {e}", file=sys.stderr)
        return 2

    try:
        config = SessionConfig.from_environment()
    except ValueError as e:
        print(f"Error: Invalid session configuration: {e}", file=sys.stderr)
        return 2
    if args.no_seed:
        config = replace(config, seed_voters=())

    report = build_report(script, config)
    report_json = report.model_dump(mode="json")

    if args.output is not None:
        _save_json(args.output, report_json)
        print(f"Report written to {args.output}")
    else:
        print(json.dumps(report_json, indent=2))

    return 0 if report.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
