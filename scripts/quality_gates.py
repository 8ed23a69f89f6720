#!/usr/bin/env python3
"""
Quality Gates Runner.

Runs lint, type and test gates for catalogkit and writes a JSON report
plus a markdown summary to artifacts/.

Gates:
1. Rules gate: catalogkit_rules.yaml loads and validates
2. Lint gate: ruff linting
3. Format gate: ruff format check (warning only)
4. Type gate: mypy type checking
5. Test gate: full pytest suite
"""

from __future__ import annotations

import argparse
import datetime
import json
import subprocess
import sys
import time
from dataclasses import asdict, dataclass
from pathlib import Path

# --- Configuration ---

ARTIFACTS_DIR = Path("artifacts")
PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class GateConfig:
    """Configuration for a quality gate."""

    name: str
    description: str
    command: list[str]
    required: bool = True
    timeout_seconds: int = 300


GATES: list[GateConfig] = [
    GateConfig(
        name="rules",
        description="Rules file validation",
        command=["python", "-m", "pytest", "tests/unit/test_catalog_rules.py", "-q"],
    ),
    GateConfig(
        name="lint",
        description="Code linting (ruff)",
        command=["python", "-m", "ruff", "check", "."],
    ),
    GateConfig(
        name="format",
        description="Code formatting check (ruff)",
        command=["python", "-m", "ruff", "format", "--check", "."],
        required=False,
    ),
    GateConfig(
        name="types",
        description="Type checking (mypy)",
        command=["python", "-m", "mypy", "catalogkit"],
    ),
    GateConfig(
        name="tests",
        description="All tests (pytest)",
        command=["python", "-m", "pytest", "-q"],
        timeout_seconds=600,
    ),
]


# --- Result Types ---


@dataclass
class GateResult:
    """Result from running a gate."""

    name: str
    status: str  # "pass" | "fail" | "skip" | "warn"
    exit_code: int
    duration_seconds: float
    output: str
    command: list[str]
    required: bool


@dataclass
class GatesReport:
    """Full quality gates report."""

    timestamp_utc: str
    overall_status: str
    passed_gates: int
    failed_gates: int
    gates: list[GateResult]
    summary: str


# --- Gate Runner ---


def run_gate(config: GateConfig) -> GateResult:
    """Run a single quality gate."""
    print(f"[{config.name}] {config.description}...", end="", flush=True)
    start_time = time.monotonic()

    try:
        result = subprocess.run(
            config.command,
            capture_output=True,
            text=True,
            timeout=config.timeout_seconds,
            cwd=PROJECT_ROOT,
        )
    except subprocess.TimeoutExpired:
        duration = time.monotonic() - start_time
        print(f" TIMEOUT ({duration:.1f}s)")
        return GateResult(
            name=config.name,
            status="fail",
            exit_code=-1,
            duration_seconds=duration,
            output=f"Timeout after {config.timeout_seconds}s",
            command=config.command,
            required=config.required,
        )
    except OSError as e:
        duration = time.monotonic() - start_time
        print(f" ERROR ({duration:.1f}s)")
        return GateResult(
            name=config.name,
            status="fail",
            exit_code=-1,
            duration_seconds=duration,
            output=str(e),
            command=config.command,
            required=config.required,
        )

    duration = time.monotonic() - start_time
    if result.returncode == 0:
        status = "pass"
    elif not config.required:
        status = "warn"
    else:
        status = "fail"
    print(f" {status.upper()} ({duration:.1f}s)")

    return GateResult(
        name=config.name,
        status=status,
        exit_code=result.returncode,
        duration_seconds=duration,
        output=result.stderr or result.stdout,
        command=config.command,
        required=config.required,
    )


def run_all_gates(
    gates: list[GateConfig] | None = None,
    skip_gates: list[str] | None = None,
) -> list[GateResult]:
    """Run all configured gates, recording skipped ones."""
    gates = gates or GATES
    skip_gates = skip_gates or []

    results = []
    for config in gates:
        if config.name in skip_gates:
            print(f"[{config.name}] SKIPPED")
            results.append(
                GateResult(
                    name=config.name,
                    status="skip",
                    exit_code=0,
                    duration_seconds=0.0,
                    output="Skipped by user",
                    command=config.command,
                    required=config.required,
                )
            )
        else:
            results.append(run_gate(config))
    return results


# --- Report Generation ---


def generate_report(results: list[GateResult]) -> GatesReport:
    """Build the report; overall status fails only on required failures."""
    required_failures = [r for r in results if r.status == "fail" and r.required]
    overall_status = "fail" if required_failures else "pass"
    timestamp = datetime.datetime.now(datetime.UTC).isoformat()

    summary_lines = [
        "# Quality Gates Summary",
        "",
        f"**Status**: {overall_status.upper()}",
        f"**Timestamp**: {timestamp}",
        "",
        "| Gate | Status | Duration | Required |",
        "|------|--------|----------|----------|",
    ]
    for r in results:
        summary_lines.append(
            f"| {r.name} | {r.status.upper()} | {r.duration_seconds:.1f}s "
            f"| {'Yes' if r.required else 'No'} |"
        )

    for r in required_failures:
        summary_lines.extend(
            ["", f"## {r.name}", "", f"Command: `{' '.join(r.command)}`", "", "```",
             r.output or "No output", "```"]
        )

    return GatesReport(
        timestamp_utc=timestamp,
        overall_status=overall_status,
        passed_gates=sum(1 for r in results if r.status == "pass"),
        failed_gates=sum(1 for r in results if r.status == "fail"),
        gates=results,
        summary="\n".join(summary_lines),
    )


def write_artifacts(report: GatesReport, artifacts_dir: Path = ARTIFACTS_DIR) -> Path:
    """Write JSON report and markdown summary; return the JSON path."""
    artifacts_dir.mkdir(parents=True, exist_ok=True)

    json_path = artifacts_dir / "quality_gates_run.json"
    payload = {
        "timestamp_utc": report.timestamp_utc,
        "overall_status": report.overall_status,
        "passed_gates": report.passed_gates,
        "failed_gates": report.failed_gates,
        "gates": [
            {k: v for k, v in asdict(gate).items() if k != "output"} for gate in report.gates
        ],
    }
    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    (artifacts_dir / "quality_gates_summary.md").write_text(report.summary, encoding="utf-8")
    print(f"\nJSON report: {json_path}")
    return json_path


# --- CLI ---


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run catalogkit quality gates.")
    parser.add_argument("--skip", nargs="*", default=[], help="Gates to skip")
    parser.add_argument("--only", nargs="*", help="Only run these gates")
    parser.add_argument("--list", action="store_true", help="List gates and exit")
    args = parser.parse_args(argv)

    if args.list:
        for gate in GATES:
            kind = "required" if gate.required else "optional"
            print(f"  - {gate.name}: {gate.description} ({kind})")
        return 0

    gates_to_run = GATES
    if args.only:
        gates_to_run = [g for g in GATES if g.name in args.only]
        if not gates_to_run:
            print(f"Error: No gates found matching: {args.only}")
            return 1

    report = generate_report(run_all_gates(gates_to_run, skip_gates=args.skip))
    write_artifacts(report)
    return 0 if report.overall_status == "pass" else 1


if __name__ == "__main__":
    sys.exit(main())
