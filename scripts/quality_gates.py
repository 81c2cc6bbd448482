#!/usr/bin/env python3
"""
Quality Gates Runner.

Runs lint, format, type and test gates for strutil-py and writes JSON and
markdown evidence to artifacts/.

Gates:
1. lint: ruff check
2. format: ruff format --check (optional)
3. types: mypy over src
4. tests: full pytest suite
5. regression: invariant suite only
"""

from __future__ import annotations

import argparse
import datetime
import json
import subprocess
import sys
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
ARTIFACTS_DIR = PROJECT_ROOT / "artifacts"

PASS = "pass"
FAIL = "fail"
WARN = "warn"
SKIP = "skip"


@dataclass
class GateConfig:
    """A single gate: a command that must exit 0."""

    name: str
    description: str
    command: list[str]
    required: bool = True
    timeout_seconds: int = 300


GATES: list[GateConfig] = [
    GateConfig(
        name="lint",
        description="Code linting (ruff)",
        command=[sys.executable, "-m", "ruff", "check", "."],
    ),
    GateConfig(
        name="format",
        description="Code formatting check (ruff)",
        command=[sys.executable, "-m", "ruff", "format", "--check", "."],
        required=False,
    ),
    GateConfig(
        name="types",
        description="Type checking (mypy)",
        command=[sys.executable, "-m", "mypy", "src", "--ignore-missing-imports"],
    ),
    GateConfig(
        name="tests",
        description="All tests (pytest)",
        command=[sys.executable, "-m", "pytest", "-q"],
        timeout_seconds=600,
    ),
    GateConfig(
        name="regression",
        description="Invariant suite (pytest)",
        command=[sys.executable, "-m", "pytest", "tests/regression", "-q"],
    ),
]


@dataclass
class GateResult:
    """Outcome of one gate."""

    name: str
    status: str
    exit_code: int
    duration_seconds: float
    command: list[str]
    required: bool
    output: str = ""


@dataclass
class GatesReport:
    """Aggregated gate outcomes."""

    timestamp_utc: str
    overall_status: str
    counts: dict[str, int]
    gates: list[GateResult] = field(default_factory=list)


def _status_for(exit_code: int, required: bool) -> str:
    if exit_code == 0:
        return PASS
    return FAIL if required else WARN


def run_gate(config: GateConfig, cwd: Path = PROJECT_ROOT) -> GateResult:
    """Run one gate and capture its outcome."""
    print(f"[{config.name}] {config.description}...", end="", flush=True)
    start = time.monotonic()

    try:
        completed = subprocess.run(
            config.command,
            capture_output=True,
            text=True,
            timeout=config.timeout_seconds,
            cwd=cwd,
        )
        exit_code = completed.returncode
        output = completed.stdout + completed.stderr
    except subprocess.TimeoutExpired:
        exit_code = -1
        output = f"Timeout after {config.timeout_seconds}s"
    except OSError as e:
        exit_code = -1
        output = str(e)

    duration = time.monotonic() - start
    status = FAIL if exit_code == -1 else _status_for(exit_code, config.required)
    print(f" {status.upper()} ({duration:.1f}s)")

    return GateResult(
        name=config.name,
        status=status,
        exit_code=exit_code,
        duration_seconds=duration,
        command=config.command,
        required=config.required,
        output=output,
    )


def select_gates(
    gates: list[GateConfig],
    only: list[str] | None = None,
) -> list[GateConfig]:
    """Restrict gates to the named ones, keeping declaration order."""
    if not only:
        return list(gates)
    return [gate for gate in gates if gate.name in only]


def run_all_gates(
    gates: list[GateConfig],
    skip: list[str] | None = None,
) -> list[GateResult]:
    """Run gates in order, recording skipped ones."""
    skip = skip or []
    results = []
    for config in gates:
        if config.name in skip:
            print(f"[{config.name}] SKIPPED")
            results.append(
                GateResult(
                    name=config.name,
                    status=SKIP,
                    exit_code=0,
                    duration_seconds=0.0,
                    command=config.command,
                    required=config.required,
                )
            )
        else:
            results.append(run_gate(config))
    return results


def generate_report(results: list[GateResult]) -> GatesReport:
    """Aggregate results. Overall fails only on a failed required gate."""
    counts = {status: 0 for status in (PASS, FAIL, WARN, SKIP)}
    for result in results:
        counts[result.status] += 1

    failed_required = any(r.status == FAIL and r.required for r in results)
    return GatesReport(
        timestamp_utc=datetime.datetime.now(datetime.UTC).isoformat(),
        overall_status=FAIL if failed_required else PASS,
        counts=counts,
        gates=results,
    )


def render_summary(report: GatesReport) -> str:
    """Markdown summary of a report."""
    lines = [
        "# Quality Gates Summary",
        "",
        f"**Status**: {report.overall_status.upper()}",
        f"**Timestamp**: {report.timestamp_utc}",
        "",
        "| Gate | Status | Duration | Required |",
        "|------|--------|----------|----------|",
    ]
    for r in report.gates:
        required = "Yes" if r.required else "No"
        lines.append(
            f"| {r.name} | {r.status.upper()} | {r.duration_seconds:.1f}s | {required} |"
        )

    failures = [r for r in report.gates if r.status == FAIL and r.required]
    if failures:
        lines.extend(["", "## Failures", ""])
        for r in failures:
            lines.extend(
                [f"### {r.name}", "", f"Command: `{' '.join(r.command)}`", "", "```"]
            )
            lines.append(r.output or "No output")
            lines.extend(["```", ""])

    return "\n".join(lines)


def write_artifacts(report: GatesReport, artifacts_dir: Path = ARTIFACTS_DIR) -> list[Path]:
    """Write the JSON report and markdown summary; return their paths."""
    artifacts_dir.mkdir(parents=True, exist_ok=True)

    json_path = artifacts_dir / "quality_gates_run.json"
    payload = asdict(report)
    for gate in payload["gates"]:
        gate.pop("output")
    json_path.write_text(json.dumps(payload, indent=2))

    md_path = artifacts_dir / "quality_gates_summary.md"
    md_path.write_text(render_summary(report))
    return [json_path, md_path]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run quality gates and generate evidence artifacts."
    )
    parser.add_argument("--skip", nargs="*", default=[], help="Gates to skip")
    parser.add_argument("--only", nargs="*", help="Only run these gates")
    parser.add_argument("--list", action="store_true", help="List gates and exit")
    parser.add_argument(
        "--artifacts-dir",
        type=Path,
        default=ARTIFACTS_DIR,
        help="Directory for report artifacts",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.list:
        for gate in GATES:
            kind = "required" if gate.required else "optional"
            print(f"  - {gate.name}: {gate.description} ({kind})")
        return 0

    gates = select_gates(GATES, args.only)
    if not gates:
        print(f"Error: No gates found matching: {args.only}")
        return 1

    report = generate_report(run_all_gates(gates, skip=args.skip))
    for path in write_artifacts(report, args.artifacts_dir):
        print(f"Wrote {path}")

    if report.overall_status == PASS:
        print("SUCCESS: All required quality gates passed.")
        return 0
    print("FAILURE: One or more required quality gates failed.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
