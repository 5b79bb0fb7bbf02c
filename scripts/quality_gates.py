#!/usr/bin/env python3
"""
Quality gates runner.

Runs lint, format, type and test gates over the package and writes a JSON
report to artifacts/quality_gates.json. Exit code 0 when every required
gate passes, 1 otherwise, 2 when the report cannot be written.
"""

from __future__ import annotations

import datetime
import json
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TypedDict

PROJECT_ROOT = Path(__file__).parent.parent
ARTIFACTS_DIR = PROJECT_ROOT / "artifacts"


@dataclass(frozen=True)
class Gate:
    name: str
    command: list[str]
    required: bool = True


class GateResult(TypedDict):
    status: str  # "pass" | "fail"
    required: bool
    exit_code: int
    stdout: str
    stderr: str
    command: list[str]


class GatesReport(TypedDict):
    timestamp_utc: str
    overall_status: str  # "pass" | "fail"
    gates: dict[str, GateResult]


GATES: list[Gate] = [
    Gate("lint", [sys.executable, "-m", "ruff", "check", "oneliners", "tests"]),
    # Formatting is advisory
    Gate(
        "format",
        [sys.executable, "-m", "ruff", "format", "--check", "oneliners"],
        required=False,
    ),
    Gate("types", [sys.executable, "-m", "mypy", "oneliners"]),
    Gate("tests", [sys.executable, "-m", "pytest", "-q", "tests/"]),
]


def run_gate(gate: Gate) -> GateResult:
    print(f"[{gate.name}] Running: {' '.join(gate.command)} ...", end="", flush=True)
    try:
        proc = subprocess.run(
            gate.command,
            capture_output=True,
            text=True,
            check=False,
            cwd=PROJECT_ROOT,
        )
    except OSError as e:
        print(" ERROR")
        return {
            "status": "fail",
            "required": gate.required,
            "exit_code": -1,
            "stdout": "",
            "stderr": str(e),
            "command": gate.command,
        }
    status = "pass" if proc.returncode == 0 else "fail"
    print(f" {status.upper()}")
    return {
        "status": status,
        "required": gate.required,
        "exit_code": proc.returncode,
        "stdout": proc.stdout,
        "stderr": proc.stderr,
        "command": gate.command,
    }


def build_report(
    results: dict[str, GateResult],
    now: datetime.datetime | None = None,
) -> GatesReport:
    """Overall status fails only when a required gate fails."""
    overall_pass = all(r["status"] == "pass" for r in results.values() if r["required"])
    now = now or datetime.datetime.now(datetime.UTC)
    return {
        "timestamp_utc": now.isoformat(),
        "overall_status": "pass" if overall_pass else "fail",
        "gates": results,
    }


def main() -> None:
    print("=== oneliners: quality gates ===")

    results = {gate.name: run_gate(gate) for gate in GATES}
    report = build_report(results)

    ARTIFACTS_DIR.mkdir(exist_ok=True)
    report_path = ARTIFACTS_DIR / "quality_gates.json"
    try:
        report_path.write_text(json.dumps(report, indent=2))
    except OSError as e:
        print(f"\nFAILED to write report artifact: {e}")
        sys.exit(2)
    print(f"\nReport written to: {report_path}")

    if report["overall_status"] == "pass":
        print("\nSUCCESS: All required quality gates passed.")
        sys.exit(0)

    print("\nFAILURE: One or more required quality gates failed.")
    for name, res in results.items():
        if res["status"] == "fail" and res["required"]:
            print(f"\n--- {name} FAILED (exit code {res['exit_code']}) ---")
            if res["stdout"].strip():
                print("STDOUT:")
                print(res["stdout"])
            if res["stderr"].strip():
                print("STDERR:")
                print(res["stderr"])
    sys.exit(1)


if __name__ == "__main__":
    main()
