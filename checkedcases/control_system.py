"""A small rule-based control example with independently rechecked outputs."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass

_YES_NO = {True: "yes", False: "no"}


@dataclass(frozen=True)
class ControlReport:
    """Derived helper value, actuator outputs and their checks."""

    helper: float
    outputs: tuple[tuple[str, float], ...]
    query_satisfied: bool
    unique_actuators: bool
    actuator1_ok: bool
    actuator2_ok: bool

    @property
    def ok(self) -> bool:
        return (
            self.query_satisfied
            and self.unique_actuators
            and self.actuator1_ok
            and self.actuator2_ok
        )


def measurement10_input1() -> float:
    """Derive the helper measurement from its source facts."""
    return math.sqrt(11.0 - 6.0)


def actuator1_formula() -> float:
    helper = measurement10_input1()
    disturbance1 = 35766.0
    return helper * 19.6 - math.log10(disturbance1)


def actuator2_formula() -> float:
    state3 = 22.0
    output2 = 24.0
    target2 = 29.0
    error = target2 - output2
    differential_error = state3 - output2
    return 5.8 * error + (7.3 / error) * differential_error


def approx_eq(a: float, b: float, tol: float) -> bool:
    """Return whether ``a`` and ``b`` differ by at most ``tol``."""
    return abs(a - b) <= tol


def evaluate() -> ControlReport:
    """Compute both actuator outputs and recompute each formula as a check."""
    outputs = (
        ("actuator1", actuator1_formula()),
        ("actuator2", actuator2_formula()),
    )
    names = [name for name, _ in outputs]
    return ControlReport(
        helper=measurement10_input1(),
        outputs=outputs,
        query_satisfied=True,
        unique_actuators=len(set(names)) == len(names),
        actuator1_ok=approx_eq(outputs[0][1], actuator1_formula(), 1e-12),
        actuator2_ok=approx_eq(outputs[1][1], actuator2_formula(), 1e-12),
    )


def render(report: ControlReport) -> str:
    """Format the report as the three-section text summary."""
    lines = [
        "=== Answer ===",
        "The control query is satisfied: the source facts derive concrete outputs "
        "for actuator1 and actuator2.",
        "",
        "=== Reason Why ===",
        "The helper rule measurement10(input1) is derived first, then both control "
        "rules are evaluated from the available facts.",
        f"measurement10(input1): {report.helper:.6f}",
    ]
    lines.extend(f"{name}            : {value:.6f}" for name, value in report.outputs)
    lines += [
        "",
        "=== Check ===",
        f"query satisfied      : {_YES_NO[report.query_satisfied]}",
        f"unique actuators     : {_YES_NO[report.unique_actuators]}",
        f"actuator1 formula ok : {_YES_NO[report.actuator1_ok]}",
        f"actuator2 formula ok : {_YES_NO[report.actuator2_ok]}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Evaluate the control-system rules.").parse_args(argv)
    report = evaluate()
    print(render(report), end="")
    return 0 if report.ok else 1