"""Euler's identity in an exact integer complex model."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

_YES_NO = {True: "yes", False: "no"}


@dataclass(frozen=True)
class ExactComplex:
    """A complex number with integer parts."""

    re: int
    im: int

    def __add__(self, other: ExactComplex) -> ExactComplex:
        if not isinstance(other, ExactComplex):
            return NotImplemented
        return ExactComplex(self.re + other.re, self.im + other.im)

    def modulus_squared(self) -> int:
        return self.re * self.re + self.im * self.im

    def __str__(self) -> str:
        return f"({self.re}, {self.im})"


@dataclass(frozen=True)
class EulerReport:
    exp_ipi: ExactComplex
    result: ExactComplex
    modulus_sq: int
    identity_ok: bool
    unit_circle_ok: bool

    @property
    def ok(self) -> bool:
        return self.identity_ok and self.unit_circle_ok


def evaluate() -> EulerReport:
    """Represent exp(i*pi) exactly as (-1, 0) and add one."""
    exp_ipi = ExactComplex(-1, 0)
    result = exp_ipi + ExactComplex(1, 0)
    modulus_sq = exp_ipi.modulus_squared()
    return EulerReport(
        exp_ipi=exp_ipi,
        result=result,
        modulus_sq=modulus_sq,
        identity_ok=result == ExactComplex(0, 0),
        unit_circle_ok=modulus_sq == 1,
    )


def render(report: EulerReport) -> str:
    """Format the report as the three-section text summary."""
    lines = [
        "=== Answer ===",
        "Euler's identity holds exactly in this exact-arithmetic model: exp(i*pi) + 1 = 0.",
        "",
        "=== Reason Why ===",
        "exp(i*pi) is represented as (-1, 0) and adding (1, 0) gives the exact zero complex number.",
        f"exp(i*pi)   : {report.exp_ipi}",
        f"exp(i*pi)+1 : {report.result}",
        f"|exp(i*pi)|^2: {report.modulus_sq}",
        "",
        "=== Check ===",
        f"identity exact: {_YES_NO[report.identity_ok]}",
        f"unit circle   : {_YES_NO[report.unit_circle_ok]}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Check Euler's identity exactly.").parse_args(argv)
    report = evaluate()
    print(render(report), end="")
    return 0 if report.ok else 1