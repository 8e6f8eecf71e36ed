"""Exact 2x2 matrices showing a non-vanishing commutator."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

_YES_NO = {True: "yes", False: "no"}


@dataclass(frozen=True)
class Matrix2:
    """An integer 2x2 matrix."""

    a11: int
    a12: int
    a21: int
    a22: int

    def __matmul__(self, other: Matrix2) -> Matrix2:
        if not isinstance(other, Matrix2):
            return NotImplemented
        return Matrix2(
            self.a11 * other.a11 + self.a12 * other.a21,
            self.a11 * other.a12 + self.a12 * other.a22,
            self.a21 * other.a11 + self.a22 * other.a21,
            self.a21 * other.a12 + self.a22 * other.a22,
        )

    def __sub__(self, other: Matrix2) -> Matrix2:
        if not isinstance(other, Matrix2):
            return NotImplemented
        return Matrix2(
            self.a11 - other.a11,
            self.a12 - other.a12,
            self.a21 - other.a21,
            self.a22 - other.a22,
        )

    def trace(self) -> int:
        return self.a11 + self.a22

    def det(self) -> int:
        return self.a11 * self.a22 - self.a12 * self.a21

    def is_zero(self) -> bool:
        return not (self.a11 or self.a12 or self.a21 or self.a22)

    def __str__(self) -> str:
        return f"[[{self.a11},{self.a12}],[{self.a21},{self.a22}]]"


_IDENTITY = Matrix2(1, 0, 0, 1)


@dataclass(frozen=True)
class MatrixReport:
    h: Matrix2
    x: Matrix2
    hx: Matrix2
    xh: Matrix2
    commutator: Matrix2
    spectrum_ok: bool
    involution: bool
    commutator_nonzero: bool

    @property
    def ok(self) -> bool:
        return self.spectrum_ok and self.involution and self.commutator_nonzero


def evaluate() -> MatrixReport:
    """Build H and X, their products and commutator, and check them."""
    h = Matrix2(1, 0, 0, 2)
    x = Matrix2(0, 1, 1, 0)
    hx = h @ x
    xh = x @ h
    commutator = hx - xh
    return MatrixReport(
        h=h,
        x=x,
        hx=hx,
        xh=xh,
        commutator=commutator,
        spectrum_ok=h.trace() == 3 and h.det() == 2,
        involution=x @ x == _IDENTITY,
        commutator_nonzero=not commutator.is_zero(),
    )


def render(report: MatrixReport) -> str:
    """Format the report as the three-section text summary."""
    lines = [
        "=== Answer ===",
        "In this toy matrix-mechanics model, the Hamiltonian has two discrete energy "
        "levels and does not commute with a second observable.",
        "",
        "=== Reason Why ===",
        f"H  = {report.h}",
        f"X  = {report.x}",
        f"HX = {report.hx}",
        f"XH = {report.xh}",
        f"[H,X] = {report.commutator}",
        "",
        "=== Check ===",
        f"trace/determinant match energy levels: {_YES_NO[report.spectrum_ok]}",
        f"X^2 = I                           : {_YES_NO[report.involution]}",
        f"[H,X] != 0                        : {_YES_NO[report.commutator_nonzero]}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Show a non-commuting pair of matrices.").parse_args(argv)
    report = evaluate()
    print(render(report), end="")
    return 0 if report.ok else 1