"""A toy tunnelling-diode model counting overlap of shifted energy levels."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

N_FILLED = (1, 2, 3, 4)
P_EMPTY_ZERO_BIAS = (3, 4, 5, 6)
BIAS_POINTS = (0, 1, 2, 3, 4, 5, 6)
HEAVY_DOPING_BARRIER_WIDTH = 1
LIGHT_DOPING_BARRIER_WIDTH = 8

_YES_NO = {True: "yes", False: "no"}


@dataclass(frozen=True)
class TunnelingReport:
    """The bias sweep and the qualitative checks on its shape."""

    biases: tuple[int, ...]
    curve: tuple[int, ...]
    peak_index: int
    valley_index: int
    barrier_narrower: bool
    peak_before_valley: bool
    negative_differential: bool
    overlap_closes: bool
    full_overlap_peak: bool

    @property
    def ok(self) -> bool:
        return (
            self.barrier_narrower
            and self.peak_before_valley
            and self.negative_differential
            and self.overlap_closes
            and self.full_overlap_peak
        )


def overlap_count(lhs: Sequence[int], rhs: Sequence[int]) -> int:
    """Count the elements of ``lhs`` that also appear in ``rhs``."""
    return sum(1 for level in lhs if level in rhs)


def tunneling_curve(
    n_filled: Sequence[int], p_empty: Sequence[int], biases: Sequence[int]
) -> list[int]:
    """Return the overlap current proxy at each forward bias."""
    return [overlap_count(n_filled, [p - bias for p in p_empty]) for bias in biases]


def evaluate() -> TunnelingReport:
    """Sweep the bias points and check for a peak followed by a fall."""
    curve = tunneling_curve(N_FILLED, P_EMPTY_ZERO_BIAS, BIAS_POINTS)
    peak_index = max(range(len(curve)), key=curve.__getitem__)
    valley_index = len(curve) - 1
    after_peak = curve[peak_index:]
    return TunnelingReport(
        biases=BIAS_POINTS,
        curve=tuple(curve),
        peak_index=peak_index,
        valley_index=valley_index,
        barrier_narrower=HEAVY_DOPING_BARRIER_WIDTH < LIGHT_DOPING_BARRIER_WIDTH,
        peak_before_valley=peak_index < valley_index,
        negative_differential=any(b < a for a, b in zip(after_peak, after_peak[1:])),
        overlap_closes=curve[valley_index] == 0,
        full_overlap_peak=curve[peak_index] == len(N_FILLED),
    )


def render(report: TunnelingReport) -> str:
    """Format the report as the three-section text summary."""
    sweep = ", ".join(f"{b}->{c}" for b, c in zip(report.biases, report.curve))
    p, v = report.peak_index, report.valley_index
    lines = [
        "=== Answer ===",
        "In this toy PN-junction tunneling model, heavy doping narrows the depletion "
        "region enough for a tunneling window that rises to a peak and then falls.",
        "",
        "=== Reason Why ===",
        "We count exact state overlap while forward bias shifts the empty P-side levels.",
        f"bias -> overlap current proxy : {sweep}",
        f"peak point                    : {report.biases[p]} -> {report.curve[p]}",
        f"high-bias point               : {report.biases[v]} -> {report.curve[v]}",
        "",
        "=== Check ===",
        f"heavily doped barrier is narrower : {_YES_NO[report.barrier_narrower]}",
        f"peak occurs before overlap closes : {_YES_NO[report.peak_before_valley]}",
        f"negative differential region      : {_YES_NO[report.negative_differential]}",
        f"high-bias overlap closes          : {_YES_NO[report.overlap_closes]}",
        f"peak equals full overlap          : {_YES_NO[report.full_overlap_peak]}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Sweep the tunnelling toy model.").parse_args(argv)
    report = evaluate()
    print(render(report), end="")
    return 0 if report.ok else 1