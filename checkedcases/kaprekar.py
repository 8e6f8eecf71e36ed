"""Kaprekar's routine over all non-repdigit four-digit starts."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

KAPREKAR_CONSTANT = 6174
ITERATION_BOUND = 7
TRACE_CAP = 16
LEADING_ZERO_START = 2111
_HISTOGRAM_BINS = 8


@dataclass(frozen=True)
class KaprekarReport:
    """Summary of Kaprekar's routine over every four-digit start."""

    valid_starts: int
    repdigits: int
    max_iterations: int
    worst_case_starts: int
    worst_trace: tuple[int, ...]
    leading_trace: tuple[int, ...]
    histogram: tuple[int, ...]
    fixed_point_ok: bool
    all_reach: bool
    bound_ok: bool
    histogram_ok: bool

    @property
    def ok(self) -> bool:
        return self.fixed_point_ok and self.all_reach and self.bound_ok and self.histogram_ok


def _digits(n: int) -> str:
    if not 0 <= n <= 9999:
        raise ValueError(f"expected a four-digit value in 0..9999, got {n}")
    return f"{n:04d}"


def has_two_distinct_digits(n: int) -> bool:
    """Return whether ``n``, padded to four digits, is not a repdigit."""
    return len(set(_digits(n))) > 1


def kaprekar_step(n: int) -> int:
    """Subtract the ascending digit arrangement from the descending one."""
    digits = sorted(_digits(n))
    return int("".join(reversed(digits))) - int("".join(digits))


def kaprekar_trace(start: int, cap: int = TRACE_CAP) -> list[int]:
    """Follow the routine from ``start`` until 6174 or ``cap`` values."""
    _digits(start)
    if cap < 1:
        raise ValueError(f"cap must be positive, got {cap}")
    trace: list[int] = []
    current = start
    while len(trace) < cap:
        trace.append(current)
        if current == KAPREKAR_CONSTANT:
            break
        current = kaprekar_step(current)
    return trace


def evaluate() -> KaprekarReport:
    """Run the routine from every start and collect witnesses."""
    valid_starts = repdigits = 0
    max_iterations = worst_case_starts = 0
    worst_trace: list[int] = []
    histogram = [0] * _HISTOGRAM_BINS
    all_reach = bound_ok = True

    for start in range(10000):
        if not has_two_distinct_digits(start):
            repdigits += 1
            continue
        trace = kaprekar_trace(start, TRACE_CAP)
        steps = len(trace) - 1
        valid_starts += 1
        if trace[-1] != KAPREKAR_CONSTANT:
            all_reach = False
        if steps > ITERATION_BOUND:
            bound_ok = False
        if steps < _HISTOGRAM_BINS:
            histogram[steps] += 1
        if steps > max_iterations:
            max_iterations = steps
            worst_case_starts = 1
            worst_trace = trace
        elif steps == max_iterations:
            worst_case_starts += 1

    return KaprekarReport(
        valid_starts=valid_starts,
        repdigits=repdigits,
        max_iterations=max_iterations,
        worst_case_starts=worst_case_starts,
        worst_trace=tuple(worst_trace),
        leading_trace=tuple(kaprekar_trace(LEADING_ZERO_START, TRACE_CAP)),
        histogram=tuple(histogram),
        fixed_point_ok=kaprekar_step(KAPREKAR_CONSTANT) == KAPREKAR_CONSTANT,
        all_reach=all_reach,
        bound_ok=bound_ok,
        histogram_ok=sum(histogram) == valid_starts,
    )


def _format_trace(trace: tuple[int, ...]) -> str:
    return " -> ".join(f"{v:04d}" for v in trace)


def render(report: KaprekarReport) -> str:
    """Format the report as the three-section text summary."""
    lines = [
        "=== Answer ===",
        "Every valid four-digit start tested reaches 6174, and all of them do so "
        "within seven iterations.",
        "",
        "=== Reason Why ===",
        "The program applies Kaprekar's routine to every non-repdigit start, records "
        "the iteration count, and keeps witness traces.",
        f"valid starts checked: {report.valid_starts}",
        f"repdigits excluded  : {report.repdigits}",
        f"max iterations      : {report.max_iterations}",
        f"worst-case starts   : {report.worst_case_starts}",
        f"worst trace         : {_format_trace(report.worst_trace)}",
        f"leading-zero trace  : {_format_trace(report.leading_trace)}",
        "",
        "=== Check ===",
        f"6174 fixed point    : {'yes' if report.fixed_point_ok else 'no'}",
        f"all starts reach it : {'yes' if report.all_reach else 'no'}",
        f"bound <= 7 verified : {'yes' if report.bound_ok else 'no'}",
        f"histogram total ok  : {'yes' if report.histogram_ok else 'no'}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Check Kaprekar's routine.").parse_args(argv)
    report = evaluate()
    print(render(report), end="")
    return 0 if report.ok else 1