"""An NPN low-side switch model in integer millivolts and microamps."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

VCC_MV = 5000
VIN_LOW_MV = 0
VIN_HIGH_MV = 5000
VBE_ON_MV = 700
VCE_SAT_MV = 200
RB_OHMS = 10000
RL_OHMS = 1000
BETA = 100


@dataclass(frozen=True)
class SwitchState:
    """Operating point of the switch for one input voltage."""

    input_mv: int
    base_current_ua: int
    collector_gain_limit_ua: int
    collector_load_limit_ua: int
    collector_current_ua: int
    load_voltage_mv: int
    collector_emitter_voltage_mv: int
    cutoff: bool
    saturation: bool

    def name(self) -> str:
        if self.cutoff:
            return "cutoff / OFF"
        return "saturation / ON" if self.saturation else "active / linear"


@dataclass(frozen=True)
class SwitchReport:
    low: SwitchState
    high: SwitchState
    low_cutoff: bool
    high_saturation: bool
    switching_cleanly: bool
    load_limited: bool
    ohm_ok: bool

    @property
    def ok(self) -> bool:
        return (
            self.low_cutoff
            and self.high_saturation
            and self.switching_cleanly
            and self.load_limited
            and self.ohm_ok
        )


def evaluate_state(input_mv: int) -> SwitchState:
    """Compute the switch operating point for ``input_mv`` at the base resistor."""
    if input_mv < 0:
        raise ValueError(f"input voltage must be non-negative, got {input_mv}")
    if input_mv <= VBE_ON_MV:
        return SwitchState(input_mv, 0, 0, 0, 0, 0, VCC_MV, True, False)
    base = (input_mv - VBE_ON_MV) * 1000 // RB_OHMS
    gain_limit = base * BETA
    load_limit = (VCC_MV - VCE_SAT_MV) * 1000 // RL_OHMS
    collector = min(gain_limit, load_limit)
    saturated = gain_limit >= load_limit
    load_voltage = collector * RL_OHMS // 1000
    vce = VCE_SAT_MV if saturated else VCC_MV - load_voltage
    return SwitchState(
        input_mv, base, gain_limit, load_limit, collector, load_voltage, vce, False, saturated
    )


def evaluate() -> SwitchReport:
    """Evaluate the low and high inputs and check the switching behaviour."""
    low = evaluate_state(VIN_LOW_MV)
    high = evaluate_state(VIN_HIGH_MV)
    return SwitchReport(
        low=low,
        high=high,
        low_cutoff=low.cutoff
        and low.collector_current_ua == 0
        and low.collector_emitter_voltage_mv == VCC_MV,
        high_saturation=high.saturation and high.collector_emitter_voltage_mv == VCE_SAT_MV,
        switching_cleanly=low.cutoff and high.saturation,
        load_limited=high.collector_current_ua == high.collector_load_limit_ua
        and high.collector_gain_limit_ua > high.collector_load_limit_ua,
        ohm_ok=high.load_voltage_mv == high.collector_current_ua * RL_OHMS // 1000,
    )


def render(report: SwitchReport) -> str:
    """Format the report as the three-section text summary."""
    lines = [
        "=== Answer ===",
        "In this toy transistor-switch model, a low input leaves the transistor OFF "
        "and a high input drives it ON in saturation.",
        "",
        "=== Reason Why ===",
        f"low input state   : {report.low.name()}",
        f"high input state  : {report.high.name()}",
        f"high base current : {report.high.base_current_ua} uA",
        f"high collector Ic : {report.high.collector_current_ua} uA",
        f"load-limited Ic   : {report.high.collector_load_limit_ua} uA",
        "",
        "=== Check ===",
        f"low input cutoff                : {'yes' if report.low_cutoff else 'no'}",
        f"high input saturation           : {'yes' if report.high_saturation else 'no'}",
        f"switching states differ         : {'yes' if report.switching_cleanly else 'no'}",
        f"on-state current is load-limited: {'yes' if report.load_limited else 'no'}",
        f"load voltage matches Ohm's law  : {'yes' if report.ohm_ok else 'no'}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Evaluate the transistor switch.").parse_args(argv)
    report = evaluate()
    print(render(report), end="")
    return 0 if report.ok else 1