import pytest

from checkedcases.transistor_switch import (
    VBE_ON_MV,
    VCC_MV,
    VCE_SAT_MV,
    evaluate,
    evaluate_state,
    main,
    render,
)


def test_low_input_is_cutoff():
    state = evaluate_state(0)
    assert state.cutoff and not state.saturation
    assert state.collector_current_ua == 0
    assert state.collector_emitter_voltage_mv == VCC_MV
    assert state.name() == "cutoff / OFF"


def test_threshold_input_still_cutoff():
    assert evaluate_state(VBE_ON_MV).cutoff


def test_high_input_saturates():
    state = evaluate_state(5000)
    assert state.saturation
    assert state.collector_current_ua == state.collector_load_limit_ua
    assert state.collector_emitter_voltage_mv == VCE_SAT_MV
    assert state.name() == "saturation / ON"


def test_intermediate_input_is_active():
    state = evaluate_state(1000)
    assert not state.cutoff and not state.saturation
    assert state.name() == "active / linear"
    assert state.collector_current_ua == state.collector_gain_limit_ua
    assert state.collector_emitter_voltage_mv == VCC_MV - state.load_voltage_mv


def test_negative_input_rejected():
    with pytest.raises(ValueError):
        evaluate_state(-1)


def test_report_checks():
    report = evaluate()
    assert report.low_cutoff
    assert report.high_saturation
    assert report.load_limited
    assert report.ok


def test_render_and_main(capsys):
    text = render(evaluate())
    assert "high input state  : saturation / ON" in text
    assert main([]) == 0
    assert capsys.readouterr().out == text