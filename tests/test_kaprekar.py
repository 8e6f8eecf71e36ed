import pytest

from checkedcases.kaprekar import (
    evaluate,
    has_two_distinct_digits,
    kaprekar_step,
    kaprekar_trace,
    main,
    render,
)


@pytest.fixture(scope="module")
def report():
    return evaluate()


def test_fixed_point():
    assert kaprekar_step(6174) == 6174


def test_repdigit_detection():
    assert not has_two_distinct_digits(7777)
    assert has_two_distinct_digits(2111)
    assert has_two_distinct_digits(1)


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        kaprekar_step(10000)
    with pytest.raises(ValueError):
        has_two_distinct_digits(-1)


def test_leading_zero_trace():
    trace = kaprekar_trace(2111)
    assert trace[0] == 2111
    assert trace[1] == 999
    assert trace[-1] == 6174


def test_trace_respects_cap():
    trace = kaprekar_trace(2111, cap=2)
    assert len(trace) == 2
    assert trace[1] == kaprekar_step(2111)


def test_trace_follows_step():
    trace = kaprekar_trace(1234)
    assert all(kaprekar_step(a) == b for a, b in zip(trace, trace[1:]))


def test_report_bounds(report):
    assert report.all_reach
    assert report.bound_ok
    assert report.max_iterations <= 7
    assert report.ok


def test_report_counts(report):
    assert sum(report.histogram) == report.valid_starts
    assert report.histogram[report.max_iterations] == report.worst_case_starts
    assert len(report.worst_trace) == report.max_iterations + 1
    assert report.worst_trace[-1] == 6174


def test_render_and_main(report, capsys):
    text = render(report)
    assert "6174 fixed point    : yes" in text
    assert "leading-zero trace  : 2111 -> 0999" in text
    assert main([]) == 0
    assert capsys.readouterr().out == text