from checkedcases.pn_junction import (
    BIAS_POINTS,
    N_FILLED,
    P_EMPTY_ZERO_BIAS,
    evaluate,
    main,
    overlap_count,
    render,
    tunneling_curve,
)


def test_overlap_identical_sets():
    assert overlap_count([5, 6, 7], [7, 6, 5]) == 3


def test_overlap_disjoint_sets():
    assert overlap_count([1, 2], [3, 4]) == 0


def test_overlap_counts_each_left_element_once():
    assert overlap_count([1, 2], [1, 1, 1]) == 1


def test_curve_length_and_bounds():
    curve = tunneling_curve(N_FILLED, P_EMPTY_ZERO_BIAS, BIAS_POINTS)
    assert len(curve) == len(BIAS_POINTS)
    assert all(0 <= c <= len(N_FILLED) for c in curve)


def test_zero_bias_shift_is_plain_overlap():
    curve = tunneling_curve([1, 2, 3], [2, 3, 4], [0])
    assert curve == [overlap_count([1, 2, 3], [2, 3, 4])]


def test_report_shape():
    report = evaluate()
    assert report.biases[report.peak_index] == 2
    assert report.curve[report.peak_index] == len(N_FILLED)
    assert report.curve[-1] == 0
    assert report.ok


def test_curve_rises_then_falls():
    report = evaluate()
    rising = report.curve[: report.peak_index + 1]
    falling = report.curve[report.peak_index :]
    assert list(rising) == sorted(rising)
    assert list(falling) == sorted(falling, reverse=True)


def test_render_and_main(capsys):
    text = render(evaluate())
    assert "negative differential region      : yes" in text
    assert main([]) == 0
    assert capsys.readouterr().out == text