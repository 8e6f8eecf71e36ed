import pytest

from checkedcases.matrix_mechanics import Matrix2, evaluate, main, render

IDENTITY = Matrix2(1, 0, 0, 1)


@pytest.mark.parametrize(
    "m",
    [Matrix2(1, 0, 0, 2), Matrix2(0, 1, 1, 0), Matrix2(3, -2, 5, 7)],
)
def test_identity_is_neutral(m):
    assert m @ IDENTITY == m
    assert IDENTITY @ m == m


def test_subtracting_self_is_zero():
    m = Matrix2(3, -2, 5, 7)
    assert (m - m).is_zero()
    assert not m.is_zero()


def test_determinant_is_multiplicative():
    a = Matrix2(3, -2, 5, 7)
    b = Matrix2(1, 4, -1, 2)
    assert (a @ b).det() == a.det() * b.det()


def test_trace_of_products_commutes():
    a = Matrix2(3, -2, 5, 7)
    b = Matrix2(1, 4, -1, 2)
    assert (a @ b).trace() == (b @ a).trace()


def test_hamiltonian_spectrum():
    h = Matrix2(1, 0, 0, 2)
    assert h.trace() == 3
    assert h.det() == 2


def test_str_format():
    assert str(Matrix2(1, 0, 0, 2)) == "[[1,0],[0,2]]"


def test_evaluate_report():
    report = evaluate()
    assert report.x @ report.x == IDENTITY
    assert report.commutator == report.hx - report.xh
    assert report.hx != report.xh
    assert report.commutator.trace() == 0
    assert report.ok


def test_render_lines():
    report = evaluate()
    text = render(report)
    assert "H  = [[1,0],[0,2]]" in text
    assert f"[H,X] = {report.commutator}" in text
    assert "X^2 = I                           : yes" in text


def test_main_returns_zero(capsys):
    assert main([]) == 0
    assert "[H,X] != 0                        : yes" in capsys.readouterr().out