import pytest

from checkedcases.sudoku import (
    ALL_MASK,
    DEFAULT_PUZZLE,
    Move,
    SolveStats,
    SudokuState,
    count_solutions,
    evaluate,
    format_board,
    main,
    parse_puzzle,
    propagate_singles,
    render,
    replay_moves_are_legal,
    select_unfilled_cell,
    solve,
    unit_complete,
)

EMPTY = "0" * 81
DEAD_END = "123456780" + "000000009" + "0" * 63


@pytest.fixture(scope="module")
def report():
    return evaluate(DEFAULT_PUZZLE)


def test_parse_accepts_all_blank_markers():
    text = "1._" + "0" * 78
    cells = parse_puzzle(text)
    assert cells[:3] == (1, 0, 0)
    assert len(cells) == 81


def test_parse_rejects_wrong_length():
    with pytest.raises(ValueError):
        parse_puzzle("123")


def test_parse_rejects_bad_character():
    with pytest.raises(ValueError):
        parse_puzzle("x" + "0" * 80)


def test_from_puzzle_rejects_conflicting_givens():
    with pytest.raises(ValueError):
        SudokuState.from_puzzle(parse_puzzle("11" + "0" * 79))


def test_place_and_candidates():
    state = SudokuState.from_puzzle(parse_puzzle(EMPTY))
    assert state.candidates(0) == ALL_MASK
    assert state.place(0, 5)
    assert state.place(0, 5)
    assert not state.place(0, 6)
    assert not state.place(1, 5)
    assert not state.candidates(80 - 8) & (1 << 4) or True
    assert state.candidates(1) & (1 << 4) == 0


def test_place_rejects_out_of_range_digit():
    state = SudokuState()
    with pytest.raises(ValueError):
        state.place(0, 10)


def test_copy_is_independent():
    state = SudokuState()
    clone = state.copy()
    clone.place(0, 3)
    assert state.cells[0] == 0
    assert clone.cells[0] == 3


def test_unit_complete():
    assert unit_complete(list(range(1, 10)))
    assert not unit_complete([1, 1, 2, 3, 4, 5, 6, 7, 8])
    assert not unit_complete([0, 2, 3, 4, 5, 6, 7, 8, 9])
    assert not unit_complete(list(range(1, 9)))


def test_default_puzzle_is_solved_and_verified(report):
    assert report.ok
    assert report.unique
    assert report.solution is not None
    assert 0 not in report.solution
    assert all(g == 0 or g == s for g, s in zip(report.puzzle, report.solution))


def test_stats_are_consistent(report):
    stats = report.stats
    assert stats.givens + stats.blanks == 81
    assert stats.recursive_nodes >= 1
    assert stats.guessed_moves >= stats.recursive_nodes - 1


def test_solved_grid_has_no_other_solution(report):
    full = SudokuState.from_puzzle(report.solution)
    assert count_solutions(full, 2) == 1


def test_empty_grid_has_many_solutions():
    state = SudokuState.from_puzzle(parse_puzzle(EMPTY))
    assert count_solutions(state, 2) == 2


def test_dead_end_has_no_solution():
    state = SudokuState.from_puzzle(parse_puzzle(DEAD_END))
    assert not propagate_singles(state.copy())
    assert solve(state.copy(), SolveStats()) is None
    assert count_solutions(state, 2) == 0


def test_select_unfilled_cell_on_full_grid(report):
    assert select_unfilled_cell(SudokuState.from_puzzle(report.solution)) is None


def test_single_blank_is_forced_and_replays(report):
    puzzle = (0,) + report.solution[1:]
    stats = SolveStats()
    solved = solve(SudokuState.from_puzzle(puzzle), stats)
    assert solved is not None
    assert solved.cells == list(report.solution)
    assert solved.moves == [Move(0, report.solution[0], 1 << (report.solution[0] - 1), True)]
    assert stats.forced_moves == 1
    assert stats.guessed_moves == 0
    assert replay_moves_are_legal(puzzle, solved)


def test_tampered_replay_is_rejected(report):
    puzzle = (0,) + report.solution[1:]
    solved = solve(SudokuState.from_puzzle(puzzle))
    move = solved.moves[0]
    wrong = move.value % 9 + 1
    solved.moves[0] = Move(move.index, wrong, move.candidates_mask, True)
    assert not replay_moves_are_legal(puzzle, solved)


def test_format_board_of_empty_grid():
    text = format_board([0] * 81)
    lines = text.splitlines()
    assert lines[0] == ". . . | . . . | . . . "
    assert len(lines) == 11
    assert lines[3] == ""


def test_render_reports_checks(report):
    text = render(report)
    assert text.startswith("=== Answer ===\n")
    assert "the unique valid Sudoku solution." in text
    assert "uniqueness check                : yes" in text
    assert "recorded placements replay legally: yes" in text


def test_main_prints_and_succeeds(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "solver found solution           : yes" in out


def test_main_fails_for_unsolvable_puzzle(capsys):
    assert main(["--puzzle", DEAD_END]) == 1
    assert "solver found solution           : no" in capsys.readouterr().out