import pytest

from torre_hanoi.game import HanoiGame, IllegalMoveError


def solve(game):
    while not game.is_won():
        game.move(*game.next_optimal_move())


def test_new_game_stacks_discs_on_first_peg():
    game = HanoiGame(3)
    assert list(game.pegs[0]) == [3, 2, 1]
    assert game.pegs[1].is_empty()
    assert game.pegs[2].is_empty()
    assert game.moves == 0


def test_legal_move_counts():
    game = HanoiGame(3)
    game.move(0, 2)
    assert game.pegs[2].top() == 1
    assert len(game.pegs[0]) == 2
    assert game.moves == 1


def test_move_from_empty_peg_raises_and_keeps_state():
    game = HanoiGame(2)
    with pytest.raises(IllegalMoveError):
        game.move(1, 2)
    assert game.moves == 0
    assert len(game.pegs[0]) == 2


def test_larger_on_smaller_raises_and_restores():
    game = HanoiGame(2)
    game.move(0, 1)
    with pytest.raises(IllegalMoveError):
        game.move(0, 1)
    assert game.pegs[0].top() == 2
    assert game.pegs[1].top() == 1
    assert game.moves == 1


def test_unknown_peg_raises_value_error():
    game = HanoiGame(2)
    with pytest.raises(ValueError):
        game.move(0, 3)


def test_move_onto_same_peg_is_counted():
    game = HanoiGame(2)
    game.move(0, 0)
    assert game.moves == 1
    assert game.pegs[0].top() == 1


def test_not_won_at_start():
    assert not HanoiGame(3).is_won()


def test_won_on_middle_peg():
    game = HanoiGame(1)
    game.move(0, 1)
    assert game.is_won()


def test_not_won_when_discs_split():
    game = HanoiGame(2)
    game.move(0, 1)
    game.move(0, 2)
    assert not game.is_won()


@pytest.mark.parametrize("num_discs", [1, 2, 3, 4, 5, 6])
def test_optimal_moves_solve_in_minimum(num_discs):
    game = HanoiGame(num_discs)
    solve(game)
    assert game.is_won()
    assert game.moves == 2 ** num_discs - 1


def test_first_suggestion_depends_on_parity():
    assert HanoiGame(3).next_optimal_move() == (0, 2)
    assert HanoiGame(2).next_optimal_move() == (0, 1)


def test_reset_restores_start():
    game = HanoiGame(3)
    solve(game)
    game.reset(3)
    assert game.moves == 0
    assert len(game.pegs[0]) == 3
    assert not game.is_won()


def test_reset_without_argument_keeps_disc_count():
    game = HanoiGame(4)
    game.move(0, 1)
    game.reset()
    assert game.num_discs == 4
    assert len(game.pegs[0]) == 4


def test_render_one_disc():
    expected = (
        "\n Torre de Hanoi \nMovimentos: 0\n\n"
        "(=1=)    |      |    \n"
        "-----  -----  -----  \n"
        "  A      B      C    \n"
    )
    assert HanoiGame(1).render() == expected


def test_render_line_count_follows_tallest_peg():
    game = HanoiGame(4)
    game.move(0, 1)
    text = game.render()
    assert "Movimentos: 1" in text
    # header (4 lines) + 3 rows of discs + base + letters
    assert len(text.splitlines()) == 4 + len(game.pegs[0]) + 2