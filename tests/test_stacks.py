import io

import pytest

from pushswap.stacks import Stacks, find_max, find_min_position, format_stack


def make(values):
    out = io.StringIO()
    return Stacks(values, out), out


def test_initial_state():
    values = [4, 8, 15, 16]
    stacks, out = make(values)
    assert list(stacks.a) == values
    assert list(stacks.b) == []
    assert out.getvalue() == ""


def test_sa_swaps_top_two():
    values = [1, 2, 3]
    stacks, out = make(values)
    stacks.sa()
    assert list(stacks.a) == [2, 1, 3]
    assert out.getvalue() == "sa\n"


def test_sa_twice_is_identity():
    values = [9, 4, 7, 1]
    stacks, out = make(values)
    stacks.sa()
    stacks.sa()
    assert list(stacks.a) == values
    assert out.getvalue() == "sa\nsa\n"


@pytest.mark.parametrize("values", [[], [5]])
def test_sa_on_short_stack_does_nothing(values):
    stacks, out = make(values)
    stacks.sa()
    assert list(stacks.a) == values
    assert out.getvalue() == ""


def test_pb_then_pa_round_trip():
    values = [3, 1, 2]
    stacks, out = make(values)
    stacks.pb()
    assert list(stacks.b) == [values[0]]
    assert list(stacks.a) == values[1:]
    stacks.pa()
    assert list(stacks.a) == values
    assert list(stacks.b) == []
    assert out.getvalue() == "pb\npa\n"


def test_push_from_empty_does_nothing():
    stacks, out = make([1, 2])
    stacks.pa()
    assert list(stacks.a) == [1, 2]
    assert list(stacks.b) == []
    empty, empty_out = make([])
    empty.pb()
    assert list(empty.b) == []
    assert out.getvalue() == "" and empty_out.getvalue() == ""


def test_ra_moves_top_to_bottom():
    values = [10, 20, 30, 40]
    stacks, out = make(values)
    stacks.ra()
    assert list(stacks.a) == values[1:] + values[:1]
    assert out.getvalue() == "ra\n"


def test_rra_moves_bottom_to_top():
    values = [10, 20, 30, 40]
    stacks, out = make(values)
    stacks.rra()
    assert list(stacks.a) == values[-1:] + values[:-1]
    assert out.getvalue() == "rra\n"


def test_ra_then_rra_is_identity():
    values = [6, 2, 9, 3, 5]
    stacks, _ = make(values)
    stacks.ra()
    stacks.rra()
    assert list(stacks.a) == values


def test_full_rotation_is_identity():
    values = [6, 2, 9, 3, 5]
    stacks, out = make(values)
    for _ in values:
        stacks.ra()
    assert list(stacks.a) == values
    assert out.getvalue() == "ra\n" * len(values)


@pytest.mark.parametrize("move", ["ra", "rra"])
def test_rotation_of_single_element_does_nothing(move):
    stacks, out = make([42])
    getattr(stacks, move)()
    assert list(stacks.a) == [42]
    assert out.getvalue() == ""


def test_b_moves_act_on_b_only():
    values = [1, 2, 3, 4]
    stacks, out = make(values)
    for _ in values:
        stacks.pb()
    pushed = list(stacks.b)
    assert pushed == values[::-1]
    stacks.sb()
    assert list(stacks.b) == [pushed[1], pushed[0], *pushed[2:]]
    stacks.sb()
    stacks.rb()
    assert list(stacks.b) == pushed[1:] + pushed[:1]
    stacks.rrb()
    assert list(stacks.b) == pushed
    assert list(stacks.a) == []
    assert out.getvalue().splitlines()[-3:] == ["sb", "rb", "rrb"]


def test_combined_moves_report_each_part():
    stacks, out = make([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    out.seek(0)
    out.truncate()
    stacks.ss()
    stacks.rr()
    stacks.rrr()
    assert out.getvalue().splitlines() == [
        "sa", "sb", "ss",
        "ra", "rb", "rr",
        "rra", "rrb", "rrr",
    ]


def test_combined_move_reports_name_even_when_parts_cannot_act():
    stacks, out = make([])
    stacks.rr()
    assert out.getvalue() == "rr\n"


def test_moves_preserve_the_multiset():
    values = [7, 3, 9, 1, 5]
    stacks, _ = make(values)
    for move in ["pb", "pb", "sa", "rb", "ra", "rra", "ss", "pa", "rrr"]:
        getattr(stacks, move)()
        assert sorted([*stacks.a, *stacks.b]) == sorted(values)


def test_default_output_is_stdout(capsys):
    stacks = Stacks([1, 2])
    stacks.sa()
    assert capsys.readouterr().out == "sa\n"


def test_find_max():
    assert find_max([3, 7, 1]) == 7
    assert find_max([-5, -2, -9]) == -2
    assert find_max([]) == 0


def test_find_min_position():
    assert find_min_position([5, 2, 9]) == 2
    assert find_min_position([1, 4, 6]) == 1
    assert find_min_position([]) == 0


def test_find_min_position_on_a_stack():
    stacks, _ = make([8, 6, 4, 0])
    assert find_min_position(stacks.a) == len(stacks.a)


def test_format_stack():
    assert format_stack([]) == "NULL"
    assert format_stack([1, -2]) == "1 -> -2 -> NULL"