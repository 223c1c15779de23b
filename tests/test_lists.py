import pytest

from lispkit.lists import (
    append,
    butlast,
    cons,
    first,
    is_empty,
    last,
    length,
    make_list,
    nth,
    rest,
)
from lispkit.values import LispError


def test_list_creation_no_arguments():
    assert make_list() == []


def test_list_creation_single_element():
    assert make_list(42) == [42]


def test_list_creation_multiple_elements():
    assert make_list(1, 2, 3) == [1, 2, 3]


def test_list_with_mixed_types():
    assert make_list(42, "hello", True) == [42, "hello", True]


def test_empty_on_empty_list():
    assert is_empty(make_list()) is True


def test_empty_on_non_empty_list():
    assert is_empty(make_list(1)) is False


def test_length_of_empty_list():
    assert length(make_list()) == 0


def test_length_of_non_empty_list():
    assert length(make_list(1, 2, 3)) == 3


def test_first_of_non_empty_list():
    assert first(make_list(1, 2, 3)) == 1


def test_rest_of_non_empty_list():
    assert rest(make_list(1, 2, 3)) == [2, 3]


def test_rest_of_single_element_list():
    assert rest(make_list(1)) == []


def test_cons_element_to_list():
    assert cons(0, make_list(1, 2)) == [0, 1, 2]


def test_cons_element_to_empty_list():
    assert cons(42, make_list()) == [42]


def test_rest_and_cons_do_not_modify_input():
    original = make_list(1, 2)
    cons(0, original)
    rest(original)
    assert original == [1, 2]


def test_append():
    assert append([1, 2], [3]) == [1, 2, 3]
    assert append([], []) == []


def test_reverse():
    assert reverse_of([1, 2, 3]) == [3, 2, 1]


def reverse_of(values):
    from lispkit.lists import reverse

    return reverse(values)


def test_nth():
    assert nth(1, ["a", "b", "c"]) == "b"
    assert nth(2.9, ["a", "b", "c"]) == "c"


def test_nth_errors():
    with pytest.raises(LispError):
        nth(-1, [1])
    with pytest.raises(LispError):
        nth(1, [1])
    with pytest.raises(LispError):
        nth("0", [1])
    with pytest.raises(LispError):
        nth(0, 42)


def test_last_and_butlast():
    assert last([1, 2, 3]) == 3
    assert butlast([1, 2, 3]) == [1, 2]
    assert butlast([]) == []


def test_last_on_empty_list():
    with pytest.raises(LispError):
        last([])


@pytest.mark.parametrize("func", [first, rest])
def test_empty_list_errors(func):
    with pytest.raises(LispError):
        func(make_list())


@pytest.mark.parametrize(
    "func, args",
    [
        (first, ()),
        (rest, ([1], 2)),
        (cons, (1,)),
        (length, ()),
        (is_empty, ()),
    ],
)
def test_wrong_number_of_arguments(func, args):
    with pytest.raises(TypeError):
        func(*args)


@pytest.mark.parametrize(
    "func, args",
    [
        (first, (42,)),
        (rest, (42,)),
        (cons, (1, 42)),
        (length, (42,)),
        (is_empty, (42,)),
        (append, (1, [2])),
        (append, ([1], 2)),
        (butlast, ("abc",)),
    ],
)
def test_non_list_arguments(func, args):
    with pytest.raises(LispError):
        func(*args)