from hypothesis import given
from hypothesis import strategies as st

from basekit.chain import Chain


def test_empty_chain():
    chain = Chain()
    assert len(chain) == 0
    assert chain.last() is None
    assert chain.to_list() == []


def test_append_keeps_order():
    chain = Chain()
    for item in ["a", "b", "c"]:
        chain.append(item)
    assert chain.to_list() == ["a", "b", "c"]
    assert chain.last() == "c"
    assert len(chain) == 3


def test_prepend_puts_item_first():
    chain = Chain(["b", "c"])
    chain.prepend("a")
    assert chain.to_list() == ["a", "b", "c"]
    assert chain.last() == "c"


def test_prepend_on_empty_sets_last():
    chain = Chain()
    chain.prepend("x")
    assert chain.last() == "x"
    chain.append("y")
    assert chain.to_list() == ["x", "y"]


def test_clear_empties_chain():
    chain = Chain([1, 2, 3])
    chain.clear()
    assert len(chain) == 0
    assert chain.last() is None
    chain.append(4)
    assert chain.to_list() == [4]


def test_for_each_visits_in_order():
    seen = []
    Chain(["p", "q", "r"]).for_each(seen.append)
    assert seen == ["p", "q", "r"]


def test_map_returns_new_chain():
    original = Chain(["a", "bb", "ccc"])
    mapped = original.map(len)
    assert mapped.to_list() == [1, 2, 3]
    assert original.to_list() == ["a", "bb", "ccc"]


def test_map_of_empty_is_empty():
    assert Chain().map(str).to_list() == []


@given(st.lists(st.integers()))
def test_round_trip(items):
    chain = Chain(items)
    assert chain.to_list() == items
    assert list(chain) == items
    assert len(chain) == len(items)
    assert chain.last() == (items[-1] if items else None)


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_prepend_and_append_combine(front, back):
    chain = Chain()
    for item in back:
        chain.append(item)
    for item in front:
        chain.prepend(item)
    assert chain.to_list() == list(reversed(front)) + back