import pytest

from fortytools.linked_list import LinkedList, from_params


def cmp(a, b):
    return (a > b) - (a < b)


def test_push_back_and_front():
    items = LinkedList()
    items.push_back("Papa")
    items.push_back("Pipi")
    items.push_front("kawaaa")
    assert list(items) == ["kawaaa", "Papa", "Pipi"]
    assert len(items) == 3


def test_last_and_empty_last():
    items = LinkedList(["Tata", "Titi"])
    assert items.last() == "Titi"
    with pytest.raises(IndexError):
        LinkedList().last()


def test_at_is_one_based():
    items = LinkedList(["a", "b", "c"])
    assert items.at(1) == "a"
    assert items.at(3) == "c"
    assert items.at(0) is None
    assert items.at(4) is None


def test_from_params_reverses_order():
    args = ["one", "two", "three"]
    assert list(from_params(args)) == list(reversed(args))


def test_clear():
    items = LinkedList([1, 2, 3])
    items.clear()
    assert list(items) == []
    assert len(items) == 0


@pytest.mark.parametrize("values", [[], [1], [1, 2], ["aaba", "aa", "aab", "ok1", "aaa"]])
def test_reverse_and_reverse_data_agree(values):
    relinked = LinkedList(values)
    swapped = LinkedList(values)
    relinked.reverse()
    swapped.reverse_data()
    assert list(relinked) == values[::-1]
    assert list(swapped) == values[::-1]


def test_foreach_and_foreach_if():
    items = LinkedList(["Tata", "Titi", "Tutu", "Titi"])
    seen = []
    items.foreach(seen.append)
    assert seen == list(items)
    matched = []
    items.foreach_if(matched.append, "Titi", cmp)
    assert matched == ["Titi", "Titi"]


def test_find():
    items = LinkedList(["Tata", "Titi", "Tutu"])
    assert items.find("Tutu", cmp) == "Tutu"
    assert items.find("Toto", cmp) is None


def test_remove_if_removes_all_matches():
    items = LinkedList(["Titi", "Tata", "Titi", "Titi", "Tutu", "Titi"])
    items.remove_if("Titi", cmp)
    assert list(items) == ["Tata", "Tutu"]


def test_merge_appends_and_handles_empty():
    first = LinkedList(["aa", "aab"])
    first.merge(LinkedList(["Papa", "Pipi"]))
    assert list(first) == ["aa", "aab", "Papa", "Pipi"]
    empty = LinkedList()
    empty.merge(LinkedList(["Pupu"]))
    assert list(empty) == ["Pupu"]


def test_sort_matches_sorted():
    values = ["aaba", "aa", "aab", "ok1", "aaa"]
    items = LinkedList(values)
    items.sort(cmp)
    assert list(items) == sorted(values)


@pytest.mark.parametrize("new", ["a", "aab", "zz", "aa"])
def test_sorted_insert_keeps_order(new):
    values = sorted(["aa", "aab", "aaa", "ok1"])
    items = LinkedList(values)
    items.sorted_insert(new, cmp)
    assert list(items) == sorted(values + [new])


def test_sorted_insert_into_empty_list():
    items = LinkedList()
    items.sorted_insert("ok1", cmp)
    assert list(items) == ["ok1"]


def test_sorted_merge():
    first = LinkedList(["aaba", "aa", "aab", "ok1", "aaa"])
    second = ["kawaaa", "Papa", "Pipi", "Pupu"]
    first.sorted_merge(LinkedList(second), cmp)
    assert list(first) == sorted(["aaba", "aa", "aab", "ok1", "aaa"] + second)