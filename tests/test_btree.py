from fortytools.btree import (
    Node,
    apply_by_level,
    apply_infix,
    apply_prefix,
    apply_suffix,
    insert_data,
    level_count,
    search_item,
)


def cmp(a, b):
    return (a > b) - (a < b)


def build(items):
    root = None
    for item in items:
        root = insert_data(root, item, cmp)
    return root


def collect(apply, root):
    seen = []
    apply(root, seen.append)
    return seen


def test_insert_into_empty_tree_returns_new_root():
    root = insert_data(None, 7, cmp)
    assert root.item == 7
    assert root.left is None and root.right is None


def test_infix_yields_sorted_items():
    items = [5, 3, 8, 1, 4, 9, 7, 2]
    assert collect(apply_infix, build(items)) == sorted(items)


def test_prefix_and_suffix_orders():
    root = build([2, 1, 3])
    assert collect(apply_prefix, root) == [2, 1, 3]
    assert collect(apply_suffix, root) == [1, 3, 2]


def test_traversals_visit_every_item_once():
    items = [10, 4, 15, 2, 6, 12, 20]
    root = build(items)
    for apply in (apply_prefix, apply_infix, apply_suffix):
        assert sorted(collect(apply, root)) == sorted(items)


def test_equal_items_go_right():
    root = build([5, 5])
    assert root.left is None
    assert root.right.item == 5


def test_level_count_of_chain_and_empty():
    assert level_count(None) == 0
    items = [1, 2, 3, 4]
    assert level_count(build(items)) == len(items)


def test_level_count_balanced():
    root = Node(2, Node(1), Node(3))
    assert level_count(root) == 2


def test_search_item_found_and_missing():
    root = build(["m", "c", "x", "a"])
    assert search_item(root, "x", cmp) == "x"
    assert search_item(root, "q", cmp) is None
    assert search_item(None, "a", cmp) is None


def test_search_item_returns_first_in_infix_order():
    root = build([(1, "a"), (0, "b"), (1, "c")])

    def by_key(ref, item):
        return cmp(ref, item[0])

    assert search_item(root, 1, by_key) == (1, "a")


def test_apply_by_level_reports_levels_and_first_flags():
    calls = []
    apply_by_level(build([2, 1, 3]), lambda item, level, first: calls.append((item, level, first)))
    assert calls == [(2, 0, True), (1, 1, True), (3, 1, False)]


def test_apply_by_level_levels_are_non_decreasing():
    calls = []
    apply_by_level(build([8, 4, 12, 2, 6, 10, 14, 1]), lambda i, lv, f: calls.append((lv, f)))
    levels = [lv for lv, _ in calls]
    assert levels == sorted(levels)
    firsts = [lv for lv, f in calls if f]
    assert firsts == sorted(set(levels))


def test_apply_by_level_on_empty_tree_calls_nothing():
    calls = []
    apply_by_level(None, lambda *args: calls.append(args))
    assert calls == []