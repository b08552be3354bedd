from authform.tests.unit.helpers import make_item
from authform.usecases.partition_errors import partition_errors


def test_partition_splits_by_param_name_and_keeps_order():
    a = make_item(None, code="a")
    b = make_item("x", code="b")
    c = make_item(None, code="c")
    d = make_item("y", code="d")
    e = make_item("", code="e")

    parts = partition_errors([a, b, c, d, e])

    assert parts.field_errors == (b, d)
    assert parts.global_errors == (a, c, e)


def test_partition_is_total():
    items = [make_item(name, code=str(idx)) for idx, name in enumerate([None, "p", "q", None, "p"])]

    parts = partition_errors(items)

    assert len(parts.field_errors) + len(parts.global_errors) == len(items)
    recovered = sorted(parts.field_errors + parts.global_errors, key=lambda item: int(item.code))
    assert recovered == items


def test_partition_of_nothing_is_empty():
    assert partition_errors(None).field_errors == ()
    assert partition_errors([]).global_errors == ()
