import pytest

from brumby.hash_lookup import DuplicateItemError, HashLookup


def test_push_and_resolve():
    lookup = HashLookup()
    assert len(lookup) == 0
    lookup.push("zero")
    lookup.push("one")
    assert len(lookup) == 2
    assert lookup.items() == ("zero", "one")

    assert lookup.item_at(0) == "zero"
    assert lookup.index_of("zero") == 0

    assert lookup.item_at(1) == "one"
    assert lookup.index_of("one") == 1

    assert lookup.item_at(2) is None
    assert lookup.index_of("two") is None


def test_push_duplicate():
    lookup = HashLookup(["zero", "one"])
    with pytest.raises(DuplicateItemError, match="duplicate item at index 2, previously at 1"):
        lookup.push("one")
    assert lookup.index_of("one") == 1
    assert len(lookup) == 2


def test_from_list():
    lookup = HashLookup(["zero", "one"])
    assert lookup.items() == ("zero", "one")
    assert lookup.item_at(0) == "zero"
    assert lookup.index_of("one") == 1
    assert len(lookup) == 2


def test_no_item_at_index():
    lookup = HashLookup(("zero", "one"))
    with pytest.raises(IndexError) as excinfo:
        lookup[2]
    assert str(excinfo.value) == "no item at index 2"
    assert len(lookup) == 2


def test_getitem():
    lookup = HashLookup(("zero", "one"))
    assert lookup[1] == "one"


def test_from_duplicate():
    with pytest.raises(DuplicateItemError, match="duplicate item at index 2, previously at 1"):
        HashLookup(["zero", "one", "one"])


def test_iter():
    lookup = HashLookup(["zero", "one"])
    iterator = iter(lookup)
    assert next(iterator) == "zero"
    assert next(iterator) == "one"
    with pytest.raises(StopIteration):
        next(iterator)


def test_negative_item_at():
    lookup = HashLookup(["zero"])
    assert lookup.item_at(-1) is None