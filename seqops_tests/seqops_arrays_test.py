import suite
import seqops
from seqops import filter, map, first_or_default, some, every, find, FindResult, ElementNotFound
from dgen import from_schema, random_ints

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

book_schema = {
    'title': 'sentence',
    'pages': ('pyint', {'min_value': 10, 'max_value': 900}),
    'genre': {'_qen_provider': 'choice', 'from': ['fiction', 'poetry', 'history']},
    'in_print': ('pybool', {})
}

numbers = [12345, 123, 125]
samples = [random_ints(40, seed=s) for s in range(5)] + [[]]


# filter() tests

@test("filter keeps matching elements in order")
def test_filter_basic():
    assert_that(filter(numbers, lambda x: x != 12345) == [123, 125], "should drop 12345")
    assert_that(filter([12345], lambda x: x != 12345) == [], "should drop the only element")
    assert_that(filter(numbers, lambda x: x != 0) == numbers, "should keep everything")
    assert_that(filter([], lambda x: x != 0) == [], "empty input gives empty output")


@test("filter does not mutate its input")
def test_filter_pure():
    data = [5, 4, 3, 2, 1]
    result = filter(data, lambda x: x % 2 == 1)
    assert_that(data == [5, 4, 3, 2, 1], f"input changed: {data}")
    assert_that(result == [5, 3, 1], f"wrong result: {result}")
    assert_that(result is not data, "should return a new list")


@test("filter on objects")
def test_filter_objects():
    books = [{'title': 'book1'}, {'title': 'book2'}, {'title': 'book3'}]
    result = filter(books, lambda b: b['title'] != 'book1')
    assert_that(result == [{'title': 'book2'}, {'title': 'book3'}], f"wrong books: {result}")


@test("filter returns plain python numbers")
def test_filter_numeric_types():
    ints = filter([1, 2, 3, 4], lambda x: x > 2)
    floats = filter([0.5, 1.5, 2.5], lambda x: x > 1)
    assert_that(ints == [3, 4] and all(type(x) is int for x in ints), f"ints: {ints!r}")
    assert_that(floats == [1.5, 2.5] and all(type(x) is float for x in floats), f"floats: {floats!r}")


@test("filter keeps ints beyond int64 exact")
def test_filter_big_ints():
    wide = filter([-1, 2**63, 3], lambda x: x != 3)
    assert_that(wide == [-1, 2**63], f"wrong values: {wide!r}")
    huge = filter([2**62 + 1, 2**63 + 1], lambda x: True)
    assert_that(huge == [2**62 + 1, 2**63 + 1], f"precision lost: {huge!r}")
    for result in (wide, huge):
        assert_that(all(type(x) is int for x in result), f"should stay ints: {result!r}")
    unsigned = seqops.E([-5, 18446744073709551615]).filter(lambda x: x > 0).value()
    assert_that(unsigned == [18446744073709551615] and type(unsigned[0]) is int, f"wrong: {unsigned!r}")


@test("filter on mixed types")
def test_filter_mixed():
    mixed = [1, 'hello', 2.5, True, None]
    result = filter(mixed, lambda x: isinstance(x, str))
    assert_that(result == ['hello'], f"wrong result: {result}")


@test("filter partitions the input")
def test_filter_partition_property():
    is_even = lambda x: x % 2 == 0
    for s in samples:
        kept = filter(s, is_even)
        dropped = filter(s, lambda x: not is_even(x))
        assert_that(len(kept) + len(dropped) == len(s), "kept + dropped should cover the input")
        assert_that(all(is_even(x) for x in kept), "every kept element should match")


@test("filter propagates predicate errors")
def test_filter_predicate_error():
    def boom(x):
        raise RuntimeError("bad predicate")
    assert_raises(RuntimeError, filter, [1, 2, 3], boom)


@test("filter over faker records")
def test_filter_records():
    books = from_schema(book_schema, seed=7).take(25).value()
    long_poetry = filter(books, lambda b: b['genre'] == 'poetry' and b['pages'] > 300)
    for book in long_poetry:
        assert_that(book['genre'] == 'poetry', "all should be poetry")
        assert_that(book['pages'] > 300, "all should be long")


# map() tests

@test("map transforms every element")
def test_map_basic():
    assert_that(map(numbers, str) == ['12345', '123', '125'], "should stringify")
    assert_that(map(['12345', '123', '125'], lambda x: x) == ['12345', '123', '125'], "identity")
    assert_that(map([], str) == [], "empty input gives empty output")


@test("map preserves length")
def test_map_length_property():
    for s in samples:
        assert_that(len(map(s, lambda x: x * x)) == len(s), "length should be preserved")


# first_or_default() tests

@test("first_or_default uses the predicate")
def test_first_or_default():
    assert_that(first_or_default([12345, 123, 125], lambda x: x == 12345, 0) == 12345, "should find 12345")
    assert_that(first_or_default([12345, 123, 125], lambda x: x == 0, 0) == 0, "should fall back to 0")
    assert_that(first_or_default([], lambda x: x == 12345, 0) == 0, "empty gives default")
    assert_that(first_or_default([], lambda x: x == 12345, 5) == 5, "empty gives default 5")


@test("first_or_default without predicate takes the first element")
def test_first_or_default_no_predicate():
    assert_that(first_or_default([7, 8]) == 7, "should return the head")
    assert_that(first_or_default([], default=3) == 3, "should return the default")
    assert_that(first_or_default([]) is None, "default defaults to none")


@test("first_or_default returns the earliest match")
def test_first_or_default_earliest():
    assert_that(first_or_default([1, 4, 6, 8], lambda x: x % 2 == 0) == 4, "4 is the first even number")


# some() / every() tests

@test("some checks for any match")
def test_some():
    assert_that(some(numbers, lambda x: x == 12345), "12345 is present")
    assert_that(some(numbers, lambda x: x == 123), "123 is present")
    assert_that(not some([], lambda x: x == 123), "empty is never some")
    assert_that(not some(numbers, lambda x: x == 10), "10 is absent")
    assert_that(some([12345, 123, 124], lambda x: x % 2 == 0), "124 is even")


@test("every checks all elements")
def test_every():
    assert_that(not every(numbers, lambda x: x == 12345), "not all are 12345")
    assert_that(every(numbers, lambda x: x > 1), "all are greater than 1")
    assert_that(not every(numbers, lambda x: x > 9999), "not all are large")
    assert_that(every([], lambda x: x == 10), "empty is vacuously true")


@test("some and every short-circuit")
def test_short_circuit():
    seen = []
    def record(pred):
        def inner(x):
            seen.append(x)
            return pred(x)
        return inner

    some([1, 2, 3, 4], record(lambda x: x == 2))
    assert_that(seen == [1, 2], f"some should stop at the first match: {seen}")
    seen.clear()
    every([1, 2, 3, 4], record(lambda x: x < 2))
    assert_that(seen == [1, 2], f"every should stop at the first failure: {seen}")


@test("some is the dual of every")
def test_de_morgan():
    preds = [lambda x: x > 0, lambda x: x % 3 == 0, lambda x: x == 5000]
    for s in samples:
        for p in preds:
            assert_that(some(s, p) == (not every(s, lambda x: not p(x))), "duality should hold")


# find() tests

@test("find returns element and index")
def test_find_basic():
    result = find(numbers, lambda x: x == 12345)
    assert_that(result == FindResult(12345, 0, True), f"wrong result: {result}")
    element, index, found = find(numbers, lambda x: x == 125)
    assert_that((element, index, found) == (125, 2, True), "should find 125 at index 2")


@test("find reports a miss without raising")
def test_find_not_found():
    miss = find(numbers, lambda x: x > 99999)
    assert_that(not miss, "a miss should be falsy")
    assert_that(miss.index == -1 and miss.element is None, f"wrong miss: {miss}")
    assert_that(find([], lambda x: x == 10) == FindResult.not_found(), "empty input never matches")


@test("find unwrap raises on a miss")
def test_find_unwrap():
    assert_that(find(numbers, lambda x: x == 123).unwrap() == 123, "hit should unwrap")
    error = assert_raises(ElementNotFound, find(numbers, lambda x: x < 0).unwrap)
    assert_that(isinstance(error, ValueError), "ElementNotFound should be a ValueError")


@test("find returns the lowest matching index")
def test_find_lowest_index():
    for s in samples:
        result = find(s, lambda x: x > 500)
        expected = next((i for i, x in enumerate(s) if x > 500), -1)
        assert_that(result.index == expected, f"expected index {expected}, got {result.index}")


@test("package exposes the free functions")
def test_package_exports():
    for name in ['filter', 'map', 'first_or_default', 'some', 'every', 'find', 'sort', 'quick_sort']:
        assert_that(name in seqops.__all__, f"{name} should be exported")


if __name__ == "__main__":
    suite.main(title="seqops free function test suite")
