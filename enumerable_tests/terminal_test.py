import operator
from collections import namedtuple

import numpy as np
import pandas as pd
import suite
from enumerable import E, Callback, empty, configure, get_options, InvalidArgumentError, InvalidStateError

test = suite.test
assert_that = suite.assert_that
raises = suite.raises

Pet = namedtuple('Pet', ['name', 'species', 'age'])

pets = [
    Pet('tobi', 'ferret', 2),
    Pet('loki', 'ferret', 4),
    Pet('jane', 'cat', 6),
    Pet('manny', 'dog', 1),
]


# find() / find_last() tests

@test("find returns the first match")
def test_find():
    assert_that(E(pets).find(lambda p: p.species == 'ferret').name == 'tobi', "should find tobi first")
    assert_that(E(pets).find("species == 'cat'").name == 'jane', "shorthand find failed")


@test("find returns None when nothing matches")
def test_find_missing():
    assert_that(E(pets).find('age > 100') is None, "no match should give None")
    assert_that(empty().find(lambda v: True) is None, "empty sequence should give None")


@test("find_last scans from the end")
def test_find_last():
    visited = []

    def ferret(p, i):
        visited.append(i)
        return p.species == 'ferret'

    found = E(pets).find_last(ferret)
    assert_that(found.name == 'loki', f"should find loki last: {found}")
    assert_that(visited == [3, 2, 1], f"scan order wrong: {visited}")
    assert_that(E(pets).find_last('age > 100') is None, "no match should give None")


# all() / none() / any() / count() tests

@test("all is true only when every element matches")
def test_all():
    assert_that(E(pets).all('age > 0'), "every pet has a positive age")
    assert_that(not E(pets).all("species == 'ferret'"), "not every pet is a ferret")
    assert_that(E(pets).every(lambda p: p.name), "every is an alias for all")


@test("all scans descending and stops at the first failure")
def test_all_short_circuit():
    visited = []

    def small(v, i):
        visited.append(i)
        return v < 4

    assert_that(not E([1, 5, 2, 3]).all(small), "5 breaks the predicate")
    assert_that(visited == [3, 2, 1], f"should stop at index 1: {visited}")


@test("none and any on matches and misses")
def test_none_any():
    assert_that(E(pets).none("species == 'bird'"), "there are no birds")
    assert_that(not E(pets).none("species == 'cat'"), "there is a cat")
    assert_that(E(pets).any("species == 'dog'"), "there is a dog")
    assert_that(not E(pets).some('age > 10'), "some is an alias for any")


@test("any stops at the first match")
def test_any_short_circuit():
    calls = []
    E(range(100)).any(lambda v: calls.append(v) or v == 2)
    assert_that(calls == [0, 1, 2], f"should stop after the match: {calls}")


@test("predicates on an empty sequence")
def test_empty_predicates():
    assert_that(empty().all(lambda v: False) is True, "all on empty is true")
    assert_that(empty().none(lambda v: True) is True, "none on empty is true")
    assert_that(empty().any(lambda v: True) is False, "any on empty is false")


@test("count counts matches and requires a predicate")
def test_count():
    assert_that(E(pets).count("species == 'ferret'") == 2, "two ferrets")
    assert_that(E(range(10)).count(lambda v, i: v == i) == 10, "index is passed to count")
    err = raises(InvalidArgumentError, E(pets).count)
    assert_that(isinstance(err, ValueError), "invalid argument errors are value errors")


# index_of() / has() / at() tests

@test("index_of and has use equality")
def test_index_of_has():
    coll = E(['a', 'b', 'c', 'b'])
    assert_that(coll.index_of('b') == 1, "first b is at 1")
    assert_that(coll.index_of('z') == -1, "missing value gives -1")
    assert_that(coll.has('c') and not coll.has('z'), "has should follow index_of")
    assert_that('a' in coll, "in operator should use has")


@test("index_of and has never match a bool against a number")
def test_index_of_strict():
    assert_that(E([1, 2]).index_of(True) == -1, "True should not match 1")
    assert_that(not E([0]).has(False), "False should not match 0")
    assert_that(E([0, False]).index_of(False) == 1, "False matches False")
    assert_that(E([1]).index_of(1.0) == 0, "numbers compare by value across types")
    assert_that(E([[1], [2]]).index_of([2]) == 1, "unhashable values compare with ==")


@test("at returns None outside the valid range")
def test_at():
    coll = E([10, 20, 30])
    assert_that(coll.at(0) == 10 and coll.at(2) == 30, "valid indices read values")
    assert_that(coll.at(3) is None, "past the end gives None")
    assert_that(coll.at(-1) is None, "negative index gives None")
    raises(InvalidArgumentError, coll.at, '1')


# reduce() tests

@test("reduce without init starts from the first element")
def test_reduce_no_init():
    assert_that(E([1, 2, 3, 4]).reduce(lambda a, b: a + b) == 10, "sum via reduce")
    assert_that(E([1, 2, 3, 4]).reduce(operator.mul) == 24, "operator.mul should fold")


@test("reduce with init and index")
def test_reduce_init():
    result = E(['a', 'b']).reduce(lambda acc, v, i: acc + [(i, v)], [])
    assert_that(result == [(0, 'a'), (1, 'b')], f"fold with index failed: {result}")
    assert_that(E([]).reduce(lambda a, b: a + b, 5) == 5, "empty with init gives init")


@test("reduce treats an explicit None as the initial value")
def test_reduce_none_init():
    result = E([1, 2]).reduce(lambda acc, v: [v] if acc is None else acc + [v], None)
    assert_that(result == [1, 2], f"None should seed the fold: {result}")


@test("reduce on an empty sequence without init is an error")
def test_reduce_empty():
    raises(InvalidStateError, E([]).reduce, lambda a, b: a + b)


@test("reduce needs a callable accumulator")
def test_reduce_rejects_non_callables():
    raises(InvalidArgumentError, E([1, 2]).reduce, "x")
    raises(InvalidArgumentError, E([1, 2]).reduce, {"a": 1})
    raises(InvalidArgumentError, E([1, 2]).reduce, Callback("x"), 0)
    assert_that(E([1, 2, 3]).reduce(Callback(operator.add)) == 6, "wrapped callables still fold")


# first() / last() tests

@test("first and last with counts")
def test_first_last_counts():
    coll = E([1, 2, 3, 4, 5])
    assert_that(coll.first(3) == [1, 2, 3], "first three")
    assert_that(coll.last(3) == [3, 4, 5], "last three")
    assert_that(coll.first(10) == [1, 2, 3, 4, 5], "first clamps to length")
    assert_that(coll.last(10) == [1, 2, 3, 4, 5], "last clamps to length")
    assert_that(coll.first(0) == [] and coll.last(0) == [], "zero gives an empty list")
    assert_that(coll.array() == [1, 2, 3, 4, 5], "first/last do not mutate")


@test("first and last return plain lists, not hosts")
def test_first_last_types():
    coll = E([1, 2, 3])
    head = coll.first(2)
    assert_that(type(head) is list, f"should be a list: {type(head)}")
    head.append(99)
    assert_that(coll.array() == [1, 2, 3], "result should be a copy")


@test("first and last without arguments")
def test_first_last_single():
    assert_that(E([7, 8, 9]).first() == 7 and E([7, 8, 9]).last() == 9, "single element reads")
    assert_that(empty().first() is None and empty().last() is None, "empty gives None")


@test("first and last with a callable delegate to find")
def test_first_last_callable():
    coll = E([1, 2, 3, 4])
    assert_that(coll.first(lambda v: v % 2 == 0) == 2, "first even")
    assert_that(coll.last(lambda v: v % 2 == 1) == 3, "last odd")
    raises(InvalidArgumentError, coll.first, -1)
    raises(InvalidArgumentError, coll.last, 'x')


# value() / length() / conversions

@test("value and its aliases return the live slot")
def test_value_aliases():
    coll = E([1, 2])
    assert_that(coll.value() is coll.array() is coll.to_json() is coll.value_of(), "aliases share the slot")
    assert_that(coll.to_list() == [1, 2] and coll.to_list() is not coll.value(), "to_list copies")


@test("length, size and len agree")
def test_length():
    coll = E('hello')
    assert_that(coll.length() == coll.size() == len(coll) == 5, "length mismatch")
    assert_that(list(coll) == list('hello'), "iteration yields the slot")


@test("numpy and pandas conversions")
def test_conversions():
    assert_that(np.array_equal(E([1, 2, 3]).to_numpy(), np.array([1, 2, 3])), "numpy conversion failed")
    series = E([1.5, 2.5]).to_series(name='x')
    assert_that(isinstance(series, pd.Series) and series.name == 'x', "series conversion failed")
    frame = E(pets).to_frame()
    assert_that(isinstance(frame, pd.DataFrame) and frame.shape == (4, 3), f"frame shape: {frame.shape}")
    assert_that(list(frame.columns) == ['name', 'species', 'age'], "namedtuple fields become columns")


# to_string()

@test("to_string embeds the json of the slot")
def test_to_string():
    coll = E([1, 2, 3])
    assert_that(coll.to_string() == '[Enumerable [1,2,3]]', f"unexpected: {coll.to_string()}")
    assert_that(repr(coll) == str(coll) == coll.inspect() == coll.to_string(), "aliases should agree")


@test("to_string falls back to repr and honours repr_limit")
def test_to_string_limits():
    odd = E([{1, 2}])
    assert_that(odd.to_string().startswith('[Enumerable ["'), "non-json values use repr")
    previous = get_options().repr_limit
    configure(repr_limit=2)
    try:
        text = E([1, 2, 3, 4]).to_string()
    finally:
        configure(repr_limit=previous)
    assert_that(text == '[Enumerable [1,2,"..."]]', f"truncation failed: {text}")


@test("to_string survives slots json cannot walk")
def test_to_string_unencodable():
    keyed = E([{(1, 2): "a"}])
    assert_that(keyed.to_string() == "[Enumerable [{(1, 2): 'a'}]]", f"tuple keys: {keyed.to_string()}")
    looped = [1]
    looped.append(looped)
    coll = E([looped])
    assert_that(repr(coll) == str(coll) == "[Enumerable [[1, [...]]]]", f"cycle: {coll!r}")


@test("configure rejects invalid limits")
def test_configure_validation():
    for bad in (-1, True, "x", 2.5):
        raises(InvalidArgumentError, configure, repr_limit=bad)
        raises(InvalidArgumentError, configure, shorthand_cache_size=bad)
    previous = get_options().repr_limit
    configure(repr_limit=None)
    try:
        assert_that(E(range(150)).to_string().endswith("149]]"), "None should disable truncation")
    finally:
        configure(repr_limit=previous)


if __name__ == "__main__":
    suite.main("enumerable terminal operations")
