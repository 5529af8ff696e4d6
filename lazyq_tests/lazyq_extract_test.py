from itertools import count

import suite
from dgen import from_schema, traced
from lazyq import Q, Extract, extract

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

MISSING = object()

reading_schema = {
    'sensor': {'_qen_provider': 'choice', 'from': ['north', 'south']},
    'value': ('pyfloat', {'min_value': 0, 'max_value': 50})
}


@test("extracting index 2 of [10, 20, 30, 40]")
def test_extract_scenario():
    value, remainder = extract([10, 20, 30, 40], 2)
    assert_equal(value, 30)
    assert_that(isinstance(remainder, Extract), "remainder should be an Extract")
    assert_equal(remainder.to.list(), [10, 20, 40])


@test("every index, in range or not, splits the sequence correctly")
def test_extract_every_index():
    samples = [[], [1], [1, 2, 3], list('hello'), from_schema(reading_schema, seed=11).list(6)]
    for data in samples:
        for n in range(len(data) + 3):
            value, remainder = extract(traced(data), n, default=MISSING)
            expected = data[n] if n < len(data) else MISSING
            assert_that(value is expected or value == expected, f"{data!r}[{n}] gave {value!r}")
            assert_equal(remainder.to.list(), data[:n] + data[n + 1:], f"remainder of {data!r} without {n}")


@test("out of range extraction returns None and keeps every value")
def test_extract_out_of_range():
    value, remainder = extract([1, 2], 5)
    assert_that(value is None, "default should be None")
    assert_equal(remainder.to.list(), [1, 2])


@test("extraction pulls only up to the requested index")
def test_extract_is_lazy():
    src = traced(count())
    value, remainder = extract(src, 3)
    assert_equal(value, 3)
    assert_equal(src.pulls, 4)
    assert_equal(remainder.buffered, 3)
    assert_equal(remainder.take(5).to.list(), [0, 1, 2, 4, 5])
    assert_equal(src.pulls, 6, "values after the target are pulled on demand")


@test("negative indexes are rejected")
def test_extract_negative_index():
    assert_raises(ValueError, lambda: extract([1, 2], -1))
    _, remainder = extract([1, 2], 0)
    assert_raises(ValueError, lambda: remainder.pop(-2))


@test("pop splices buffered values and skips ahead otherwise")
def test_pop_on_remainder():
    value, remainder = extract(range(10), 0)
    assert_equal(value, 0)
    assert_equal(remainder.pop(2), 3, "skip ahead past 1 and 2")
    assert_equal(remainder.buffered, 2)
    assert_equal(remainder.pop(1), 2, "index inside the buffer")
    assert_equal(remainder.pop(0), 1, "re-requesting an index already skipped past")
    assert_equal(remainder.to.list(), [4, 5, 6, 7, 8, 9])


@test("pop past the end keeps what it buffered and never re-pulls the source")
def test_pop_past_end():
    src = traced([1, 2, 3])
    remainder = Extract(src)
    assert_that(remainder.pop(3, MISSING) is MISSING, "index 3 is one past the end")
    assert_equal(remainder.buffered, 3)
    assert_equal(remainder.to.list(), [1, 2, 3])
    assert_that(remainder.pop(0, MISSING) is MISSING, "drained remainder has nothing left")
    assert_equal(next(remainder, 'done'), 'done')
    assert_equal(src.pulls, 3)


@test("a sentinel default tells a stored None apart from a missing value")
def test_extract_none_values():
    value, remainder = extract([None, 1], 0, default=MISSING)
    assert_that(value is None, "None was really at index 0")
    value, _ = extract([None], 1, default=MISSING)
    assert_that(value is MISSING, "index 1 does not exist")


@test("extract composes as a method and over another remainder")
def test_extract_composition():
    value, remainder = Q('abcdef').extract(1)
    assert_equal(value, 'b')
    inner_value, inner = remainder.extract(2)
    assert_equal(inner_value, 'd')
    assert_equal(inner.to.list(), ['a', 'c', 'e', 'f'])

    # pull the largest reading out and keep the rest in order
    readings = from_schema(reading_schema, seed=5).list(8)
    largest = max(range(len(readings)), key=lambda i: readings[i]['value'])
    top, rest = extract(readings, largest)
    assert_equal(top, readings[largest])
    assert_equal(rest.select(lambda r: r['value']).to.list(),
                 [r['value'] for i, r in enumerate(readings) if i != largest])


if __name__ == "__main__":
    suite.run(title="lazyq extract test suite")
