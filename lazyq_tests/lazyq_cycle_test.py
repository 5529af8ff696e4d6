from itertools import count

import suite
from dgen import from_schema, traced
from lazyq import Q, LazyCycle, lazy_cycle, empty

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

word_schema = {'word': 'word', 'n': ('pyint', {'min_value': 0, 'max_value': 9})}


@test("cycling [1, 2, 3] for seven pulls wraps around")
def test_cycle_scenario():
    assert_equal(lazy_cycle([1, 2, 3]).take(7).to.list(), [1, 2, 3, 1, 2, 3, 1])


@test("cycle output is the source repeated and truncated")
def test_cycle_matches_repetition():
    samples = [[7], [1, 2], list('abcde'), [1, 1, 2], from_schema(word_schema, seed=3).list(4)]
    for data in samples:
        for n in (0, 1, len(data), len(data) * 3 + 2):
            expected = [data[i % len(data)] for i in range(n)]
            assert_equal(lazy_cycle(data).take(n).to.list(), expected, f"{data!r} x {n}")


@test("cycling an empty source yields nothing and terminates")
def test_cycle_empty():
    src = traced([])
    cycle = lazy_cycle(src)
    assert_equal(cycle.to.list(), [])
    assert_equal(next(cycle, 'done'), 'done', "stays exhausted")
    assert_equal(src.pulls, 0)
    assert_equal(empty().lazy_cycle().take(5).to.list(), [])


@test("the source is pulled once per value, never after exhaustion")
def test_cycle_pulls_source_once():
    src = traced([1, 2, 3])
    cycle = lazy_cycle(src)
    assert_equal(cycle.take(10).to.list(), [1, 2, 3, 1, 2, 3, 1, 2, 3, 1])
    assert_equal(cycle.take(2).to.list(), [2, 3], "replay continues where it left off")
    assert_equal(src.pulls, 3)
    assert_that(src.exhausted, "source saw exactly one exhaustion")


@test("side effects of the source happen on the first pass only")
def test_cycle_side_effects_once():
    log = []

    def noisy():
        for value in 'xy':
            log.append(value)
            yield value

    assert_equal(lazy_cycle(noisy()).take(6).to.list(), list('xyxyxy'))
    assert_equal(log, ['x', 'y'])


@test("values pass through before the source ends")
def test_cycle_is_lazy():
    assert_equal(lazy_cycle(count()).take(5).to.list(), [0, 1, 2, 3, 4])

    cycle = lazy_cycle(iter([4, 5]))
    assert_equal(next(cycle), 4)
    assert_equal(cycle.history_size, 1)
    assert_equal(cycle.take(5).to.list(), [5, 4, 5, 4, 5])
    assert_equal(cycle.history_size, 2, "history stops growing once replay starts")


@test("lazy_cycle composes as a method and feeds other adaptors")
def test_cycle_composition():
    cycle = Q([1, 2]).lazy_cycle()
    assert_that(isinstance(cycle, LazyCycle), "method form returns a LazyCycle")
    assert_equal(cycle.take(5).to.list(), [1, 2, 1, 2, 1])

    runs = Q([1, 1, 2]).lazy_cycle().take(7).group_by().to.list()
    assert_equal(runs, [(1, [1, 1]), (2, [2]), (1, [1, 1]), (2, [2]), (1, [1])])


if __name__ == "__main__":
    suite.run(title="lazyq cycle test suite")
