import suite
from kollect import make, empty, from_range
from kollect import ItemNotFoundError

case = suite.case
assert_that = suite.assert_that
assert_raises = suite.assert_raises


@case("push and prepend change the receiver")
def test_push_prepend():
    c = make(2)
    result = c.push(3, 4).prepend(0, 1)
    assert_that(result is c, "returns the same collection for chaining")
    assert_that(c.to.list() == [0, 1, 2, 3, 4], "items appended and prepended in argument order")


@case("pop and shift remove from the ends")
def test_pop_shift():
    c = make(1, 2, 3)
    assert_that(c.pop() == 3 and c.shift() == 1, "removed values come back")
    assert_that(c.to.list() == [2], "only the middle is left")
    assert_that(empty().pop() is None and empty().shift() is None, "None when empty")
    with assert_raises(ItemNotFoundError):
        empty().pop_or_fail()
    with assert_raises(ItemNotFoundError):
        empty().shift_or_fail()
    assert_that(make(5).pop_or_fail() == 5 and make(6).shift_or_fail() == 6, "fail forms succeed when present")


@case("put ignores out-of-range indices")
def test_put():
    c = make('a', 'b')
    c.put(1, 'B').put(5, 'x').put(-1, 'y')
    assert_that(c.to.list() == ['a', 'B'], "only the valid index changes")


@case("forget measures every index against the original positions")
def test_forget():
    c = from_range(0, 5)
    c.forget(1, 3, 3, 99, -2)
    assert_that(c.to.list() == [0, 2, 4, 5], "1 and 3 removed, duplicates and invalid ones ignored")


@case("pull removes and returns one element")
def test_pull():
    c = make('x', 'y', 'z')
    assert_that(c.pull(1) == 'y' and c.to.list() == ['x', 'z'], "middle element pulled")
    assert_that(c.pull(7) is None and c.count() == 2, "out of range leaves the collection alone")


@case("transform rewrites every element in place")
def test_transform():
    c = make(1, 2, 3)
    assert_that(c.transform(lambda x: x * 10) is c, "returns the receiver")
    assert_that(c.to.list() == [10, 20, 30], "values replaced")


@case("splice cuts a range and returns it")
def test_splice():
    c = from_range(1, 6)
    removed = c.splice(1, 2)
    assert_that(removed.to.list() == [2, 3], "removed part")
    assert_that(c.to.list() == [1, 4, 5, 6], "remaining part")

    c = from_range(1, 6)
    assert_that(c.splice(-2).to.list() == [5, 6] and c.to.list() == [1, 2, 3, 4], "negative offset, no length")

    c = from_range(1, 3)
    assert_that(c.splice(10, 2).is_empty() and c.count() == 3, "offset past the end removes nothing")


@case("splice_replace inserts the replacement where the cut was")
def test_splice_replace():
    c = make('a', 'b', 'c', 'd')
    removed = c.splice_replace(1, 2, ['X', 'Y', 'Z'])
    assert_that(removed.to.list() == ['b', 'c'], "removed part")
    assert_that(c.to.list() == ['a', 'X', 'Y', 'Z', 'd'], "replacement inserted")

    c = make(1, 2)
    c.splice_replace(1, 0, [9])
    assert_that(c.to.list() == [1, 9, 2], "zero length inserts without removing")


@case("each, each_until and tap")
def test_each():
    seen = []
    c = make(1, 2, 3, 4)
    assert_that(c.each(seen.append) is c and seen == [1, 2, 3, 4], "each visits all in order")

    seen = []
    c.each_until(lambda x: seen.append(x) or x < 2)
    assert_that(seen == [1, 2], "stops right after the callback returns False")

    seen = []
    c.each_until(lambda x: seen.append(x))
    assert_that(seen == [1, 2, 3, 4], "a None result does not stop iteration")

    counts = []
    assert_that(c.tap(lambda col: counts.append(col.count())) is c and counts == [4], "tap sees the collection")


if __name__ == "__main__":
    suite.run(title="kollect mutation test suite")
