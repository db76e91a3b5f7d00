import suite
from kollect import C, make, empty, from_range
from kollect import ItemNotFoundError, MultipleItemsFoundError, CollectionError

case = suite.case
assert_that = suite.assert_that
assert_raises = suite.assert_raises

letters = C(['a', 'b', 'c', 'd'])


@case("first and last: safe, default and fail forms")
def test_first_last():
    assert_that(letters.first() == 'a' and letters.last() == 'd', "ends of a non-empty collection")
    assert_that(empty().first() is None and empty().last() is None, "empty gives None")
    assert_that(empty().first_or('z') == 'z' and empty().last_or('z') == 'z', "default when empty")
    assert_that(letters.first_or_fail() == 'a' and letters.last_or_fail() == 'd', "fail forms succeed when present")
    with assert_raises(ItemNotFoundError, "first_or_fail on empty"):
        empty().first_or_fail()
    with assert_raises(ItemNotFoundError, "last_or_fail on empty"):
        empty().last_or_fail()


@case("first_where reports whether it found anything")
def test_first_where():
    item, found = from_range(1, 10).first_where(lambda x: x > 4)
    assert_that(found and item == 5, "first number above four")
    item, found = from_range(1, 10).first_where(lambda x: x > 40)
    assert_that(not found and item is None, "no match")
    item, found = make(None, 1).first_where(lambda x: x is None)
    assert_that(found and item is None, "a None match is still found")
    item, found = from_range(1, 10).last_where(lambda x: x % 3 == 0)
    assert_that(found and item == 9, "last multiple of three")
    with assert_raises(ItemNotFoundError, "no element satisfies") as caught:
        letters.first_where_or_fail(lambda x: x == 'q')
    assert_that(caught['error'].message == "no element satisfies the condition", "message is kept on the error")


@case("get by index treats negative and past-the-end as out of range")
def test_get():
    assert_that(letters.get(1) == 'b', "index lookup")
    assert_that(letters.get(-1) is None and letters.get(4) is None, "out of range gives None")
    assert_that(letters.get_or(10, '?') == '?', "default for out of range")
    with assert_raises(ItemNotFoundError) as caught:
        letters.get_or_fail(4)
    assert_that("index 4 out of range" in str(caught['error']), "message names the index")


@case("sole requires exactly one element")
def test_sole():
    assert_that(make(7).sole() == 7, "single element")
    with assert_raises(ItemNotFoundError, "empty has no sole element"):
        empty().sole()
    with assert_raises(MultipleItemsFoundError, "two elements are too many"):
        make(1, 2).sole()
    assert_that(make(1, 2, 3).sole_where(lambda x: x == 2) == 2, "sole match")
    with assert_raises(MultipleItemsFoundError):
        make(1, 2, 3).sole_where(lambda x: x > 1)
    with assert_raises(ItemNotFoundError):
        make(1, 2, 3).sole_where(lambda x: x > 5)


@case("error types share one base and the builtin lookup family")
def test_error_family():
    with assert_raises(LookupError, "not-found is a LookupError"):
        empty().first_or_fail()
    with assert_raises(CollectionError, "multiple-found is a CollectionError") as caught:
        make(1, 1).sole()
    assert_that(str(caught['error']) == "multiple items found", "default message")


@case("search, contains, some and every")
def test_predicates():
    assert_that(letters.search(lambda x: x == 'c') == 2, "index of the first match")
    assert_that(letters.search(lambda x: x == 'q') == -1, "-1 when missing")
    assert_that(letters.contains(lambda x: x == 'a') and letters.some(lambda x: x == 'd'), "contains/some")
    assert_that(not letters.contains(lambda x: x == 'q'), "contains is false without a match")
    assert_that(letters.every(lambda x: len(x) == 1), "every is true for all single letters")
    assert_that(empty().every(lambda x: False), "every is vacuously true on empty")
    assert_that(not empty().some(lambda x: True), "some is false on empty")


@case("random picks come from the collection")
def test_random():
    pool = from_range(1, 20)
    pick = pool.random()
    assert_that(pool.contains(lambda x: x == pick), "random item is a member")
    assert_that(pool.random(random_state=3) == pool.random(random_state=3), "seeded pick repeats")
    assert_that(empty().random() is None, "empty gives None")
    with assert_raises(ItemNotFoundError):
        empty().random_or_fail()

    picked = pool.random_n(5, random_state=11)
    assert_that(picked.count() == 5, "five picks")
    assert_that(len(set(picked.to.list())) == 5, "picks are distinct positions")
    assert_that(picked.every(lambda x: 1 <= x <= 20), "picks come from the pool")
    everything = pool.random_n(50, random_state=11)
    assert_that(sorted(everything.to.list()) == pool.to.list(), "asking for too many gives everything shuffled")
    assert_that(pool.random_n(0).is_empty() and empty().random_n(3).is_empty(), "nothing to pick")


if __name__ == "__main__":
    suite.run(title="kollect access test suite")
