import suite
from kollect import C, make, empty, from_range
from dgen import from_schema

case = suite.case
assert_that = suite.assert_that
assert_raises = suite.assert_raises

sale_schema = {
    'sku': 'word',
    'qty': ('pyint', {'min_value': 1, 'max_value': 20}),
}


@case("sum and avg")
def test_sum_avg():
    assert_that(from_range(1, 10).stats.sum() == 55, "sum of 1..10")
    assert_that(from_range(1, 4).stats.avg() == 2.5, "mean of 1..4")
    assert_that(make(0.5, 0.25).stats.sum() == 0.75, "float sum")
    assert_that(isinstance(make(1, 2).stats.sum(), int), "integer sums stay python ints")


@case("aggregates with a selector")
def test_aggregates_with_selector():
    sales = from_schema(sale_schema, seed=9).take(12)
    expected = sum(s['qty'] for s in sales)
    assert_that(sales.stats.sum(lambda s: s['qty']) == expected, "sum with selector")
    assert_that(sales.stats.sum_by(lambda s: s['qty']) == expected, "sum_by agrees")
    assert_that(abs(sales.stats.avg_by(lambda s: s['qty']) - expected / 12) < 1e-9, "avg_by")


@case("median for odd and even counts")
def test_median():
    assert_that(make(1, 2, 3, 4).stats.median() == 2.5, "even count averages the middle pair")
    assert_that(make(5, 1, 3).stats.median() == 3.0, "odd count takes the middle")
    assert_that(C([{'v': 10}, {'v': 2}]).stats.median(lambda d: d['v']) == 6.0, "median with selector")


@case("mode returns every value tied for the top count")
def test_mode():
    assert_that(make(1, 2, 2, 3, 3).stats.mode() == [2, 3], "ties in first-seen order")
    assert_that(make('x', 'y', 'x').stats.mode() == ['x'], "single winner")
    assert_that(empty().stats.mode() == [], "nothing for empty")


@case("empty collections never raise")
def test_empty_aggregates():
    stats = empty().stats
    assert_that(stats.sum() == 0 and stats.avg() == 0 and stats.median() == 0, "zero for numeric aggregates")
    assert_that(stats.min() is None and stats.max() is None, "None for min/max")
    assert_that(stats.min_by(len) is None and stats.max_by(len) is None, "None for min_by/max_by")


@case("min, max and their keyed forms")
def test_min_max():
    c = make(4, -2, 9)
    assert_that(c.stats.min() == -2 and c.stats.max() == 9, "natural ordering")
    words = C(['pear', 'fig', 'banana', 'kiwi'])
    assert_that(words.stats.min_by(len) == 'fig', "shortest word")
    assert_that(words.stats.max_by(len) == 'banana', "longest word")
    assert_that(C(['aa', 'bb']).stats.min_by(len) == 'aa', "first wins a tie")


@case("integer sums do not wrap around at 64 bits")
def test_big_integer_sum():
    big = make(2**62, 2**62)
    assert_that(big.stats.sum() == 2**63, "sum past the int64 range")
    assert_that(C([{'n': 2**63}, {'n': 2**63}]).stats.sum_by(lambda d: d['n']) == 2**64, "sum_by past the int64 range")
    assert_that(big.stats.avg() == float(2**62), "avg of large ints")


@case("non-numeric data needs a selector")
def test_non_numeric():
    with assert_raises(TypeError, "strings cannot be summed directly"):
        make('a', 'b').stats.sum()


@case("selectors must produce numbers")
def test_non_numeric_selector():
    with assert_raises(TypeError, "a selector returning strings is rejected"):
        C([{'v': 'x'}, {'v': 'y'}]).stats.sum(lambda d: d['v'])
    with assert_raises(TypeError, "avg_by checks selector output too"):
        C([{'v': 1}, {'v': None}]).stats.avg_by(lambda d: d['v'])


if __name__ == "__main__":
    suite.run(title="kollect stats test suite")
