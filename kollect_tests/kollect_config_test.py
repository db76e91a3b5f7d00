import logging
import suite
from kollect import make, collect_map, configure, get_config, reset_config, CollectionConfig
from kollect import InvalidArgumentError, CollectionError
from dgen import from_schema

case = suite.case
assert_that = suite.assert_that
assert_raises = suite.assert_raises


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _capture(logger_name: str) -> _ListHandler:
    handler = _ListHandler()
    logger = logging.getLogger(logger_name)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler


@case("configure replaces selected fields")
def test_configure():
    try:
        updated = configure(json_sort_keys=True, random_seed=4)
        assert_that(isinstance(updated, CollectionConfig), "returns the new config")
        assert_that(get_config().json_sort_keys and get_config().random_seed == 4, "changes are active")
        assert_that(get_config().json_indent is None, "untouched fields keep defaults")
        assert_that(collect_map({'b': 1, 'a': 2}).to_json() == '{"a": 2, "b": 1}', "sorted keys in json")
    finally:
        reset_config()
    assert_that(get_config() == CollectionConfig(), "reset restores defaults")


@case("unknown options are rejected")
def test_configure_unknown():
    with assert_raises(InvalidArgumentError) as caught:
        configure(colour='blue')
    assert_that('colour' in caught['error'].message, "message names the option")
    assert_that(isinstance(caught['error'], ValueError), "also a ValueError")
    assert_that(get_config() == CollectionConfig(), "config unchanged after a rejected call")


@case("a configured seed makes random operations repeatable")
def test_configured_seed():
    try:
        configure(random_seed=99)
        first = make(*range(20)).shuffle().to.list()
        second = make(*range(20)).shuffle().to.list()
        assert_that(first == second, "same configured seed, same order")
        assert_that(make(*range(20)).shuffle(random_state=1).to.list() == make(*range(20)).shuffle(random_state=1).to.list(),
                    "an explicit random_state still works")
    finally:
        reset_config()


@case("configure logs the active settings at debug level")
def test_configure_logs():
    handler = _capture('kollect.config')
    try:
        configure(json_indent=4)
        assert_that(any('json_indent' in r.getMessage() and r.levelno == logging.DEBUG for r in handler.records),
                    "debug record mentions the new settings")
    finally:
        logging.getLogger('kollect.config').removeHandler(handler)
        reset_config()


@case("dump logs the json form and keeps chaining")
def test_dump_logs():
    handler = _capture('kollect.collection')
    try:
        c = make(1, 2)
        assert_that(c.dump() is c, "dump returns the collection")
        messages = [r.getMessage() for r in handler.records if r.levelno == logging.INFO]
        assert_that(any(m == 'Collection(2): [1, 2]' for m in messages), "info record with the json form")
    finally:
        logging.getLogger('kollect.collection').removeHandler(handler)

    handler = _capture('kollect.map_collection')
    try:
        m = collect_map({'k': 'v'})
        assert_that(m.dump() is m, "map dump returns the map")
        assert_that(any('{"k": "v"}' in r.getMessage() for r in handler.records), "map json logged")
    finally:
        logging.getLogger('kollect.map_collection').removeHandler(handler)


@case("errors carry a default or custom message")
def test_error_messages():
    assert_that(CollectionError().message == "collection error", "base default")
    assert_that(str(InvalidArgumentError("bad size")) == "bad size", "custom message")


# --- fixture generator ---

@case("fixture generator is repeatable with a seed")
def test_fixture_seed():
    schema = {
        'id': ('pyint', {'min_value': 1, 'max_value': 1000}),
        'label': {'_gen_provider': 'ref', 'key': 'id', 'format': 'item-{}'},
        'kind': {'_gen_provider': 'choice', 'from': ['a', 'b']},
        'tags': [{'_gen_count': 2, '_gen_items': 'word'}],
        'source': {'_gen_provider': 'literal', 'value': 'fixture'},
    }
    first = from_schema(schema, seed=3).take(4)
    second = from_schema(schema, seed=3).take(4)
    assert_that(first.to.list() == second.to.list(), "same seed, same records")
    record = first.first()
    assert_that(record['label'] == f"item-{record['id']}", "ref fields see earlier fields")
    assert_that(record['kind'] in ('a', 'b') and len(record['tags']) == 2, "choice and counted lists")
    assert_that(record['source'] == 'fixture', "literal provider")


# --- test runner ---

@case("runner exposes its report faces and error helpers")
def test_runner_helpers():
    assert_that(suite.PASS_FACE and suite.FAIL_FACE and suite.SUMMARY_FACE, "report faces are defined")
    with assert_raises(suite.SuiteAssertionError, "a false condition fails"):
        assert_that(False, "expected failure")
    with assert_raises(suite.SuiteAssertionError, "a block that does not raise fails"):
        with assert_raises(KeyError):
            pass


if __name__ == "__main__":
    suite.run(title="kollect config, logging and errors test suite")
