import pytest

from urlquery import MissingParameter, parse_url_query
from urlquery.validation import assert_limit_and_offset, assert_required, cap_limit


def test_assert_required():
    q = parse_url_query("userId=1", {"userId"})
    assert_required(q, ["userId"])
    with pytest.raises(MissingParameter):
        assert_required(q, ["userName"])


def test_assert_limit_and_offset():
    assert assert_limit_and_offset(parse_url_query("limit=5&offset=10", set())) == ("5", "10")
    with pytest.raises(MissingParameter):
        assert_limit_and_offset(parse_url_query("offset=10", set()))


@pytest.mark.parametrize(
    "raw,cap,expected",
    [
        ("limit=50", 100, "50"),
        ("limit=500", 100, "100"),
        ("", 100, "100"),
        ("limit=abc", 100, "abc"),
        ("limit=²", 100, "²"),
    ],
)
def test_cap_limit(raw, cap, expected):
    assert cap_limit(parse_url_query(raw, set()), cap).limit == expected


def test_cap_limit_keeps_the_rest_of_the_model():
    q = parse_url_query("userId=1&limit=999&offset=20", {"userId"})
    capped = cap_limit(q, 10)
    assert capped.limit == "10"
    assert capped.offset == "20"
    assert capped.filters == q.filters
