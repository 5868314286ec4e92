"""Tests for conditions, filter tokens and sort tokens."""

import pytest

from urlquery import (
    Case,
    Condition,
    Dialect,
    Filter,
    InvalidCondition,
    InvalidField,
    InvalidFilter,
    InvalidSort,
    InvalidSortBy,
    Sort,
    SortBy,
)

ALLOWED = {"id", "orderId", "price", "userName"}


@pytest.mark.parametrize(
    "token,condition,symbol",
    [
        ("eq", Condition.EQ, "="),
        ("ne", Condition.NE, "!="),
        ("gt", Condition.GT, ">"),
        ("ge", Condition.GE, ">="),
        ("lt", Condition.LT, "<"),
        ("le", Condition.LE, "<="),
    ],
)
def test_condition_table(token, condition, symbol):
    assert Condition.parse(token) is condition
    assert condition.symbol == symbol
    assert condition.token == token


@pytest.mark.parametrize("token", ["", "gr", "EQ", "=", "gte"])
def test_condition_rejects_unknown_token(token):
    with pytest.raises(InvalidCondition):
        Condition.parse(token)


def test_filter_keeps_hyphenated_value_whole():
    f = Filter.parse("id-eq-8bd8a6fb-e2b2-47ab-b3db-4f47c067ba5e", ALLOWED)
    assert f == Filter("id", Condition.EQ, "8bd8a6fb-e2b2-47ab-b3db-4f47c067ba5e")


def test_filter_allows_empty_value():
    assert Filter.parse("price-gt-", ALLOWED).value == ""


@pytest.mark.parametrize("token", ["price", "price-ge", ""])
def test_filter_needs_three_parts(token):
    with pytest.raises(InvalidFilter):
        Filter.parse(token, ALLOWED)


def test_filter_field_checked_before_condition():
    with pytest.raises(InvalidField):
        Filter.parse("secret-xx-1", ALLOWED)


def test_filter_bad_condition():
    with pytest.raises(InvalidCondition):
        Filter.parse("price-xx-1", ALLOWED)


def test_from_key_value_is_equality_without_allow_list():
    f = Filter.from_key_value("anything", "bob")
    assert f.condition is Condition.EQ
    assert f.field == "anything"


def test_filter_human_and_token_forms():
    f = Filter("price", Condition.GE, "200")
    assert f.to_human() == "price >= 200"
    assert str(f) == "price >= 200"
    assert f.to_token() == "price-ge-200"


def test_filter_to_sql_postgres():
    f = Filter("orderId", Condition.NE, "7")
    assert f.to_sql(3, case=Case.SNAKE) == "order_id != $3"
    assert f.to_sql(3) == "orderId != $3"


def test_filter_to_sql_with_table_and_dialects():
    f = Filter("userName", Condition.EQ, "Bob-Smith")
    assert f.to_sql(1, table="users", case=Case.SNAKE) == "users.user_name = $1"
    assert f.to_sql(1, case=Case.SNAKE, dialect=Dialect.MYSQL) == "user_name = ?"
    assert f.to_sql(2, case=Case.SNAKE, dialect=Dialect.SNOWFLAKE) == "user_name = %(p2)s"


def test_filter_is_immutable():
    f = Filter("price", Condition.GE, "200")
    with pytest.raises(Exception):
        f.value = "300"


def test_sort_parse():
    assert Sort.parse("price-desc", ALLOWED) == Sort("price", SortBy.DESC)
    assert Sort.parse("orderId-asc", ALLOWED) == Sort("orderId", SortBy.ASC)


def test_sort_errors():
    with pytest.raises(InvalidSort):
        Sort.parse("price", ALLOWED)
    with pytest.raises(InvalidField):
        Sort.parse("secret-asc", ALLOWED)
    with pytest.raises(InvalidSortBy):
        Sort.parse("price-up", ALLOWED)


def test_sort_to_sql():
    s = Sort("orderId", SortBy.DESC)
    assert s.to_sql(case=Case.SNAKE) == "order_id DESC"
    assert s.to_sql(table="orders", case=Case.SNAKE) == "orders.order_id DESC"
    assert s.to_sql() == "orderId DESC"
