import pytest

from urlquery.naming import Case, convert, to_camel, to_pascal, to_snake


@pytest.mark.parametrize(
    "name,expected",
    [
        ("orderId", "order_id"),
        ("userName", "user_name"),
        ("price", "price"),
        ("developmentAreaId", "development_area_id"),
        ("UserName", "user_name"),
        ("already_snake", "already_snake"),
        ("orderID", "order_id"),
    ],
)
def test_to_snake(name, expected):
    assert to_snake(name) == expected


def test_camel_and_pascal():
    assert to_camel("user_name") == "userName"
    assert to_camel("userName") == "userName"
    assert to_pascal("order_id") == "OrderId"


def test_case_apply():
    assert Case.SNAKE.apply("orderId") == "order_id"
    assert Case.UPPER_SNAKE.apply("orderId") == "ORDER_ID"
    assert Case.CAMEL.apply("order_id") == "orderId"
    assert Case.PASCAL.apply("orderId") == "OrderId"
    assert convert("orderId", None) == "orderId"
