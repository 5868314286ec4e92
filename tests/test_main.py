from pathlib import Path

from fastapi.testclient import TestClient

from urlquery.main import REG, app

CONFIG = Path(__file__).resolve().parent.parent / "config" / "endpoints.yaml"


def test_healthz_and_bundled_config():
    with TestClient(app) as client:
        REG.load(CONFIG)
        r = client.get("/healthz")
        assert r.status_code == 200
        assert r.json()["endpoints"] == ["order_totals", "orders", "orders_with_users"]

        r = client.get("/sql/orders_with_users?userId=1&userName=bob&sort=orderId-desc")
        assert r.status_code == 200
        assert r.json()["sql"] == (
            "SELECT orders.id, orders.status, users.user_name FROM orders "
            "JOIN users ON users.id = orders.user_id "
            "WHERE user_id = $1 AND users.user_name = $2 ORDER BY orders.order_id DESC LIMIT 100"
        )
