"""주문 조회 API 테스트.

Order read API tests — Every /api/{version}/orders and simple-orders route.
"""

import pytest
from httpx import AsyncClient

API = "/api"

ORDER_ROUTES = ["v2", "v3", "v3.1", "v5", "v5.1", "v6"]
SIMPLE_ROUTES = ["v2", "v3", "v4"]
ALL_PATHS = (
    [f"{API}/{v}/orders" for v in ["v1", *ORDER_ROUTES, "v4"]]
    + [f"{API}/{v}/simple-orders" for v in ["v1", *SIMPLE_ROUTES]]
)


# ===== Health =====

class TestHealth:
    """헬스 체크 테스트."""

    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}


# ===== Orders =====

class TestOrders:
    """주문 + 주문 상품 조회 테스트."""

    @pytest.mark.parametrize("version", ORDER_ROUTES)
    async def test_orders_with_items(self, client: AsyncClient, orders, version):
        """모든 버전이 같은 주문/상품 구조를 같은 순서로 반환."""
        res = await client.get(f"{API}/{version}/orders")
        assert res.status_code == 200
        data = res.json()

        assert [o["order_id"] for o in data] == orders
        assert [o["name"] for o in data] == ["userA", "userB", "userA"]
        assert data[0]["order_status"] == "ORDER"
        assert data[0]["address"] == {"city": "서울", "street": "1", "zipcode": "1111"}
        assert data[0]["order_items"] == [
            {"item_name": "JPA1 BOOK", "order_price": 10000, "count": 1},
            {"item_name": "JPA2 BOOK", "order_price": 20000, "count": 2},
        ]
        assert [len(o["order_items"]) for o in data] == [2, 2, 1]

    @pytest.mark.parametrize("version", ORDER_ROUTES)
    async def test_same_json_twice(self, client: AsyncClient, orders, version):
        """같은 요청 두 번 → 동일한 JSON."""
        first = await client.get(f"{API}/{version}/orders")
        second = await client.get(f"{API}/{version}/orders")
        assert first.json() == second.json()

    async def test_v1_entity_shape(self, client: AsyncClient, orders):
        """v1 — 엔티티 형태: 회원/배송/상품 엔티티 포함."""
        res = await client.get(f"{API}/v1/orders")
        assert res.status_code == 200
        first = res.json()[0]

        assert first["id"] == orders[0]
        assert first["status"] == "ORDER"
        assert first["member"]["name"] == "userA"
        assert first["delivery"]["status"] == "READY"
        assert first["order_items"][1]["item"]["name"] == "JPA2 BOOK"
        assert first["order_items"][1]["count"] == 2

    async def test_v4_has_no_items(self, client: AsyncClient, orders):
        """v4 — 주문 상품 없는 요약."""
        res = await client.get(f"{API}/v4/orders")
        assert res.status_code == 200
        data = res.json()
        assert [o["order_id"] for o in data] == orders
        assert all("order_items" not in o for o in data)


# ===== Pagination (v3.1) =====

class TestOrdersPaging:
    """v3.1 페이징 테스트."""

    async def test_first_page(self, client: AsyncClient, orders):
        """offset=0, limit=1 → 첫 주문."""
        res = await client.get(f"{API}/v3.1/orders", params={"offset": 0, "limit": 1})
        assert res.status_code == 200
        data = res.json()
        assert [o["order_id"] for o in data] == [orders[0]]
        assert len(data[0]["order_items"]) == 2

    async def test_second_page(self, client: AsyncClient, orders):
        """offset=1, limit=2 → 두 번째, 세 번째 주문."""
        res = await client.get(f"{API}/v3.1/orders", params={"offset": 1, "limit": 2})
        assert [o["order_id"] for o in res.json()] == orders[1:]

    async def test_default_window(self, client: AsyncClient, orders):
        """파라미터 없음 → offset=0, limit=100."""
        res = await client.get(f"{API}/v3.1/orders")
        assert [o["order_id"] for o in res.json()] == orders

    @pytest.mark.parametrize("params", [{"offset": -1}, {"limit": -1}, {"offset": -1, "limit": -1}])
    async def test_negative_rejected(self, client: AsyncClient, orders, params):
        """음수 offset/limit → 422."""
        res = await client.get(f"{API}/v3.1/orders", params=params)
        assert res.status_code == 422
        assert "must be >= 0" in res.json()["detail"]

    async def test_non_integer_rejected(self, client: AsyncClient, orders):
        """정수가 아닌 값 → 422."""
        res = await client.get(f"{API}/v3.1/orders", params={"limit": "ten"})
        assert res.status_code == 422

    async def test_unpaged_versions_ignore_window(self, client: AsyncClient, orders):
        """v3/v6는 offset/limit을 무시하고 전체 반환."""
        for version in ("v3", "v6"):
            res = await client.get(f"{API}/{version}/orders", params={"offset": 1, "limit": 1})
            assert [o["order_id"] for o in res.json()] == orders


# ===== Simple orders =====

class TestSimpleOrders:
    """주문 요약 조회 테스트."""

    @pytest.mark.parametrize("version", SIMPLE_ROUTES)
    async def test_simple_orders(self, client: AsyncClient, orders, version):
        """v2~v4 — 같은 요약을 같은 순서로 반환."""
        res = await client.get(f"{API}/{version}/simple-orders")
        assert res.status_code == 200
        data = res.json()
        assert [o["order_id"] for o in data] == orders
        assert data[1]["name"] == "userB"
        assert data[1]["address"]["city"] == "부산"
        assert "order_items" not in data[0]

    async def test_v1_entity_shape(self, client: AsyncClient, orders):
        """v1 — 회원/배송까지의 엔티티 형태, 주문 상품 없음."""
        res = await client.get(f"{API}/v1/simple-orders")
        assert res.status_code == 200
        first = res.json()[0]
        assert first["member"]["address"]["zipcode"] == "1111"
        assert "order_items" not in first


# ===== Empty database =====

class TestEmpty:
    """주문이 없을 때 테스트."""

    @pytest.mark.parametrize("path", ALL_PATHS)
    async def test_empty_list(self, client: AsyncClient, path):
        """모든 엔드포인트가 빈 배열 반환."""
        res = await client.get(path)
        assert res.status_code == 200
        assert res.json() == []
