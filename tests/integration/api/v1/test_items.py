"""
v1 アイテムAPIの統合テスト

clientフィクスチャのアプリにはサンプルアイテム（id=1: itemA, id=2: itemB）が登録済み
"""

from typing import Any

from fastapi.testclient import TestClient


class TestReadItems:
    """一覧・取得エンドポイントのテスト"""

    def test_read_items(self, client: TestClient) -> None:
        """サンプルアイテムが登録順で返ること"""
        response = client.get("/api/v1/items/")
        assert response.status_code == 200

        data: Any = response.json()
        assert data == [
            {"id": 1, "name": "itemA", "price": 10000, "quantity": 10},
            {"id": 2, "name": "itemB", "price": 20000, "quantity": 20},
        ]

    def test_read_item(self, client: TestClient) -> None:
        """IDで取得できること"""
        response = client.get("/api/v1/items/2")
        assert response.status_code == 200
        assert response.json()["name"] == "itemB"

    def test_read_item_not_found(self, client: TestClient) -> None:
        """存在しないIDは404になること"""
        response = client.get("/api/v1/items/999")
        assert response.status_code == 404

        data: Any = response.json()
        assert data["status"] == "error"
        assert data["code"] == "not_found"
        assert data["details"] == {"item_id": 999}

    def test_read_item_invalid_id(self, client: TestClient) -> None:
        """整数でないIDはバリデーションエラーになること"""
        response = client.get("/api/v1/items/abc")
        assert response.status_code == 400
        assert response.json()["code"] == "validation_error"


class TestCreateItem:
    """登録エンドポイントのテスト"""

    def test_create_item(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """次の連番IDで登録されること"""
        response = client.post(
            "/api/v1/items/",
            json={"name": "itemC", "price": 30000, "quantity": 30},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json() == {
            "id": 3,
            "name": "itemC",
            "price": 30000,
            "quantity": 30,
        }

        names = [item["name"] for item in client.get("/api/v1/items/").json()]
        assert names == ["itemA", "itemB", "itemC"]

    def test_create_item_ignores_id(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """ペイロードのidは無視されること"""
        response = client.post(
            "/api/v1/items/",
            json={"id": 100, "name": "itemC", "price": 1, "quantity": 1},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["id"] == 3

    def test_create_item_requires_api_key(self, client: TestClient) -> None:
        """APIキーなしでは403になり、登録されないこと"""
        response = client.post(
            "/api/v1/items/",
            json={"name": "itemC", "price": 30000, "quantity": 30},
        )
        assert response.status_code == 403
        assert len(client.get("/api/v1/items/").json()) == 2

    def test_create_item_invalid_body(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """価格が整数でない場合は400になること"""
        response = client.post(
            "/api/v1/items/",
            json={"name": "itemC", "price": "free", "quantity": 1},
            headers=auth_headers,
        )
        assert response.status_code == 400

        data: Any = response.json()
        assert data["code"] == "validation_error"
        assert any(detail["loc"][-1] == "price" for detail in data["details"])


class TestUpdateItem:
    """更新エンドポイントのテスト"""

    def test_update_item(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """name/price/quantityが更新され、idは変わらないこと"""
        response = client.put(
            "/api/v1/items/1",
            json={"name": "itemA2", "price": 12000, "quantity": 10},
            headers=auth_headers,
        )
        assert response.status_code == 200

        expected = {"id": 1, "name": "itemA2", "price": 12000, "quantity": 10}
        assert response.json() == expected
        assert client.get("/api/v1/items/1").json() == expected

    def test_update_item_path_id_is_authoritative(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """ペイロードのidではなくパスのIDのアイテムが更新されること"""
        response = client.put(
            "/api/v1/items/1",
            json={"id": 2, "name": "X", "price": 1, "quantity": 1},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["id"] == 1
        assert client.get("/api/v1/items/2").json()["name"] == "itemB"

    def test_update_item_not_found(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """存在しないIDは404になり、ストアは変化しないこと"""
        before = client.get("/api/v1/items/").json()

        response = client.put(
            "/api/v1/items/999",
            json={"name": "X", "price": 1, "quantity": 1},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert response.json()["code"] == "not_found"
        assert client.get("/api/v1/items/").json() == before

    def test_update_item_requires_api_key(self, client: TestClient) -> None:
        """APIキーなしでは403になること"""
        response = client.put(
            "/api/v1/items/1",
            json={"name": "X", "price": 1, "quantity": 1},
        )
        assert response.status_code == 403
