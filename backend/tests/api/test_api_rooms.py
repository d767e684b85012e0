"""
房间管理 API 测试
覆盖 /api/rooms 端点
"""
from datetime import date, timedelta
from fastapi.testclient import TestClient


ROOM_PAYLOAD = {
    "roomNumber": "202",
    "type": "Deluxe",
    "basePrice": 2500,
    "weekendPrice": 2800,
    "holidayPrice": 3200,
    "amenities": ["WiFi", "TV"],
    "capacity": 3,
}


class TestRoomCrud:
    """房间增删改查"""

    def test_create_room(self, client: TestClient):
        """测试创建房间"""
        response = client.post("/api/rooms", json=ROOM_PAYLOAD)

        assert response.status_code == 200
        data = response.json()
        assert data["roomNumber"] == "202"
        assert data["type"] == "Deluxe"
        assert data["status"] == "Available"
        assert data["amenities"] == ["WiFi", "TV"]
        assert data["capacity"] == 3
        assert "id" in data

    def test_create_room_defaults(self, client: TestClient):
        """测试房型与容量默认值"""
        response = client.post("/api/rooms", json={
            "roomNumber": "105", "basePrice": 1000, "weekendPrice": 1200, "holidayPrice": 1500
        })

        data = response.json()
        assert data["type"] == "Standard"
        assert data["capacity"] == 2
        assert data["images"] == []

    def test_create_duplicate_room(self, client: TestClient, sample_room):
        """测试房间号重复"""
        response = client.post("/api/rooms", json={**ROOM_PAYLOAD, "roomNumber": "101"})

        assert response.status_code == 400
        assert response.json()["msg"] == "Room with this number already exists"

    def test_create_room_validation(self, client: TestClient):
        """测试缺少价格字段"""
        response = client.post("/api/rooms", json={"roomNumber": "110"})

        assert response.status_code == 400
        body = response.json()
        assert body["msg"] == "Validation error"
        assert "basePrice" in body["details"]

    def test_get_room(self, client: TestClient, sample_room):
        """测试获取房间详情"""
        response = client.get(f"/api/rooms/{sample_room.id}")

        assert response.status_code == 200
        assert response.json()["roomNumber"] == "101"

    def test_get_missing_room(self, client: TestClient):
        """测试获取不存在的房间"""
        response = client.get("/api/rooms/9999")

        assert response.status_code == 404
        assert response.json()["msg"] == "Room not found"

    def test_unparseable_room_id(self, client: TestClient):
        """测试无法解析的房间 ID"""
        response = client.get("/api/rooms/abc")

        assert response.status_code == 404
        assert response.json()["msg"] == "Room not found"

    def test_update_room(self, client: TestClient, sample_room):
        """测试更新房间价格与状态"""
        response = client.put(f"/api/rooms/{sample_room.id}", json={
            "basePrice": 1800, "status": "Maintenance"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["basePrice"] == 1800
        assert data["status"] == "Maintenance"
        assert data["roomNumber"] == "101"

    def test_update_room_number_conflict(self, client: TestClient, sample_room, sample_suite):
        """测试改成已存在的房间号"""
        response = client.put(f"/api/rooms/{sample_suite.id}", json={"roomNumber": "101"})

        assert response.status_code == 400
        assert response.json()["msg"] == "Room with this number already exists"

    def test_delete_room(self, client: TestClient, sample_room):
        """测试删除房间"""
        room_id = sample_room.id
        response = client.delete(f"/api/rooms/{room_id}")

        assert response.status_code == 200
        assert response.json()["msg"] == "Room removed"
        assert client.get(f"/api/rooms/{room_id}").status_code == 404

    def test_delete_room_keeps_bookings(self, client: TestClient, sample_room, sample_guest):
        """测试删除房间后其预订仍然保留"""
        room_id = sample_room.id
        check_in = date.today() + timedelta(days=20)
        booking = client.post("/api/bookings", json={
            "roomId": room_id,
            "guestId": sample_guest.id,
            "checkIn": check_in.isoformat(),
            "checkOut": (check_in + timedelta(days=2)).isoformat(),
            "totalPrice": 3000,
        }).json()

        client.delete(f"/api/rooms/{room_id}")

        response = client.get(f"/api/bookings/{booking['id']}")
        assert response.status_code == 200
        data = response.json()
        assert data["roomId"] == room_id
        assert data["room"] is None

    def test_delete_room_with_foreign_keys_enforced(self, foreign_keys_on, client: TestClient,
                                                    sample_room, sample_guest):
        """测试外键检查打开时删除有关联记录的房间"""
        room_id = sample_room.id
        check_in = date.today() + timedelta(days=20)
        booking = client.post("/api/bookings", json={
            "roomId": room_id,
            "guestId": sample_guest.id,
            "checkIn": check_in.isoformat(),
            "checkOut": (check_in + timedelta(days=2)).isoformat(),
            "totalPrice": 3000,
        }).json()
        client.post("/api/services", json={
            "type": "Housekeeping",
            "guestId": sample_guest.id,
            "roomId": room_id,
            "bookingId": booking["id"],
            "item": "Extra towels",
        })
        client.post("/api/maintenance", json={"roomId": room_id, "issue": "Leaky faucet"})

        response = client.delete(f"/api/rooms/{room_id}")

        assert response.status_code == 200
        assert client.get(f"/api/bookings/{booking['id']}").json()["roomId"] == room_id
        assert [s["roomId"] for s in client.get("/api/services").json()] == [room_id]
        assert len(client.get("/api/maintenance").json()) == 1

    def test_delete_missing_room(self, client: TestClient):
        """测试删除不存在的房间"""
        response = client.delete("/api/rooms/9999")

        assert response.status_code == 404
        assert response.json()["msg"] == "Room not found"


class TestRoomFilters:
    """房间列表过滤"""

    def test_list_sorted_by_number(self, client: TestClient, sample_suite, sample_room):
        """测试按房间号排序"""
        data = client.get("/api/rooms").json()

        assert [r["roomNumber"] for r in data] == ["101", "301"]

    def test_filter_by_type(self, client: TestClient, sample_room, sample_suite):
        """测试按房型过滤"""
        data = client.get("/api/rooms", params={"type": "Suite"}).json()

        assert [r["roomNumber"] for r in data] == ["301"]

    def test_filter_by_status(self, client: TestClient, sample_room, sample_suite):
        """测试按状态过滤"""
        client.put(f"/api/rooms/{sample_suite.id}", json={"status": "Cleaning"})

        data = client.get("/api/rooms", params={"status": "Available"}).json()
        assert [r["roomNumber"] for r in data] == ["101"]

    def test_filter_by_price_range(self, client: TestClient, sample_room, sample_suite):
        """测试按基础价格区间过滤"""
        cheap = client.get("/api/rooms", params={"maxPrice": 2000}).json()
        assert [r["roomNumber"] for r in cheap] == ["101"]

        pricey = client.get("/api/rooms", params={"minPrice": 2000}).json()
        assert [r["roomNumber"] for r in pricey] == ["301"]

        both = client.get("/api/rooms", params={"minPrice": 1500, "maxPrice": 5000}).json()
        assert len(both) == 2


class TestAppEndpoints:
    """根路径与健康检查"""

    def test_root(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "Welcome to Project Bolt Hotel Management API"

    def test_health(self, client: TestClient):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_unknown_route(self, client: TestClient):
        """测试未知路由也返回 {msg}"""
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert "msg" in response.json()
