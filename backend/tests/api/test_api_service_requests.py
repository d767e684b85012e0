"""
客房服务 API 测试
覆盖 /api/services 端点
"""
from fastapi.testclient import TestClient


def _request_payload(guest_id, room_id, **extra):
    payload = {
        "type": "Food & Beverage",
        "guestId": guest_id,
        "roomId": room_id,
        "item": "Club sandwich",
        "quantity": 2,
        "price": 450,
    }
    payload.update(extra)
    return payload


class TestServiceRequests:
    """服务请求增删改查"""

    def test_create_request(self, client: TestClient, sample_guest, sample_room):
        """测试创建服务请求"""
        response = client.post("/api/services", json=_request_payload(sample_guest.id, sample_room.id))

        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "Food & Beverage"
        assert data["status"] == "pending"
        assert data["quantity"] == 2
        assert data["guest"]["username"] == "guest1"
        assert data["room"]["roomNumber"] == "101"
        assert data["assignee"] is None

    def test_create_defaults(self, client: TestClient, sample_guest, sample_room):
        """测试数量与价格默认值"""
        response = client.post("/api/services", json={
            "type": "Wake-up Call",
            "guestId": sample_guest.id,
            "roomId": sample_room.id,
            "item": "06:30",
        })

        data = response.json()
        assert data["quantity"] == 1
        assert data["price"] == 0

    def test_invalid_type(self, client: TestClient, sample_guest, sample_room):
        response = client.post("/api/services", json=_request_payload(
            sample_guest.id, sample_room.id, type="Spa"
        ))

        assert response.status_code == 400
        assert response.json()["msg"] == "Validation error"

    def test_assign_and_complete(self, client: TestClient, sample_guest, sample_staff, sample_room):
        """测试指派员工并完成"""
        created = client.post("/api/services", json=_request_payload(sample_guest.id, sample_room.id)).json()

        response = client.put(f"/api/services/{created['id']}", json={
            "status": "completed", "assignedTo": sample_staff.id, "notes": "Delivered warm"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "completed"
        assert data["assignedTo"] == sample_staff.id
        assert data["assignee"]["fullName"] == "Front Desk"
        assert data["notes"] == "Delivered warm"

    def test_get_missing_request(self, client: TestClient):
        response = client.get("/api/services/9999")

        assert response.status_code == 404
        assert response.json()["msg"] == "Service request not found"

    def test_update_missing_request(self, client: TestClient):
        response = client.put("/api/services/9999", json={"status": "completed"})

        assert response.status_code == 404
        assert response.json()["msg"] == "Service request not found"

    def test_delete_request(self, client: TestClient, sample_guest, sample_room):
        """测试删除服务请求"""
        created = client.post("/api/services", json=_request_payload(sample_guest.id, sample_room.id)).json()

        response = client.delete(f"/api/services/{created['id']}")

        assert response.status_code == 200
        assert response.json()["msg"] == "Service request removed"
        assert client.get(f"/api/services/{created['id']}").status_code == 404

    def test_list_filters(self, client: TestClient, sample_guest, sample_room, sample_suite):
        """测试按类型、状态与房间过滤"""
        client.post("/api/services", json=_request_payload(sample_guest.id, sample_room.id))
        housekeeping = client.post("/api/services", json=_request_payload(
            sample_guest.id, sample_suite.id, type="Housekeeping", item="Extra pillows"
        )).json()
        client.put(f"/api/services/{housekeeping['id']}", json={"status": "processing"})

        everything = client.get("/api/services").json()
        assert len(everything) == 2
        # 最新的在前
        assert everything[0]["id"] == housekeeping["id"]

        by_type = client.get("/api/services", params={"type": "Housekeeping"}).json()
        assert [r["item"] for r in by_type] == ["Extra pillows"]

        by_status = client.get("/api/services", params={"status": "pending"}).json()
        assert [r["item"] for r in by_status] == ["Club sandwich"]

        by_room = client.get("/api/services", params={"roomId": sample_suite.id}).json()
        assert [r["id"] for r in by_room] == [housekeeping["id"]]

        by_guest = client.get("/api/services", params={"guestId": sample_guest.id}).json()
        assert len(by_guest) == 2
