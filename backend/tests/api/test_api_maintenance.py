"""
维修任务 API 测试
覆盖 /api/maintenance 端点
"""
from fastapi.testclient import TestClient


class TestMaintenanceTasks:
    """维修任务增删改查"""

    def test_create_task(self, client: TestClient, sample_room):
        """测试报修"""
        response = client.post("/api/maintenance", json={
            "roomId": sample_room.id,
            "issue": "Leaky faucet in bathroom",
            "reportedBy": "Reception",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "pending"
        assert data["priority"] == "medium"
        assert data["room"]["roomNumber"] == "101"
        assert data["reportedBy"] == "Reception"

    def test_create_without_room(self, client: TestClient):
        """测试公共区域报修（无房间）"""
        response = client.post("/api/maintenance", json={"issue": "Lobby light flickering"})

        assert response.status_code == 200
        assert response.json()["room"] is None

    def test_create_with_unknown_room(self, client: TestClient):
        response = client.post("/api/maintenance", json={"roomId": 9999, "issue": "Broken lock"})

        assert response.status_code == 404
        assert response.json()["msg"] == "Room not found"

    def test_update_task(self, client: TestClient, sample_room):
        """测试更新状态、优先级与指派人"""
        created = client.post("/api/maintenance", json={
            "roomId": sample_room.id, "issue": "AC not cooling"
        }).json()

        response = client.put(f"/api/maintenance/{created['id']}", json={
            "status": "in-progress", "priority": "high", "assignedTo": "Ravi"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "in-progress"
        assert data["priority"] == "high"
        assert data["assignedTo"] == "Ravi"

    def test_list_filters(self, client: TestClient, sample_room):
        """测试按状态与优先级过滤"""
        client.post("/api/maintenance", json={"issue": "Broken window lock", "priority": "low"})
        urgent = client.post("/api/maintenance", json={
            "roomId": sample_room.id, "issue": "Water leak", "priority": "high"
        }).json()
        client.put(f"/api/maintenance/{urgent['id']}", json={"status": "in-progress"})

        assert len(client.get("/api/maintenance").json()) == 2

        high = client.get("/api/maintenance", params={"priority": "high"}).json()
        assert [t["id"] for t in high] == [urgent["id"]]

        pending = client.get("/api/maintenance", params={"status": "pending"}).json()
        assert [t["issue"] for t in pending] == ["Broken window lock"]

    def test_get_missing_task(self, client: TestClient):
        response = client.get("/api/maintenance/9999")

        assert response.status_code == 404
        assert response.json()["msg"] == "Task not found"

    def test_unparseable_task_id(self, client: TestClient):
        response = client.get("/api/maintenance/first")

        assert response.status_code == 404
        assert response.json()["msg"] == "Task not found"

    def test_delete_task(self, client: TestClient):
        """测试删除维修任务"""
        created = client.post("/api/maintenance", json={"issue": "Squeaky door"}).json()

        response = client.delete(f"/api/maintenance/{created['id']}")

        assert response.status_code == 200
        assert client.get(f"/api/maintenance/{created['id']}").status_code == 404
        assert client.delete(f"/api/maintenance/{created['id']}").status_code == 404
