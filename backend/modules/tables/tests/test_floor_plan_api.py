# backend/modules/tables/tests/test_floor_plan_api.py

import pytest
from fastapi.testclient import TestClient

from modules.tables.models.table_models import RestaurantTable
from tests.factories import RoomFactory, TableFactory


class TestFloorPlanEditorEndpoints:
    """Floor plan editing through editor sessions"""

    @pytest.fixture
    def patio(self, db_session):
        room = RoomFactory(name="Patio")
        TableFactory(room=room, table_number="P1", position_x=0, position_y=0)
        TableFactory(room=room, table_number="P2", position_x=150, position_y=0)
        return room

    @pytest.fixture
    def session_id(self, client: TestClient, patio) -> str:
        response = client.post("/floor-plan/sessions", json={"room_id": patio.id})
        assert response.status_code == 201
        return response.json()["session_id"]

    def drag(self, client, session_id, table_id, dx, dy):
        base = f"/floor-plan/sessions/{session_id}"
        client.put(f"{base}/tool", json={"tool": "move"})
        client.post(f"{base}/pointer/down", json={"table_id": table_id, "x": 0, "y": 0})
        client.post(f"{base}/pointer/move", json={"x": dx, "y": dy})
        return client.post(f"{base}/pointer/up")

    def test_open_defaults_to_first_active_room(self, client: TestClient, db_session):
        RoomFactory(name="Terrace")
        RoomFactory(name="Atrium", active=False)
        garden = RoomFactory(name="Garden")

        state = client.post("/floor-plan/sessions", json={}).json()

        assert state["room_id"] == garden.id
        assert state["room_name"] == "Garden"
        assert state["is_editing"] is False
        assert state["tool"] == "select"

    def test_open_all_rooms(self, client: TestClient, patio):
        state = client.post("/floor-plan/sessions", json={"all_rooms": True}).json()

        assert state["room_name"] == "All Rooms"
        assert len(state["tables"]) == 2

    def test_tool_requires_edit_mode(self, client: TestClient, session_id):
        response = client.put(f"/floor-plan/sessions/{session_id}/tool", json={"tool": "resize"})
        assert response.status_code == 400

    def test_exit_with_changes_requires_answer(self, client: TestClient, session_id, patio):
        """Test leaving edit mode with unsaved changes asks to save first"""
        client.post(f"/floor-plan/sessions/{session_id}/edit")
        table_id = patio.tables[0].id
        state = self.drag(client, session_id, table_id, 30, 40).json()
        assert state["has_unsaved_changes"] is True
        assert state["modified_table_ids"] == [table_id]

        response = client.post(f"/floor-plan/sessions/{session_id}/exit", json={})

        assert response.status_code == 409
        assert response.json()["error_code"] == "UNSAVED_CHANGES"
        assert client.get(f"/floor-plan/sessions/{session_id}").json()["is_editing"] is True

    def test_exit_and_save_persists_layout(self, client: TestClient, session_id, patio, db_session):
        """Test confirming the save prompt writes the new layout"""
        client.post(f"/floor-plan/sessions/{session_id}/edit")
        table_id = patio.tables[0].id
        self.drag(client, session_id, table_id, 30, 40)

        response = client.post(f"/floor-plan/sessions/{session_id}/exit", json={"save": True})

        state = response.json()
        assert response.status_code == 200
        assert state["is_editing"] is False
        assert state["has_unsaved_changes"] is False
        assert state["message"] == "Floor plan changes saved successfully"

        table = client.get(f"/tables/{table_id}").json()
        assert (table["position_x"], table["position_y"]) == (30, 40)

    def test_exit_and_discard_keeps_database(self, client: TestClient, session_id, patio):
        client.post(f"/floor-plan/sessions/{session_id}/edit")
        table_id = patio.tables[0].id
        self.drag(client, session_id, table_id, 30, 40)

        state = client.post(f"/floor-plan/sessions/{session_id}/exit", json={"save": False}).json()

        assert state["is_editing"] is False
        assert state["has_unsaved_changes"] is False
        table = client.get(f"/tables/{table_id}").json()
        assert (table["position_x"], table["position_y"]) == (0, 0)

    def test_rotate_and_save(self, client: TestClient, session_id, patio, db_session):
        base = f"/floor-plan/sessions/{session_id}"
        table_id = patio.tables[1].id
        client.post(f"{base}/edit")
        client.post(f"{base}/tables/{table_id}/rotate")
        state = client.post(f"{base}/tables/{table_id}/rotate").json()
        assert state["selected_table_id"] == table_id

        client.post(f"{base}/save")

        db_session.expire_all()
        assert db_session.get(RestaurantTable, table_id).rotation == 90

    def test_change_room_requires_discard(self, client: TestClient, session_id, patio, db_session):
        """Test switching rooms with unsaved changes needs explicit discard"""
        hall = RoomFactory(name="Hall")
        client.post(f"/floor-plan/sessions/{session_id}/edit")
        self.drag(client, session_id, patio.tables[0].id, 5, 5)

        response = client.post(f"/floor-plan/sessions/{session_id}/room", json={"room_id": hall.id})
        assert response.status_code == 409

        state = client.post(
            f"/floor-plan/sessions/{session_id}/room",
            json={"room_id": hall.id, "discard_changes": True},
        ).json()
        assert state["room_name"] == "Hall"
        assert state["tables"] == []

    def test_close_session(self, client: TestClient, session_id):
        assert client.delete(f"/floor-plan/sessions/{session_id}").json()["success"] is True
        assert client.get(f"/floor-plan/sessions/{session_id}").status_code == 404
