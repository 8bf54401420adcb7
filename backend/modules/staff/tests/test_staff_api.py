# backend/modules/staff/tests/test_staff_api.py

from fastapi.testclient import TestClient

from tests.factories import StaffMemberFactory


class TestStaffEndpoints:

    def test_create_staff_member(self, client: TestClient):
        response = client.post("/staff/members", json={
            "first_name": "Abebe",
            "last_name": "Kebede",
            "email": "abebe@example.com",
            "role": "chef",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["full_name"] == "Abebe Kebede"
        assert data["status"] == "active"

    def test_duplicate_email_is_conflict(self, client: TestClient, db_session):
        StaffMemberFactory(email="taken@example.com")

        response = client.post("/staff/members", json={
            "first_name": "Hana", "last_name": "Tesfaye", "email": "taken@example.com",
        })

        assert response.status_code == 409

    def test_invalid_email_is_rejected(self, client: TestClient):
        response = client.post("/staff/members", json={
            "first_name": "Hana", "last_name": "Tesfaye", "email": "not-an-email",
        })
        assert response.status_code == 422

    def test_search_and_filter(self, client: TestClient, db_session):
        StaffMemberFactory(first_name="Meron", last_name="Alemu", role="waiter")
        StaffMemberFactory(first_name="Dawit", last_name="Meron", role="chef")
        StaffMemberFactory(first_name="Yonas", last_name="Girma", role="chef")

        found = client.get("/staff/members", params={"search": "meron"}).json()
        assert {m["first_name"] for m in found} == {"Meron", "Dawit"}

        chefs = client.get("/staff/members", params={"role": "chef"}).json()
        assert [m["first_name"] for m in chefs] == ["Dawit", "Yonas"]

    def test_update_and_delete(self, client: TestClient, db_session):
        staff = StaffMemberFactory()

        updated = client.put(f"/staff/members/{staff.id}", json={"status": "on_leave"}).json()
        assert updated["status"] == "on_leave"

        assert client.delete(f"/staff/members/{staff.id}").json()["success"] is True
        assert client.get(f"/staff/members/{staff.id}").status_code == 404

    def test_clock_in_and_out(self, client: TestClient, db_session):
        staff = StaffMemberFactory()

        response = client.post(f"/staff/attendance/{staff.id}/clock-in", json={"notes": "Opening"})
        assert response.status_code == 200
        assert response.json()["record"]["status"] == "present"

        assert client.post(f"/staff/attendance/{staff.id}/clock-in").status_code == 409

        response = client.post(f"/staff/attendance/{staff.id}/clock-out")
        assert response.status_code == 200
        assert response.json()["record"]["check_out"] is not None

        records = client.get("/staff/attendance/records", params={"staff_id": staff.id}).json()
        assert len(records) == 1

    def test_null_required_field_is_rejected(self, client: TestClient, db_session):
        staff = StaffMemberFactory(first_name="Selam")

        response = client.put(f"/staff/members/{staff.id}", json={"first_name": None})

        assert response.status_code == 422
        assert client.get(f"/staff/members/{staff.id}").json()["first_name"] == "Selam"

    def test_clearing_optional_field_is_allowed(self, client: TestClient, db_session):
        staff = StaffMemberFactory(phone="+251911000000")

        response = client.put(f"/staff/members/{staff.id}", json={"phone": None})

        assert response.status_code == 200
        assert response.json()["phone"] is None

    def test_update_to_taken_email_is_conflict(self, client: TestClient, db_session):
        StaffMemberFactory(email="taken@example.com")
        staff = StaffMemberFactory(email="mine@example.com")

        response = client.put(f"/staff/members/{staff.id}", json={"email": "taken@example.com"})
        assert response.status_code == 409
        assert response.json()["error_code"] == "DUPLICATE_EMAIL"

        # Re-sending one's own email is not a duplicate
        response = client.put(f"/staff/members/{staff.id}", json={"email": "mine@example.com"})
        assert response.status_code == 200
