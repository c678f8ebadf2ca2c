"""Tests for ticket endpoints."""
import uuid

import pytest

from conftest import bearer


@pytest.fixture
def project(store, user_id):
    return store.add_project(user_id, name="Website")


class TestCreateTicket:
    def test_defaults_are_applied(self, client, store, project, user_id):
        resp = client.post(
            f"/api/v1/projects/{project['id']}/tickets",
            json={"title": "Bug", "description": "Crash on load"},
            headers=bearer(user_id),
        )

        assert resp.status_code == 201
        data = resp.json()["data"]
        assert data["status"] == "open"
        assert data["priority"] == "medium"
        assert data["created_by"] == str(user_id)
        stored = store.tickets[uuid.UUID(data["id"])]
        assert stored["status"] == "open"
        assert stored["priority"] == "medium"

    def test_explicit_values(self, client, project, user_id, other_user_id):
        resp = client.post(
            f"/api/v1/projects/{project['id']}/tickets",
            json={
                "title": "Bug",
                "description": "Crash",
                "status": "in_progress",
                "priority": "critical",
                "assigned_to": str(other_user_id),
            },
            headers=bearer(user_id),
        )

        data = resp.json()["data"]
        assert data["status"] == "in_progress"
        assert data["priority"] == "critical"
        assert data["assigned_to"] == str(other_user_id)

    @pytest.mark.parametrize("status", ["pending", "Open", "done"])
    def test_invalid_status_is_rejected_without_write(self, client, store, project, user_id, status):
        resp = client.post(
            f"/api/v1/projects/{project['id']}/tickets",
            json={"title": "Bug", "description": "Crash", "status": status},
            headers=bearer(user_id),
        )

        assert resp.status_code == 400
        assert resp.json()["fields"] == ["status"]
        assert store.tickets == {}

    def test_title_and_description_required(self, client, store, project, user_id):
        resp = client.post(
            f"/api/v1/projects/{project['id']}/tickets",
            json={"priority": "low"},
            headers=bearer(user_id),
        )

        assert resp.status_code == 400
        assert resp.json()["fields"] == ["title", "description"]
        assert store.writes == []

    def test_non_owner_is_forbidden(self, client, store, project, other_user_id):
        resp = client.post(
            f"/api/v1/projects/{project['id']}/tickets",
            json={"title": "Bug", "description": "Crash on load"},
            headers=bearer(other_user_id),
        )

        assert resp.status_code == 403
        assert resp.json()["success"] is False
        assert store.tickets == {}

    def test_missing_project_is_404(self, client, store, user_id):
        resp = client.post(
            f"/api/v1/projects/{uuid.uuid4()}/tickets",
            json={"title": "Bug", "description": "Crash"},
            headers=bearer(user_id),
        )
        assert resp.status_code == 404
        assert store.tickets == {}


class TestReadTickets:
    def test_list_for_owner(self, client, store, project, user_id):
        store.add_ticket(project["id"], user_id, status="open")
        store.add_ticket(project["id"], user_id, status="closed")

        resp = client.get(f"/api/v1/projects/{project['id']}/tickets", headers=bearer(user_id))

        assert resp.status_code == 200
        assert len(resp.json()["data"]) == 2

    def test_list_filters_by_status(self, client, store, project, user_id):
        store.add_ticket(project["id"], user_id, status="open")
        closed = store.add_ticket(project["id"], user_id, status="closed")

        resp = client.get(
            f"/api/v1/projects/{project['id']}/tickets",
            params={"status": "closed"},
            headers=bearer(user_id),
        )

        assert [t["id"] for t in resp.json()["data"]] == [str(closed["id"])]

    def test_list_rejects_unknown_filter_value(self, client, project, user_id):
        resp = client.get(
            f"/api/v1/projects/{project['id']}/tickets",
            params={"priority": "urgent"},
            headers=bearer(user_id),
        )
        assert resp.status_code == 400

    def test_list_for_non_owner_is_forbidden(self, client, store, project, user_id, other_user_id):
        store.add_ticket(project["id"], user_id)
        resp = client.get(f"/api/v1/projects/{project['id']}/tickets", headers=bearer(other_user_id))
        assert resp.status_code == 403

    def test_get_ticket(self, client, store, project, user_id):
        ticket = store.add_ticket(project["id"], user_id)
        resp = client.get(f"/api/v1/tickets/{ticket['id']}", headers=bearer(user_id))
        assert resp.status_code == 200
        assert resp.json()["data"]["title"] == "Bug"

    def test_get_ticket_of_other_project_is_forbidden(self, client, store, project, user_id, other_user_id):
        ticket = store.add_ticket(project["id"], user_id)
        resp = client.get(f"/api/v1/tickets/{ticket['id']}", headers=bearer(other_user_id))
        assert resp.status_code == 403

    def test_get_missing_ticket_is_404(self, client, user_id):
        resp = client.get(f"/api/v1/tickets/{uuid.uuid4()}", headers=bearer(user_id))
        assert resp.status_code == 404


class TestUpdateTicket:
    def test_partial_update(self, client, store, project, user_id):
        ticket = store.add_ticket(project["id"], user_id)

        resp = client.patch(
            f"/api/v1/tickets/{ticket['id']}",
            json={"status": "resolved"},
            headers=bearer(user_id),
        )

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["status"] == "resolved"
        assert data["title"] == "Bug"

    def test_unassign_with_null(self, client, store, project, user_id, other_user_id):
        ticket = store.add_ticket(project["id"], user_id, assigned_to=other_user_id)

        resp = client.patch(f"/api/v1/tickets/{ticket['id']}", json={"assigned_to": None}, headers=bearer(user_id))

        assert resp.status_code == 200
        assert store.tickets[ticket["id"]]["assigned_to"] is None

    def test_empty_body_is_400(self, client, store, project, user_id):
        ticket = store.add_ticket(project["id"], user_id)

        resp = client.patch(f"/api/v1/tickets/{ticket['id']}", json={}, headers=bearer(user_id))

        assert resp.status_code == 400
        assert "At least one field" in resp.json()["error"]
        assert store.writes == []

    def test_invalid_status_is_400(self, client, store, project, user_id):
        ticket = store.add_ticket(project["id"], user_id)

        resp = client.patch(f"/api/v1/tickets/{ticket['id']}", json={"status": "reopened"}, headers=bearer(user_id))

        assert resp.status_code == 400
        assert store.tickets[ticket["id"]]["status"] == "open"

    def test_null_title_is_400(self, client, store, project, user_id):
        ticket = store.add_ticket(project["id"], user_id)
        resp = client.patch(f"/api/v1/tickets/{ticket['id']}", json={"title": None}, headers=bearer(user_id))
        assert resp.status_code == 400
        assert resp.json()["fields"] == ["title"]

    def test_non_owner_is_forbidden(self, client, store, project, user_id, other_user_id):
        # The other user created the ticket but does not own the project.
        ticket = store.add_ticket(project["id"], other_user_id)

        resp = client.patch(f"/api/v1/tickets/{ticket['id']}", json={"priority": "low"}, headers=bearer(other_user_id))

        assert resp.status_code == 403
        assert store.tickets[ticket["id"]]["priority"] == "medium"


class TestDeleteTicket:
    def test_project_owner_can_delete(self, client, store, project, user_id, other_user_id):
        ticket = store.add_ticket(project["id"], other_user_id)

        resp = client.delete(f"/api/v1/tickets/{ticket['id']}", headers=bearer(user_id))

        assert resp.status_code == 200
        assert resp.json()["data"]["id"] == str(ticket["id"])
        assert ticket["id"] not in store.tickets

    def test_creator_without_ownership_cannot_delete(self, client, store, project, other_user_id):
        ticket = store.add_ticket(project["id"], other_user_id)

        resp = client.delete(f"/api/v1/tickets/{ticket['id']}", headers=bearer(other_user_id))

        assert resp.status_code == 403
        assert ticket["id"] in store.tickets

    def test_delete_missing_is_404(self, client, user_id):
        resp = client.delete(f"/api/v1/tickets/{uuid.uuid4()}", headers=bearer(user_id))
        assert resp.status_code == 404
