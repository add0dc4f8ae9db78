"""HTTP tests for the customer API.

Covers the wire contract: status codes, camelCase bodies, RFC 9457 error
bodies, paging metadata and trace id propagation.
"""

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from customer_hub.core.container import get_dispatcher
from customer_hub.main import app


# =============================================================================
# Create
# =============================================================================


@pytest.mark.api
class TestCreateCustomer:
    def test_create_returns_201_with_location(self, client):
        # Act
        response = client.post(
            "/api/customers",
            json={
                "name": "Ada Lovelace",
                "email": "Ada@Example.com",
                "phone": "+14155552671",
            },
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert response.headers["Location"] == f"/api/customers/{body['id']}"
        assert body["name"] == "Ada Lovelace"
        assert body["email"] == "ada@example.com"
        assert body["type"] == "Regular"
        assert body["status"] == "Active"
        assert "createdAt" in body
        assert body["updatedAt"] is None

    def test_duplicate_email_is_409_and_not_stored(self, client, create_customer):
        # Arrange
        create_customer()

        # Act
        response = client.post(
            "/api/customers",
            json={
                "name": "Ada Clone",
                "email": "ada@example.com",
                "phone": "+14155552672",
            },
        )

        # Assert
        assert response.status_code == 409
        body = response.json()
        assert body["status"] == 409
        assert body["title"] == "Resource Conflict"
        assert body["type"].endswith("/errors/email_already_exists")
        search = client.get("/api/customers").json()
        assert search["totalCount"] == 1

    def test_invalid_fields_are_400_with_field_errors(self, client):
        response = client.post(
            "/api/customers", json={"name": "", "email": "bad", "phone": "x"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["title"] == "Validation Failed"
        assert [e["field"] for e in body["errors"]] == ["name", "email", "phone"]
        assert body["errors"][0]["code"] == "required_field_missing"
        assert body["errors"][0]["message"] == "Name is required"

    def test_missing_body_fields_are_400(self, client):
        response = client.post("/api/customers", json={"name": "Ada"})

        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["errors"]}
        assert fields == {"email", "phone"}

    def test_wrong_body_type_reports_bare_field_name(self, client):
        response = client.post(
            "/api/customers",
            json={"name": 42, "email": "ada@example.com", "phone": "+14155552671"},
        )

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert [e["field"] for e in errors] == ["name"]
        assert errors[0]["code"] == "string_type"

    def test_malformed_json_is_400(self, client):
        response = client.post(
            "/api/customers",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errors"]


# =============================================================================
# Read
# =============================================================================


@pytest.mark.api
class TestGetCustomer:
    def test_get_existing_customer(self, client, create_customer):
        created = create_customer()

        response = client.get(f"/api/customers/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_unknown_customer_is_404(self, client):
        customer_id = uuid7()

        response = client.get(f"/api/customers/{customer_id}")

        assert response.status_code == 404
        body = response.json()
        assert body["type"].endswith("/errors/customer_not_found")
        assert body["instance"] == f"/api/customers/{customer_id}"
        assert body["detail"] == "Customer not found"

    def test_malformed_id_is_400(self, client):
        response = client.get("/api/customers/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "path.customer_id"


# =============================================================================
# Update
# =============================================================================


@pytest.mark.api
class TestUpdateCustomer:
    def test_update_replaces_contact_details(self, client, create_customer):
        created = create_customer()

        response = client.put(
            f"/api/customers/{created['id']}",
            json={
                "name": "Augusta Ada King",
                "email": "augusta@example.com",
                "phone": "+442071838750",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Augusta Ada King"
        assert body["email"] == "augusta@example.com"
        assert body["updatedAt"] is not None

    def test_update_to_taken_email_is_409(self, client, create_customer):
        create_customer(name="Grace Hopper", email="grace@example.com")
        ada = create_customer()

        response = client.put(
            f"/api/customers/{ada['id']}",
            json={
                "name": "Ada Lovelace",
                "email": "grace@example.com",
                "phone": "+14155552671",
            },
        )

        assert response.status_code == 409

    def test_update_unknown_customer_is_404(self, client):
        response = client.put(
            f"/api/customers/{uuid7()}",
            json={
                "name": "Nobody",
                "email": "nobody@example.com",
                "phone": "+14155552671",
            },
        )

        assert response.status_code == 404

    def test_update_unknown_customer_with_taken_email_is_404(
        self, client, create_customer
    ):
        create_customer(email="ada@example.com")

        response = client.put(
            f"/api/customers/{uuid7()}",
            json={
                "name": "Nobody",
                "email": "ada@example.com",
                "phone": "+14155552671",
            },
        )

        assert response.status_code == 404

    def test_update_deleted_customer_with_taken_email_is_404(
        self, client, create_customer
    ):
        create_customer(email="ada@example.com")
        gone = create_customer(name="Grace Hopper", email="grace@example.com")
        client.delete(f"/api/customers/{gone['id']}")

        response = client.put(
            f"/api/customers/{gone['id']}",
            json={
                "name": "Grace Hopper",
                "email": "ada@example.com",
                "phone": "+14155552671",
            },
        )

        assert response.status_code == 404


# =============================================================================
# Transitions and delete
# =============================================================================


@pytest.mark.api
class TestCustomerTransitions:
    def test_promote_then_promote_again(self, client, create_customer):
        created = create_customer()
        url = f"/api/customers/{created['id']}/promote"

        first = client.post(url)
        second = client.post(url)

        assert first.status_code == 200
        assert first.json()["type"] == "Vip"
        assert second.status_code == 409
        body = second.json()
        assert body["title"] == "Business Rule Violation"
        assert body["type"].endswith("/errors/customer_already_vip")

    def test_suspend_and_activate(self, client, create_customer):
        created = create_customer()
        base = f"/api/customers/{created['id']}"

        suspended = client.post(f"{base}/suspend")
        suspended_again = client.post(f"{base}/suspend")
        activated = client.post(f"{base}/activate")
        activated_again = client.post(f"{base}/activate")

        assert suspended.json()["status"] == "Suspended"
        assert suspended_again.status_code == 409
        assert activated.json()["status"] == "Active"
        assert activated_again.status_code == 409

    def test_promote_unknown_customer_is_404(self, client):
        assert client.post(f"/api/customers/{uuid7()}/promote").status_code == 404

    def test_delete_then_everything_is_404(self, client, create_customer):
        # Arrange
        created = create_customer()
        url = f"/api/customers/{created['id']}"

        # Act
        deleted = client.delete(url)

        # Assert
        assert deleted.status_code == 204
        assert deleted.content == b""
        assert client.get(url).status_code == 404
        assert client.delete(url).status_code == 404
        assert client.post(f"{url}/promote").status_code == 404
        assert client.get("/api/customers").json()["totalCount"] == 0

    def test_email_can_be_reused_after_delete(self, client, create_customer):
        created = create_customer()
        client.delete(f"/api/customers/{created['id']}")

        recreated = create_customer(name="Ada Again")

        assert recreated["id"] != created["id"]


# =============================================================================
# Search and VIP listing
# =============================================================================


@pytest.mark.api
class TestSearchCustomers:
    def test_default_paging_over_twenty_five_customers(self, client, create_customer):
        # Arrange
        for i in range(25):
            create_customer(name=f"Customer {chr(65 + i)}", email=f"c{i}@example.com")

        # Act
        response = client.get("/api/customers")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["totalCount"] == 25
        assert len(body["items"]) == 10
        assert body["totalPages"] == 3
        assert body["pageNumber"] == 1
        assert body["pageSize"] == 10
        assert body["hasNext"] is True
        assert body["hasPrevious"] is False
        assert body["items"][0]["name"] == "Customer A"

    def test_last_page(self, client, create_customer):
        for i in range(25):
            create_customer(name=f"Customer {chr(65 + i)}", email=f"c{i}@example.com")

        body = client.get("/api/customers?pageNumber=3&pageSize=10").json()

        assert len(body["items"]) == 5
        assert body["hasNext"] is False
        assert body["hasPrevious"] is True

    def test_filters(self, client, create_customer):
        ada = create_customer()
        create_customer(name="Grace Hopper", email="grace@example.com")
        client.post(f"/api/customers/{ada['id']}/promote")

        by_name = client.get("/api/customers", params={"name": "HOPP"}).json()
        by_type = client.get("/api/customers", params={"type": "Vip"}).json()
        by_email = client.get("/api/customers", params={"email": "ada@"}).json()

        assert [c["name"] for c in by_name["items"]] == ["Grace Hopper"]
        assert [c["name"] for c in by_type["items"]] == ["Ada Lovelace"]
        assert [c["name"] for c in by_email["items"]] == ["Ada Lovelace"]

    @pytest.mark.parametrize(
        ("query", "field"),
        [
            ("pageNumber=0", "page_number"),
            ("pageSize=0", "page_size"),
            ("pageSize=101", "page_size"),
        ],
    )
    def test_out_of_range_paging_is_400(self, client, query, field):
        response = client.get(f"/api/customers?{query}")

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == [field]

    def test_unknown_type_is_400(self, client):
        response = client.get("/api/customers", params={"type": "Gold"})

        assert response.status_code == 400


@pytest.mark.api
class TestListVipCustomers:
    def test_lists_only_vips_ordered_by_name(self, client, create_customer):
        zed = create_customer(name="Zed Zimmer", email="zed@example.com")
        amy = create_customer(name="Amy Adams", email="amy@example.com")
        create_customer(name="Bob Brown", email="bob@example.com")
        client.post(f"/api/customers/{zed['id']}/promote")
        client.post(f"/api/customers/{amy['id']}/promote")

        response = client.get("/api/customers/vip")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Amy Adams", "Zed Zimmer"]

    def test_empty_list(self, client):
        assert client.get("/api/customers/vip").json() == []


# =============================================================================
# Cross-cutting
# =============================================================================


@pytest.mark.api
class TestTraceAndErrors:
    def test_inbound_trace_id_is_echoed(self, client):
        response = client.get(
            f"/api/customers/{uuid7()}", headers={"X-Trace-Id": "trace-abc"}
        )

        assert response.headers["X-Trace-Id"] == "trace-abc"
        assert response.json()["trace_id"] == "trace-abc"

    def test_trace_id_generated_when_absent(self, client):
        response = client.get("/api/customers")

        assert response.headers["X-Trace-Id"]

    def test_unknown_route_is_problem_details_404(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json()["title"] == "Resource Not Found"

    def test_unexpected_exception_is_generic_500(self):
        class BrokenDispatcher:
            async def send(self, request, scope):
                raise RuntimeError("database password is hunter2")

        app.dependency_overrides[get_dispatcher] = lambda: BrokenDispatcher()
        try:
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.get(
                    f"/api/customers/{uuid7()}",
                    headers={"X-Trace-Id": "trace-500"},
                )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        body = response.json()
        assert body["title"] == "Internal Server Error"
        assert body["trace_id"] == "trace-500"
        assert response.headers["X-Trace-Id"] == "trace-500"
        assert "hunter2" not in response.text


@pytest.mark.api
class TestScenarios:
    def test_create_john_doe(self, client):
        response = client.post(
            "/api/customers",
            json={
                "name": "John Doe",
                "email": "john@example.com",
                "phone": "+1234567890",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["name"] == "John Doe"
        assert body["email"] == "john@example.com"
        assert body["phone"] == "+1234567890"
        assert body["type"] == "Regular"
        assert body["status"] == "Active"

    def test_get_is_idempotent(self, client, create_customer):
        created = create_customer()
        url = f"/api/customers/{created['id']}"

        first = client.get(url)
        second = client.get(url)

        assert first.content == second.content

    def test_promote_twice_keeps_vip(self, client, create_customer):
        created = create_customer()
        url = f"/api/customers/{created['id']}"

        client.post(f"{url}/promote")
        client.post(f"{url}/promote")

        assert client.get(url).json()["type"] == "Vip"
