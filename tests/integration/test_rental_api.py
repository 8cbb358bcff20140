"""Integration tests for the rental service HTTP API."""

import pytest


@pytest.fixture
def host_headers(host, auth_headers):
    return auth_headers(host)


@pytest.fixture
def renter_headers(renter, auth_headers):
    return auth_headers(renter)


@pytest.fixture
def created_space(rental_client, host_headers, space_payload):
    response = rental_client.post("/api/spaces/", json=space_payload, headers=host_headers)
    assert response.status_code == 201
    return response.json()["data"]


def add_tenant(client, headers, space_id, **overrides):
    payload = {
        "first_name": "Tom",
        "last_name": "Tenant",
        "email": "tom@example.com",
        "space_id": space_id,
        "start_date": "2024-01-01",
        "end_date": "2024-06-01",
        "rent_amount": 500,
    }
    payload.update(overrides)
    return client.post("/api/tenants/", json=payload, headers=headers)


class TestEnvelope:
    """Tests for the response envelope and auth boundary."""

    def test_health_is_wrapped(self, rental_client):
        response = rental_client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "Success"
        assert body["status_code"] == "100"
        assert body["data"] == {"status": "healthy"}

    def test_missing_token_is_rejected(self, rental_client):
        response = rental_client.get("/api/spaces/host/my-spaces")

        assert response.status_code in (401, 403)
        assert response.json()["status"] == "Failure"

    def test_garbage_token_is_rejected(self, rental_client):
        response = rental_client.get(
            "/api/spaces/host/my-spaces", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401
        assert response.json()["status_code"] == "300"

    def test_invalid_body_uses_failure_envelope(self, rental_client, host_headers):
        response = rental_client.post(
            "/api/spaces/", json={"capacity": "lots"}, headers=host_headers)

        assert response.status_code == 422
        body = response.json()
        assert body["status"] == "Failure"
        assert body["status_code"] == "202"


class TestSpacesApi:
    """Tests for /api/spaces."""

    def test_create_and_read_space(self, rental_client, host_headers, created_space):
        response = rental_client.get(
            f"/api/spaces/{created_space['space_id']}", headers=host_headers)

        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Sunny room"

    def test_missing_field_is_400(self, rental_client, host_headers, space_payload):
        payload = {**space_payload, "zip_code": ""}

        response = rental_client.post("/api/spaces/", json=payload, headers=host_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Missing required field: zip_code"
        assert body["data"] == {"field": "zip_code"}

    def test_is_active_string_on_update(self, rental_client, host_headers, created_space):
        response = rental_client.put(
            f"/api/spaces/{created_space['space_id']}",
            json={"is_active": "false"},
            headers=host_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["is_active"] is False

    def test_other_host_gets_403(self, rental_client, renter_headers, created_space):
        response = rental_client.put(
            f"/api/spaces/{created_space['space_id']}",
            json={"title": "Mine"},
            headers=renter_headers,
        )

        assert response.status_code == 403
        assert response.json()["status_code"] == "206"

    def test_metrics_and_conflicting_delete(self, rental_client, host_headers, created_space):
        space_id = created_space["space_id"]
        assert add_tenant(rental_client, host_headers, space_id).status_code == 201

        metrics = rental_client.get("/api/spaces/host/metrics", headers=host_headers)
        assert metrics.json()["data"] == {
            "total_spaces": 1,
            "active_spaces": 1,
            "total_tenants": 1,
            "monthly_revenue": 500.0,
        }

        response = rental_client.delete(f"/api/spaces/{space_id}", headers=host_headers)
        assert response.status_code == 409
        body = response.json()
        assert body["status_code"] == "207"
        assert body["data"] == {"activeTenantsCount": 1}

        still_there = rental_client.get(f"/api/spaces/{space_id}", headers=host_headers)
        assert still_there.status_code == 200

    def test_delete_after_tenant_removed(self, rental_client, host_headers, created_space):
        space_id = created_space["space_id"]
        tenant = add_tenant(rental_client, host_headers, space_id).json()["data"]
        rental_client.delete(f"/api/tenants/{tenant['tenant_id']}", headers=host_headers)

        response = rental_client.delete(f"/api/spaces/{space_id}", headers=host_headers)

        assert response.status_code == 200
        assert response.json()["data"]["is_deleted"] is True
        gone = rental_client.get(f"/api/spaces/{space_id}", headers=host_headers)
        assert gone.status_code == 404

    def test_browse_lists_active_spaces(self, rental_client, renter_headers, created_space):
        response = rental_client.get("/api/spaces/", params={"city": "Springfield"}, headers=renter_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total"] == 1
        assert data["spaces"][0]["space_id"] == created_space["space_id"]


class TestTenantsApi:
    """Tests for /api/tenants."""

    def test_equal_dates_are_400(self, rental_client, host_headers, created_space):
        response = add_tenant(
            rental_client, host_headers, created_space["space_id"],
            start_date="2024-01-01", end_date="2024-01-01")

        assert response.status_code == 400

    def test_list_and_metrics(self, rental_client, host_headers, created_space):
        add_tenant(rental_client, host_headers, created_space["space_id"])

        listing = rental_client.get("/api/tenants/", headers=host_headers).json()["data"]
        assert listing["total"] == 1
        assert listing["tenants"][0]["space_title"] == "Sunny room"

        metrics = rental_client.get("/api/tenants/metrics", headers=host_headers).json()["data"]
        assert metrics["active_tenants"] == 1
        assert metrics["monthly_rent"] == 500.0

    def test_unparseable_date_on_update_is_422(self, rental_client, host_headers, created_space):
        tenant = add_tenant(rental_client, host_headers, created_space["space_id"]).json()["data"]

        response = rental_client.put(
            f"/api/tenants/{tenant['tenant_id']}",
            json={"end_date": "not-a-date"},
            headers=host_headers,
        )

        assert response.status_code == 422
        assert response.json()["status_code"] == "202"

        stored = rental_client.get(f"/api/tenants/{tenant['tenant_id']}", headers=host_headers)
        assert stored.json()["data"]["end_date"] == "2024-06-01"

    def test_unparseable_date_on_create_is_422(self, rental_client, host_headers, created_space):
        response = add_tenant(
            rental_client, host_headers, created_space["space_id"], end_date="2024-13-45")

        assert response.status_code == 422

    def test_other_host_cannot_delete_tenant(self, rental_client, host_headers, renter_headers, created_space):
        tenant = add_tenant(rental_client, host_headers, created_space["space_id"]).json()["data"]

        response = rental_client.delete(f"/api/tenants/{tenant['tenant_id']}", headers=renter_headers)

        assert response.status_code == 403


class TestBookingsApi:
    """Tests for /api/bookings."""

    def test_booking_scenario(self, rental_client, host_headers, renter_headers, created_space):
        response = rental_client.post(
            "/api/bookings/",
            json={"space_id": created_space["space_id"],
                  "start_date": "2024-03-01", "end_date": "2024-03-05"},
            headers=renter_headers,
        )
        assert response.status_code == 201
        booking = response.json()["data"]
        assert booking["booking_status"] == "pending"

        url = f"/api/bookings/{booking['booking_id']}/status"
        canceled = rental_client.put(url, json={"booking_status": "canceled"}, headers=renter_headers)
        assert canceled.status_code == 200
        assert canceled.json()["data"]["booking_status"] == "canceled"

        confirmed = rental_client.put(url, json={"booking_status": "confirmed"}, headers=renter_headers)
        assert confirmed.status_code == 403

        hosted = rental_client.get("/api/bookings/host", headers=host_headers).json()["data"]
        assert hosted["bookings"][0]["email"] == "renter@example.com"

    def test_host_booking_own_space_is_409(self, rental_client, host_headers, created_space):
        response = rental_client.post(
            "/api/bookings/",
            json={"space_id": created_space["space_id"],
                  "start_date": "2024-03-01", "end_date": "2024-03-05"},
            headers=host_headers,
        )

        assert response.status_code == 409
        assert response.json()["message"] == "You cannot book your own space"

    def test_unknown_status_is_rejected(self, rental_client, renter_headers, host_headers, created_space):
        booking = rental_client.post(
            "/api/bookings/",
            json={"space_id": created_space["space_id"],
                  "start_date": "2024-03-01", "end_date": "2024-03-05"},
            headers=renter_headers,
        ).json()["data"]

        response = rental_client.put(
            f"/api/bookings/{booking['booking_id']}/status",
            json={"booking_status": "approved"},
            headers=host_headers,
        )

        assert response.status_code == 422
