"""Shipment dashboard load test scenarios.

Two stateful SequentialTaskSet journeys: a coordinator building and working
through a register of shipments, and a read-heavy dashboard session. Steps
execute in order — each depends on the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import listing_params, registration_data, shipment_changes, shipment_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CoordinatorState


class _CoordinatorJourney(SequentialTaskSet):
    def on_start(self):
        self.state = CoordinatorState()

    def _register_and_login(self):
        payload = registration_data()
        with self.client.post(
            "/api/auth/register",
            json=payload,
            catch_response=True,
            name="POST /api/auth/register",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Registration failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()
                return

        self.state.username = payload["username"]
        self.state.password = payload["password"]

        with self.client.post(
            "/api/auth/login",
            json={"username": self.state.username, "password": self.state.password},
            catch_response=True,
            name="POST /api/auth/login",
        ) as resp:
            if resp.status_code == 200:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Login failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    def _create_shipment(self):
        payload = shipment_data()
        with self.client.post(
            "/api/shipments",
            json=payload,
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/shipments",
        ) as resp:
            if resp.status_code == 201:
                self.state.shipment_ids.append(resp.json()["id"])
                self.state.tracking_numbers.append(payload["tracking_number"])
            else:
                resp.failure(f"Create shipment failed: {resp.status_code} — {extract_error_detail(resp)}")

    def _list(self, params=None):
        with self.client.get(
            "/api/shipments",
            params=params or {},
            headers=self.state.headers,
            catch_response=True,
            name="GET /api/shipments",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List shipments failed: {resp.status_code} — {extract_error_detail(resp)}")

    def _summary(self):
        with self.client.get(
            "/api/shipments/stats/summary",
            headers=self.state.headers,
            catch_response=True,
            name="GET /api/shipments/stats/summary",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Summary failed: {resp.status_code} — {extract_error_detail(resp)}")


class ShipmentRegisterJourney(_CoordinatorJourney):
    """Register -> Login -> Create x3 -> List -> Update -> Summary -> Duplicate create -> Delete."""

    @task
    def sign_up(self):
        self._register_and_login()

    @task
    def create_shipments(self):
        for _ in range(3):
            self._create_shipment()

    @task
    def list_shipments(self):
        self._list({"sortBy": "createdAt", "sortOrder": "desc"})

    @task
    def update_shipment(self):
        if not self.state.shipment_ids:
            self.interrupt()
            return
        shipment_id = random.choice(self.state.shipment_ids)
        with self.client.put(
            f"/api/shipments/{shipment_id}",
            json=shipment_changes(),
            headers=self.state.headers,
            catch_response=True,
            name="PUT /api/shipments/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update shipment failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def view_summary(self):
        self._summary()

    @task
    def duplicate_tracking_number_is_rejected(self):
        if not self.state.tracking_numbers:
            self.interrupt()
            return
        payload = {**shipment_data(), "tracking_number": self.state.tracking_numbers[0]}
        with self.client.post(
            "/api/shipments",
            json=payload,
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/shipments (duplicate)",
        ) as resp:
            if resp.status_code == 409:
                resp.success()
            else:
                resp.failure(f"Expected 409 for duplicate, got {resp.status_code}")

    @task
    def delete_shipment(self):
        if not self.state.shipment_ids:
            self.interrupt()
            return
        shipment_id = self.state.shipment_ids.pop()
        with self.client.delete(
            f"/api/shipments/{shipment_id}",
            headers=self.state.headers,
            catch_response=True,
            name="DELETE /api/shipments/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Delete shipment failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class DashboardBrowsingJourney(_CoordinatorJourney):
    """Register -> Login -> Create x10 -> Browse with filters and paging -> Summary."""

    @task
    def sign_up(self):
        self._register_and_login()

    @task
    def seed_register(self):
        for _ in range(10):
            self._create_shipment()

    @task
    def browse(self):
        for _ in range(5):
            self._list(listing_params())

    @task
    def view_summary(self):
        self._summary()

    @task
    def done(self):
        self.interrupt()


class CoordinatorUser(HttpUser):
    """Locust user simulating coordinators maintaining their register.

    Weighted task distribution:
    - 60% Shipment register journey (writes)
    - 40% Dashboard browsing journey (reads)
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        ShipmentRegisterJourney: 3,
        DashboardBrowsingJourney: 2,
    }


class DashboardReaderUser(HttpUser):
    """Read-heavy traffic: listing, filtering, paging and summary."""

    wait_time = between(0.2, 1.0)
    tasks = [DashboardBrowsingJourney]
