"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
State tracks the bearer token and the shipment ids returned by creation
endpoints so follow-up operations can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class CoordinatorState:
    """Tracks state for a single simulated coordinator session."""

    username: str | None = None
    password: str | None = None
    token: str | None = None
    shipment_ids: list[str] = field(default_factory=list)
    tracking_numbers: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}
