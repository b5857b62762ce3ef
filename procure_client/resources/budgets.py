"""Budget envelope endpoints and client-side totals."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from ..api.client import ApiClient
from ..errors.internal import ParsingError
from ..utils.helpers import to_decimal


@dataclass(frozen=True)
class BudgetSummary:
    allocated: Decimal
    committed: Decimal
    spent: Decimal
    available: Decimal


def summarize_budgets(projects: Iterable[Mapping[str, Any]]) -> BudgetSummary:
    """Total the amounts of a budget project list.

    Missing or malformed amounts count as zero.
    """
    allocated = committed = spent = available = Decimal("0")
    for project in projects:
        allocated += to_decimal(project.get("allocated_amount"))
        committed += to_decimal(project.get("committed_amount"))
        spent += to_decimal(project.get("spent_amount"))
        available += to_decimal(project.get("available_amount"))
    return BudgetSummary(allocated, committed, spent, available)


class BudgetsAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    async def list(self) -> Any:
        return await self._client.get("/budgets/projects/")

    async def create(self, data: Mapping[str, Any]) -> Any:
        """Create a budget project; name, code and allocated_amount are required."""
        missing = [
            key
            for key in ("name", "code", "allocated_amount")
            if not str(data.get(key) or "").strip()
        ]
        if missing:
            raise ValueError(f"Missing required budget fields: {', '.join(missing)}")
        try:
            amount = Decimal(str(data["allocated_amount"]).strip())
        except InvalidOperation:
            raise ValueError("allocated_amount must be numeric") from None
        if not amount.is_finite():
            raise ValueError("allocated_amount must be numeric")
        body = dict(data)
        body["allocated_amount"] = float(amount)
        return await self._client.post("/budgets/projects/", body)

    async def update(self, project_id: int | str, data: Mapping[str, Any]) -> Any:
        return await self._client.patch(f"/budgets/projects/{project_id}/", dict(data))

    async def stats(self) -> Any:
        return await self._client.get("/budgets/stats/")

    async def summary(self) -> BudgetSummary:
        """Fetch the project list and total it."""
        projects = await self.list()
        if isinstance(projects, Mapping):
            projects = projects.get("results", [])
        if not isinstance(projects, list):
            raise ParsingError(
                "Unexpected budget list payload",
                data={"type": type(projects).__name__},
            )
        return summarize_budgets(p for p in projects if isinstance(p, Mapping))
