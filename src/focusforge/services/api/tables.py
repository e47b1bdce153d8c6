"""Table endpoints of the hosted database (PostgREST conventions)."""

from typing import Any

from focusforge.services.api.client import APIClient


def eq(value: Any) -> str:
    """Build an equality filter value, e.g. ``{"user_id": eq(uid)}``."""
    if isinstance(value, bool):
        value = "true" if value else "false"
    return f"eq.{value}"


def parse_content_range(header: str | None) -> int:
    """Extract the total from a ``Content-Range`` header.

    ``"0-24/573"`` and ``"*/573"`` both give 573. A missing header or an
    unknown total (``"*/*"``) gives 0.
    """
    if not header or "/" not in header:
        return 0
    total = header.rsplit("/", 1)[1].strip()
    if not total.isdigit():
        return 0
    return int(total)


class TablesAPI:
    """Row operations against named tables plus remote procedures."""

    def __init__(self, client: APIClient):
        self.client = client

    async def select(
        self,
        table: str,
        *,
        filters: dict[str, str] | None = None,
        order: str | None = None,
        columns: str = "*",
    ) -> list[dict]:
        """Select rows matching *filters*, optionally ordered (``"position.asc"``)."""
        params: dict[str, Any] = {"select": columns}
        if filters:
            params.update(filters)
        if order:
            params["order"] = order

        response = await self.client.get(f"/{table}", params=params)
        return response.json()

    async def count(self, table: str, *, filters: dict[str, str] | None = None) -> int:
        """Count rows matching *filters* without transferring them."""
        params: dict[str, Any] = {"select": "*"}
        if filters:
            params.update(filters)

        response = await self.client.head(
            f"/{table}", params=params, headers={"Prefer": "count=exact"}
        )
        return parse_content_range(response.headers.get("Content-Range"))

    async def insert(self, table: str, row: dict[str, Any]) -> list[dict]:
        """Insert one row and return the stored representation."""
        response = await self.client.post(
            f"/{table}", json=row, headers={"Prefer": "return=representation"}
        )
        return response.json()

    async def update(
        self, table: str, values: dict[str, Any], *, filters: dict[str, str]
    ) -> list[dict]:
        """Update rows matching *filters*; returns the updated rows."""
        response = await self.client.patch(
            f"/{table}",
            json=values,
            params=filters,
            headers={"Prefer": "return=representation"},
        )
        return response.json()

    async def delete(self, table: str, *, filters: dict[str, str]) -> None:
        """Delete rows matching *filters*."""
        await self.client.delete(f"/{table}", params=filters)

    async def rpc(self, function: str, params: dict[str, Any]) -> Any:
        """Call a remote procedure."""
        response = await self.client.post(f"/rpc/{function}", json=params)
        if not response.content:
            return None
        return response.json()
