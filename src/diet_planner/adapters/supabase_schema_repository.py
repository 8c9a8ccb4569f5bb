"""Supabase RPC wrappers used by the two-week migration."""

from dataclasses import dataclass

from supabase import Client

from diet_planner.services.migration import SchemaRepository


@dataclass
class SupabaseSchemaRepository(SchemaRepository):
    """Calls the check_column_exists and execute_sql server procedures."""

    client: Client

    def column_exists(self, table_name: str, column_name: str) -> bool:
        response = self.client.rpc(
            "check_column_exists",
            {"table_name": table_name, "column_name": column_name},
        ).execute()
        return _read_exists(response.data)

    def execute_sql(self, sql: str) -> None:
        self.client.rpc("execute_sql", {"sql": sql}).execute()


def _read_exists(data: object) -> bool:
    # The procedure may return a scalar, a row, or a single-row list.
    if isinstance(data, list):
        return _read_exists(data[0]) if data else False
    if isinstance(data, dict):
        return bool(data.get("exists", False))
    return bool(data)
