"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import SimpleNamespace
from uuid import UUID, uuid4

from diet_planner.adapters.supabase_auth_client import (
    SupabaseAuthClient,
    SupabaseProfileRepository,
)
from diet_planner.adapters.supabase_completion_repository import (
    SupabaseCompletionRepository,
)
from diet_planner.adapters.supabase_plan_repository import SupabasePlanRepository
from diet_planner.adapters.supabase_schema_repository import SupabaseSchemaRepository
from diet_planner.domain.completions import FoodCompletion, MealCompletion
from diet_planner.domain.plans import NewFoodItem


@dataclass
class FakeResponse:
    data: object


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": [], "upsert": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_on_conflict: str | None = None
    executed: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def upsert(self, payload, on_conflict: str = "") -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.executed.append(action)
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeRpc:
    data: object

    def execute(self) -> FakeResponse:
        return FakeResponse(data=self.data)


@dataclass
class FakeAuth:
    users: dict[str, str] = field(default_factory=dict)

    def get_user(self, jwt: str) -> SimpleNamespace:
        if jwt not in self.users:
            raise ValueError("invalid JWT")
        return SimpleNamespace(user=SimpleNamespace(id=self.users[jwt]))


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)
    rpc_results: dict[str, object] = field(default_factory=dict)
    rpc_calls: list[tuple[str, dict[str, object]]] = field(default_factory=list)
    auth: FakeAuth = field(default_factory=FakeAuth)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]

    def rpc(self, name: str, params: dict[str, object]) -> FakeRpc:
        self.rpc_calls.append((name, params))
        return FakeRpc(self.rpc_results.get(name))


def _food_row(meal_id: str, **overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "id": 42,
        "diet_meal_id": meal_id,
        "food_name": "Oats",
        "calories": 150,
        "carbohydrates": "27.5",
        "sugars": None,
        "protein": 5,
        "fat": 3,
        "quantity": 40,
        "unit": "g",
        "completed": False,
        "week": 1,
    }
    row.update(overrides)
    return row


def test_plan_repository_reads_template() -> None:
    client = FakeSupabaseClient()
    template_id = str(uuid4())
    client.table("diet_plans").queue(
        "select",
        [
            {
                "id": template_id,
                "name": "Lean",
                "description": "High protein",
                "owner_id": None,
                "is_template": True,
                "created_at": "2024-01-01T00:00:00+00:00",
            }
        ],
    )

    template = SupabasePlanRepository(client).get_template(UUID(template_id))

    assert template is not None
    assert template.is_template is True
    assert template.owner_id is None
    assert template.created_at == datetime(2024, 1, 1, tzinfo=UTC)
    assert ("is_template", True) in client.table("diet_plans").last_filters


def test_plan_repository_missing_rows_return_none() -> None:
    repository = SupabasePlanRepository(FakeSupabaseClient())

    assert repository.get_plan(uuid4()) is None
    assert repository.get_template(uuid4()) is None
    assert repository.get_food_item(42) is None
    assert repository.list_days(uuid4()) == []


def test_plan_repository_creates_user_plan() -> None:
    client = FakeSupabaseClient()
    owner_id = uuid4()
    plan_id = str(uuid4())
    table = client.table("diet_plans")
    table.queue(
        "insert",
        [
            {
                "id": plan_id,
                "name": "Lean",
                "description": None,
                "owner_id": str(owner_id),
                "is_template": False,
                "created_at": "2024-02-01T10:00:00+00:00",
            }
        ],
    )

    plan = SupabasePlanRepository(client).create_plan(
        "Lean", None, owner_id, datetime(2024, 2, 1, 10, tzinfo=UTC)
    )

    assert plan.owner_id == owner_id
    assert table.last_payload == {
        "name": "Lean",
        "description": None,
        "owner_id": str(owner_id),
        "is_template": False,
        "created_at": "2024-02-01T10:00:00+00:00",
    }


def test_plan_repository_insert_without_row_raises() -> None:
    repository = SupabasePlanRepository(FakeSupabaseClient())

    try:
        repository.create_meal(uuid4(), "lunch")
    except RuntimeError as exc:
        assert "Failed to create meal" in str(exc)
    else:
        raise AssertionError("Expected RuntimeError")


def test_plan_repository_creates_day_and_meal() -> None:
    client = FakeSupabaseClient()
    plan_id = str(uuid4())
    day_id = str(uuid4())
    client.table("diet_days").queue(
        "insert",
        [
            {
                "id": day_id,
                "diet_plan_id": plan_id,
                "day_of_week": "Monday",
                "total_calories": "1850",
            }
        ],
    )
    client.table("diet_meals").queue(
        "insert",
        [{"id": str(uuid4()), "diet_day_id": day_id, "meal_type": "breakfast"}],
    )
    repository = SupabasePlanRepository(client)

    day = repository.create_day(UUID(plan_id), "Monday", 1850)
    meal = repository.create_meal(day.id, "breakfast")

    assert day.total_calories == 1850.0
    assert meal.day_id == UUID(day_id)
    assert client.table("diet_meals").last_payload == {
        "diet_day_id": day_id,
        "meal_type": "breakfast",
    }


def test_plan_repository_food_items() -> None:
    client = FakeSupabaseClient()
    meal_id = str(uuid4())
    table = client.table("diet_food_items")
    table.queue("select", [_food_row(meal_id), _food_row(meal_id, week=None)])
    table.queue("insert", [_food_row(meal_id, week=2)])
    repository = SupabasePlanRepository(client)

    items = repository.list_food_items(UUID(meal_id))
    created = repository.create_food_item(
        UUID(meal_id),
        NewFoodItem(
            food_name="Oats",
            calories=150,
            carbohydrates=27.5,
            sugars=None,
            protein=5,
            fat=3,
            quantity=40,
            unit="g",
            completed=False,
            week=2,
        ),
    )

    assert items[0].id == 42
    assert items[0].carbohydrates == 27.5
    assert items[1].week == 1
    assert created.week == 2
    assert table.last_payload["diet_meal_id"] == meal_id
    assert table.last_payload["week"] == 2


def test_plan_repository_week_one_insert_leaves_week_to_default() -> None:
    client = FakeSupabaseClient()
    meal_id = str(uuid4())
    table = client.table("diet_food_items")
    table.queue("insert", [_food_row(meal_id, id=7, food_name="Coffee", week=None)])

    created = SupabasePlanRepository(client).create_food_item(
        UUID(meal_id),
        NewFoodItem(
            food_name="Coffee",
            calories=5,
            carbohydrates=None,
            sugars=None,
            protein=None,
            fat=None,
            quantity=1,
            unit="cup",
            completed=False,
            week=1,
        ),
    )

    assert created.id == 7
    assert created.week == 1
    assert "week" not in table.last_payload


def test_plan_repository_creates_template() -> None:
    client = FakeSupabaseClient()
    table = client.table("diet_plans")
    table.queue(
        "insert",
        [
            {
                "id": str(uuid4()),
                "name": "Seeded",
                "description": None,
                "owner_id": None,
                "is_template": True,
                "created_at": "2024-02-01T10:00:00+00:00",
            }
        ],
    )

    template = SupabasePlanRepository(client).create_template(
        "Seeded", None, datetime(2024, 2, 1, 10, tzinfo=UTC)
    )

    assert template.is_template is True
    assert table.last_payload == {
        "name": "Seeded",
        "description": None,
        "owner_id": None,
        "is_template": True,
        "created_at": "2024-02-01T10:00:00+00:00",
    }


def test_plan_repository_sets_completed_flag() -> None:
    client = FakeSupabaseClient()

    SupabasePlanRepository(client).set_food_item_completed(42, True)

    table = client.table("diet_food_items")
    assert table.last_payload == {"completed": True}
    assert table.last_filters == [("id", "42")]


def test_completion_repository_upserts_on_scope() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseCompletionRepository(client)
    user_id = uuid4()
    plan_id = uuid4()
    completed_at = datetime(2024, 3, 1, 7, 30, tzinfo=UTC)

    repository.upsert_meal_completion(
        MealCompletion(
            user_id=user_id,
            diet_plan_id=plan_id,
            day="week2_Friday",
            meal_type="snack",
            completed=True,
            completed_at=completed_at,
        )
    )

    table = client.table("meal_completions")
    assert table.last_on_conflict == "user_id,diet_plan_id,day,meal_type"
    assert table.last_payload == {
        "user_id": str(user_id),
        "diet_plan_id": str(plan_id),
        "day": "week2_Friday",
        "meal_type": "snack",
        "completed": True,
        "completed_at": "2024-03-01T07:30:00+00:00",
    }


def test_completion_repository_food_records() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseCompletionRepository(client)
    user_id = uuid4()
    item_id = 42
    table = client.table("user_food_item_completion")
    table.queue(
        "select",
        [
            {
                "user_id": str(user_id),
                "meal_food_item_id": item_id,
                "completed": False,
                "completed_at": None,
            }
        ],
    )

    repository.upsert_food_completion(
        FoodCompletion(user_id, item_id, completed=False, completed_at=None)
    )
    record = repository.get_food_completion(user_id, item_id)

    assert table.last_on_conflict == "user_id,meal_food_item_id"
    assert table.last_payload["meal_food_item_id"] == 42
    assert table.executed == ["upsert", "select"]
    assert record == FoodCompletion(user_id, item_id, False, None)


def test_schema_repository_reads_exists_flag() -> None:
    client = FakeSupabaseClient(rpc_results={"check_column_exists": [{"exists": True}]})
    repository = SupabaseSchemaRepository(client)

    assert repository.column_exists("diet_food_items", "week") is True
    assert client.rpc_calls == [
        (
            "check_column_exists",
            {"table_name": "diet_food_items", "column_name": "week"},
        )
    ]

    client.rpc_results["check_column_exists"] = {"exists": False}
    assert repository.column_exists("diet_food_items", "week") is False
    client.rpc_results["check_column_exists"] = []
    assert repository.column_exists("diet_food_items", "week") is False


def test_schema_repository_executes_sql() -> None:
    client = FakeSupabaseClient()

    SupabaseSchemaRepository(client).execute_sql("SELECT 1")

    assert client.rpc_calls == [("execute_sql", {"sql": "SELECT 1"})]


def test_auth_client_resolves_user() -> None:
    user_id = uuid4()
    client = FakeSupabaseClient(auth=FakeAuth({"good": str(user_id)}))
    auth_client = SupabaseAuthClient(client)

    assert auth_client.get_user_id("good") == user_id
    assert auth_client.get_user_id("bad") is None


def test_profile_repository_reads_role() -> None:
    client = FakeSupabaseClient()
    client.table("profiles").queue("select", [{"role": "admin"}])
    repository = SupabaseProfileRepository(client)

    assert repository.get_role(uuid4()) == "admin"
    assert repository.get_role(uuid4()) is None
