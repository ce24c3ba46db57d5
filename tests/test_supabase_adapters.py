"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import date

from health_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from health_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from health_tracker.adapters.supabase_history_repository import (
    SupabaseHistoryRepository,
)
from health_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from health_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from health_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from health_tracker.domain.enums import (
    ActivityLevel,
    ExerciseType,
    Gender,
    Goal,
    MealType,
)
from health_tracker.domain.food import NewFoodItem
from health_tracker.domain.models import UserProfile


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "update": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_columns: str | None = None
    last_upsert_conflict: str | None = None
    last_filters: list[tuple[str, str, object]] = field(default_factory=list)
    orders: list[tuple[str, bool]] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, columns: str = "*") -> "FakeTable":
        self._action = "select"
        self.last_columns = columns
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def upsert(  # type: ignore[no-untyped-def]
        self, payload, on_conflict: str = ""
    ) -> "FakeTable":
        self._action = "upsert"
        self.last_payload = payload
        self.last_upsert_conflict = on_conflict
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("eq", column, value))
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("gte", column, value))
        return self

    def lte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("lte", column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.orders.append((column, desc))
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.actions.append(action)
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _user_row(**overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "id": 1,
        "email": "ada@example.com",
        "name": "Ada",
        "password": "$2b$10$hash",
        "created_at": "2025-10-01T08:00:00+00:00",
    }
    row.update(overrides)
    return row


def test_supabase_user_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    users_table = client.table("users")
    users_table.queue("insert", [_user_row()])
    users_table.queue("select", [_user_row()])
    users_table.queue("update", [_user_row(name="Ada L")])

    repository = SupabaseUserRepository(client)
    created = repository.create_user("ada@example.com", "$2b$10$hash", "Ada")
    fetched = repository.get_by_email("ada@example.com")
    renamed = repository.update_name(1, "Ada L")

    assert created.id == 1
    assert created.password_hash == "$2b$10$hash"
    assert fetched is not None
    assert fetched.created_at is not None
    assert renamed is not None
    assert renamed.name == "Ada L"
    assert repository.get_by_id(2) is None


def test_supabase_profile_repository_upserts_on_user_id() -> None:
    client = FakeSupabaseClient()
    table = client.table("user_profiles")
    row = {
        "user_id": 4,
        "age": 41,
        "gender": "female",
        "height": 170,
        "weight": 65.5,
        "activity_level": "very-active",
        "goal": "gain",
        "target_weight": None,
        "unit_system": "imperial",
        "use_custom_macros": 0,
        "custom_calories": 0,
        "custom_protein": 0,
        "custom_carbs": 0,
        "custom_fat": 0,
        "updated_at": "2025-10-01T08:00:00+00:00",
    }
    table.queue("upsert", [row])
    table.queue("select", [row])

    repository = SupabaseProfileRepository(client)
    saved = repository.upsert_profile(
        UserProfile(
            user_id=4,
            age=41,
            gender=Gender.FEMALE,
            height_cm=170,
            weight_kg=65.5,
            activity_level=ActivityLevel.VERY_ACTIVE,
            goal=Goal.GAIN,
        )
    )
    fetched = repository.get_profile(4)

    assert table.last_upsert_conflict == "user_id"
    assert saved.activity_level is ActivityLevel.VERY_ACTIVE
    assert fetched is not None
    assert fetched.use_custom_macros is False
    assert fetched.target_weight_kg is None


def test_supabase_food_repository_custom_food_and_entries() -> None:
    client = FakeSupabaseClient()
    items_table = client.table("food_items")
    entries_table = client.table("food_entries")
    item_row = {
        "id": 9,
        "user_id": 1,
        "name": "Soup",
        "calories": 180,
        "protein": 9,
        "carbs": 20,
        "fat": 6,
        "serving_size": "1 bowl",
        "is_custom": 1,
    }
    entry_row = {
        "id": 30,
        "user_id": 1,
        "food_item_id": 9,
        "servings": 2,
        "meal_type": "lunch",
        "date": "2025-10-20",
        "created_at": "2025-10-20T12:00:00+00:00",
        "food_items": item_row,
    }
    items_table.queue("insert", [item_row])
    entries_table.queue("insert", [entry_row])
    entries_table.queue("select", [entry_row])

    repository = SupabaseFoodRepository(client)
    item = repository.create_custom_food(
        1, NewFoodItem("Soup", 180, 9, 20, 6, "1 bowl")
    )
    entry = repository.create_entry(1, item.id, 2, MealType.LUNCH, date(2025, 10, 20))
    listed = repository.list_entries(1, date(2025, 10, 19), date(2025, 10, 21))

    assert item.is_custom is True
    assert entry.meal_type is MealType.LUNCH
    assert listed[0].food_item is not None
    assert listed[0].food_item.name == "Soup"
    assert ("gte", "date", "2025-10-19") in entries_table.last_filters
    assert ("lte", "date", "2025-10-21") in entries_table.last_filters
    assert entries_table.orders[-1] == ("created_at", True)


def test_supabase_food_repository_update_miss_returns_none() -> None:
    client = FakeSupabaseClient()
    table = client.table("food_entries")

    repository = SupabaseFoodRepository(client)
    result = repository.update_entry(1, 99, {"servings": 3})

    assert result is None
    assert table.last_payload == {"servings": 3}
    assert ("eq", "user_id", 1) in table.last_filters


def test_supabase_exercise_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("exercises")
    table.queue(
        "insert",
        [
            {
                "id": 5,
                "user_id": 1,
                "name": "Knee ups",
                "type": "knees-over-toes",
                "duration": 15,
                "calories_burned": 60,
                "date": "2025-10-20",
                "notes": "",
            }
        ],
    )

    repository = SupabaseExerciseRepository(client)
    entry = repository.create_entry(
        1, "Knee ups", ExerciseType.KNEES_OVER_TOES, 15, 60, date(2025, 10, 20), None
    )
    repository.delete_entry(1, entry.id)

    assert entry.type is ExerciseType.KNEES_OVER_TOES
    assert entry.notes is None
    assert table.last_payload["type"] == "knees-over-toes"
    assert table.actions == ["insert", "delete"]


def test_supabase_weight_repository_orders_newest_first() -> None:
    client = FakeSupabaseClient()
    table = client.table("weight_history")
    table.queue(
        "select",
        [
            {"id": 2, "user_id": 1, "weight": "71.2", "date": "2025-10-02"},
            {"id": 1, "user_id": 1, "weight": 71.9, "date": "2025-10-01"},
        ],
    )

    repository = SupabaseWeightRepository(client)
    entries = repository.list_entries(1, 30)

    assert [entry.weight_kg for entry in entries] == [71.2, 71.9]
    assert table.orders == [("date", True)]
    assert not any(op == "gte" for op, _, _ in table.last_filters)


def test_supabase_history_repository_maps_rows() -> None:
    client = FakeSupabaseClient()
    client.table("food_entries").queue(
        "select",
        [
            {
                "date": "2025-10-20",
                "servings": 2,
                "food_items": {"calories": 200, "protein": 10, "carbs": None},
            },
            {"date": "2025-10-21", "servings": None, "food_items": None},
        ],
    )
    client.table("exercises").queue(
        "select",
        [
            {"date": "2025-10-20", "calories_burned": 150, "duration": 30},
            {"date": "2025-10-21", "calories_burned": "220", "duration": None},
        ],
    )
    client.table("weight_history").queue(
        "select",
        [
            {"date": "2025-10-20", "weight": 60.0},
            {"date": "2025-10-20", "weight": 61.5},
        ],
    )

    repository = SupabaseHistoryRepository(client)
    start, end = date(2025, 10, 19), date(2025, 10, 25)
    nutrition = repository.list_nutrition(1, start, end)
    exercise = repository.list_exercise(1, start, end)
    weights = repository.list_weights(1, start, end)

    assert nutrition[0].calories_per_serving == 200
    assert nutrition[0].carbs_per_serving is None
    assert nutrition[1].servings is None
    assert nutrition[1].calories_per_serving is None
    assert exercise[0].duration_minutes == 30
    assert exercise[1].calories_burned == 220
    assert exercise[1].duration_minutes == 0
    assert [sample.weight_kg for sample in weights] == [60.0, 61.5]
    assert client.table("weight_history").orders == [
        ("date", False),
        ("created_at", False),
    ]
