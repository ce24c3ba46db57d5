"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from health_tracker.adapters.rows import parse_datetime
from health_tracker.domain.models import UserRecord
from health_tracker.services.users import UserRepository

_COLUMNS = "id, email, name, password, created_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user accounts."""

    client: Client

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user for an email, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def get_by_id(self, user_id: int) -> UserRecord | None:
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def create_user(self, email: str, password_hash: str, name: str) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert({"email": email, "password": password_hash, "name": name})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_name(self, user_id: int, name: str) -> UserRecord | None:
        """Rename a user."""
        response = (
            self.client.table("users")
            .update({"name": name, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("id", user_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=int(row["id"]),
        email=str(row.get("email", "")),
        name=str(row.get("name", "")),
        password_hash=str(row.get("password", "")),
        created_at=parse_datetime(row.get("created_at")),
    )
