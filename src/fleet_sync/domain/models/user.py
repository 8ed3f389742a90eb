"""Authenticated user domain model."""

from pydantic import BaseModel, ConfigDict

ROLE_LEVELS = {
    "viewer": 1,
    "operator": 2,
    "admin": 3,
}


class User(BaseModel):
    """The user returned by the backend after login or a session probe."""

    model_config = ConfigDict(extra="allow")

    email: str | None = None
    name: str | None = None
    role: str = "viewer"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def has_permission(self, required_role: str) -> bool:
        """Whether this user's role ranks at least as high as ``required_role``."""
        return ROLE_LEVELS.get(self.role, 0) >= ROLE_LEVELS.get(required_role, 0)
