import enum
from typing import List

from pydantic import BaseModel


class RoleName(str, enum.Enum):
    admin = "admin"
    editor = "editor"
    viewer = "viewer"


class Actor(BaseModel):
    """The authenticated caller, as carried by the bearer token claims."""

    subject: str
    roles: List[RoleName] = []

    def has_role(self, *roles: RoleName) -> bool:
        return bool(set(self.roles) & set(roles))
