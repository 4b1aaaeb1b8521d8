"""User response shapes."""
from typing import Optional

from pydantic import Field

from .base import Link, SynergiaModel, SynergiaResponse


class UserClass(Link):
    uuid: str = Field(alias='UUID')


class User(SynergiaModel):
    id: int
    account_id: str
    first_name: str
    last_name: str
    class_: Optional[UserClass] = Field(default=None, alias='Class')
    unit: Optional[Link] = None
    class_register_number: Optional[int] = None
    is_employee: bool
    group_id: int

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class ResponseUser(SynergiaResponse):
    user: Optional[User] = None
