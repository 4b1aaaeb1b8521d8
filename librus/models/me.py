"""Current account response shapes."""
from typing import List, Optional

from pydantic import Field

from .base import Link, SynergiaModel, SynergiaResponse


class Account(SynergiaModel):
    id: int
    user_id: int
    first_name: str
    last_name: str
    email: str
    group_id: int
    is_active: bool
    login: str
    is_premium: bool
    is_premium_demo: bool
    expired_premium_date: Optional[int] = None
    premium_addons: List[str] = []


class MeUser(SynergiaModel):
    first_name: str
    last_name: str


class Me(SynergiaModel):
    account: Account
    refresh: int
    user: MeUser
    class_: Link = Field(alias='Class')


class ResponseMe(SynergiaResponse):
    me: Me
