"""Homework (class event) response shapes."""
from typing import List, Optional

from pydantic import Field

from .base import Link, SynergiaModel, SynergiaResponse


class Classroom(SynergiaModel):
    id: int
    symbol: str
    name: str
    size: int


class Homework(SynergiaModel):
    id: int
    content: str
    date: str
    category: Link
    lesson_no: Optional[str] = None
    time_from: str
    time_to: str
    created_by: Link
    class_: Optional[Link] = Field(default=None, alias='Class')
    subject: Optional[Link] = None
    add_date: str
    classroom: Optional[Classroom] = None


class ResponseHomeworks(SynergiaResponse):
    homeworks: List[Homework] = Field(alias='HomeWorks')
