"""Lesson, subject and attendance response shapes."""
from typing import List, Optional, Union

from pydantic import Field

from .base import Link, SynergiaModel, SynergiaResponse


class Lesson(SynergiaModel):
    id: int
    teacher: Link
    subject: Link
    class_: Link = Field(alias='Class')


class ResponseLesson(SynergiaResponse):
    lesson: Lesson


class LessonSubject(SynergiaModel):
    id: int
    name: str
    num: int = Field(alias='No')
    short: str
    is_extra_curricular: Optional[bool] = None
    is_block_lesson: Optional[bool] = None


class ResponseLessonSubject(SynergiaResponse):
    subject: Optional[LessonSubject] = None


class Attendance(SynergiaModel):
    # Numeric for lesson attendances, "t<id>" style strings for trips
    id: Union[int, str]
    lesson: Link
    student: Link
    date: str
    add_date: str
    lesson_no: int
    semester: int
    type: Link
    added_by: Link
    trip: Optional[Link] = None


class ResponseAttendances(SynergiaResponse):
    attendances: List[Attendance]


class AttendanceType(SynergiaModel):
    id: int
    name: str
    short: str
    standard: bool
    color_rgb: Optional[str] = Field(default=None, alias='ColorRGB')
    is_presence_kind: bool
    order: int
    identifier: str
    standard_type: Optional[Link] = None
    color: Optional[Link] = None


class ResponseAttendancesType(SynergiaResponse):
    types: List[AttendanceType]
