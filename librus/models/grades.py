"""Grade-related response shapes."""
from typing import List, Optional

from .base import Link, SynergiaModel, SynergiaResponse


class Grade(SynergiaModel):
    id: int
    lesson: Link
    subject: Link
    student: Link
    category: Link
    added_by: Link
    grade: str
    date: str
    add_date: str
    semester: int
    is_constituent: bool
    is_semester: bool
    is_semester_proposition: bool
    is_final: bool
    is_final_proposition: bool
    comments: Optional[List[Link]] = None
    improvement: Optional[Link] = None
    resit: Optional[Link] = None


class ResponseGrades(SynergiaResponse):
    grades: List[Grade]


class GradeCategory(SynergiaModel):
    id: int
    color: Link
    name: str
    adults_extramural: bool
    adults_daily: bool
    standard: bool
    is_read_only: str
    count_to_the_average: bool
    block_any_grades: bool
    obligation_to_perform: bool


class ResponseGradesCategories(SynergiaResponse):
    category: GradeCategory


class GradeComment(SynergiaModel):
    id: int
    added_by: Link
    grade: Link
    text: str


class ResponseGradesComments(SynergiaResponse):
    comment: Optional[GradeComment] = None
