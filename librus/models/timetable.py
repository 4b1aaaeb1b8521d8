"""Timetable response shapes."""
from typing import Dict, List, Optional

from .base import Link, SynergiaModel, SynergiaResponse


class TimetableEntry(SynergiaModel):
    lesson: Optional[Link] = None
    subject: Optional[Link] = None
    teacher: Optional[Link] = None
    classroom: Optional[Link] = None
    hour_from: Optional[str] = None
    hour_to: Optional[str] = None
    lesson_no: Optional[str] = None
    is_canceled: Optional[bool] = None
    is_substitution_class: Optional[bool] = None


class TimetablePages(SynergiaModel):
    next: str
    prev: str


class ResponseTimetable(SynergiaResponse):
    # Date ("YYYY-MM-DD") -> lesson slots -> entries in that slot
    timetable: Dict[str, List[List[TimetableEntry]]]
    pages: Optional[TimetablePages] = None

    def lessons_on(self, day: str) -> List[TimetableEntry]:
        """Flatten the entries scheduled on a given date."""
        return [entry for slot in self.timetable.get(day, []) for entry in slot]
