"""Response shapes for the academic and messaging APIs."""
from .base import DataEnvelope, Link, ResourceUrl
from .grades import (
    Grade,
    GradeCategory,
    GradeComment,
    ResponseGrades,
    ResponseGradesCategories,
    ResponseGradesComments,
)
from .homeworks import Classroom, Homework, ResponseHomeworks
from .lessons import (
    Attendance,
    AttendanceType,
    Lesson,
    LessonSubject,
    ResponseAttendances,
    ResponseAttendancesType,
    ResponseLesson,
    ResponseLessonSubject,
)
from .me import Account, Me, ResponseMe
from .messages import (
    Attachment,
    InboxMessage,
    MessageDetail,
    OutboxMessage,
    UnreadCounts,
)
from .notices import ResponseSchoolNotices, SchoolNotice
from .timetable import ResponseTimetable, TimetableEntry
from .users import ResponseUser, User

__all__ = [
    'DataEnvelope', 'Link', 'ResourceUrl',
    'Grade', 'GradeCategory', 'GradeComment',
    'ResponseGrades', 'ResponseGradesCategories', 'ResponseGradesComments',
    'Classroom', 'Homework', 'ResponseHomeworks',
    'Attendance', 'AttendanceType', 'Lesson', 'LessonSubject',
    'ResponseAttendances', 'ResponseAttendancesType',
    'ResponseLesson', 'ResponseLessonSubject',
    'Account', 'Me', 'ResponseMe',
    'Attachment', 'InboxMessage', 'MessageDetail', 'OutboxMessage', 'UnreadCounts',
    'ResponseSchoolNotices', 'SchoolNotice',
    'ResponseTimetable', 'TimetableEntry',
    'ResponseUser', 'User',
]
