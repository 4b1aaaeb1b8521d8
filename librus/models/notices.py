"""School notice (announcement) response shapes."""
from typing import List

from .base import Link, SynergiaModel, SynergiaResponse
from ..core.content import strip_markup


class SchoolNotice(SynergiaModel):
    id: str
    start_date: str
    end_date: str
    subject: str
    content: str
    added_by: Link
    creation_date: str
    was_read: bool

    @property
    def text(self) -> str:
        """Notice body (an HTML fragment) reduced to plain text."""
        return strip_markup(self.content)


class ResponseSchoolNotices(SynergiaResponse):
    school_notices: List[SchoolNotice]
