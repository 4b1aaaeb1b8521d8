"""Messaging API response shapes.

Message bodies arrive base64 encoded; ``text`` decodes them.
"""
from typing import List, Optional

from pydantic import Field

from .base import MessagesModel
from ..core.content import decode_base64_text


class UnreadCounts(MessagesModel):
    inbox: int
    notes: int
    alerts: int
    substitutions: int
    absences: int
    justifications: int
    trash: int
    archive_inbox: int
    archive_notes: int
    archive_alerts: int
    archive_substitutions: int
    archive_absences: int
    archive_justifications: int
    archive_trash: int


class InboxMessage(MessagesModel):
    message_id: str
    sender_first_name: str
    sender_last_name: str
    sender_name: str
    topic: str
    content: str
    send_date: str
    read_date: Optional[str] = None
    is_any_file_attached: bool
    tags: List[str]
    category: Optional[str] = None

    @property
    def text(self) -> Optional[str]:
        return decode_base64_text(self.content)


class OutboxMessage(MessagesModel):
    message_id: str
    receiver_first_name: str
    receiver_last_name: str
    receiver_name: str
    topic: str
    content: str
    send_date: str
    is_any_file_attached: bool
    tags: List[str]
    category: Optional[str] = None

    @property
    def text(self) -> Optional[str]:
        return decode_base64_text(self.content)


class Attachment(MessagesModel):
    id: str
    name: str
    size: Optional[int] = None


class MessageDetail(MessagesModel):
    message_id: str
    sender_id: Optional[str] = None
    sender_first_name: str
    sender_last_name: str
    sender_name: str
    sender_group: Optional[str] = None
    topic: str
    message: str = Field(alias='Message')
    send_date: str
    read_date: Optional[str] = None
    attachments: List[Attachment]
    receivers_count: Optional[int] = None
    no_reply: Optional[int] = None
    archive: Optional[int] = None

    @property
    def text(self) -> Optional[str]:
        return decode_base64_text(self.message)
