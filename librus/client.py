"""
LibrusClient - High-level async client for Librus Synergia.

Example:
    >>> async with await LibrusClient.from_env() as librus:
    ...     grades = await librus.grades()
    ...     for grade in grades.grades:
    ...         print(grade.date, grade.grade)
"""
from datetime import date
from typing import List, Optional, Type, TypeVar

from .core.api import (
    APIConfig,
    AsyncAPIClient,
    AsyncAuthService,
    RequestBuilder,
    ResponseHandler,
)
from .core.content import decode_base64_text, strip_markup
from .core.credentials import Credentials, CredentialsBuilder
from .core.logging import get_logger
from .core.session import LibrusSession
from .models import (
    InboxMessage,
    MessageDetail,
    OutboxMessage,
    ResponseAttendances,
    ResponseAttendancesType,
    ResponseGrades,
    ResponseGradesCategories,
    ResponseGradesComments,
    ResponseHomeworks,
    ResponseLesson,
    ResponseLessonSubject,
    ResponseMe,
    ResponseSchoolNotices,
    ResponseTimetable,
    ResponseUser,
    UnreadCounts,
)

T = TypeVar('T')


class ClientBuilder:
    """
    Fluent builder for LibrusClient.

    Example:
        >>> client = await (LibrusClient.builder()
        ...     .username("jan.kowalski")
        ...     .password("secret")
        ...     .build())
    """

    def __init__(self):
        self._credentials = CredentialsBuilder()
        self._config: Optional[APIConfig] = None

    def username(self, username: str) -> 'ClientBuilder':
        self._credentials.username(username)
        return self

    def password(self, password: str) -> 'ClientBuilder':
        self._credentials.password(password)
        return self

    def config(self, config: APIConfig) -> 'ClientBuilder':
        self._config = config
        return self

    async def build(self) -> 'LibrusClient':
        """
        Resolve credentials and log in.

        Raises:
            MissingCredentialError: If username or password was not set
            AuthenticationError: If the login was rejected
            TransportError: If the service could not be reached
        """
        credentials = self._credentials.build()
        return await LibrusClient.authenticate(credentials, config=self._config)


class LibrusClient:
    """
    High-level async client for Librus Synergia.

    Three ways to construct one:

    1. Environment variables (LIBRUS_USERNAME / LIBRUS_PASSWORD):
        >>> client = await LibrusClient.from_env()

    2. Explicit credentials:
        >>> client = await LibrusClient.login("username", "password")

    3. Builder:
        >>> client = await LibrusClient.builder().username("u").password("p").build()

    Messaging methods warm up the messaging backend on first use.
    """

    def __init__(self, session: LibrusSession):
        """
        Wrap an authenticated session.

        Use login(), from_env() or builder() instead of calling this directly.
        """
        self._session = session
        self._http = session.http
        config = self._http.config
        self._synergia = RequestBuilder(config.synergia_api_base, config.api_headers)
        self._messages = RequestBuilder(config.messages_api_base)
        self._logger = get_logger('librus.client')

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    async def authenticate(
        cls,
        credentials: Credentials,
        config: Optional[APIConfig] = None
    ) -> 'LibrusClient':
        """Run the login handshake and return a ready client."""
        http = AsyncAPIClient(config)
        try:
            session = await AsyncAuthService(http).authenticate(credentials)
        except BaseException:
            await http.close()
            raise
        return cls(session)

    @classmethod
    async def login(
        cls,
        username: str,
        password: str,
        config: Optional[APIConfig] = None
    ) -> 'LibrusClient':
        """Log in with explicit credentials."""
        return await cls.authenticate(Credentials(username, password), config=config)

    @classmethod
    async def from_env(cls, config: Optional[APIConfig] = None) -> 'LibrusClient':
        """
        Log in with credentials from the environment.

        Raises:
            MissingEnvVarError: If a credential variable is not set
        """
        config = config or APIConfig.default()
        credentials = Credentials.from_env(
            username_var=config.username_env,
            password_var=config.password_env
        )
        return await cls.authenticate(credentials, config=config)

    @staticmethod
    def builder() -> ClientBuilder:
        return ClientBuilder()

    @property
    def session(self) -> LibrusSession:
        return self._session

    async def close(self):
        """Close the HTTP session."""
        await self._session.close()

    async def __aenter__(self) -> 'LibrusClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # =========================================================================
    # Request helpers
    # =========================================================================

    async def _get_api(self, path: str, model: Type[T]) -> T:
        response = await self._http.get(
            self._synergia.base_url, path, headers=self._synergia.build_headers()
        )
        return ResponseHandler.decode(model, response.body)

    async def _get_messages_api(self, path: str, model: Type[T]) -> T:
        await self._session.ensure_messaging_ready()
        response = await self._http.get(self._messages.base_url, path)
        return ResponseHandler.unwrap(model, response.body)

    # =========================================================================
    # Academic API
    # =========================================================================

    async def me(self) -> ResponseMe:
        """Get the logged-in account."""
        return await self._get_api('Me', ResponseMe)

    async def grades(self) -> ResponseGrades:
        """Get all grades."""
        return await self._get_api('Grades', ResponseGrades)

    async def grade_category(self, category_id: int) -> ResponseGradesCategories:
        return await self._get_api(f'Grades/Categories/{category_id}', ResponseGradesCategories)

    async def grade_comment(self, comment_id: int) -> ResponseGradesComments:
        return await self._get_api(f'Grades/Comments/{comment_id}', ResponseGradesComments)

    async def lesson(self, lesson_id: int) -> ResponseLesson:
        return await self._get_api(f'Lessons/{lesson_id}', ResponseLesson)

    async def subject(self, subject_id: int) -> ResponseLessonSubject:
        return await self._get_api(f'Subjects/{subject_id}', ResponseLessonSubject)

    async def attendances(self) -> ResponseAttendances:
        return await self._get_api('Attendances/', ResponseAttendances)

    async def attendance_types(self) -> ResponseAttendancesType:
        return await self._get_api('Attendances/Types/', ResponseAttendancesType)

    async def homeworks(self) -> ResponseHomeworks:
        return await self._get_api('HomeWorks/', ResponseHomeworks)

    async def school_notices(self) -> ResponseSchoolNotices:
        return await self._get_api('SchoolNotices', ResponseSchoolNotices)

    async def user(self, user_id: int) -> ResponseUser:
        return await self._get_api(f'Users/{user_id}', ResponseUser)

    async def current_user(self) -> ResponseUser:
        return await self._get_api('Users', ResponseUser)

    async def timetable(self, week_start: Optional[date] = None) -> ResponseTimetable:
        """
        Get the timetable for a week.

        Args:
            week_start: Monday of the week (current week when omitted)
        """
        path = 'Timetables'
        if week_start is not None:
            path += f'?weekStart={week_start.isoformat()}'
        return await self._get_api(path, ResponseTimetable)

    # =========================================================================
    # Messaging API
    # =========================================================================

    async def unread_counts(self) -> UnreadCounts:
        """Get unread message counts per folder."""
        return await self._get_messages_api('inbox/unreadMessagesCount', UnreadCounts)

    async def inbox_messages(self, page: int = 1, limit: int = 10) -> List[InboxMessage]:
        return await self._get_messages_api(
            f'inbox/messages?page={page}&limit={limit}', List[InboxMessage]
        )

    async def outbox_messages(self, page: int = 1, limit: int = 10) -> List[OutboxMessage]:
        return await self._get_messages_api(
            f'outbox/messages?page={page}&limit={limit}', List[OutboxMessage]
        )

    async def message(self, message_id: str) -> MessageDetail:
        """Get a single inbox message with its attachment list."""
        return await self._get_messages_api(f'inbox/messages/{message_id}', MessageDetail)

    async def attachment(self, attachment_id: str, message_id: str) -> bytes:
        """
        Download a message attachment.

        Returns:
            Raw attachment bytes
        """
        await self._session.ensure_messaging_ready()
        url = self._messages.build_url(f'attachments/{attachment_id}/messages/{message_id}')
        data = await self._http.get_bytes(url)
        self._logger.debug(f"Downloaded attachment {attachment_id} ({len(data)} bytes)")
        return data

    # =========================================================================
    # Content helpers
    # =========================================================================

    @staticmethod
    def decode_message_content(content: str) -> Optional[str]:
        """Decode a base64 message body; None if it is not base64 text."""
        return decode_base64_text(content)

    @staticmethod
    def notice_content_to_text(content: str) -> str:
        """Reduce a notice's HTML body to plain text."""
        return strip_markup(content)
