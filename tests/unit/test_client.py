"""Tests for the high-level LibrusClient."""
import base64
from datetime import date
from unittest.mock import patch

import aiohttp
import pytest
import pytest_asyncio

from librus import LibrusClient
from librus.core.api import AsyncAPIClient
from librus.core.exceptions import (
    ApiError,
    AuthenticationError,
    DecodeError,
    MissingCredentialError,
    MissingEnvVarError,
    TransportError,
)

from fakes import FakeResponse


SYNERGIA = 'https://synergia.librus.pl/gateway/api/2.0/'
MESSAGES = 'https://wiadomosci.librus.pl/api/'


@pytest.fixture
def patched_http(config, fake_session):
    """Route every client built by LibrusClient through the fake session."""
    created = []

    def factory(cfg=None):
        http = AsyncAPIClient(cfg or config, session=fake_session)
        created.append(http)
        return http

    with patch('librus.client.AsyncAPIClient', side_effect=factory) as mock:
        mock.created = created
        yield mock


@pytest_asyncio.fixture
async def client(handshake, patched_http):
    """Logged-in client over the fake transport."""
    librus = await LibrusClient.login('jan.kowalski', 'secret')
    handshake.calls.clear()
    return librus


class TestConstruction:
    """Tests for the ways a client gets built."""

    @pytest.mark.asyncio
    async def test_login(self, handshake, patched_http):
        client = await LibrusClient.login('jan.kowalski', 'secret')

        assert client.session.username == 'jan.kowalski'
        assert len(handshake.calls) == 4

    @pytest.mark.asyncio
    async def test_from_env(self, handshake, patched_http, monkeypatch):
        monkeypatch.setenv('LIBRUS_USERNAME', 'anna')
        monkeypatch.setenv('LIBRUS_PASSWORD', 'pw')

        client = await LibrusClient.from_env()

        assert client.session.username == 'anna'
        assert handshake.calls[1][2]['data']['login'] == 'anna'

    @pytest.mark.asyncio
    async def test_from_env_missing_var_sends_nothing(self, fake_session, patched_http, monkeypatch):
        """Test a missing variable fails before any request is made."""
        monkeypatch.delenv('LIBRUS_USERNAME', raising=False)
        monkeypatch.setenv('LIBRUS_PASSWORD', 'pw')

        with pytest.raises(MissingEnvVarError) as exc_info:
            await LibrusClient.from_env()

        assert exc_info.value.name == 'LIBRUS_USERNAME'
        assert fake_session.calls == []
        patched_http.assert_not_called()

    @pytest.mark.asyncio
    async def test_builder(self, handshake, patched_http):
        client = await LibrusClient.builder().username('u').password('p').build()

        assert client.session.username == 'u'

    @pytest.mark.asyncio
    async def test_builder_missing_password(self, fake_session, patched_http):
        with pytest.raises(MissingCredentialError) as exc_info:
            await LibrusClient.builder().username('u').build()

        assert exc_info.value.field == 'password'
        assert fake_session.calls == []

    @pytest.mark.asyncio
    async def test_failed_login_closes_client(self, config, fake_session, patched_http):
        fake_session.add('GET', config.auth_test_url, FakeResponse(200))
        fake_session.add('POST', config.auth_url, FakeResponse(200))
        fake_session.add('GET', config.auth_grant_url, FakeResponse(200))
        fake_session.add('GET', config.token_info_url, FakeResponse(401))

        with pytest.raises(AuthenticationError):
            await LibrusClient.login('jan.kowalski', 'wrong')

        assert patched_http.created[0].closed is True

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, client):
        async with client:
            pass

        assert client.session.http.closed is True


class TestAcademicApi:
    """Tests for academic API accessors."""

    @pytest.mark.asyncio
    async def test_grades(self, client, fake_session, grades_payload, as_body):
        fake_session.add('GET', SYNERGIA + 'Grades', FakeResponse(200, as_body(grades_payload)))

        grades = await client.grades()

        assert grades.grades[0].grade == '5'
        assert grades.grades[0].category.id == 41
        assert grades.resources['Grades\\Averages'].url.endswith('Averages')

    @pytest.mark.asyncio
    async def test_sends_json_content_type(self, client, fake_session, grades_payload, as_body):
        fake_session.add('GET', SYNERGIA + 'Grades', FakeResponse(200, as_body(grades_payload)))

        await client.grades()

        assert fake_session.calls[0][2]['headers'] == {'Content-Type': 'application/json'}

    @pytest.mark.asyncio
    async def test_academic_calls_skip_warm_up(self, client, fake_session, config, grades_payload, as_body):
        fake_session.add('GET', SYNERGIA + 'Grades', FakeResponse(200, as_body(grades_payload)))

        await client.grades()

        assert config.messages_init_url not in fake_session.urls()
        assert client.session.messaging_ready is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("call, path", [
        (lambda c: c.grade_category(7), 'Grades/Categories/7'),
        (lambda c: c.grade_comment(8), 'Grades/Comments/8'),
        (lambda c: c.lesson(9), 'Lessons/9'),
        (lambda c: c.subject(10), 'Subjects/10'),
        (lambda c: c.attendances(), 'Attendances/'),
        (lambda c: c.attendance_types(), 'Attendances/Types/'),
        (lambda c: c.homeworks(), 'HomeWorks/'),
        (lambda c: c.school_notices(), 'SchoolNotices'),
        (lambda c: c.user(11), 'Users/11'),
        (lambda c: c.current_user(), 'Users'),
        (lambda c: c.me(), 'Me'),
        (lambda c: c.timetable(date(2024, 3, 4)), 'Timetables?weekStart=2024-03-04'),
    ])
    async def test_paths(self, client, fake_session, call, path):
        """Test each accessor hits its path and surfaces a 404 as ApiError."""
        fake_session.add('GET', SYNERGIA + path, FakeResponse(404, b'{"Code":"NotFound"}'))

        with pytest.raises(ApiError) as exc_info:
            await call(client)

        assert fake_session.urls() == [SYNERGIA + path]
        assert exc_info.value.body == b'{"Code":"NotFound"}'

    @pytest.mark.asyncio
    async def test_notice_text(self, client, fake_session, notices_payload, as_body):
        fake_session.add('GET', SYNERGIA + 'SchoolNotices', FakeResponse(200, as_body(notices_payload)))

        notices = await client.school_notices()

        assert notices.school_notices[0].text == 'Hello World & friends'

    @pytest.mark.asyncio
    async def test_decode_error_keeps_body(self, client, fake_session):
        body = b'<html>maintenance</html>'
        fake_session.add('GET', SYNERGIA + 'Me', FakeResponse(200, body))

        with pytest.raises(DecodeError) as exc_info:
            await client.me()

        assert exc_info.value.body == body

    @pytest.mark.asyncio
    async def test_transport_error(self, client, fake_session):
        fake_session.add('GET', SYNERGIA + 'Me', aiohttp.ClientConnectionError("reset"))

        with pytest.raises(TransportError):
            await client.me()


class TestMessagingApi:
    """Tests for messaging API accessors."""

    @pytest.mark.asyncio
    async def test_warm_up_precedes_first_call(self, client, fake_session, config, unread_payload, as_body):
        fake_session.add('GET', config.messages_init_url, FakeResponse(200))
        fake_session.add(
            'GET', MESSAGES + 'inbox/unreadMessagesCount',
            FakeResponse(200, as_body(unread_payload))
        )

        counts = await client.unread_counts()

        assert counts.inbox == 3
        assert fake_session.urls() == [
            config.messages_init_url,
            MESSAGES + 'inbox/unreadMessagesCount',
        ]

    @pytest.mark.asyncio
    async def test_warm_up_once(self, client, fake_session, config, unread_payload, inbox_payload, as_body):
        """Test later messaging calls reuse the warmed-up session."""
        fake_session.add('GET', config.messages_init_url, FakeResponse(200))
        fake_session.add(
            'GET', MESSAGES + 'inbox/unreadMessagesCount',
            FakeResponse(200, as_body(unread_payload))
        )
        fake_session.add(
            'GET', MESSAGES + 'inbox/messages?page=1&limit=10',
            FakeResponse(200, as_body(inbox_payload))
        )

        await client.unread_counts()
        await client.unread_counts()
        await client.inbox_messages()

        assert fake_session.urls().count(config.messages_init_url) == 1

    @pytest.mark.asyncio
    async def test_inbox(self, client, fake_session, config, inbox_payload, as_body):
        fake_session.add('GET', config.messages_init_url, FakeResponse(200))
        fake_session.add(
            'GET', MESSAGES + 'inbox/messages?page=2&limit=5',
            FakeResponse(200, as_body(inbox_payload))
        )

        messages = await client.inbox_messages(page=2, limit=5)

        assert len(messages) == 1
        assert messages[0].sender_name == 'Anna Nowak'
        assert messages[0].text == 'Zebranie w piątek'

    @pytest.mark.asyncio
    async def test_outbox(self, client, fake_session, config, as_body):
        payload = {'data': [{
            'messageId': '77',
            'receiverFirstName': 'Piotr',
            'receiverLastName': 'Zieliński',
            'receiverName': 'Piotr Zieliński',
            'topic': 'Re: Zebranie',
            'content': base64.b64encode(b'Dziekuje').decode(),
            'sendDate': '2024-03-06 08:00:00',
            'isAnyFileAttached': False,
            'tags': [],
        }]}
        fake_session.add('GET', config.messages_init_url, FakeResponse(200))
        fake_session.add(
            'GET', MESSAGES + 'outbox/messages?page=1&limit=10',
            FakeResponse(200, as_body(payload))
        )

        messages = await client.outbox_messages()

        assert messages[0].receiver_name == 'Piotr Zieliński'
        assert messages[0].text == 'Dziekuje'

    @pytest.mark.asyncio
    async def test_message_detail(self, client, fake_session, config, as_body):
        payload = {'data': {
            'messageId': '9001',
            'senderFirstName': 'Anna',
            'senderLastName': 'Nowak',
            'senderName': 'Anna Nowak',
            'topic': 'Zebranie',
            'Message': base64.b64encode('Zapraszam'.encode()).decode(),
            'sendDate': '2024-03-05 12:00:00',
            'attachments': [{'id': 'a1', 'name': 'plan.pdf'}],
        }}
        fake_session.add('GET', config.messages_init_url, FakeResponse(200))
        fake_session.add('GET', MESSAGES + 'inbox/messages/9001', FakeResponse(200, as_body(payload)))

        detail = await client.message('9001')

        assert detail.text == 'Zapraszam'
        assert detail.attachments[0].name == 'plan.pdf'

    @pytest.mark.asyncio
    async def test_attachment(self, client, fake_session, config):
        url = MESSAGES + 'attachments/a1/messages/9001'
        fake_session.add('GET', config.messages_init_url, FakeResponse(200))
        fake_session.add('GET', url, FakeResponse(200, b'%PDF\x00\x01'))

        data = await client.attachment('a1', '9001')

        assert data == b'%PDF\x00\x01'
        assert fake_session.urls() == [config.messages_init_url, url]

    @pytest.mark.asyncio
    async def test_warm_up_failure_propagates(self, client, fake_session, config):
        """Test a failed warm-up surfaces and is retried on the next call."""
        fake_session.add(
            'GET', config.messages_init_url,
            aiohttp.ClientConnectionError("reset"),
            FakeResponse(200)
        )
        fake_session.add('GET', MESSAGES + 'inbox/unreadMessagesCount', FakeResponse(401, b'{}'))

        with pytest.raises(TransportError):
            await client.unread_counts()
        assert MESSAGES + 'inbox/unreadMessagesCount' not in fake_session.urls()

        with pytest.raises(ApiError) as exc_info:
            await client.unread_counts()

        assert exc_info.value.status == 401
        assert client.session.messaging_ready is True

    @pytest.mark.asyncio
    async def test_missing_envelope_is_decode_error(self, client, fake_session, config, unread_payload, as_body):
        body = as_body(unread_payload['data'])
        fake_session.add('GET', config.messages_init_url, FakeResponse(200))
        fake_session.add('GET', MESSAGES + 'inbox/unreadMessagesCount', FakeResponse(200, body))

        with pytest.raises(DecodeError) as exc_info:
            await client.unread_counts()

        assert exc_info.value.body == body


class TestContentHelpers:
    """Tests for the static content helpers."""

    def test_decode_message_content(self):
        encoded = base64.b64encode('Dzień dobry'.encode()).decode()

        assert LibrusClient.decode_message_content(encoded) == 'Dzień dobry'
        assert LibrusClient.decode_message_content('not base64!') is None

    def test_notice_content_to_text(self):
        assert LibrusClient.notice_content_to_text('<b>A</b>&amp;B') == 'A&B'
