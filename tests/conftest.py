"""Pytest fixtures for librus tests."""
import base64
import json

import pytest

from librus.core.api import APIConfig, AsyncAPIClient
from librus.core.session import LibrusSession

from fakes import FakeResponse, FakeSession


@pytest.fixture
def config():
    """Default API configuration."""
    return APIConfig.default()


@pytest.fixture
def fake_session():
    """Empty fake aiohttp session."""
    return FakeSession()


@pytest.fixture
def api_client(config, fake_session):
    """AsyncAPIClient wired to the fake session."""
    return AsyncAPIClient(config, session=fake_session)


@pytest.fixture
def librus_session(api_client):
    """Authenticated session over the fake transport."""
    return LibrusSession(api_client, 'jan.kowalski')


@pytest.fixture
def handshake(config, fake_session):
    """Queue a successful four-step login on the fake session."""
    fake_session.add('GET', config.auth_test_url, FakeResponse(200, b'<html>login</html>'))
    fake_session.add('POST', config.auth_url, FakeResponse(302, b''))
    fake_session.add('GET', config.auth_grant_url, FakeResponse(200, b''))
    fake_session.add('GET', config.token_info_url, FakeResponse(200, b'{"UserIdentifier": "123u"}'))
    return fake_session


def _link(id_, path):
    return {'Id': id_, 'Url': f'https://api.librus.pl/2.0/{path}/{id_}'}


@pytest.fixture
def grades_payload():
    """Returns a sample Grades response."""
    return {
        'Grades': [
            {
                'Id': 1001,
                'Lesson': _link(11, 'Lessons'),
                'Subject': _link(21, 'Subjects'),
                'Student': _link(31, 'Users'),
                'Category': _link(41, 'Grades/Categories'),
                'AddedBy': _link(51, 'Users'),
                'Grade': '5',
                'Date': '2024-03-04',
                'AddDate': '2024-03-04 10:11:12',
                'Semester': 2,
                'IsConstituent': True,
                'IsSemester': False,
                'IsSemesterProposition': False,
                'IsFinal': False,
                'IsFinalProposition': False,
                'Comments': [_link(61, 'Grades/Comments')],
            }
        ],
        'Resources': {
            'Grades\\Averages': {'Url': 'https://api.librus.pl/2.0/Grades/Averages'},
            '..': {'Url': 'https://api.librus.pl/2.0/Root'},
        },
        'Url': 'https://api.librus.pl/2.0/Grades',
    }


@pytest.fixture
def notices_payload():
    """Returns a sample SchoolNotices response."""
    return {
        'SchoolNotices': [
            {
                'Id': 'A1B2',
                'StartDate': '2024-03-01',
                'EndDate': '2024-03-31',
                'Subject': 'Wycieczka',
                'Content': '<p>Hello&nbsp;<b>World</b> &amp; friends</p>',
                'AddedBy': _link(51, 'Users'),
                'CreationDate': '2024-02-28 08:00:00',
                'WasRead': False,
            }
        ],
        'Url': 'https://api.librus.pl/2.0/SchoolNotices',
    }


@pytest.fixture
def inbox_payload():
    """Returns a sample messaging inbox page."""
    return {
        'data': [
            {
                'messageId': '9001',
                'senderFirstName': 'Anna',
                'senderLastName': 'Nowak',
                'senderName': 'Anna Nowak',
                'topic': 'Zebranie',
                'content': base64.b64encode('Zebranie w piątek'.encode()).decode(),
                'sendDate': '2024-03-05 12:00:00',
                'readDate': None,
                'isAnyFileAttached': False,
                'tags': [],
                'category': None,
            }
        ]
    }


@pytest.fixture
def unread_payload():
    """Returns a sample unread counts response."""
    counts = {
        'inbox': 3, 'notes': 1, 'alerts': 0, 'substitutions': 0,
        'absences': 0, 'justifications': 0, 'trash': 0,
        'archiveInbox': 0, 'archiveNotes': 0, 'archiveAlerts': 0,
        'archiveSubstitutions': 0, 'archiveAbsences': 0,
        'archiveJustifications': 0, 'archiveTrash': 0,
    }
    return {'data': counts}


@pytest.fixture
def as_body():
    """Serialize a payload the way the API sends it."""
    return lambda payload: json.dumps(payload).encode('utf-8')
