"""User credentials for Librus authentication."""
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .exceptions import MissingCredentialError, MissingEnvVarError

USERNAME_ENV = 'LIBRUS_USERNAME'
PASSWORD_ENV = 'LIBRUS_PASSWORD'


@dataclass(frozen=True)
class Credentials:
    """
    Username and password handed to the login handshake.

    Empty strings are accepted; only absent (None) values are rejected.

    Example:
        >>> creds = Credentials("jan.kowalski", "secret")
        >>> creds = Credentials.from_env()
        >>> creds = CredentialsBuilder().username("jan").password("x").build()
    """
    username: str
    password: str = field(repr=False)

    def __post_init__(self):
        if self.username is None:
            raise MissingCredentialError('username')
        if self.password is None:
            raise MissingCredentialError('password')

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        username_var: str = USERNAME_ENV,
        password_var: str = PASSWORD_ENV
    ) -> 'Credentials':
        """
        Read credentials from environment variables.

        The username variable is checked first, so only one missing
        variable is ever reported.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            username_var: Name of the username variable
            password_var: Name of the password variable

        Returns:
            Credentials instance

        Raises:
            MissingEnvVarError: If either variable is not set
        """
        if environ is None:
            environ = os.environ

        username = environ.get(username_var)
        if username is None:
            raise MissingEnvVarError(username_var)

        password = environ.get(password_var)
        if password is None:
            raise MissingEnvVarError(password_var)

        return cls(username, password)


class CredentialsBuilder:
    """Fluent builder accumulating optional credential fields."""

    def __init__(self):
        self._username: Optional[str] = None
        self._password: Optional[str] = None

    def username(self, username: str) -> 'CredentialsBuilder':
        """Set username."""
        self._username = username
        return self

    def password(self, password: str) -> 'CredentialsBuilder':
        """Set password."""
        self._password = password
        return self

    def build(self) -> Credentials:
        """
        Build credentials.

        Raises:
            MissingCredentialError: Naming the first unset field
        """
        if self._username is None:
            raise MissingCredentialError('username')
        if self._password is None:
            raise MissingCredentialError('password')
        return Credentials(self._username, self._password)
