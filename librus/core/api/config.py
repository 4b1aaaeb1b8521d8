"""
API configuration module.

Provides configuration for the Librus API client: endpoint URLs for the
login handshake and both API backends, plus transport settings.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import ssl


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None

        if self.username and self.password:
            if '://' in self.url:
                protocol, rest = self.url.split('://', 1)
                return f"{protocol}://{self.username}:{self.password}@{rest}"

        return self.url


@dataclass
class SSLConfig:
    """SSL/TLS configuration."""
    verify: bool = True
    ca_file: Optional[str] = None
    check_hostname: bool = True

    def create_ssl_context(self):
        """Create SSL context from configuration (False disables verification)."""
        if not self.verify:
            return False

        context = ssl.create_default_context()

        if self.ca_file:
            context.load_verify_locations(self.ca_file)

        context.check_hostname = self.check_hostname

        return context


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    The only cancellation policy the client has; nothing is retried.
    """
    total: float = 60.0  # Total request timeout
    connect: float = 15.0  # Connection timeout
    sock_read: float = 30.0  # Socket read timeout

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read
        )


@dataclass
class APIConfig:
    """
    Complete API configuration.

    Centralizes endpoint URLs and transport options for the Librus client.
    API bases must end with '/': request paths are appended verbatim.
    """
    # API roots
    synergia_api_base: str = 'https://synergia.librus.pl/gateway/api/2.0/'
    messages_api_base: str = 'https://wiadomosci.librus.pl/api/'

    # Login handshake
    auth_url: str = 'https://api.librus.pl/OAuth/Authorization?client_id=46'
    auth_test_url: str = (
        'https://api.librus.pl/OAuth/Authorization'
        '?client_id=46&response_type=code&scope=mydata'
    )
    auth_grant_url: str = 'https://api.librus.pl/OAuth/Authorization/Grant?client_id=46'
    token_info_url: str = 'https://synergia.librus.pl/gateway/api/2.0/Auth/TokenInfo/'

    # Messaging warm-up, served by the primary host
    messages_init_url: str = 'https://synergia.librus.pl/wiadomosci3'

    # Credential environment variables
    username_env: str = 'LIBRUS_USERNAME'
    password_env: str = 'LIBRUS_PASSWORD'

    # User agent
    user_agent: str = 'librus/1.0.0'

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    # Headers sent with academic API calls
    api_headers: Dict[str, str] = field(
        default_factory=lambda: {'Content-Type': 'application/json'}
    )

    # Additional headers for every request
    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Logging
    log_level: int = 20  # logging.INFO

    # Connection pool settings
    limit_per_host: int = 10
    limit: int = 100

    def __post_init__(self):
        for name in ('synergia_api_base', 'messages_api_base'):
            if not getattr(self, name).endswith('/'):
                raise ValueError(f"{name} must end with '/'")

    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )

    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False, check_hostname=False),
            **kwargs
        )

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
