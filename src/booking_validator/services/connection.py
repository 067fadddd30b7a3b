"""HTTP connection to a partner's booking server.

An HTTPConnection is built once per run from the server address and the
optional credentials and CA files, then reused for every endpoint check.
Checks run one after another; the connection is not meant to be shared
between threads.
"""

import base64
import ssl
from typing import Optional

import httpx

from booking_validator.models.errors import ConnectionSetupError, NetworkError
from booking_validator.utils.files import FileReader, read_file
from booking_validator.utils.logging import get_logger, log_http_request, log_http_response

logger = get_logger(__name__)

# Upper bound for one request/response exchange
TIMEOUT_SECONDS = 30.0


class HTTPConnection:
    """Connection-related state for talking to one partner server.

    Usage:
        conn = init_http_connection("localhost:8080", credentials_file="creds.txt")
        body = conn.send_request("/v1/BookingAvailability", '{"hotel_id": "97322"}')
        conn.close()
    """

    def __init__(
        self,
        client: httpx.Client,
        base_url: str,
        *,
        credentials: str = "",
        ssl_context: Optional[ssl.SSLContext] = None,
        server_name: str = "",
    ) -> None:
        """Initialize connection.

        Args:
            client: HTTP client used for every exchange
            base_url: Scheme and host:port, e.g. "https://partner.example.com:443"
            credentials: Value of the Authorization header ("" when unauthenticated)
            ssl_context: TLS trust configuration, when connecting over https
            server_name: Host name sent for SNI and checked against the certificate
        """
        self.client = client
        self.base_url = base_url
        self.credentials = credentials
        self.ssl_context = ssl_context
        self.server_name = server_name

    def get_url(self, endpoint: str) -> str:
        """Full URL for an endpoint path."""
        if endpoint:
            return f"{self.base_url}{endpoint}"
        return self.base_url

    def send_request(self, endpoint: str, body: str) -> str:
        """POST a JSON body to an endpoint and return the response body.

        Both bodies are logged verbatim for the audit trail.

        Args:
            endpoint: Endpoint path, e.g. "/v1/BookingSubmit"
            body: JSON request body

        Returns:
            Response body text, whatever the HTTP status

        Raises:
            NetworkError: If the exchange fails or times out
        """
        url = self.get_url(endpoint)
        headers = {
            "Content-Type": "application/json",
            "Authorization": self.credentials,
        }
        extensions = {"sni_hostname": self.server_name} if self.server_name else None

        log_http_request(logger, endpoint, url=url, method="POST", headers=headers, body=body)
        try:
            response = self.client.post(
                url,
                content=body.encode("utf-8"),
                headers=headers,
                extensions=extensions,
            )
        except httpx.TimeoutException as e:
            raise NetworkError(f"{endpoint} timed out after {TIMEOUT_SECONDS:g}s: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"{endpoint} yielded error: {e}") from e

        log_http_response(logger, endpoint, status_code=response.status_code, body=response.text)
        return response.text

    def close(self) -> None:
        """Release the underlying HTTP client."""
        self.client.close()

    def __enter__(self) -> "HTTPConnection":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def setup_credentials(credentials_file: str, reader: FileReader = read_file) -> str:
    """Build an HTTP basic auth header value from a credentials file.

    Args:
        credentials_file: Path to a file holding "username:password", or ""
        reader: File reading capability

    Returns:
        "Basic <base64>" or "" when no file is given

    Raises:
        ConnectionSetupError: If the file cannot be read
    """
    if not credentials_file:
        return ""
    try:
        data = reader(credentials_file)
    except OSError as e:
        raise ConnectionSetupError(f"failed to read credentials file: {e}") from e
    token = base64.b64encode(data.replace(b"\n", b"")).decode("ascii")
    return f"Basic {token}"


def setup_cert_config(ca_file: str, reader: FileReader = read_file) -> Optional[ssl.SSLContext]:
    """Build a TLS context that trusts only the roots in a PEM file.

    Args:
        ca_file: Path to PEM encoded root certificates, or ""
        reader: File reading capability

    Returns:
        SSL context, or None when no file is given (plain http)

    Raises:
        ConnectionSetupError: If the file cannot be read or holds no valid certificate
    """
    if not ca_file:
        return None
    try:
        pem = reader(ca_file)
    except OSError as e:
        raise ConnectionSetupError(f"failed to read root certificates file: {e}") from e
    try:
        return ssl.create_default_context(cadata=pem.decode("ascii"))
    except (ssl.SSLError, ValueError) as e:
        raise ConnectionSetupError(
            "failed to parse root certificates, please check your roots file "
            f"(ca_file flag) and try again: {e}"
        ) from e


def init_http_connection(
    server_addr: str,
    credentials_file: str = "",
    ca_file: str = "",
    full_server_name: str = "",
    *,
    reader: FileReader = read_file,
    transport: Optional[httpx.BaseTransport] = None,
) -> HTTPConnection:
    """Create a connection to a partner server.

    Uses https when a CA file is given, plain http otherwise.

    Args:
        server_addr: Server address as host:port
        credentials_file: Optional file holding "username:password"
        ca_file: Optional PEM file with the server's root certificates
        full_server_name: Optional host name for SNI and certificate checks when
            it differs from the server address
        reader: File reading capability
        transport: Optional httpx transport (tests pass a mock)

    Returns:
        Ready-to-use HTTPConnection

    Raises:
        ConnectionSetupError: If credentials or certificates cannot be loaded
    """
    credentials = setup_credentials(credentials_file, reader)
    ssl_context = setup_cert_config(ca_file, reader)

    protocol = "https" if ssl_context is not None else "http"
    client = httpx.Client(
        timeout=TIMEOUT_SECONDS,
        verify=ssl_context if ssl_context is not None else True,
        transport=transport,
    )
    logger.info("Connecting to %s://%s", protocol, server_addr)

    return HTTPConnection(
        client,
        f"{protocol}://{server_addr}",
        credentials=credentials,
        ssl_context=ssl_context,
        server_name=full_server_name,
    )
