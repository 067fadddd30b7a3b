"""Unit tests for HTTP connection setup and the request/response exchange."""

import logging
import ssl

import httpx
import pytest

from booking_validator.models import ConnectionSetupError, ErrorKind
from booking_validator.services.connection import (
    TIMEOUT_SECONDS,
    HTTPConnection,
    init_http_connection,
    setup_cert_config,
    setup_credentials,
)

CREDENTIALS = "/path/to/credentials"
PEM = "/path/to/pem"


class TestConnectionURL:
    """Tests for scheme selection and URL building."""

    @pytest.mark.parametrize(
        ("ca_file", "want"),
        [
            ("", "http://localhost:8080/test"),
            (PEM, "https://localhost:8080/test"),
        ],
    )
    def test_scheme_follows_ca_file(self, fake_reader, ca_file: str, want: str) -> None:
        """https with a CA file, http without."""
        conn = init_http_connection("localhost:8080", ca_file=ca_file, reader=fake_reader)

        assert conn.get_url("/test") == want

    def test_empty_endpoint_is_base_url(self, fake_reader) -> None:
        """No endpoint means the bare server URL."""
        conn = init_http_connection("localhost:8080", reader=fake_reader)

        assert conn.get_url("") == "http://localhost:8080"

    def test_client_uses_fixed_timeout(self, fake_reader) -> None:
        """Every request shares one fixed timeout."""
        conn = init_http_connection("localhost:8080", reader=fake_reader)

        assert conn.client.timeout == httpx.Timeout(TIMEOUT_SECONDS)


class TestCredentials:
    """Tests for basic auth credential loading."""

    @pytest.mark.parametrize(
        ("credentials_file", "want"),
        [
            ("", ""),
            (CREDENTIALS, "Basic dXNlcm5hbWU6cGFzc3dvcmQ="),
        ],
    )
    def test_credentials_header_value(self, fake_reader, credentials_file: str, want: str) -> None:
        """The file becomes a Basic auth header."""
        conn = init_http_connection("localhost:8080", credentials_file=credentials_file, reader=fake_reader)

        assert conn.credentials == want

    def test_newlines_are_stripped(self) -> None:
        """Every newline is removed before encoding."""
        reader = {"creds": b"user\nname:pass\n"}.__getitem__

        assert setup_credentials("creds", reader) == "Basic dXNlcm5hbWU6cGFzcw=="

    def test_no_file_reads_nothing(self, fake_reader) -> None:
        """No credentials file means no auth and no read."""
        setup_credentials("", fake_reader)

        assert fake_reader.reads == []

    def test_unreadable_file_raises(self, fake_reader) -> None:
        """A missing credentials file is a setup error."""
        with pytest.raises(ConnectionSetupError) as exc_info:
            init_http_connection("localhost:8080", credentials_file="/missing", reader=fake_reader)

        assert exc_info.value.kind == ErrorKind.CONFIGURATION_ERROR
        assert "failed to read credentials file" in str(exc_info.value)


class TestCertConfig:
    """Tests for root certificate loading."""

    def test_no_ca_file_means_no_tls_context(self, fake_reader) -> None:
        """No CA file means plain http."""
        assert setup_cert_config("", fake_reader) is None

    def test_context_trusts_exactly_the_given_roots(self, fake_reader) -> None:
        """Only the supplied roots are trusted."""
        context = setup_cert_config(PEM, fake_reader)

        assert isinstance(context, ssl.SSLContext)
        assert context.verify_mode == ssl.CERT_REQUIRED
        certs = context.get_ca_certs()
        assert len(certs) == 1
        assert certs[0]["subject"] == ((("commonName", "booking-validator-test-ca"),),)

    def test_unreadable_file_raises(self, fake_reader) -> None:
        """A missing CA file is a setup error."""
        with pytest.raises(ConnectionSetupError) as exc_info:
            init_http_connection("localhost:8080", ca_file="/missing.pem", reader=fake_reader)

        assert "failed to read root certificates file" in str(exc_info.value)

    def test_unparsable_pem_raises(self) -> None:
        """A file with no certificates is a setup error."""
        reader = {"bad.pem": b"this is not a certificate"}.__getitem__

        with pytest.raises(ConnectionSetupError) as exc_info:
            setup_cert_config("bad.pem", reader)

        assert "failed to parse root certificates" in str(exc_info.value)


class TestSendRequest:
    """Tests for HTTPConnection.send_request."""

    def _connection(self, handler, **kwargs) -> HTTPConnection:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        return HTTPConnection(client, "http://partner.test", **kwargs)

    def test_returns_body_and_sends_headers(self) -> None:
        """The body comes back and the auth and content headers go out."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text='{"ok": true}')

        conn = self._connection(handler, credentials="Basic abc")

        body = conn.send_request("/v1/Test", '{"a": 1}')

        assert body == '{"ok": true}'
        assert seen[0].headers["Authorization"] == "Basic abc"
        assert seen[0].content == b'{"a": 1}'

    def test_server_name_sent_for_sni(self) -> None:
        """The configured server name is used for TLS."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="{}")

        conn = self._connection(handler, server_name="booking.partner.example")

        conn.send_request("/v1/Test", "{}")

        assert seen[0].extensions["sni_hostname"] == "booking.partner.example"

    def test_credentials_redacted_in_log(self, caplog: pytest.LogCaptureFixture) -> None:
        """The audit log never shows the credentials."""
        conn = self._connection(lambda request: httpx.Response(200, text="{}"), credentials="Basic c2VjcmV0")

        with caplog.at_level(logging.INFO):
            conn.send_request("/v1/Test", "{}")

        assert "<redacted>" in caplog.text
        assert "c2VjcmV0" not in caplog.text

    def test_context_manager_closes_client(self) -> None:
        """Leaving the with block closes the client."""
        conn = self._connection(lambda request: httpx.Response(200, text="{}"))

        with conn:
            pass

        assert conn.client.is_closed
