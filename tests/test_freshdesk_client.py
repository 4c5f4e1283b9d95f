import base64
import json

import httpx
import pytest
from contact_proxy.clients.freshdesk import (
    FreshdeskClient,
    FreshdeskTransportError,
    TicketRejectedError,
    basic_auth_header,
    extract_error_message,
    normalize_domain,
    validate_domain,
)
from contact_proxy.core.config import Settings
from contact_proxy.models.ticket import TicketPriority, TicketRequest, TicketStatus
from tests.helpers.transport import RecordingTransport


def _ticket(**overrides: object) -> TicketRequest:
    values: dict[str, object] = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "description": "My order never arrived.",
    }
    values.update(overrides)
    return TicketRequest(**values)  # type: ignore[arg-type]


def test_basic_auth_header_uses_key_and_placeholder_password() -> None:
    header = basic_auth_header("abc123")

    assert header.startswith("Basic ")
    assert base64.b64decode(header.removeprefix("Basic ")).decode() == "abc123:X"


@pytest.mark.parametrize(
    "raw",
    ["acme", "ACME.freshdesk.com", "https://acme.freshdesk.com/", " http://acme.freshdesk.com/a/b "],
)
def test_normalize_domain(raw: str) -> None:
    assert normalize_domain(raw) == "acme"


def test_tickets_url_built_from_settings() -> None:
    settings = Settings(freshdesk_domain="acme.freshdesk.com", freshdesk_api_key="key")

    client = FreshdeskClient.from_settings(settings)

    assert client.tickets_url == "https://acme.freshdesk.com/api/v2/tickets"


def test_create_ticket_posts_json_with_basic_auth() -> None:
    transport = RecordingTransport(lambda _: httpx.Response(201, json={"id": 42}))
    client = FreshdeskClient("acme", "secret-key", transport=transport)

    created = client.create_ticket(_ticket())

    assert created == {"id": 42}
    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://acme.freshdesk.com/api/v2/tickets"
    assert request.headers["Authorization"] == basic_auth_header("secret-key")
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "description": "My order never arrived.",
        "status": 2,
        "priority": 1,
    }


def test_create_ticket_sends_optional_fields_unmodified() -> None:
    transport = RecordingTransport(lambda _: httpx.Response(201, json={"id": 1}))
    client = FreshdeskClient("acme", "key", transport=transport)
    ticket = _ticket(
        status=TicketStatus.PENDING,
        priority=TicketPriority.URGENT,
        tags=["web", "Contact Form"],
        custom_fields={"cf_order_id": "A-100"},
    )

    client.create_ticket(ticket)

    body = json.loads(transport.requests[0].content)
    assert body["status"] == 3
    assert body["priority"] == 4
    assert body["tags"] == ["web", "Contact Form"]
    assert body["custom_fields"] == {"cf_order_id": "A-100"}


def test_create_ticket_tolerates_non_json_success_body() -> None:
    transport = RecordingTransport(lambda _: httpx.Response(200, text="created"))
    client = FreshdeskClient("acme", "key", transport=transport)

    assert client.create_ticket(_ticket()) == {}


def test_create_ticket_raises_rejected_with_upstream_message() -> None:
    transport = RecordingTransport(
        lambda _: httpx.Response(422, json={"message": "Email is invalid"}),
    )
    client = FreshdeskClient("acme", "key", transport=transport)

    with pytest.raises(TicketRejectedError) as exc_info:
        client.create_ticket(_ticket())

    assert exc_info.value.status_code == 422
    assert exc_info.value.message == "Email is invalid"


def test_create_ticket_wraps_transport_failures() -> None:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)

    client = FreshdeskClient("acme", "key", transport=httpx.MockTransport(_fail))

    with pytest.raises(FreshdeskTransportError):
        client.create_ticket(_ticket())


def test_create_ticket_treats_timeout_as_transport_failure() -> None:
    def _timeout(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = FreshdeskClient("acme", "key", transport=httpx.MockTransport(_timeout))

    with pytest.raises(FreshdeskTransportError):
        client.create_ticket(_ticket())


@pytest.mark.parametrize(
    ("response", "expected"),
    [
        (httpx.Response(403, json={"message": "You have to be logged in"}), "You have to be logged in"),
        (httpx.Response(400, json={"description": "Validation failed", "errors": []}), "Unknown error"),
        (httpx.Response(500, text="<html>oops</html>"), "Unknown error"),
        (httpx.Response(502, content=b""), "Unknown error"),
        (httpx.Response(422, json={"message": 17}), "Unknown error"),
        (httpx.Response(422, json=["not", "an", "object"]), "Unknown error"),
    ],
)
def test_extract_error_message(response: httpx.Response, expected: str) -> None:
    assert extract_error_message(response) == expected


def test_create_ticket_wraps_undecodable_response_body() -> None:
    transport = httpx.MockTransport(
        lambda _: httpx.Response(500, headers={"Content-Encoding": "gzip"}, content=b"not-gzip"),
    )
    client = FreshdeskClient("acme", "key", transport=transport)

    with pytest.raises(FreshdeskTransportError):
        client.create_ticket(_ticket())


@pytest.mark.parametrize("raw", ["acme corp:x", "", "-acme", "acme_corp", "https://"])
def test_client_rejects_unusable_domain(raw: str) -> None:
    with pytest.raises(ValueError, match="Invalid Freshdesk domain"):
        FreshdeskClient(raw, "key")


def test_validate_domain_normalizes_host() -> None:
    assert validate_domain("https://Acme-Support.freshdesk.com/") == "acme-support"
