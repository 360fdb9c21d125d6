"""Logfire setup for the API process and its scripts.

Services log through ``logfire`` directly:

    logfire.info("Admin approved", account_id=str(account.id))

    with logfire.span("account_service.transition", transition="approve"):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from alumni.config import ObservabilitySettings, Settings

SERVICE_NAME = "alumni-backend"
SESSION_COOKIE = "auth_token"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``OBSERVABILITY__SEND_TO_LOGFIRE`` wins; otherwise telemetry
    is sent only when a token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = should_send_to_logfire(observability)

    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        options["token"] = observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Attach method, path, client host and session presence to request spans.

    The session token itself is never recorded.
    """
    result = {**attributes}
    if hasattr(request, "method"):
        result["method"] = request.method
    if hasattr(request, "url"):
        result["path"] = request.url.path
    client = getattr(request, "client", None)
    if client:
        result["client_host"] = client.host
    cookies = getattr(request, "cookies", None) or {}
    result["has_session"] = SESSION_COOKIE in cookies
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request, without headers."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
