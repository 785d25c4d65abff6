"""
Unit tests for server exception handlers.

Tests cover the domain handlers for data entry errors and the global
handler for everything else.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from recordkit.core.errors import DataEntryError, DataEntryNotFoundError, OutOfBoundsError, UndefinedColumnError
from recordkit.server.exception_handlers import setup_exception_handlers
from recordkit.server.exception_handlers.domain_handlers import (
    data_entry_error_handler,
    not_found_handler,
    out_of_bounds_handler,
)
from recordkit.server.exception_handlers.global_handler import global_exception_handler


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/v1/test"
    request.query_params = {"limit": "10"}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


def body(response: JSONResponse) -> dict:
    return json.loads(response.body)


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        exc = ValueError("Test error")

        with patch("recordkit.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"
            assert call_args[1]["extra"]["query_params"] == {"limit": "10"}
            assert call_args[1]["exc_info"] is True

    @pytest.mark.asyncio
    async def test_exception_handler_returns_500_json(self, mock_request):
        exc = RuntimeError("Test error")

        with patch("recordkit.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        assert body(response) == {"detail": "Internal server error", "error_id": id(exc), "error_type": "RuntimeError"}

    @pytest.mark.asyncio
    async def test_exception_message_is_not_leaked(self, mock_request):
        with patch("recordkit.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, RuntimeError("password=secret"))

        assert "secret" not in response.body.decode()

    @pytest.mark.asyncio
    async def test_request_without_client(self, mock_request):
        mock_request.client = None

        with patch("recordkit.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, KeyError("x"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestDomainHandlers:
    @pytest.mark.asyncio
    async def test_out_of_bounds_is_400(self, mock_request):
        with patch("recordkit.server.exception_handlers.domain_handlers.logger") as mock_logger:
            response = await out_of_bounds_handler(mock_request, OutOfBoundsError("Priority too high"))

        assert response.status_code == 400
        assert body(response) == {"detail": "Priority too high", "error_type": "OutOfBoundsError"}
        mock_logger.info.assert_called_once()

    @pytest.mark.asyncio
    async def test_not_found_is_404(self, mock_request):
        with patch("recordkit.server.exception_handlers.domain_handlers.logger"):
            response = await not_found_handler(mock_request, DataEntryNotFoundError("plugin", 7))

        assert response.status_code == 404
        assert body(response)["detail"] == "The plugin '7' does not exist"

    @pytest.mark.asyncio
    async def test_data_entry_error_is_400(self, mock_request):
        with patch("recordkit.server.exception_handlers.domain_handlers.logger") as mock_logger:
            response = await data_entry_error_handler(mock_request, UndefinedColumnError("plugin", "color"))

        assert response.status_code == 400
        assert body(response)["error_type"] == "UndefinedColumnError"
        mock_logger.warning.assert_called_once()


class TestSetupExceptionHandlers:
    @pytest.fixture
    def app(self) -> FastAPI:
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/bounds")
        async def bounds():
            raise OutOfBoundsError("out of bounds")

        @app.get("/missing")
        async def missing():
            raise DataEntryNotFoundError("plugin", "foo")

        @app.get("/entry")
        async def entry():
            raise DataEntryError("bad entry")

        @app.get("/boom")
        async def boom():
            raise RuntimeError("boom")

        return app

    def test_handlers_are_registered(self, app: FastAPI):
        assert OutOfBoundsError in app.exception_handlers
        assert DataEntryNotFoundError in app.exception_handlers
        assert DataEntryError in app.exception_handlers
        assert Exception in app.exception_handlers

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path,status_code,error_type",
        [
            ("/bounds", 400, "OutOfBoundsError"),
            ("/missing", 404, "DataEntryNotFoundError"),
            ("/entry", 400, "DataEntryError"),
        ],
    )
    async def test_status_codes(self, app: FastAPI, path, status_code, error_type):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            response = await client.get(path)

        assert response.status_code == status_code
        assert response.json()["error_type"] == error_type

    @pytest.mark.asyncio
    async def test_unhandled_error_is_500(self, app: FastAPI):
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://localhost") as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"
