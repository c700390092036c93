"""Tests for error handling utilities."""

import logging

import httpx
import pytest

from depot_client.exceptions import (
    DepotHTTPError,
    MetadataDecodeError,
    NoFilePartError,
    NoXFilenameError,
    RemotePackageNotFound,
    WriteSyncFailedError,
)
from depot_client.models import PackageIdent
from depot_client.utils.error_handling import (
    handle_depot_error,
    handle_generic_error,
    handle_http_error,
    with_error_handling,
)


@pytest.fixture(autouse=True)
def _capture_errors(caplog):
    caplog.set_level(logging.DEBUG)


class TestHandleDepotError:
    """Tests for handle_depot_error function."""

    def test_package_not_found(self, caplog):
        """Test a missing package names the identifier."""
        handle_depot_error(RemotePackageNotFound(PackageIdent.from_string("core/foo")), "fetch", log_traceback=False)
        assert "Package not found during fetch: core/foo" in caplog.text

    @pytest.mark.parametrize(
        "status,message",
        [(404, "Resource not found"), (500, "Server error"), (503, "Server error"), (403, "HTTP error")],
    )
    def test_http_status(self, caplog, status, message):
        """Test status codes map to messages."""
        handle_depot_error(DepotHTTPError(status, "http://repo.example/keys/k"), "fetch", log_traceback=False)
        assert message in caplog.text
        assert str(status) in caplog.text

    @pytest.mark.parametrize(
        "error",
        [NoXFilenameError("http://repo.example/keys/k"), MetadataDecodeError("core/foo", "bad json")],
    )
    def test_invalid_response(self, caplog, error):
        """Test protocol violations are reported as invalid responses."""
        handle_depot_error(error, "fetch", log_traceback=False)
        assert "Invalid response from depot" in caplog.text

    @pytest.mark.parametrize("error", [WriteSyncFailedError("/tmp/a.tmp"), NoFilePartError("/tmp/")])
    def test_local_file(self, caplog, error):
        """Test local failures are reported as file errors."""
        handle_depot_error(error, "fetch", log_traceback=False)
        assert "Local file error" in caplog.text

    def test_traceback_logged_at_debug(self, caplog):
        """Test the traceback is logged when requested."""
        handle_depot_error(DepotHTTPError(500), "fetch")
        assert "Traceback" in caplog.text


class TestHandleHttpError:
    """Tests for handle_http_error function."""

    def test_connect_error(self, caplog):
        """Test connection failures mention availability."""
        handle_http_error(httpx.ConnectError("refused"), "fetch", log_traceback=False)
        assert "Depot is not available" in caplog.text

    def test_timeout(self, caplog):
        """Test timeouts are reported as such."""
        handle_http_error(httpx.ReadTimeout("slow"), "fetch", log_traceback=False)
        assert "Timed out" in caplog.text

    def test_other(self, caplog):
        """Test other transport errors."""
        handle_http_error(httpx.ReadError("reset"), "fetch", log_traceback=False)
        assert "HTTP error during fetch" in caplog.text


class TestHandleGenericError:
    """Tests for handle_generic_error function."""

    def test_os_error(self, caplog):
        """Test OSError is reported as a file error."""
        handle_generic_error(PermissionError("denied"), "fetch", log_traceback=False)
        assert "File error during fetch" in caplog.text

    def test_unexpected(self, caplog):
        """Test other exceptions are reported as unexpected."""
        handle_generic_error(ValueError("boom"), "fetch", log_traceback=False)
        assert "Unexpected error during fetch" in caplog.text


class TestWithErrorHandling:
    """Tests for with_error_handling decorator."""

    def test_successful_execution(self):
        """Test decorator with successful function execution."""

        @with_error_handling("test operation")
        def successful_func():
            return "success"

        assert successful_func() == "success"

    def test_reraise(self):
        """Test the original exception is re-raised after logging."""

        @with_error_handling("test operation")
        def failing_func():
            raise DepotHTTPError(500)

        with pytest.raises(DepotHTTPError):
            failing_func()

    def test_no_reraise(self, caplog):
        """Test errors are swallowed when reraise is False."""

        @with_error_handling("test operation", reraise=False)
        def failing_func():
            raise httpx.ConnectError("refused")

        assert failing_func() is None
        assert "Depot is not available" in caplog.text

    def test_exit_on_error(self):
        """Test the process exits with the given code."""

        @with_error_handling("test operation", exit_on_error=True, exit_code=3)
        def failing_func():
            raise OSError("disk full")

        with pytest.raises(SystemExit) as exc_info:
            failing_func()

        assert exc_info.value.code == 3
