"""
Tests for rbaclite.utils, rbaclite.storage and rbaclite.cancellation.
"""

import time
from uuid import UUID, uuid4

import pytest

from rbaclite.cancellation import CancellationToken, check_cancelled
from rbaclite.errors import InvalidArgumentError, OperationCancelledError
from rbaclite.rbac import Role
from rbaclite.storage import ConcurrentMap
from rbaclite.utils import NIL_UUID, new_id, not_default, not_null, resolve_id


class TestGuards:
    """Tests for argument guards."""

    def test_not_null_passes_values_through(self):
        """Test that valid values are returned unchanged."""
        assert not_null("admin", "name") == "admin"
        assert not_null(0, "count") == 0

    def test_not_null_rejects_none_and_empty(self):
        """Test that None and empty strings are rejected."""
        for value in (None, "", "  "):
            with pytest.raises(InvalidArgumentError) as exc_info:
                not_null(value, "system_name")
            assert exc_info.value.name == "system_name"

    def test_invalid_argument_is_value_error(self):
        """Test that argument errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            not_null(None, "value")

    def test_not_default(self):
        """Test identifier checks."""
        value = uuid4()
        assert not_default(value, "id") == value

        for invalid in (None, NIL_UUID, "not-a-uuid"):
            with pytest.raises(InvalidArgumentError):
                not_default(invalid, "id")

    def test_resolve_id(self):
        """Test resolving identifiers from UUIDs and records."""
        role = Role(id=uuid4(), system_name="admin", display_name="Admin")

        assert resolve_id(role.id, "role") == role.id
        assert resolve_id(role, "role") == role.id

        with pytest.raises(InvalidArgumentError):
            resolve_id(None, "role")
        with pytest.raises(InvalidArgumentError):
            resolve_id(object(), "role")

    def test_new_id(self):
        """Test identifier generation."""
        first, second = new_id(), new_id()

        assert isinstance(first, UUID)
        assert first.version == 4
        assert first != second


class TestConcurrentMap:
    """Tests for ConcurrentMap class."""

    def test_try_add(self):
        """Test insert-if-absent."""
        items = ConcurrentMap()

        assert items.try_add("a", 1) is True
        assert items.try_add("a", 2) is False
        assert items.try_get("a") == 1
        assert len(items) == 1

    def test_try_get_missing(self):
        """Test reading a missing key."""
        items = ConcurrentMap()

        assert items.try_get("missing") is None
        assert items.contains("missing") is False
        assert "missing" not in items

    def test_try_update_compares_identity(self):
        """Test that the swap only matches the exact stored object."""
        items = ConcurrentMap()
        stored = ["value"]
        items.try_add("a", stored)

        assert items.try_update("a", ["new"], ["value"]) is False
        assert items.try_update("a", ["new"], stored) is True
        assert items.try_get("a") == ["new"]
        assert items.try_update("missing", 1, None) is False

    def test_try_remove(self):
        """Test unconditional and conditional removal."""
        items = ConcurrentMap()
        stored = object()
        items.try_add("a", stored)
        items.try_add("b", 2)

        assert items.try_remove("a", object()) is False
        assert items.try_remove("a", stored) is True
        assert items.try_remove("a") is False
        assert items.try_remove("b") is True
        assert len(items) == 0

    def test_values_and_find(self):
        """Test snapshots."""
        items = ConcurrentMap()
        for i in range(5):
            items.try_add(i, i * 10)

        assert sorted(items.values()) == [0, 10, 20, 30, 40]
        assert sorted(items.find(lambda v: v >= 30)) == [30, 40]


class TestCancellationToken:
    """Tests for CancellationToken class."""

    def test_new_token_not_cancelled(self):
        """Test a fresh token."""
        token = CancellationToken()

        assert token.is_cancelled is False
        token.raise_if_cancelled()
        check_cancelled(token)
        check_cancelled(None)

    def test_cancel(self):
        """Test explicit cancellation."""
        token = CancellationToken()
        token.cancel()

        assert token.is_cancelled is True
        with pytest.raises(OperationCancelledError):
            token.raise_if_cancelled()

    def test_cancelled_factory(self):
        """Test the pre-cancelled factory."""
        with pytest.raises(OperationCancelledError):
            check_cancelled(CancellationToken.cancelled())

    def test_timeout(self):
        """Test deadline expiry."""
        token = CancellationToken.with_timeout(0.01)
        time.sleep(0.05)

        assert token.is_expired is True
        assert token.is_cancelled is True
        with pytest.raises(OperationCancelledError, match="timed out"):
            token.raise_if_cancelled()

    def test_long_timeout_not_expired(self):
        """Test that a distant deadline does not cancel."""
        token = CancellationToken(timeout=3600)

        assert token.is_expired is False
        token.raise_if_cancelled()

    def test_negative_timeout_rejected(self):
        """Test that negative timeouts are rejected."""
        with pytest.raises(ValueError):
            CancellationToken(timeout=-1)
