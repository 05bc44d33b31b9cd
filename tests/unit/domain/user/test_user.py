"""Tests for the User aggregate."""

import pytest
from pydantic import ValidationError

from ledger.domain.user import User


class TestUser:
    def test_repr_hides_password_hash(self):
        user = User(id="alice", password_hash="secret-hash")

        assert "secret-hash" not in repr(user)
        assert repr(user) == "User(id='alice')"

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            User(id="", password_hash="x")
