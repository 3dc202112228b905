"""Authorization gate tests."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from snippet_vault.errors import InvalidCredentialsError, StorageUnavailableError
from snippet_vault.models.user import User
from snippet_vault.services.credentials import CredentialStore
from snippet_vault.services.gate import AuthGate
from snippet_vault.services.tokens import TokenCodec


def test_no_token_is_anonymous(gate):
    """Test requests without a token resolve to None."""
    assert gate.authenticate(None) is None
    assert gate.authenticate("") is None


def test_valid_token_resolves_user(gate, store, codec):
    """Test a valid token resolves to the stored user."""
    user = store.register("a@x.com", "pw123456", "Alice")

    assert gate.authenticate(codec.issue(user.id)) == user


@pytest.mark.parametrize("token", ["garbage", "a.b.c", "e30.e30.e30"])
def test_malformed_token_is_anonymous(gate, token):
    """Test malformed tokens resolve to None."""
    assert gate.authenticate(token) is None


def test_forged_token_is_anonymous(gate, store):
    """Test tokens signed with another secret resolve to None."""
    user = store.register("a@x.com", "pw123456", "Alice")
    forged = TokenCodec("not-the-server-secret").issue(user.id)

    assert gate.authenticate(forged) is None


def test_expired_token_is_anonymous(gate, store, codec, clock):
    """Test expired tokens resolve to None."""
    user = store.register("a@x.com", "pw123456", "Alice")
    token = codec.issue(user.id, timedelta(minutes=5))

    clock.advance(timedelta(minutes=5))
    assert gate.authenticate(token) is None


def test_deleted_user_is_anonymous(db, gate, store, codec):
    """Test a valid token for a user that no longer exists resolves to None."""
    user = store.register("a@x.com", "pw123456", "Alice")
    token = codec.issue(user.id)

    db.query(User).filter(User.id == user.id).delete()
    db.commit()

    assert gate.authenticate(token) is None


def test_storage_failure_propagates(codec, hasher):
    """Test the gate does not turn a storage outage into anonymous."""
    broken_db = MagicMock()
    broken_db.query.side_effect = OperationalError("SELECT", {}, Exception("timeout"))
    gate = AuthGate(codec, CredentialStore(broken_db, hasher))

    with pytest.raises(StorageUnavailableError):
        gate.authenticate(codec.issue(1))


def test_end_to_end_scenario(gate, store, codec, clock):
    """Test register, login, issue, authenticate, then expiry after 8 days."""
    user = store.register("a@x.com", "pw123456", "Alice")
    assert user.id is not None

    with pytest.raises(InvalidCredentialsError):
        store.verify_credentials("a@x.com", "wrong")

    logged_in = store.verify_credentials("a@x.com", "pw123456")
    assert logged_in.id == user.id

    token = codec.issue(logged_in.id, timedelta(days=7))
    assert gate.authenticate(token) == user

    clock.advance(timedelta(days=8))
    assert gate.authenticate(token) is None
