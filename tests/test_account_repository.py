import pytest

from src.account import AccountRepository, DEFAULT_DISPLAY_NAME
from src.common.exceptions import AuthError, ConflictError, ValidationError


@pytest.fixture
def repo():
    return AccountRepository()


def test_register_assigns_increasing_ids(repo):
    first = repo.register(" Alice@Example.com ", " Alice ", "pw")
    second = repo.register("bob@example.com", "Bob", "pw")

    assert first.member_id == 1
    assert second.member_id == 2
    assert first.email == "alice@example.com"
    assert first.name == "Alice"
    assert repo.is_logged_in("alice@example.com") is False


@pytest.mark.parametrize(
    "email, name, password",
    [("", "n", "p"), ("e@x.com", " ", "p"), ("e@x.com", "n", None), (1, "n", "p")],
)
def test_register_requires_fields(repo, email, name, password):
    with pytest.raises(ValidationError):
        repo.register(email, name, password)


def test_register_conflict_is_case_insensitive(repo):
    repo.register("alice@example.com", "Alice", "pw")
    with pytest.raises(ConflictError):
        repo.register("ALICE@example.com", "Other", "pw2")


def test_authenticate_sets_login_state(repo):
    repo.register("alice@example.com", "Alice", "pw")

    member = repo.authenticate("Alice@Example.com", "pw")

    assert member.welcome_message == "Welcome, Alice!"
    assert repo.is_logged_in("alice@example.com") is True


def test_authenticate_rejects_bad_credentials(repo):
    repo.register("alice@example.com", "Alice", "pw")

    with pytest.raises(AuthError) as excinfo:
        repo.authenticate("alice@example.com", "wrong")
    assert excinfo.value.extra == {"isLogined": 0}

    with pytest.raises(AuthError):
        repo.authenticate("nobody@example.com", "pw")

    with pytest.raises(ValidationError):
        repo.authenticate("alice@example.com", "")


def test_login_external_creates_member_without_password(repo):
    member = repo.login_external("new@example.com", "New Person")

    assert member.password is None
    assert member.name == "New Person"
    assert repo.is_logged_in("new@example.com") is True

    with pytest.raises(AuthError):
        repo.authenticate("new@example.com", "anything")


def test_login_external_reuses_existing_member(repo):
    existing = repo.register("alice@example.com", "Alice", "pw")

    member = repo.login_external("ALICE@example.com", "Alice From Google")

    assert member.member_id == existing.member_id
    assert member.name == "Alice"
    assert member.password == "pw"


def test_login_external_backfills_blank_name(repo):
    member = repo.login_external("x@example.com", None)
    assert member.name == DEFAULT_DISPLAY_NAME

    member.name = ""
    repo.login_external("x@example.com", "Filled")
    assert repo.get("x@example.com").name == "Filled"


def test_logout_is_idempotent(repo):
    repo.register("alice@example.com", "Alice", "pw")
    repo.authenticate("alice@example.com", "pw")

    assert repo.logout("ALICE@example.com") is False
    assert repo.is_logged_in("alice@example.com") is False

    assert repo.logout("ghost@example.com") is False
    assert repo.logout(None) is False
    assert repo.get("ghost@example.com") is None
