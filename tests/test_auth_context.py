"""Tests for the auth context."""

import pytest

from studio_projects.services.auth import AuthContext
from tests.conftest import make_project, make_user


def _registration(**overrides) -> dict[str, object]:
    data: dict[str, object] = {
        "email": "new@studio.test",
        "login": "new",
        "password": "pw",
        "name": "Newcomer",
        "role": "designer",
    }
    data.update(overrides)
    return data


def test_login_by_login_or_email(context: AuthContext, user_repository) -> None:
    user_repository.users = [make_user("u1", login="anna", email="anna@studio.test")]

    assert context.login("anna", "secret")
    assert context.user is not None
    context.logout()
    assert context.login("anna@studio.test", "secret")
    assert context.is_authenticated


def test_login_rejects_wrong_password(context: AuthContext, user_repository) -> None:
    user_repository.users = [make_user("u1")]

    assert not context.login("u1", "wrong")
    assert context.user is None
    assert not context.is_authenticated


def test_login_unknown_user(context: AuthContext) -> None:
    assert not context.login("ghost", "secret")


def test_logout_clears_user(context: AuthContext, user_repository) -> None:
    user_repository.users = [make_user("u1")]
    context.login("u1", "secret")

    context.logout()

    assert context.user is None


def test_register_creates_and_signs_in(context: AuthContext) -> None:
    assert context.register(_registration(avatar="me.png", phone="+7 900"))

    assert context.user is not None
    assert context.user.login == "new"
    assert context.user.phone == "+7 900"
    assert context.user.avatar is None
    assert context.users == [context.user]


def test_register_rejects_taken_login(context: AuthContext, user_repository) -> None:
    user_repository.users = [make_user("u1", login="new")]

    assert not context.register(_registration())
    assert len(context.users) == 1
    assert context.user is None


def test_add_user_does_not_sign_in(context: AuthContext) -> None:
    user = context.add_user(_registration())

    assert context.get_user(user.id) == user
    assert context.user is None


def test_add_user_ignores_supplied_id(context: AuthContext) -> None:
    user = context.add_user(_registration(id="forced"))

    assert user.id != "forced"


def test_update_user_syncs_current_user(context: AuthContext, user_repository) -> None:
    user_repository.users = [make_user("u1"), make_user("u2")]
    context.login("u1", "secret")

    context.update_user("u1", {"name": "Renamed"})

    assert context.user is not None
    assert context.user.name == "Renamed"
    assert context.get_user("u1").name == "Renamed"
    assert context.get_user("u2").name == "User u2"


def test_update_other_user_leaves_current(
    context: AuthContext, user_repository
) -> None:
    user_repository.users = [make_user("u1"), make_user("u2")]
    context.login("u1", "secret")

    context.update_user("u2", {"name": "Other"})

    assert context.user.name == "User u1"


def test_update_user_cannot_change_id(context: AuthContext, user_repository) -> None:
    user_repository.users = [make_user("u1")]

    context.update_user("u1", {"id": "u9", "name": "Kept"})

    assert context.get_user("u1").name == "Kept"
    assert context.get_user("u9") is None


def test_update_unknown_user_is_noop(context: AuthContext, user_repository) -> None:
    user_repository.users = [make_user("u1")]

    context.update_user("missing", {"name": "Nobody"})

    assert [user.name for user in context.users] == ["User u1"]


def test_update_user_rejects_unknown_fields(
    context: AuthContext, user_repository
) -> None:
    user_repository.users = [make_user("u1")]

    with pytest.raises(ValueError, match="nickname"):
        context.update_user("u1", {"nickname": "x"})


def test_delete_current_user_logs_out(context: AuthContext, user_repository) -> None:
    user_repository.users = [make_user("u1"), make_user("u2")]
    context.login("u1", "secret")

    context.delete_user("u1")

    assert context.user is None
    assert [user.id for user in context.users] == ["u2"]


def test_delete_unknown_user_is_noop(context: AuthContext, user_repository) -> None:
    user_repository.users = [make_user("u1")]

    context.delete_user("missing")

    assert len(context.users) == 1


def test_user_edit_does_not_rewrite_project_snapshots(
    context: AuthContext, user_repository, project_repository
) -> None:
    photographer = make_user("u1")
    user_repository.users = [photographer]
    project_repository.projects = [make_project(photographer=photographer)]

    context.update_user("u1", {"name": "Renamed"})

    assert context.get_project("p1").photographer.name == "User u1"


def test_users_with_role(context: AuthContext, team) -> None:
    assert [user.id for user in context.users_with_role("admin")] == ["a1"]
    assert context.users_with_role("designer") == [team["designer"]]
