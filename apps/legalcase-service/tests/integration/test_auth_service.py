"""
Integration tests for registration, login sessions and account management.
"""
import pytest

from legalcase.db.models import UserRole
from legalcase.errors import DuplicateKeyError, InvalidArgumentError, NoActiveSessionError, NotFoundError
from legalcase.services import AuthSession
from legalcase.utils.role_permissions import PERMISSION_MANAGE_USERS, PERMISSION_WRITE


@pytest.fixture
def lawyer(auth_service):
    return auth_service.register("jdoe", "hunter2", "jdoe@firm.com", "John", "Doe", UserRole.LAWYER)


@pytest.fixture
def session():
    return AuthSession()


class TestRegister:
    def test_register_stores_only_a_hash(self, auth_service, hasher, lawyer):
        assert lawyer.id is not None
        assert lawyer.enabled is True
        assert lawyer.password_hash != "hunter2"
        assert hasher.verify("hunter2", lawyer.password_hash)

    def test_default_role_is_viewer(self, auth_service):
        user = auth_service.register("guest", "pw", "guest@firm.com", "Guest", "User")
        assert user.role == UserRole.VIEWER

    def test_duplicate_username(self, auth_service, lawyer):
        with pytest.raises(DuplicateKeyError) as excinfo:
            auth_service.register("jdoe", "pw", "other@firm.com", "Jane", "Doe")
        assert excinfo.value.field == "username"

    def test_duplicate_email(self, auth_service, lawyer):
        with pytest.raises(DuplicateKeyError) as excinfo:
            auth_service.register("jane", "pw", "jdoe@firm.com", "Jane", "Doe")
        assert excinfo.value.field == "email"

    def test_empty_password_is_invalid(self, auth_service):
        with pytest.raises(InvalidArgumentError):
            auth_service.register("jane", "", "jane@firm.com", "Jane", "Doe")
        assert auth_service.get_user_by_username("jane") is None


class TestLogin:
    def test_successful_login_sets_current_user(self, auth_service, lawyer, session):
        assert auth_service.login(session, "jdoe", "hunter2") is True

        assert session.is_logged_in
        assert session.current_user.id == lawyer.id
        assert session.current_user.username == "jdoe"
        assert not hasattr(session.current_user, "password_hash")

    @pytest.mark.parametrize("username,password", [("jdoe", "wrong"), ("nobody", "hunter2"), ("", ""), (None, None)])
    def test_failed_login_leaves_session_empty(self, auth_service, lawyer, session, username, password):
        assert auth_service.login(session, username, password) is False
        assert session.is_logged_in is False

    def test_disabled_account_cannot_log_in(self, auth_service, lawyer, session):
        auth_service.set_user_enabled(lawyer.id, False)

        assert auth_service.login(session, "jdoe", "hunter2") is False

    def test_logout_clears_session(self, auth_service, lawyer, session):
        auth_service.login(session, "jdoe", "hunter2")

        auth_service.logout(session)

        assert session.is_logged_in is False
        with pytest.raises(NoActiveSessionError):
            session.current_user

    def test_logout_without_login_is_harmless(self, auth_service, session):
        auth_service.logout(session)
        assert session.is_logged_in is False

    def test_sessions_are_independent(self, auth_service, lawyer):
        auth_service.register("root", "toor", "root@firm.com", "Root", "Admin", UserRole.ADMIN)
        mine, theirs = AuthSession(), AuthSession()

        auth_service.login(mine, "jdoe", "hunter2")
        auth_service.login(theirs, "root", "toor")

        assert mine.current_user.username == "jdoe"
        assert theirs.current_user.username == "root"
        auth_service.logout(theirs)
        assert mine.is_logged_in


class TestRoles:
    def test_role_checks(self, auth_service, lawyer, session):
        auth_service.login(session, "jdoe", "hunter2")

        assert session.has_role(UserRole.LAWYER) is True
        assert session.has_role(UserRole.ADMIN) is False
        assert session.is_admin() is False
        assert session.can(PERMISSION_WRITE) is True
        assert session.can(PERMISSION_MANAGE_USERS) is False

    def test_admin(self, auth_service, session):
        auth_service.register("root", "toor", "root@firm.com", "Root", "Admin", UserRole.ADMIN)
        auth_service.login(session, "root", "toor")

        assert session.is_admin() is True
        assert session.can(PERMISSION_MANAGE_USERS) is True

    def test_role_checks_require_login(self, session):
        with pytest.raises(NoActiveSessionError):
            session.has_role(UserRole.VIEWER)

    def test_is_admin_is_false_when_logged_out(self, auth_service, session):
        assert session.is_admin() is False

        auth_service.register("root", "toor", "root@firm.com", "Root", "Admin", UserRole.ADMIN)
        auth_service.login(session, "root", "toor")
        auth_service.logout(session)

        assert session.is_admin() is False


class TestAccountManagement:
    def test_change_password(self, auth_service, lawyer, session):
        assert auth_service.change_password(lawyer.id, "hunter2", "correct horse") is True

        assert auth_service.login(session, "jdoe", "hunter2") is False
        assert auth_service.login(session, "jdoe", "correct horse") is True

    def test_change_password_requires_old_password(self, auth_service, lawyer, session):
        assert auth_service.change_password(lawyer.id, "guess", "correct horse") is False
        assert auth_service.login(session, "jdoe", "hunter2") is True

    def test_change_password_for_missing_user(self, auth_service):
        with pytest.raises(NotFoundError):
            auth_service.change_password(99, "a", "b")

    def test_reenable_account(self, auth_service, lawyer, session):
        auth_service.set_user_enabled(lawyer.id, False)
        user = auth_service.set_user_enabled(lawyer.id, True)

        assert user.enabled is True
        assert auth_service.login(session, "jdoe", "hunter2") is True

    def test_set_enabled_for_missing_user(self, auth_service):
        with pytest.raises(NotFoundError):
            auth_service.set_user_enabled(99, False)

    def test_user_listings(self, auth_service, lawyer):
        admin = auth_service.register("root", "toor", "root@firm.com", "Root", "Admin", UserRole.ADMIN)

        assert [u.id for u in auth_service.list_users()] == [lawyer.id, admin.id]
        assert [u.id for u in auth_service.list_users_by_role(UserRole.ADMIN)] == [admin.id]
        assert auth_service.get_user(lawyer.id).username == "jdoe"

    def test_delete_user(self, auth_service, lawyer, session):
        auth_service.delete_user(lawyer.id)

        assert auth_service.get_user(lawyer.id) is None
        assert auth_service.login(session, "jdoe", "hunter2") is False
        # The username is free again
        assert auth_service.register("jdoe", "s3cret", "jdoe@firm.com", "Jane", "Doe").id is not None

    def test_delete_missing_user(self, auth_service):
        with pytest.raises(NotFoundError):
            auth_service.delete_user(99)
