"""Unit tests for the session user."""

from shopcart.domain.model.user import Role, User


class TestUser:

    def test_default_is_guest(self):
        user = User()
        assert user.role is Role.GUEST
        assert not user.is_admin
        assert str(user) == "Guest (User)"

    def test_admin(self):
        user = User("Alice", "alice@mail.com", Role.ADMIN)
        assert user.is_admin
        assert str(user) == "Alice (Admin)"
