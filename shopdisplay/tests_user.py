from django.test import override_settings

from .displayable import Displayable
from .security import User


def test_default_user():
    user = User()
    assert user.get_name() == "BOB"
    assert user.get_email() == "test@test.com"


def test_user_name_is_not_transformed():
    assert User("alice", "a@b.c").get_name() == "alice"


def test_user_setters_chain():
    user = User()
    assert user.set_name("carol").set_email("c@example.com") is user
    assert user.render() == "carol - c@example.com"


def test_user_display(capsys):
    user = User()
    assert isinstance(user, Displayable)

    user.display()
    assert capsys.readouterr().out == "BOB - test@test.com\n"


def test_user_display_html_line_break(capsys):
    with override_settings(SHOP_LINE_BREAK="<br />"):
        User().display()
    assert capsys.readouterr().out == "BOB - test@test.com<br />"
