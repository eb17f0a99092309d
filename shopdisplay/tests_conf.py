import logging

from django.conf import settings
from django.test import override_settings

from . import conf, demo
from .security import User
from .shop import ProductCirc, ProductRect


def test_float_precision_setting(capsys):
    with override_settings(SHOP_FLOAT_PRECISION=5):
        ProductCirc("Ballon", 25, "rond", 40).display()
    assert capsys.readouterr().out == "BALLON - 1256.6\n"


def test_setup_twice_keeps_settings():
    conf.setup()
    conf.setup()

    assert settings.configured
    assert conf.line_break() == "\n"
    assert conf.float_precision() == 14


def test_setup_after_configure_applies_overrides(capsys):
    with override_settings():
        conf.setup(SHOP_LINE_BREAK="<br />")
        assert conf.line_break() == "<br />"
        User().display()

    assert capsys.readouterr().out == "BOB - test@test.com<br />"
    assert conf.line_break() == "\n"


def test_log_level_reaches_basic_config(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    with override_settings(SHOP_LOG_LEVEL="DEBUG"):
        assert demo.main() == 0

    assert calls[0]["level"] == "DEBUG"


def test_large_surface_uses_exponent_notation():
    # PHP echo는 1.0E+16
    assert ProductRect("x", 1, 10 ** 8, 10 ** 8).render() == "X - 1e+16"
