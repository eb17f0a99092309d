import django
from django.conf import settings

DEFAULTS = {
    "INSTALLED_APPS": ["rest_framework"],
    "SHOP_LINE_BREAK": "\n",
    "SHOP_FLOAT_PRECISION": 14,
    "SHOP_LOG_LEVEL": "INFO",
}


def setup(**overrides) -> None:
    """settings.configure()는 한 번만 가능 -> 이미 설정돼 있으면 overrides만 덮어쓴다."""
    if settings.configured:
        for name, value in overrides.items():
            setattr(settings, name, value)
        return
    settings.configure(**{**DEFAULTS, **overrides})
    django.setup()


def get(name: str):
    setup()
    return getattr(settings, name, DEFAULTS[name])


def line_break() -> str:
    return get("SHOP_LINE_BREAK")


def float_precision() -> int:
    return get("SHOP_FLOAT_PRECISION")


def format_float(value: float) -> str:
    # 16000.0 -> "16000", 1256.6370614359172 -> "1256.6370614359"
    return f"{value:.{float_precision()}g}"
