from .demo import display, list_products, main
from .security import User
from .shop import ProductCirc, ProductRect


def test_list_products_displays_each_in_order(capsys):
    list_products([ProductRect("a", 1, 2, 3), ProductCirc("b", 1, "d", 2)])
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "A - 6"
    assert lines[1].startswith("B - 3.14159")


def test_display_accepts_any_displayable(capsys):
    for item in (ProductCirc("Ballon", 25, "d", 40), ProductRect("Téléviseur", 400, 200, 80), User()):
        display(item)
        out = capsys.readouterr().out
        assert out.count("\n") == 1


def test_main_runs_the_fixed_sequence(capsys):
    assert main() == 0
    out = capsys.readouterr().out

    assert out.startswith("ProductRect {")
    assert "ProductCirc {" in out
    assert out.endswith(
        "1256.6370614359\n"
        "16000\n"
        "TÉLÉVISEUR - 16000\n"
        "BALLON - 1256.6370614359\n"
        "BALLON - 1256.6370614359\n"
        "TÉLÉVISEUR - 16000\n"
        "BOB - test@test.com\n"
    )
