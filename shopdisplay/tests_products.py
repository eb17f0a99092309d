import math

import pytest

from .displayable import Displayable
from .shop import DEFAULT_DESCRIPTION, AbstractProduct, ProductCirc, ProductRect


def test_rect_surface_is_width_times_height():
    rect = ProductRect("Téléviseur", 400, 200, 80)

    assert rect.get_surface() == 16000
    assert rect.get_name() == "TÉLÉVISEUR"


@pytest.mark.parametrize("width,height", [(0, 0), (1, 7), (13, 4)])
def test_rect_surface_matches_product(width, height):
    assert ProductRect("x", 1, width, height).get_surface() == width * height


def test_circ_surface_uses_real_division():
    circ = ProductCirc("Ballon", 25, "rond", 40)
    assert circ.get_surface() == pytest.approx(math.pi * 20 ** 2)
    assert circ.get_surface() == pytest.approx(1256.637, abs=1e-3)

    # 홀수 지름도 잘리지 않아야 함
    odd = ProductCirc("Bille", 1, "petite", 3)
    assert odd.get_surface() == pytest.approx(math.pi * 1.5 ** 2)


def test_name_is_uppercased_on_read_only():
    rect = ProductRect("lampe", 10, 1, 1)
    assert rect.get_name() == "LAMPE"

    rect.set_name("Écran plat")
    assert rect.get_name() == "ÉCRAN PLAT"
    assert rect._name == "Écran plat"


def test_rect_without_description_gets_default():
    assert ProductRect("x", 1, 1, 1).get_description() == DEFAULT_DESCRIPTION
    assert ProductRect("x", 1, 1, 1, "custom").get_description() == "custom"


def test_circ_requires_description():
    with pytest.raises(TypeError):
        ProductCirc("Ballon", 25, 40)


def test_fluent_setters_return_same_instance_and_chain_in_order():
    rect = ProductRect("a", 1, 1, 1)

    assert rect.set_name("b") is rect
    result = rect.set_price(9.5).set_description("d").set_width(3).set_height(4).set_name("c")

    assert result is rect
    assert rect.get_price() == 9.5
    assert rect.get_description() == "d"
    assert (rect.get_width(), rect.get_height()) == (3, 4)
    assert rect.get_name() == "C"
    assert rect.get_surface() == 12

    circ = ProductCirc("o", 1, "d", 2)
    assert circ.set_diameter(10) is circ
    assert circ.get_diameter() == 10


def test_ids_are_assigned_and_unique():
    a = ProductRect("a", 1, 1, 1)
    b = ProductCirc("b", 1, "d", 1)

    assert a.get_id() > 0
    assert b.get_id() > a.get_id()


def test_abstract_product_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractProduct("x", 1)


def test_products_are_displayable(capsys):
    rect = ProductRect("Téléviseur", 400, 200, 80)
    circ = ProductCirc("Ballon", 25, "rond", 40)

    assert isinstance(rect, Displayable)
    rect.display()
    circ.display()

    assert capsys.readouterr().out == "TÉLÉVISEUR - 16000\nBALLON - 1256.6370614359\n"
