import json

import pytest

from .security import User
from .serializers import dump, serialize
from .shop import DEFAULT_DESCRIPTION, ProductCirc, ProductRect


def test_serialize_rect_keeps_stored_name():
    rect = ProductRect("Téléviseur", 400, 200, 80)
    data = serialize(rect)

    assert data == {
        "id": rect.get_id(),
        "name": "Téléviseur",
        "price": 400.0,
        "description": DEFAULT_DESCRIPTION,
        "width": 200,
        "height": 80,
    }


def test_serialize_circ_and_user():
    circ = ProductCirc("Ballon", 25, "rond", 40)
    assert serialize(circ)["diameter"] == 40
    assert "width" not in serialize(circ)

    assert serialize(User()) == {"name": "BOB", "email": "test@test.com"}


def test_dump_format():
    out = dump(User("Zoé", "z@example.com"))

    label, _, body = out.partition(" ")
    assert label == "User"
    assert json.loads(body) == {"name": "Zoé", "email": "z@example.com"}
    assert "Zoé" in body


def test_unregistered_type_raises():
    with pytest.raises(TypeError):
        serialize(object())
