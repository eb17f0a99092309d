import json

from rest_framework import serializers

from . import conf
from .security import User
from .shop import ProductCirc, ProductRect


# 원본 필드 덤프용: 저장된 값 그대로 (name 대문자 변환 없음)
class UserSerializer(serializers.Serializer):
    name = serializers.CharField(source="_name")
    email = serializers.CharField(source="_email")


class ProductSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="_id")
    name = serializers.CharField(source="_name")
    price = serializers.FloatField(source="_price")
    description = serializers.CharField(source="_description")


class ProductRectSerializer(ProductSerializer):
    width = serializers.IntegerField(source="_width")
    height = serializers.IntegerField(source="_height")


class ProductCircSerializer(ProductSerializer):
    diameter = serializers.IntegerField(source="_diameter")


SERIALIZERS = {
    User: UserSerializer,
    ProductRect: ProductRectSerializer,
    ProductCirc: ProductCircSerializer,
}


def serialize(obj) -> dict:
    conf.setup()
    serializer_cls = SERIALIZERS.get(type(obj))
    if serializer_cls is None:
        raise TypeError(f"No serializer registered for {type(obj).__name__}")
    return dict(serializer_cls(obj).data)


def dump(obj) -> str:
    data = serialize(obj)
    return f"{type(obj).__name__} {json.dumps(data, indent=2, ensure_ascii=False)}"
