from __future__ import annotations

import itertools
import logging
import math
from abc import abstractmethod
from typing import Optional

from .. import conf
from ..displayable import Displayable, write_line

logger = logging.getLogger("shop")

DEFAULT_DESCRIPTION = (
    "cabin old hunter quick team bag division short flame pretty mouse grandfather "
    "grandmother model carefully beside suppose doctor gather other laugh ahead color base"
)

# 프로세스 단위 id 시퀀스 (1부터)
_ids = itertools.count(1)


class AbstractProduct(Displayable):
    def __init__(self, name: str, price: float, description: str = DEFAULT_DESCRIPTION) -> None:
        self._id = next(_ids)
        self._name = name
        self._price = price
        self._description = description
        logger.debug(f"product created: id={self._id} type={type(self).__name__}")

    @abstractmethod
    def get_surface(self) -> float:
        ...

    def render(self) -> str:
        return f"{self.get_name()} - {conf.format_float(self.get_surface())}"

    def display(self) -> None:
        write_line(self.render())

    def get_id(self) -> int:
        return self._id

    def get_name(self) -> str:
        # 저장값은 그대로, 읽을 때만 대문자
        return self._name.upper()

    def set_name(self, name: str) -> AbstractProduct:
        self._name = name
        return self

    def get_price(self) -> float:
        return self._price

    def set_price(self, price: float) -> AbstractProduct:
        self._price = price
        return self

    def get_description(self) -> str:
        return self._description

    def set_description(self, description: str) -> AbstractProduct:
        self._description = description
        return self


class ProductRect(AbstractProduct):
    def __init__(
        self,
        name: str,
        price: float,
        width: int,
        height: int,
        description: Optional[str] = None,
    ) -> None:
        if description is None:
            super().__init__(name, price)
        else:
            super().__init__(name, price, description)
        self._width = width
        self._height = height

    def get_surface(self) -> float:
        return float(self._width * self._height)

    def get_width(self) -> int:
        return self._width

    def set_width(self, width: int) -> ProductRect:
        self._width = width
        return self

    def get_height(self) -> int:
        return self._height

    def set_height(self, height: int) -> ProductRect:
        self._height = height
        return self


class ProductCirc(AbstractProduct):
    def __init__(self, name: str, price: float, description: str, diameter: int) -> None:
        super().__init__(name, price, description)
        self._diameter = diameter

    def get_surface(self) -> float:
        return math.pi * ((self._diameter / 2) ** 2)

    def get_diameter(self) -> int:
        return self._diameter

    def set_diameter(self, diameter: int) -> ProductCirc:
        self._diameter = diameter
        return self
