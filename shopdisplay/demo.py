import logging
from typing import Iterable

from . import conf
from .displayable import Displayable
from .security import User
from .serializers import dump
from .shop import AbstractProduct, ProductCirc, ProductRect

logger = logging.getLogger("shop")

BALLON_DESCRIPTION = (
    "chance tired plus border individual carried foreign future careful managed arm "
    "know three disease missing basic led evidence science industry origin former car blanket"
)


def list_products(products: Iterable[AbstractProduct]) -> None:
    for product in products:
        product.display()


def display(item: Displayable) -> None:
    item.display()


def main() -> int:
    conf.setup()
    logging.basicConfig(level=conf.get("SHOP_LOG_LEVEL"), format="%(asctime)s %(levelname)s %(message)s")

    # 1) 상품 생성 + 구조 덤프(디버그용)
    product_rect = ProductRect("Téléviseur", 400, 200, 80)
    print(dump(product_rect))

    product_circ = ProductCirc("Ballon", 25, BALLON_DESCRIPTION, 40)
    print(dump(product_circ))

    # 2) 넓이
    print(conf.format_float(product_circ.get_surface()))
    print(conf.format_float(product_rect.get_surface()))

    # 3) 목록 출력
    logger.info("list products")
    list_products([product_rect, product_circ])

    # 4) Displayable이면 타입 상관없이
    logger.info("display items")
    display(product_circ)
    display(product_rect)
    display(User())
    return 0
