from .displayable import Displayable
from .security import User
from .shop import DEFAULT_DESCRIPTION, AbstractProduct, ProductCirc, ProductRect

__all__ = [
    "DEFAULT_DESCRIPTION",
    "AbstractProduct",
    "Displayable",
    "ProductCirc",
    "ProductRect",
    "User",
]
