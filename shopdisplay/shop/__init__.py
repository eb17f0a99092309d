from .products import DEFAULT_DESCRIPTION, AbstractProduct, ProductCirc, ProductRect

__all__ = ["DEFAULT_DESCRIPTION", "AbstractProduct", "ProductCirc", "ProductRect"]
