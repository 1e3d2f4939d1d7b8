from . import attributes
from . import categories
from . import diagnostics
from . import media
from . import missing_products
from . import products
from . import views

__all__ = [
    "attributes",
    "categories",
    "diagnostics",
    "media",
    "missing_products",
    "products",
    "views",
]
