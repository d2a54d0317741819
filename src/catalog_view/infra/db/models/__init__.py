from catalog_view.infra.db.models.base import Base
from catalog_view.infra.db.models.product import ProductRow

__all__ = ["Base", "ProductRow"]
