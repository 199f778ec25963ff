from typing import Any, Dict, Optional

from db.product import ProductDB
from features.errors import NotFoundError, ValidationError, log_operation
from features.validators.common import require_id
from utils.coreutil import pagination_window


class ProductService:
    """
    Catalog business logic. Raises service errors; the API layer turns them
    into responses.
    """

    def __init__(self, db: Optional[ProductDB] = None):
        self.db = db or ProductDB()

    # ---- Commands ----
    @log_operation("add_product", "Failed to add product")
    def add_product(self, product: Dict[str, Any]) -> str:
        if not product.get("name"):
            raise ValidationError("Product name is required")
        attributes = {k: v for k, v in product.items() if k not in ("name", "product_id", "created_at")}
        item = self.db.create_product(name=product["name"], **attributes)
        return item["product_id"]

    # ---- Queries ----
    @log_operation("get_product", "Failed to fetch product")
    def get_product(self, product_id: str) -> Dict[str, Any]:
        require_id(product_id, "Product")
        item = self.db.get_product(product_id)
        if not item:
            raise NotFoundError("Product")
        return item

    @log_operation("list_products", "Failed to fetch products")
    def list_products(self, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        skip, limit = pagination_window(page, limit)
        return {
            "total": self.db.count_products(),
            "page": page,
            "limit": limit,
            "data": self.db.list_products(skip=skip, limit=limit),
        }
