"""
DynamoDB Table: products

Partition key: product_id (string, UUID4)

Attributes:
    - product_id (string, PK)
    - name (string)
    - price fields (number/decimal), e.g. price, pricePerPiece
    - inventory (map)        # {available: number, ...}
    - created_at (string, ISO8601)

# Note: products are schema-flexible; any extra attribute given at creation is stored as-is.
"""

from typing import Any, Dict, List, Optional

from botocore.exceptions import ClientError

from config import config
from db.dynamo import get_table, is_condition_failure, is_invalid_document_path, scan_all
from utils.coreutil import convert_floats_for_dynamodb, new_id, now_iso, to_decimal


class ProductDB:
    def __init__(self, table_name: Optional[str] = None, table=None):
        self.table = table if table is not None else get_table(table_name or config.PRODUCTS_TABLE)

    def create_product(self, name: str, **attributes: Any) -> Dict[str, Any]:
        product_id = new_id()
        item = {
            **attributes,
            "product_id": product_id,
            "name": name,
            "created_at": now_iso(),
        }
        item = convert_floats_for_dynamodb(item)

        self.table.put_item(Item=item)
        return item

    def get_product(self, product_id: str) -> Optional[Dict[str, Any]]:
        response = self.table.get_item(Key={"product_id": product_id})
        return response.get("Item")

    def decrement_inventory(self, product_id: str, quantity: Any) -> bool:
        """
        Subtract quantity from inventory.available. There is no floor check:
        available may go negative. A product stored without an inventory map
        gets one, starting from zero. Returns False if the product does not exist.
        """
        try:
            return self._decrement_available(product_id, quantity)
        except ClientError as e:
            if not is_invalid_document_path(e):
                raise

        # No inventory map yet: the nested path cannot be set directly
        try:
            self.table.update_item(
                Key={"product_id": product_id},
                UpdateExpression="SET #inv = :inv",
                ConditionExpression="attribute_exists(product_id) AND attribute_not_exists(#inv)",
                ExpressionAttributeNames={"#inv": "inventory"},
                ExpressionAttributeValues={":inv": {"available": -to_decimal(quantity)}},
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            if not is_condition_failure(e):
                raise
            # Product gone, or another writer created the map in between
            if self.get_product(product_id) is None:
                return False
            return self._decrement_available(product_id, quantity)
        return True

    def _decrement_available(self, product_id: str, quantity: Any) -> bool:
        try:
            self.table.update_item(
                Key={"product_id": product_id},
                UpdateExpression="SET #inv.#avail = if_not_exists(#inv.#avail, :zero) - :q",
                ConditionExpression="attribute_exists(product_id)",
                ExpressionAttributeNames={"#inv": "inventory", "#avail": "available"},
                ExpressionAttributeValues={":q": to_decimal(quantity), ":zero": to_decimal(0)},
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            if is_condition_failure(e):
                return False
            raise
        return True

    def list_products(self, skip: int = 0, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Lists products newest first.
        NOTE: scan + in-memory sort; fine for a small catalog, use a GSI on created_at beyond that.
        """
        items = scan_all(self.table)
        items.sort(key=lambda p: p.get("created_at", ""), reverse=True)
        return items[skip:skip + limit]

    def count_products(self) -> int:
        kwargs: Dict[str, Any] = {"Select": "COUNT"}
        total = 0
        while True:
            resp = self.table.scan(**kwargs)
            total += resp.get("Count", 0)
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                return total
            kwargs["ExclusiveStartKey"] = last_key
