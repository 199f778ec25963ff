"""
DynamoDB Table: bookings

Partition key: booking_id (string)

Attributes:
    - booking_id (string, PK, UUID4)
    - product_id, product_name
    - price_per_piece, quantity, total_price (number/decimal)
    - email, first_name, last_name, contact_number
    - delivery_address (string or map)
    - payment_method (string)      # 'Cash on Delivery', 'Card', ...
    - status (string)              # pending, confirmed, processing, shipped, delivered, cancelled
    - payment_status (string)      # pending, paid
    - tracking (list<map>)         # [{stage, location, note, timestamp}], append-only
    - created_at, updated_at (string, ISO8601)

GSIs:
    - GSI1_EmailBookings:
        PK = email
        SK = created_at
"""

from typing import Any, Dict, List, Optional

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from config import config
from db.dynamo import get_table, is_condition_failure, query_all
from utils.coreutil import convert_floats_for_dynamodb, new_id, now_iso

EMAIL_INDEX = "GSI1_EmailBookings"


class BookingDB:
    def __init__(self, table_name: Optional[str] = None, table=None):
        self.table = table if table is not None else get_table(table_name or config.BOOKINGS_TABLE)

    # -------------------- Create --------------------

    def create_booking(
        self,
        product_id: str,
        product_name: str,
        price_per_piece: Any,
        quantity: Any,
        total_price: Any,
        email: str,
        first_name: str,
        last_name: str,
        contact_number: str,
        delivery_address: Any,
        payment_method: str,
        status: str,
        payment_status: str,
        tracking: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        booking_id = new_id()
        timestamp = now_iso()

        item = {
            "booking_id": booking_id,
            "product_id": product_id,
            "product_name": product_name,
            "price_per_piece": price_per_piece,
            "quantity": quantity,
            "total_price": total_price,
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "contact_number": contact_number,
            "delivery_address": delivery_address,
            "payment_method": payment_method,
            "status": status,
            "payment_status": payment_status,
            "tracking": tracking or [],
            "created_at": timestamp,
            "updated_at": timestamp,
        }
        item = convert_floats_for_dynamodb(item)

        self.table.put_item(Item=item)
        return item

    # -------------------- Get --------------------

    def get_booking(self, booking_id: str) -> Optional[Dict[str, Any]]:
        resp = self.table.get_item(Key={"booking_id": booking_id})
        return resp.get("Item")

    # -------------------- Update --------------------

    def update_booking(
        self,
        booking_id: str,
        fields: Optional[Dict[str, Any]] = None,
        push_tracking: Optional[List[Dict[str, Any]]] = None,
    ) -> bool:
        """
        Set fields and/or append tracking events on an existing booking.

        Returns False when no booking with booking_id exists; the write is
        conditional so a missing booking is never created by an update.
        """
        fields = dict(fields or {})
        fields.setdefault("updated_at", now_iso())

        set_parts = []
        names: Dict[str, str] = {}
        values: Dict[str, Any] = {}
        for i, (name, value) in enumerate(fields.items()):
            set_parts.append(f"#f{i} = :v{i}")
            names[f"#f{i}"] = name
            values[f":v{i}"] = value

        if push_tracking:
            set_parts.append("#t = list_append(if_not_exists(#t, :empty), :t)")
            names["#t"] = "tracking"
            values[":empty"] = []
            values[":t"] = push_tracking

        try:
            self.table.update_item(
                Key={"booking_id": booking_id},
                UpdateExpression="SET " + ", ".join(set_parts),
                ConditionExpression="attribute_exists(booking_id)",
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=convert_floats_for_dynamodb(values),
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            if is_condition_failure(e):
                return False
            raise
        return True

    def update_status(self, booking_id: str, new_status: str) -> bool:
        return self.update_booking(booking_id, fields={"status": new_status})

    # -------------------- Delete --------------------

    def delete_booking(self, booking_id: str) -> bool:
        resp = self.table.delete_item(
            Key={"booking_id": booking_id},
            ReturnValues="ALL_OLD",
        )
        return "Attributes" in resp

    # -------------------- Queries --------------------

    def list_bookings_for_email(self, email: str) -> List[Dict[str, Any]]:
        """All bookings of a customer, latest first."""
        return query_all(
            self.table,
            IndexName=EMAIL_INDEX,
            KeyConditionExpression=Key("email").eq(email),
            ScanIndexForward=False,  # latest first
        )

    def list_bookings_page(self, email: str, skip: int = 0, limit: int = 10) -> List[Dict[str, Any]]:
        # DynamoDB has no offset; read the customer's partition and slice
        items = self.list_bookings_for_email(email)
        return items[skip:skip + limit]

    def count_bookings(self, email: str, status: Optional[str] = None) -> int:
        kwargs: Dict[str, Any] = {
            "IndexName": EMAIL_INDEX,
            "KeyConditionExpression": Key("email").eq(email),
            "Select": "COUNT",
        }
        if status is not None:
            kwargs["FilterExpression"] = Attr("status").eq(status)

        total = 0
        while True:
            resp = self.table.query(**kwargs)
            total += resp.get("Count", 0)
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                return total
            kwargs["ExclusiveStartKey"] = last_key
