"""
DynamoDB Table: users

Partition key: email (string)

Attributes:
    - email (string, PK)
    - any profile fields sent by the client (name, photo, phone, address, role, ...)
    - created_at (string, ISO8601)
    - updated_at (string, ISO8601)
"""

from typing import Any, Dict, Optional

from botocore.exceptions import ClientError

from config import config
from db.dynamo import get_table, is_condition_failure
from utils.coreutil import convert_floats_for_dynamodb, now_iso

# Attributes owned by the store; client payloads never overwrite them
PROTECTED_FIELDS = ("email", "created_at")


class UserDB:
    def __init__(self, table_name: Optional[str] = None, table=None):
        self.table = table if table is not None else get_table(table_name or config.USERS_TABLE)

    def get_user(self, email: str) -> Optional[Dict[str, Any]]:
        """Get a user by email."""
        response = self.table.get_item(Key={"email": email})
        return response.get("Item")

    def create_user(self, email: str, **profile: Any) -> Dict[str, Any]:
        timestamp = now_iso()
        item = {k: v for k, v in profile.items() if k not in PROTECTED_FIELDS}
        item.update({
            "email": email,
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        item = convert_floats_for_dynamodb(item)

        self.table.put_item(Item=item)
        return item

    def update_user(self, email: str, updates: Dict[str, Any]) -> bool:
        """
        Set the given fields on an existing user and refresh updated_at.
        Returns False when the user does not exist.
        """
        fields = {k: v for k, v in updates.items() if k not in PROTECTED_FIELDS}
        fields["updated_at"] = now_iso()

        set_parts = []
        names: Dict[str, str] = {}
        values: Dict[str, Any] = {}
        for i, (name, value) in enumerate(fields.items()):
            set_parts.append(f"#f{i} = :v{i}")
            names[f"#f{i}"] = name
            values[f":v{i}"] = value

        try:
            self.table.update_item(
                Key={"email": email},
                UpdateExpression="SET " + ", ".join(set_parts),
                ConditionExpression="attribute_exists(email)",
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=convert_floats_for_dynamodb(values),
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            if is_condition_failure(e):
                return False
            raise
        return True
