from typing import Any, Dict, Optional

from db.user import UserDB
from features.errors import NotFoundError, ValidationError, log_operation


class UserService:
    """Account operations keyed by email."""

    def __init__(self, db: Optional[UserDB] = None):
        self.db = db or UserDB()

    @log_operation("save_user", "Failed to save user")
    def save_user(self, user: Dict[str, Any]) -> Dict[str, Any]:
        """
        Save a user (create if new, update if the email already exists).

        Returns {"created": bool, "email": str}.
        """
        email = user.get("email")
        if not email:
            raise ValidationError("Email is required")

        if self.db.get_user(email):
            if not self.db.update_user(email, user):
                raise NotFoundError("User")
            return {"created": False, "email": email}

        self.db.create_user(**user)
        return {"created": True, "email": email}

    @log_operation("get_user", "Failed to fetch user")
    def get_user(self, email: str) -> Dict[str, Any]:
        item = self.db.get_user(email)
        if not item:
            raise NotFoundError("User")
        return item

    @log_operation("update_user", "Failed to update user")
    def update_user(self, email: str, updates: Dict[str, Any]) -> None:
        if not self.db.update_user(email, updates):
            raise NotFoundError("User")
