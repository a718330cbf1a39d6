"""
User Service - accounts, credentials and the users admin table.
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import HTTPException
from pydantic import EmailStr, TypeAdapter, ValidationError

from nexus_admin.core.auth import hash_password, verify_password
from nexus_admin.models import user as user_model
from nexus_admin.services.base import BaseService, to_object_id

logger = logging.getLogger(__name__)

EMAIL_ADAPTER = TypeAdapter(EmailStr)


class UserService(BaseService):
    collection_key = "users"
    entity_name = "User"
    search_fields = ("name", "email")
    populate_fields = ()

    def present(self, doc: dict) -> dict:
        return user_model.public_view(doc)

    def find_by_email(self, email: str) -> Optional[dict]:
        return self.collection.find_one({"email": email.strip().lower()})

    def _ensure_email_free(self, email: str, exclude_id=None):
        query = {"email": email.strip().lower()}
        if exclude_id is not None:
            query["_id"] = {"$ne": exclude_id}
        if self.collection.find_one(query, {"_id": 1}):
            raise HTTPException(status_code=409, detail="A user with this email already exists")

    @staticmethod
    def _guard_admin_role(actor: Optional[dict], new_role: Optional[str], target: Optional[dict] = None):
        """Only an admin grants, revokes or edits the admin role. ``actor=None`` is a trusted caller."""
        if actor is None or actor.get("role") == "admin":
            return
        if target is not None and target.get("role") == "admin":
            raise HTTPException(status_code=403, detail="Only admins can modify admin accounts")
        if new_role == "admin":
            raise HTTPException(status_code=403, detail="Only admins can grant the admin role")

    def create(self, name: str, email: str, password: str, role: str = "user", active: bool = True,
               actor: Optional[dict] = None) -> dict:
        self._guard_admin_role(actor, role)
        self._ensure_email_free(email)
        doc = user_model.new_user(name, email, hash_password(password), role=role, active=active)
        return self.insert(doc)

    def authenticate(self, email: str, password: str) -> dict:
        """Credential login. Raises 401 on bad credentials, 403 on a deactivated account."""
        doc = self.find_by_email(email)
        if not doc or not verify_password(password, doc.get("password")):
            raise HTTPException(status_code=401, detail="Invalid email or password")
        if not user_model.is_active(doc):
            raise HTTPException(status_code=403, detail="Account deactivated")

        now = datetime.utcnow()
        self.collection.update_one({"_id": doc["_id"]}, {"$set": {"last_login": now}})
        doc["last_login"] = now
        return doc

    def update_user(self, user_id: str, changes: dict, actor: Optional[dict] = None) -> dict:
        existing = self.find_or_404(user_id)
        self._guard_admin_role(actor, changes.get("role"), target=existing)
        if changes.get("email"):
            changes["email"] = changes["email"].strip().lower()
            self._ensure_email_free(changes["email"], exclude_id=existing["_id"])
        if changes.get("name"):
            changes["name"] = changes["name"].strip()
        if changes.get("password"):
            changes["password"] = hash_password(changes["password"])
        else:
            changes.pop("password", None)
        return self.update(existing["_id"], changes)

    def patch_field(self, user_id: str, field: str, value, actor: Optional[dict] = None) -> dict:
        """Single-field update from the users table (active, role, name or email)."""
        if field == "active":
            if not isinstance(value, bool):
                raise HTTPException(status_code=400, detail="active must be true or false")
        elif field == "role":
            if value not in user_model.ROLES:
                raise HTTPException(status_code=400, detail=f"Invalid role '{value}'")
        elif not isinstance(value, str) or not value.strip():
            raise HTTPException(status_code=400, detail=f"{field} cannot be empty")
        elif field == "email":
            try:
                value = EMAIL_ADAPTER.validate_python(value.strip())
            except ValidationError:
                raise HTTPException(status_code=400, detail="Please provide a valid email address")
        return self.update_user(user_id, {field: value}, actor=actor)

    def delete_user(self, user_id: str, actor: dict) -> dict:
        """
        Hard delete with two guards:
        - nobody deletes their own account (400)
        - only an admin deletes an admin (403)
        """
        target = self.find_or_404(user_id)
        if str(target["_id"]) == actor["id"]:
            raise HTTPException(status_code=400, detail="You cannot delete your own account")
        if target.get("role") == "admin" and actor["role"] != "admin":
            raise HTTPException(status_code=403, detail="Only admins can delete admin accounts")
        return self.delete(target["_id"])

    def me(self, user_id: str) -> dict:
        return self.to_response(self.find_or_404(to_object_id(user_id, "user id")))

    def user_summary(self) -> dict:
        return self.summary(extra={"active": {"active": {"$ne": False}}})
