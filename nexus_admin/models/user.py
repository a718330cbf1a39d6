"""User documents."""

from typing import Optional

ROLES = ("user", "admin", "instructor", "manager", "employee")
PROVIDERS = ("credentials", "google")

# Never sent back to clients
PRIVATE_FIELDS = {"password": 0}


def new_user(name: str, email: str, password_hash: Optional[str], role: str = "user",
             provider: str = "credentials", active: bool = True) -> dict:
    return {
        "name": name.strip(),
        "email": email.strip().lower(),
        "password": password_hash,
        "role": role,
        "provider": provider,
        "active": active,
        "profile_image": None,
        "last_login": None,
    }


def is_active(user: dict) -> bool:
    """Only an explicit ``active: false`` deactivates an account."""
    return user.get("active") is not False


def public_view(user: dict) -> dict:
    return {k: v for k, v in user.items() if k != "password"}
