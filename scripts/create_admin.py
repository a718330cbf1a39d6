#!/usr/bin/env python3
"""
Create Admin Script

Creates the first admin account (self-registration only ever creates
plain users), or promotes an existing account to admin.

Usage: python scripts/create_admin.py <email> <password> [name]
"""
import sys
sys.path.insert(0, '.')

from nexus_admin.db.mongodb import init_mongo_indexes, test_mongo_connection
from nexus_admin.services.user_service import UserService


def main():
    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(1)

    email, password = sys.argv[1], sys.argv[2]
    name = sys.argv[3] if len(sys.argv) > 3 else "Administrator"

    if not test_mongo_connection():
        print("❌ MongoDB is not reachable")
        sys.exit(1)
    init_mongo_indexes()

    service = UserService()
    existing = service.find_by_email(email)
    if existing:
        service.update_user(existing["_id"], {"role": "admin", "active": True, "password": password})
        print(f"✅ Promoted {email} to admin")
    else:
        user = service.create(name, email, password, role="admin")
        print(f"✅ Created admin {email} ({user['_id']})")


if __name__ == "__main__":
    main()
