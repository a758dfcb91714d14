"""Seed an administrator user."""

import os
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from models import db  # noqa: E402
from models.user import hash_password  # noqa: E402
from repositories.users import UserRepository  # noqa: E402

ADMIN_USERNAME = os.getenv("SEED_ADMIN_USERNAME", "admin")
ADMIN_EMAIL = os.getenv("SEED_ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD", "AdminPass123")


def main() -> None:
    app = create_app()
    with app.app_context():
        db.create_all()
        repository = UserRepository(db.session)
        admin = repository.find_by_username(ADMIN_USERNAME)
        if admin is None:
            admin = repository.create(
                username=ADMIN_USERNAME,
                email=ADMIN_EMAIL,
                password_hash=hash_password(ADMIN_PASSWORD),
                role="admin",
            )
            action = "created"
        else:
            admin.role = "admin"
            admin.set_password(ADMIN_PASSWORD)
            db.session.commit()
            action = "updated"
        print(f"Admin user {action}: {admin.username} (id={admin.id})")


if __name__ == "__main__":
    main()
