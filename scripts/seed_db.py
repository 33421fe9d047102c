from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "kintai"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from kintai.database.bootstrap import ensure_admin_user
from kintai.database.connection import DBConfig
from kintai.main import load_settings


def main() -> None:
    settings = load_settings()
    if not (settings.admin_email and settings.admin_password):
        sys.exit("ADMIN_EMAIL and ADMIN_PASSWORD must be set")

    db_config = DBConfig.from_dict(settings.db_config)
    ensure_admin_user(
        db_config,
        email=settings.admin_email,
        password=settings.admin_password,
        user_name=settings.admin_name,
    )
    print(f"OK: admin account {settings.admin_email} -> {db_config.database}")


if __name__ == "__main__":
    main()
