from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "kintai"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from kintai.database.bootstrap import apply_schema, list_tables
from kintai.database.connection import DBConfig
from kintai.main import SCHEMA_PATH, load_settings


def main() -> None:
    settings = load_settings()
    db_config = DBConfig.from_dict(settings.db_config)

    apply_schema(db_config, schema_path=SCHEMA_PATH)
    tables = list_tables(db_config)
    print(
        "OK: Applied schema.sql -> "
        f"{db_config.user}@{db_config.host}:{db_config.port}/{db_config.database} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
