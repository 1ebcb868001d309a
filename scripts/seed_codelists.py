"""Seed codelists from scripts/seed-data.json.

Loads voltage levels and building classifications (parents before children,
resolved by parent_code). Existing codes are skipped. Every insert goes
through the application services, so each one is audited.

Usage:
    python -m scripts.seed_codelists [path/to/seed-data.json]

Requires: DATABASE_URL and an up-to-date schema (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from codelists.application.dtos.classification import ClassificationNodeData
from codelists.application.dtos.voltage_level import VoltageLevelData
from codelists.application.services import (
    AuditRecorder,
    CodelistChangePublisher,
    HierarchyManager,
)
from codelists.application.use_cases import (
    BuildingClassificationService,
    VoltageLevelService,
)
from codelists.core.config import get_settings
from codelists.infrastructure.persistence.database import (
    dispose_engine,
    get_session_factory,
)
from codelists.infrastructure.persistence.repositories import (
    BuildingClassificationRepository,
    VoltageLevelRepository,
    make_audit_writer_scope,
)

SEED_ACTOR = "seed"


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(path: Path) -> None:
    _load_env()
    get_settings.cache_clear()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    data = json.loads(path.read_text(encoding="utf-8"))

    session_factory = get_session_factory()
    recorder = AuditRecorder(
        make_audit_writer_scope(session_factory),
        system_actor=get_settings().audit_system_actor,
    )
    publisher = CodelistChangePublisher()

    async with session_factory() as session:
        voltage_service = VoltageLevelService(
            VoltageLevelRepository(session), recorder, publisher
        )
        for item in data.get("voltage_levels", []):
            if await voltage_service.repo.exists_by_code(item["code"]):
                print(f"  Voltage level {item['code']} already exists, skip")
                continue
            created = await voltage_service.create(VoltageLevelData(**item), SEED_ACTOR)
            print(f"  Voltage level {created.code} -> {created.id}")

        repo = BuildingClassificationRepository(session)
        kso_service = BuildingClassificationService(
            repo, HierarchyManager(repo), recorder, publisher
        )
        items = sorted(
            data.get("building_classifications", []), key=lambda i: i["level"]
        )
        for item in items:
            if await repo.exists_by_code(item["code"]):
                print(f"  Classification {item['code']} already exists, skip")
                continue
            fields = dict(item)
            parent_code = fields.pop("parent_code", None)
            parent = await repo.get_by_code(parent_code) if parent_code else None
            if parent_code and parent is None:
                print(
                    f"  Skip {item['code']}: parent {parent_code} not found",
                    file=sys.stderr,
                )
                continue
            node = await kso_service.create(
                ClassificationNodeData(**fields, parent_id=parent.id if parent else None),
                SEED_ACTOR,
            )
            print(f"  Classification {node.code} (level {node.level}) -> {node.id}")

    await dispose_engine()
    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
