"""CLI adapter to create the finance tables and seed default categories.

Run once against a fresh database: the schema is created if missing and
the default categories are inserted only when no category exists yet.
"""

from axis_finance.application.use_cases.load_snapshot import LoadSnapshotUseCase
from axis_finance.application.use_cases.manage_records import (
    ManageCategoriesUseCase,
)
from axis_finance.domain.constants import DEFAULT_CATEGORIES
from axis_finance.domain.models import Category
from axis_finance.infrastructure.container import build_records_store
from axis_finance.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def main() -> None:
    """Prepare the schema and seed the default categories."""
    logger = get_app_logger()
    get_usage_logger().info("init_db_cli started")
    store = build_records_store()
    store.prepare_schema()

    snapshot = LoadSnapshotUseCase(store, logger=logger).execute()
    if snapshot.categories:
        print(
            f"Schema ready; {len(snapshot.categories)} categories already "
            f"present, nothing seeded."
        )
        return

    manage = ManageCategoriesUseCase(store, logger=logger)
    with store.atomic():
        for defaults in DEFAULT_CATEGORIES:
            snapshot = manage.add(snapshot, Category(**defaults)).snapshot
    print(f"Schema ready; seeded {len(snapshot.categories)} categories.")


if __name__ == "__main__":  # pragma: no cover
    main()
