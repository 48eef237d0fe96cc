from pathlib import Path

import pytest

BENCHMARK_DIR = Path(__file__).parent


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    memray_active = config.pluginmanager.hasplugin("memray")
    skip_memory = pytest.mark.skip(reason="pytest-memray is not installed")
    for item in items:
        if not item.path.is_relative_to(BENCHMARK_DIR):
            continue
        item.add_marker(pytest.mark.benchmark)
        if not memray_active and item.get_closest_marker("limit_memory"):
            item.add_marker(skip_memory)
