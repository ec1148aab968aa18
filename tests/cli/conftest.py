"""CLI test fixtures."""

import json
import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def restore_logger():
    """Restore a plain stderr sink after commands reconfigure logging."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    payload = {
        "cities": ["Вінниця"],
        "places": [
            {"name": "Стрижавка", "cityName": "Вінниця"},
            {"name": "Якова Шепеля", "cityName": "Вінниця"},
            {"name": "Нова Пошта №5", "cityName": "Вінниця"},
        ],
    }
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def slots_file(tmp_path):
    path = tmp_path / "slots.json"
    payload = [
        {
            "id": 11,
            "placeName": "Стрижавка",
            "startTime": "2025-12-09T18:00:00",
            "endTime": "2025-12-10T09:00:00",
            "capacity": 2,
            "bookedCount": 1,
        },
        {
            "id": 12,
            "placeName": "Якова Шепеля",
            "startTime": "2025-12-09T07:00:00",
            "endTime": "2025-12-09T23:00:00",
            "capacity": 1,
        },
    ]
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path
