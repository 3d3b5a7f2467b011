"""
Pytest Configuration and Fixtures

Provides shared fixtures for all tests.
"""

import csv
from pathlib import Path
from typing import Dict, List

import pytest

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

LISTING_FIELDS = [
    "",
    "realSum",
    "room_type",
    "person_capacity",
    "host_is_superhost",
    "cleanliness_rating",
    "guest_satisfaction_overall",
    "bedrooms",
    "dist",
    "metro_dist",
]


def write_listing_csv(path: Path, rows: List[Dict[str, str]], bom: bool = False) -> Path:
    """Write listing rows the way the source dataset lays them out.

    The first, unnamed column holds the row index.
    """
    encoding = "utf-8-sig" if bom else "utf-8"
    with open(path, "w", newline="", encoding=encoding) as f:
        writer = csv.DictWriter(f, fieldnames=LISTING_FIELDS)
        writer.writeheader()
        for index, row in enumerate(rows):
            writer.writerow({"": str(index), **row})
    return path


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="function")
def amsterdam_weekday_rows() -> List[Dict[str, str]]:
    return [
        {
            "realSum": "200", "room_type": "Private room", "person_capacity": "2",
            "host_is_superhost": "t", "cleanliness_rating": "9",
            "guest_satisfaction_overall": "90", "bedrooms": "1",
            "dist": "1.0", "metro_dist": "0.5",
        },
        {
            "realSum": "400", "room_type": "Entire home/apt", "person_capacity": "4",
            "host_is_superhost": "f", "cleanliness_rating": "10",
            "guest_satisfaction_overall": "100", "bedrooms": "2",
            "dist": "3.0", "metro_dist": "1.5",
        },
    ]


@pytest.fixture(scope="function")
def amsterdam_weekend_rows() -> List[Dict[str, str]]:
    return [
        {
            "realSum": "600", "room_type": "Entire home/apt", "person_capacity": "6",
            "host_is_superhost": "TRUE", "cleanliness_rating": "",
            "guest_satisfaction_overall": "95", "bedrooms": "3",
            "dist": "2.0", "metro_dist": "",
        },
        {
            "realSum": "300", "room_type": "", "person_capacity": "2",
            "host_is_superhost": "t", "cleanliness_rating": "8",
            "guest_satisfaction_overall": "85", "bedrooms": "1",
            "dist": "2.0", "metro_dist": "1.0",
        },
    ]


@pytest.fixture(scope="function")
def data_dir(tmp_path: Path, amsterdam_weekday_rows, amsterdam_weekend_rows) -> Path:
    """Temporary data directory.

    - amsterdam: weekday and weekend files (weekend file with a BOM)
    - rome: weekday file only
    - berlin: zero-byte weekday file, no weekend file
    - every other catalog city: no files
    """
    directory = tmp_path / "data"
    directory.mkdir()

    write_listing_csv(directory / "amsterdam_weekdays.csv", amsterdam_weekday_rows)
    write_listing_csv(directory / "amsterdam_weekends.csv", amsterdam_weekend_rows, bom=True)
    write_listing_csv(directory / "rome_weekdays.csv", [
        {
            "realSum": "150", "room_type": "Private room", "person_capacity": "3",
            "host_is_superhost": "False", "cleanliness_rating": "9.5",
            "guest_satisfaction_overall": "93", "bedrooms": "1",
            "dist": "0.8", "metro_dist": "0.3",
        },
    ])
    (directory / "berlin_weekdays.csv").write_text("")
    return directory


@pytest.fixture(scope="function")
def test_config(data_dir: Path, monkeypatch):
    """Create test configuration pointing at the temporary data directory.

    Yields:
        Config object configured for testing.
    """
    monkeypatch.setenv("CITYMATCH_DATA_DIR", str(data_dir))
    monkeypatch.setenv("CITYMATCH_LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("CITYMATCH_TOP_N", raising=False)

    # Reset config singleton
    from citymatch.config import reset_config, get_config
    reset_config()

    config = get_config()
    yield config

    reset_config()


@pytest.fixture(scope="function")
def client(test_config):
    """Flask test client backed by the temporary data directory."""
    from citymatch.api.server import create_app

    app = create_app({"TESTING": True})
    return app.test_client()


@pytest.fixture(scope="function")
def quiz_params() -> Dict[str, str]:
    """Quiz query-string parameters as the front end sends them."""
    return {
        "weekday": "true",
        "priceRange": "[100,300]",
        "cleanlinessValue": "9",
        "distanceRange": "[0.2,1]",
        "superhostPreference": "all_listings",
        "personCapacity": "[2,4]",
        "satisfactionScore": "90",
        "importance": (
            '{"price":5,"cleanliness":5,"distance":5,"roomType":3,'
            '"superhost":5,"capacity":5,"satisfaction":5}'
        ),
    }
