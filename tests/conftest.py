import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure project root on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from apps.web.main import create_app
from libs.core.settings import Settings


EN_US = """\
list.display_name.RecentlyWatchedList=Continue Watching
list.display_name.PopularTitles=Popular
movies.title_short.m1=Movie One
movies.title_short.m2=Movie Two
"""

ES = """\
list.display_name.RecentlyWatchedList=Seguir viendo
movies.title_short.m1=Película uno
"""

CATALOG = {
    "lists": [
        {"summary": {"key": "RecentlyWatchedList"}, "movies": [0, 1]},
        {"summary": {"key": "Unlisted"}, "movies": [1]},
    ],
    "movies": [
        {"summary": {"id": "m1", "box_art": {"150x214": "m1_small.jpg", "350x197": "m1_wide.jpg"}}},
        {"summary": {"id": "m2", "box_art": {"150x214": "m2_small.jpg", "350x197": "m2_wide.jpg"}}},
    ],
}


@pytest.fixture()
def locales_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "locales"
    directory.mkdir()
    (directory / "lolomo_en_US.properties").write_text(EN_US, encoding="utf-8")
    (directory / "lolomo_es.properties").write_text(ES, encoding="utf-8")
    return directory


@pytest.fixture()
def catalog_path(tmp_path: Path) -> Path:
    path = tmp_path / "lolomo.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return path


@pytest.fixture()
def settings(locales_dir: Path, catalog_path: Path) -> Settings:
    return Settings(
        locales_dir=locales_dir,
        catalog_path=catalog_path,
        default_locale="en_US",
        environment="development",
    )


@pytest.fixture()
def client(settings: Settings):
    """FastAPI test client backed by temporary locale and catalog files."""

    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
