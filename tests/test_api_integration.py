from pathlib import Path

from fastapi.testclient import TestClient

from apps.web.main import build_loader, create_app, get_loader
from libs.i18n import DirectoryListingChecker, FileSystemChecker


def test_listing_page_default_locale(client):
    response = client.get("/list_of_movies")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    body = response.text
    assert "Continue Watching" in body
    # row without a translation keeps its key
    assert "Unlisted" in body
    assert 'alt="Movie One"' in body
    assert 'data-bs-wide="m1_wide.jpg"' in body
    assert 'src="m2_small.jpg"' in body


def test_listing_page_language_fallback(client):
    response = client.get("/list_of_movies", params={"locale": "es_SP"})
    assert response.status_code == 200
    assert "Seguir viendo" in response.text
    assert 'alt="Película uno"' in response.text
    # es file has no title for m2
    assert 'alt=""' in response.text


def test_listing_page_unknown_locale_uses_default(client):
    response = client.get("/list_of_movies", params={"locale": "de_DE"})
    assert response.status_code == 200
    assert "Continue Watching" in response.text


def test_requests_for_different_locales_are_isolated(client):
    es = client.get("/list_of_movies", params={"locale": "es"})
    en = client.get("/list_of_movies", params={"locale": "en_US"})
    assert "Seguir viendo" in es.text and "Continue Watching" not in es.text
    assert "Continue Watching" in en.text and "Seguir viendo" not in en.text


def test_root_redirects_to_listing(client):
    response = client.get("/", follow_redirects=False)
    assert response.status_code in (302, 307)
    assert response.headers["location"] == "/list_of_movies"


def test_static_popover_script_is_served(client):
    response = client.get("/static/javascripts/scripts.js")
    assert response.status_code == 200
    assert "popover" in response.text


def test_unknown_path_renders_error_page(client):
    response = client.get("/nope")
    assert response.status_code == 404
    assert "Something went wrong" in response.text


def test_missing_catalog_renders_error_page(settings, tmp_path: Path):
    settings.catalog_path = tmp_path / "missing.json"
    with TestClient(create_app(settings)) as client:
        response = client.get("/list_of_movies")
    assert response.status_code == 500
    assert "Something went wrong" in response.text
    assert "CatalogError" in response.text
    # no partial content
    assert "Continue Watching" not in response.text


def test_missing_translations_render_error_page(settings, tmp_path: Path):
    empty = tmp_path / "empty_locales"
    empty.mkdir()
    settings.locales_dir = empty
    with TestClient(create_app(settings)) as client:
        response = client.get("/list_of_movies")
    assert response.status_code == 500
    assert "TranslationReadError" in response.text
    assert "m1_small.jpg" not in response.text


def test_production_hides_error_details(settings, tmp_path: Path):
    settings.catalog_path = tmp_path / "missing.json"
    settings.environment = "production"
    with TestClient(create_app(settings)) as client:
        response = client.get("/list_of_movies")
    assert response.status_code == 500
    assert "CatalogError" not in response.text


def test_loader_dependency_can_be_overridden(settings):
    class FailingLoader:
        async def get_strings(self, namespace, locale=None):
            raise RuntimeError("boom")

    app = create_app(settings)
    app.dependency_overrides[get_loader] = lambda: FailingLoader()
    with TestClient(app) as client:
        response = client.get("/list_of_movies")
    assert response.status_code == 500
    assert "boom" in response.text


def test_page_language_follows_resolved_locale(client):
    es = client.get("/list_of_movies", params={"locale": "es_SP"})
    en = client.get("/list_of_movies", params={"locale": "de_DE"})
    assert '<html lang="es">' in es.text
    assert '<html lang="en">' in en.text


def test_cache_listing_setting_selects_checker(settings):
    assert isinstance(build_loader(settings).resolver.checker, FileSystemChecker)

    settings.cache_listing = True
    loader = build_loader(settings)
    assert isinstance(loader.resolver.checker, DirectoryListingChecker)
    with TestClient(create_app(settings)) as client:
        response = client.get("/list_of_movies", params={"locale": "es_SP"})
    assert response.status_code == 200
    assert "Seguir viendo" in response.text
