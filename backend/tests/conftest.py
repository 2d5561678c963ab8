import pytest
from fastapi.testclient import TestClient

from board_markup.markup import render, render_html


@pytest.fixture()
def client() -> TestClient:
    from board_markup.main import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_filter_rule_cache():
    # Filter rules are loaded once per process; tests change the config.
    from board_markup.api import routes

    routes.get_filter_rules.cache_clear()
    yield
    routes.get_filter_rules.cache_clear()


@pytest.fixture()
def to_html():
    """Render a body to HTML without the sanitizer pass."""

    def _to_html(text: str) -> str:
        return render_html(render(text))

    return _to_html
