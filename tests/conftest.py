import pytest
from bs4 import BeautifulSoup


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep BIDIWEB_* variables from the outer environment out of the tests."""
    for name in (
        "BIDIWEB_CONFIG",
        "BIDIWEB_STRATEGY",
        "BIDIWEB_THRESHOLD",
        "BIDIWEB_MODE",
        "BIDIWEB_ALIGN",
        "BIDIWEB_PRUNE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_soup():
    def _make(html):
        return BeautifulSoup(html, "html.parser")

    return _make
