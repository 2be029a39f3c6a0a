"""Pytest configuration and shared fixtures."""
import pytest
from typer.testing import CliRunner


# Numbers with valid check digits, one per line of the reference list.
VALID_NUMBERS = [
    "02063626662",
    "29085114474",
    "22038538709",
    "31032335430",
    "31031670791",
    "05061739582",
    "25077648065",
    "11051602872",
    "30110618235",
    "07045838387",
    "06041579631",
    "21016514958",
]


@pytest.fixture
def valid_numbers():
    """Numbers known to carry correct check digits."""
    return list(VALID_NUMBERS)


@pytest.fixture
def category_samples():
    """One complete, valid number per category."""
    return {
        "normal": "02063626662",
        "d-number": "42063626656",
        "h-number": "02463626645",
        "fh-number": "83918473850",
    }


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep .env files and FNR_* variables from leaking into tests."""
    for key in ("FNR_LOG_LEVEL", "FNR_JSON_OUTPUT", "FNR_EXPORT_DIR", "FNR_COUNT_PROGRESS_EVERY"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def runner():
    """Typer CLI runner."""
    return CliRunner()
