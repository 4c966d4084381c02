import pytest

from unmark.cleaning.cleaner import Cleaner
from unmark.cleaning.models import BoundaryPolicy
from unmark.detection.detector import Detector


@pytest.fixture()
def detector() -> Detector:
    return Detector()


@pytest.fixture()
def cleaner() -> Cleaner:
    return Cleaner()


@pytest.fixture()
def boundary_cleaner() -> Cleaner:
    return Cleaner(policy=BoundaryPolicy.INSERT_SPACE_AT_WORD_BOUNDARY)


@pytest.fixture()
def watermarked_text() -> str:
    """A paragraph salted with one character from every category."""
    return (
        "The\u00a0quick brown\u200b fox\u202fjumps over\u2029"
        "the lazy\u2060 dog.\ufeff"
    )


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove unmark settings from the environment."""
    for name in ("APP_ENV", "LOG_LEVEL", "BOUNDARY_POLICY", "INPUT_ENCODING", "OUTPUT_INDENT"):
        monkeypatch.delenv(name, raising=False)
