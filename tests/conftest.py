"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from fitspec.models.member import Gender, MemberProfile


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the CLI and web app at an isolated data directory."""
    monkeypatch.setenv("FITSPEC_DATA_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def male_profile():
    """28 year old, 70kg male - the unscaled reference member."""
    return MemberProfile(age=28, bodyweight=70, gender=Gender.MALE, member_id="m-001", name="Minjun")


@pytest.fixture
def female_profile():
    """45 year old, 60kg female."""
    return MemberProfile(age=45, bodyweight=60, gender=Gender.FEMALE, member_id="m-002")


@pytest.fixture
def knee_profile():
    """Reference member with a reported knee injury."""
    return MemberProfile(
        age=28,
        bodyweight=70,
        gender=Gender.MALE,
        injury_notes="knee",
        member_id="m-003",
    )


@pytest.fixture
def sample_request():
    """A mixed batch across all three exercise groups."""
    return {
        "profile": {
            "age": 28,
            "bodyweight": 70,
            "gender": "male",
            "name": "Minjun",
            "member_id": "m-001",
            "injury_notes": "knee",
        },
        "measurements": [
            {"category_id": 4, "value": 120},
            {"category_id": 7, "value": 160},
            {"category_id": 8, "value": 30},
            {"category_id": 13, "value": "good"},
        ],
        "flags": {"4": {"depth_limited": True}},
    }
