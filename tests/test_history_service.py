"""LogoHistory tests."""

from __future__ import annotations

import dataclasses

import pytest

from modules.services.history_service import GeneratedLogo, LogoHistory


def make_logo(logo_id: str) -> GeneratedLogo:
    return GeneratedLogo(id=logo_id, image_reference=f"img://{logo_id}", prompt="p", timestamp=1.0)


def test_record_prepends_newest_first():
    history = LogoHistory()
    for logo_id in ("1", "2", "3"):
        history.record(make_logo(logo_id))

    assert [logo.id for logo in history.list()] == ["3", "2", "1"]
    assert len(history.list()) == 3


def test_record_rejects_duplicate_ids():
    history = LogoHistory()
    history.record(make_logo("1"))

    with pytest.raises(ValueError):
        history.record(make_logo("1"))


def test_list_returns_copy():
    history = LogoHistory()
    history.record(make_logo("1"))
    snapshot = history.list()
    snapshot.clear()

    assert len(history.list()) == 1


def test_clear_and_find():
    history = LogoHistory()
    history.record(make_logo("1"))
    assert history.find("1") is not None
    assert history.find("2") is None

    history.clear()

    assert history.list() == []
    assert history.find("1") is None


def test_records_are_immutable():
    logo = make_logo("1")

    with pytest.raises(dataclasses.FrozenInstanceError):
        logo.prompt = "changed"  # type: ignore[misc]
