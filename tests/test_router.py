import logging

from salvo.events import Category, Event
from salvo.router import EventRouter


def test_shot_event_logged_at_info(caplog):
    router = EventRouter()
    with caplog.at_level(logging.INFO, logger="salvo.router"):
        router(Event(Category.TURN, "shot", {"attacker": 2, "coord": "B5", "result": "hit", "remaining": 13}))
    assert "Player 2 fired at B5: hit (13 segments left)" in caplog.text


def test_end_without_winner(caplog):
    router = EventRouter()
    with caplog.at_level(logging.INFO, logger="salvo.router"):
        router(Event(Category.TURN, "end", {"winner": None, "reason": "aborted", "shots": 0}))
    assert "without a winner (aborted)" in caplog.text


def test_aborted_is_a_warning(caplog):
    router = EventRouter()
    with caplog.at_level(logging.WARNING, logger="salvo.router"):
        router(Event(Category.SYSTEM, "aborted", {"player": 1, "reason": "aborted"}))
    assert [r.levelno for r in caplog.records] == [logging.WARNING]


def test_bad_payload_does_not_raise(caplog):
    router = EventRouter()
    with caplog.at_level(logging.ERROR, logger="salvo.router"):
        router(Event(Category.TURN, "shot", {}))
    assert "Event routing failed" in caplog.text
