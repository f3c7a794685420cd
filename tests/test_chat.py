# -*- coding: utf-8 -*-
import random
import pytest

from unica.chat import (ChatSession, FOLLOW_UP_MESSAGE, GUIDANCE_MESSAGE, INTRO_MESSAGE,
                        PendingReply, ScheduleBoard, reply_delay)
from unica.extract import OrderInfo
from unica.fixtures import SIMULATION_LIBRARY


def _simulated(session, text="案件名: 4CBTY2 8台で出荷シミュレーション"):
    pending = session.submit(text, rng=random.Random(0))
    return session.complete(pending)


def test_session_starts_with_intro_and_follow_up():
    s = ChatSession.start()
    assert [m.content for m in s.messages] == [INTRO_MESSAGE, FOLLOW_UP_MESSAGE]
    assert s.phase == "idle"


def test_blank_submission_is_ignored():
    s = ChatSession.start()
    assert s.submit("   ") is None
    assert len(s.messages) == 2
    assert not s.is_generating


def test_submit_while_awaiting_is_ignored():
    s = ChatSession.start()
    pending = s.submit("4CBM10 6台")
    assert pending is not None
    assert s.phase == "scanning"
    assert s.submit("3CB5 5台") is None
    assert [m.role for m in s.messages] == ["assistant", "assistant", "user"]


def test_complete_appends_simulation_reply_and_returns_to_idle():
    s = ChatSession.start()
    reply = _simulated(s)
    assert s.phase == "idle"
    assert s.messages[-1] is reply
    assert reply.role == "assistant"
    assert reply.content.startswith("案件名: 4CBTY2")
    assert reply.simulation.ship_date == "2025-11-15"
    assert reply.simulation.schedule.version == 0
    assert reply.simulation.history == SIMULATION_LIBRARY["4CBTY2"].history


def test_missing_project_name_yields_guidance():
    s = ChatSession.start()
    reply = s.complete(PendingReply("assistant-x", OrderInfo(None), 0.0))
    assert reply.content == GUIDANCE_MESSAGE
    assert reply.simulation is None


def test_message_ids_are_unique():
    s = ChatSession.start()
    _simulated(s)
    _simulated(s, "3CB5 5台")
    ids = [m.id for m in s.messages]
    assert len(ids) == len(set(ids))


def test_reply_delay_bounds():
    rng = random.Random(42)
    for _ in range(50):
        assert 0.75 <= reply_delay(rng) <= 1.35


def test_confirm_block_updates_only_that_message():
    s = ChatSession.start()
    first = _simulated(s)
    second = _simulated(s)
    board = s.confirm_block(first.id, "4CBTY2-S1")
    assert board.version == 1
    assert [b.status for b in board.blocks] == ["確定", "要確認", "確定"]
    updated = next(m for m in s.messages if m.id == first.id)
    assert updated.simulation.schedule is board
    # the other reply and the fixture keep their own copies
    assert next(m for m in s.messages if m.id == second.id).simulation.schedule.version == 0
    assert SIMULATION_LIBRARY["4CBTY2"].schedule[0].status == "調整中"
    assert first.simulation.schedule.blocks[0].status == "調整中"


def test_confirm_all():
    s = ChatSession.start()
    reply = _simulated(s)
    board = s.confirm_all(reply.id)
    assert board.pending == 0
    assert all(b.status == "確定" for b in board.blocks)
    assert s.confirm_all(reply.id).version == 2


def test_confirm_unknown_targets():
    s = ChatSession.start()
    reply = _simulated(s)
    with pytest.raises(KeyError):
        s.confirm_block(reply.id, "NOPE")
    with pytest.raises(KeyError):
        s.confirm_all("assistant-intro")
    with pytest.raises(KeyError):
        s.confirm_all("missing")


def test_board_pending_count():
    board = ScheduleBoard(SIMULATION_LIBRARY["4CBTYK4"].schedule)
    assert board.pending == 2
    assert board.confirm("4CBTYK4-S3").pending == 2
    assert board.confirm("4CBTYK4-S1").pending == 1
