# unica/chat.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import itertools, random
from dataclasses import dataclass, field, replace
from typing import List, Literal, Optional, Tuple

from unica.extract import OrderInfo, extract_order_info
from unica.fixtures import ScheduleBlock, SimilarCase
from unica.simulate import build_simulation_narrative

Role = Literal["assistant", "user"]
Phase = Literal["idle", "awaiting", "scanning"]

INTRO_MESSAGE = (
    "株式会社ユニカ 納期回答エージェント『AgenticAI for Unica』です。案件名（型番）と数量を指定いただければ、"
    "コンセプトLT・在庫・製造負荷を自動参照し、出荷シミュレーションの最短案と代替案を提示します。"
)
FOLLOW_UP_MESSAGE = (
    "例：「案件名: 4CBTY2 8台で出荷シミュレーション」「4CBM10を5台で在庫優先案も」。型番をそのまま入力していただいて大丈夫です。"
)
GUIDANCE_MESSAGE = "案件名が特定できませんでした。例：「案件名: 4CBTY2 8台で出荷シミュレーション」と入力してください。"

SUGGESTED_PROMPTS = [
    "案件名: 4CBTY2 8台で出荷シミュレーション",
    "4CBTYK4 を至急案件として4台で評価して",
    "案件名: 3CB5 5台 / 製造負荷を前提に提案して",
    "案件名: 4CBM10 6台 / 代替案も比較して",
]
SAMPLE_THREADS = [
    {"id": "thread-1", "title": "4CBTY2 8台 最短案確認", "timestamp": "今日 08:10"},
    {"id": "thread-2", "title": "4CBT3 6台 在庫優先案", "timestamp": "昨日 17:22"},
    {"id": "thread-3", "title": "3cB10 7台 製造負荷チェック", "timestamp": "昨日 09:05"},
    {"id": "thread-4", "title": "4CBM10 5台 需要計画連携", "timestamp": "日曜 21:14"},
]

def reply_delay(rng: random.Random | None = None) -> float:
    """Seconds of artificial "thinking" before the assistant answers."""
    return 0.75 + (rng or random).random() * 0.6


@dataclass(frozen=True)
class ScheduleBoard:
    """A message's own copy of its schedule blocks. Every change yields a new version."""
    blocks: Tuple[ScheduleBlock, ...] = ()
    version: int = 0

    def confirm(self, block_id: str) -> "ScheduleBoard":
        if not any(b.id == block_id for b in self.blocks):
            raise KeyError(block_id)
        blocks = tuple(b.confirmed() if b.id == block_id else b for b in self.blocks)
        return ScheduleBoard(blocks, self.version + 1)

    def confirm_all(self) -> "ScheduleBoard":
        return ScheduleBoard(tuple(b.confirmed() for b in self.blocks), self.version + 1)

    @property
    def pending(self) -> int:
        return sum(1 for b in self.blocks if b.status != "確定")

@dataclass(frozen=True)
class SimulationAttachment:
    history: Tuple[SimilarCase, ...]
    schedule: ScheduleBoard
    ship_date: str

@dataclass(frozen=True)
class Message:
    id: str
    role: Role
    content: str
    simulation: Optional[SimulationAttachment] = None

@dataclass(frozen=True)
class PendingReply:
    message_id: str
    order: OrderInfo
    delay: float


@dataclass
class ChatSession:
    messages: List[Message] = field(default_factory=list)
    phase: Phase = "idle"
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1), repr=False)

    @classmethod
    def start(cls) -> "ChatSession":
        s = cls()
        s.messages = [Message("assistant-intro", "assistant", INTRO_MESSAGE),
                      Message("assistant-follow-up", "assistant", FOLLOW_UP_MESSAGE)]
        return s

    @property
    def is_generating(self) -> bool:
        return self.phase != "idle"

    def _next_id(self, role: Role) -> str:
        return f"{role}-{next(self._ids)}"

    def submit(self, text: str, rng: random.Random | None = None) -> Optional[PendingReply]:
        """Takes a user turn. Returns None when the input is blank or a reply is still pending."""
        if self.is_generating:
            return None
        content = (text or "").strip()
        if not content:
            return None
        order = extract_order_info(content)
        self.messages = [*self.messages, Message(self._next_id("user"), "user", content)]
        self.phase = "scanning" if order.project_name else "awaiting"
        return PendingReply(self._next_id("assistant"), order, reply_delay(rng))

    def complete(self, pending: PendingReply) -> Message:
        """Appends the reply. The guidance branch is reached by /api/simulate callers; submit() always yields a name."""
        order = pending.order
        if order.project_name:
            result = build_simulation_narrative(order.project_name, order.quantity)
            reply = Message(pending.message_id, "assistant", result.narrative,
                            SimulationAttachment(result.history, ScheduleBoard(result.schedule), result.ship_date))
        else:
            reply = Message(pending.message_id, "assistant", GUIDANCE_MESSAGE)
        self.messages = [*self.messages, reply]
        self.phase = "idle"
        return reply

    def _update_board(self, message_id: str, change) -> ScheduleBoard:
        msg = next((m for m in self.messages if m.id == message_id), None)
        if msg is None or msg.simulation is None:
            raise KeyError(message_id)
        board = change(msg.simulation.schedule)
        updated = replace(msg, simulation=replace(msg.simulation, schedule=board))
        self.messages = [updated if m.id == message_id else m for m in self.messages]
        return board

    def confirm_block(self, message_id: str, block_id: str) -> ScheduleBoard:
        return self._update_board(message_id, lambda b: b.confirm(block_id))

    def confirm_all(self, message_id: str) -> ScheduleBoard:
        return self._update_board(message_id, lambda b: b.confirm_all())
