# unica/simulate.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from unica.fixtures import (
    DEFAULT_KEY, DEFAULT_SIMULATION, REFERENCE_NOTE, SIMULATION_LIBRARY,
    ScheduleBlock, SimilarCase, SimulationPlan, SimulationProfile,
)

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_LABEL = "標準プロファイル（案件登録推奨）"
DECISION_PROMPT = "意思決定: 最短案で承認 / 代替案に切替 / 条件を修正 のいずれかをご指示ください。"

@dataclass(frozen=True)
class MatchedProfile:
    key: str
    profile: SimulationProfile

    @property
    def is_default(self) -> bool:
        return self.key == DEFAULT_KEY

@dataclass(frozen=True)
class SimulationResult:
    project_name: str
    matched_key: str
    requested_quantity: int
    quantity_delta: int
    narrative: str
    history: Tuple[SimilarCase, ...]
    schedule: Tuple[ScheduleBlock, ...]
    ship_date: str


def simulate_shipment(project_name: str,
                      library: Mapping[str, SimulationProfile] = SIMULATION_LIBRARY) -> MatchedProfile:
    upper = project_name.strip().upper()
    key = next((k for k in library if k in upper), None)
    if key is None:
        logger.debug("no template for %r, using default profile", project_name)
        return MatchedProfile(DEFAULT_KEY, DEFAULT_SIMULATION)
    logger.debug("matched %r to template %s", project_name, key)
    return MatchedProfile(key, library[key])

def format_number(value: int) -> str:
    return f"{value:,}"

def quantity_diff_line(default_quantity: int, quantity: Optional[int]) -> str:
    if quantity is None:
        return f"数量差異: 標準ロット {format_number(default_quantity)}台を基準に計算しています。"
    diff = quantity - default_quantity
    if diff == 0:
        return "数量差異: 標準ロットと同数です。"
    sign = "+" if diff > 0 else ""
    return f"数量差異: {sign}{diff}台（標準 {format_number(default_quantity)}台）"

def _plan_lines(heading: str, plan: SimulationPlan):
    return [
        f"{heading} | {plan.label}",
        f"  出荷日: {plan.ship_date} / LT {plan.lead_time_days}日",
        f"  アロケーション: {plan.allocation}",
        f"  製造ウィンドウ: {plan.manufacturing_window}",
        f"  リスク: {plan.risk}",
        f"  メモ: {plan.note}",
    ]

def build_simulation_narrative(project_name: str, quantity: Optional[int] = None,
                               library: Mapping[str, SimulationProfile] = SIMULATION_LIBRARY) -> SimulationResult:
    """Assembles the shipment-simulation reply for one request.

    Sections are emitted in a fixed order: header, reference snapshot, plans
    (primary first, then each alternative in authored order) and the closing
    decision prompt. Same inputs always give the same text.
    """
    match = simulate_shipment(project_name, library)
    sim = match.profile
    requested = quantity if quantity is not None else sim.default_quantity
    delta = quantity - sim.default_quantity if quantity is not None else 0
    lt, inv, load = sim.references.concept_lt, sim.references.inventory, sim.references.production_load

    lines = [
        f"案件名: {project_name}",
        f"参照テンプレート: {DEFAULT_TEMPLATE_LABEL if match.is_default else match.key}",
        f"優先度: {sim.priority} / リクエスト数量: {format_number(requested)}台",
        quantity_diff_line(sim.default_quantity, quantity),
        "",
        "■ 自動参照スナップショット",
        f"・コンセプトLT: {lt.variant}（{lt.days}日） - {lt.reason}",
        f"・在庫: {inv.sku} / 利用可能 {format_number(inv.available)}台（予約 {format_number(inv.reserved)}台） - {inv.comment}",
        f"・製造負荷: {load.line} / 稼働率 {load.utilization}%（{load.severity}） - {load.comment}",
        "",
        "■ 出荷プラン",
    ]
    lines += _plan_lines("◎ 最短案", sim.primary_plan)
    for i, plan in enumerate(sim.alternative_plans, start=1):
        lines.append("")
        lines += _plan_lines(f"▲ 代替案{i}", plan)
    lines += ["", f"補足: {REFERENCE_NOTE}", DECISION_PROMPT]

    return SimulationResult(
        project_name=project_name, matched_key=match.key,
        requested_quantity=requested, quantity_delta=delta,
        narrative="\n".join(lines), history=sim.history, schedule=sim.schedule,
        ship_date=sim.primary_plan.ship_date,
    )
