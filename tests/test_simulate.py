# -*- coding: utf-8 -*-
import dataclasses
import pytest

from unica.extract import extract_order_info
from unica.fixtures import DEFAULT_KEY, DEFAULT_SIMULATION, SIMULATION_LIBRARY, SimulationProfile
from unica.simulate import build_simulation_narrative, quantity_diff_line, simulate_shipment


def test_match_is_case_insensitive_substring():
    m = simulate_shipment("  案件 4cbty2 の件 ")
    assert m.key == "4CBTY2"
    assert m.profile is SIMULATION_LIBRARY["4CBTY2"]


def test_match_is_idempotent():
    assert simulate_shipment("4CBM10 6台") == simulate_shipment("4CBM10 6台")


def test_unknown_project_falls_back_to_default():
    m = simulate_shipment("XYZ999")
    assert m.key == DEFAULT_KEY
    assert m.profile is DEFAULT_SIMULATION
    assert m.is_default


def test_declaration_order_wins_on_overlapping_keys():
    short, long_ = SIMULATION_LIBRARY["3CB5"], SIMULATION_LIBRARY["3CB10"]
    assert simulate_shipment("4CB10", {"CB": short, "4CB": long_}).key == "CB"
    assert simulate_shipment("4CB10", {"4CB": long_, "CB": short}).key == "4CB"


@pytest.mark.parametrize("key", list(SIMULATION_LIBRARY))
def test_plan_section_lists_primary_then_alternatives(key):
    profile = SIMULATION_LIBRARY[key]
    text = build_simulation_narrative(key).narrative
    lines = text.splitlines()
    primary = [l for l in lines if l.startswith("◎ 最短案")]
    alternatives = [l for l in lines if l.startswith("▲ 代替案")]
    assert primary == [f"◎ 最短案 | {profile.plans[0].label}"]
    assert alternatives == [f"▲ 代替案{i} | {p.label}" for i, p in enumerate(profile.plans[1:], start=1)]


@pytest.mark.parametrize("k", [-3, -1, 0, 1, 7])
def test_delta_is_exact(k):
    default = SIMULATION_LIBRARY["4CBT3"].default_quantity
    result = build_simulation_narrative("4CBT3", default + k)
    assert result.quantity_delta == k
    assert result.requested_quantity == default + k


def test_diff_line_variants():
    assert quantity_diff_line(8, None) == "数量差異: 標準ロット 8台を基準に計算しています。"
    assert quantity_diff_line(8, 8) == "数量差異: 標準ロットと同数です。"
    assert quantity_diff_line(5, 10) == "数量差異: +5台（標準 5台）"
    assert quantity_diff_line(5, 2) == "数量差異: -3台（標準 5台）"


def test_sections_in_fixed_order():
    text = build_simulation_narrative("3CB5", 5).narrative
    order = ["案件名: 3CB5", "参照テンプレート: 3CB5", "優先度: 通常 / リクエスト数量: 5台",
             "■ 自動参照スナップショット", "・コンセプトLT:", "・在庫:", "・製造負荷:",
             "■ 出荷プラン", "◎ 最短案", "▲ 代替案1", "補足:", "意思決定:"]
    positions = [text.index(marker) for marker in order]
    assert positions == sorted(positions)
    assert "稼働率 46%（低負荷）" in text
    assert "（5日）" in text


def test_thousands_separator():
    base = SIMULATION_LIBRARY["4CBT2"]
    big = dataclasses.replace(
        base,
        default_quantity=1500,
        references=dataclasses.replace(
            base.references,
            inventory=dataclasses.replace(base.references.inventory, available=12000, reserved=1200)),
    )
    text = build_simulation_narrative("BIG1", 2500, {"BIG": big}).narrative
    assert "リクエスト数量: 2,500台" in text
    assert "利用可能 12,000台（予約 1,200台）" in text
    assert "数量差異: +1000台（標準 1,500台）" in text


def test_scenario_explicit_marker():
    info = extract_order_info("案件名: 4CBTY2 8台で出荷シミュレーション")
    result = build_simulation_narrative(info.project_name, info.quantity)
    assert result.matched_key == "4CBTY2"
    assert result.quantity_delta == 0
    assert "数量差異: 標準ロットと同数です。" in result.narrative
    assert result.ship_date == "2025-11-15"
    assert result.history == SIMULATION_LIBRARY["4CBTY2"].history
    assert result.schedule == SIMULATION_LIBRARY["4CBTY2"].schedule


def test_scenario_urgent_request():
    info = extract_order_info("4CBTYK4 を至急案件として4台で評価して")
    result = build_simulation_narrative(info.project_name, info.quantity)
    assert info.quantity == 4
    assert result.matched_key == "4CBTYK4"
    assert result.ship_date == "2025-11-13"
    assert result.quantity_delta == 0
    assert "優先度: 至急" in result.narrative


def test_scenario_unknown_model_uses_default_profile():
    info = extract_order_info("XYZ999 10台")
    result = build_simulation_narrative(info.project_name, info.quantity)
    assert result.matched_key == DEFAULT_KEY
    assert result.quantity_delta == 5
    assert "参照テンプレート: 標準プロファイル（案件登録推奨）" in result.narrative
    assert "数量差異: +5台（標準 5台）" in result.narrative
    assert "▲ 代替案" not in result.narrative


def test_no_quantity_uses_default_lot():
    result = build_simulation_narrative("4CBM10")
    assert result.requested_quantity == 6
    assert result.quantity_delta == 0
    assert "標準ロット 6台を基準に計算しています。" in result.narrative


def test_builder_is_deterministic():
    assert build_simulation_narrative("3CB10", 9) == build_simulation_narrative("3CB10", 9)


def test_fixture_table_is_read_only():
    with pytest.raises(TypeError):
        SIMULATION_LIBRARY["NEW"] = DEFAULT_SIMULATION
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SIMULATION.default_quantity = 10


def test_profile_requires_a_plan():
    with pytest.raises(ValueError):
        SimulationProfile(default_quantity=1, priority="通常",
                          references=DEFAULT_SIMULATION.references, plans=())
