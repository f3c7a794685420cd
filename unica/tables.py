# unica/tables.py
import pandas as pd
from typing import Iterable, Mapping

from unica.fixtures import SIMULATION_LIBRARY, ScheduleBlock, SimilarCase, SimulationProfile

HISTORY_COLUMNS = {"project": "案件", "quantity": "数量", "ship_date": "出荷日",
                   "lead_time_days": "LT(日)", "outcome": "結果", "note": "メモ"}
SCHEDULE_COLUMNS = {"id": "ID", "time_frame": "時間枠", "focus": "作業", "owner": "担当",
                    "status": "ステータス", "note": "メモ"}

def history_frame(cases: Iterable[SimilarCase]) -> pd.DataFrame:
    rows = [{label: getattr(c, attr) for attr, label in HISTORY_COLUMNS.items()} for c in cases]
    df = pd.DataFrame(rows, columns=list(HISTORY_COLUMNS.values()))
    df["出荷日"] = pd.to_datetime(df["出荷日"])
    return df.sort_values("出荷日", ascending=False).reset_index(drop=True)

def schedule_frame(blocks: Iterable[ScheduleBlock]) -> pd.DataFrame:
    rows = [{label: getattr(b, attr) for attr, label in SCHEDULE_COLUMNS.items()} for b in blocks]
    return pd.DataFrame(rows, columns=list(SCHEDULE_COLUMNS.values()))

def library_frame(library: Mapping[str, SimulationProfile] = SIMULATION_LIBRARY) -> pd.DataFrame:
    rows = []
    for key, p in library.items():
        rows.append({
            "型番": key, "優先度": p.priority, "標準ロット": p.default_quantity,
            "コンセプトLT(日)": p.references.concept_lt.days,
            "在庫(利用可能)": p.references.inventory.available,
            "稼働率%": p.references.production_load.utilization,
            "最短出荷日": p.primary_plan.ship_date, "プラン数": len(p.plans),
        })
    return pd.DataFrame(rows)

def library_kpis(df: pd.DataFrame) -> dict:
    return {
        "profiles": int(len(df)),
        "urgent": int((df["優先度"] == "至急").sum()),
        "avg_lt_days": float(df["コンセプトLT(日)"].mean()) if len(df) else 0.0,
        "max_utilization": int(df["稼働率%"].max()) if len(df) else 0,
        "earliest_ship": df["最短出荷日"].min() if len(df) else "n/a",
    }
