# unica/fixtures.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Literal, Mapping, Tuple

Priority = Literal["通常", "至急", "試作"]
LoadSeverity = Literal["低負荷", "中負荷", "高負荷"]
BlockStatus = Literal["確定", "調整中", "要確認"]

CONFIRMED: BlockStatus = "確定"
DEFAULT_KEY = "default"

REFERENCE_NOTE = (
    "コンセプトLTは量産立ち上がり時に確定したリードタイム指標です。製造負荷はロット計画から自動算出されます。"
)

@dataclass(frozen=True)
class ConceptLT:
    variant: str
    days: int
    reason: str

@dataclass(frozen=True)
class Inventory:
    sku: str
    available: int
    reserved: int
    comment: str

@dataclass(frozen=True)
class ProductionLoad:
    line: str
    utilization: int
    severity: LoadSeverity
    comment: str

@dataclass(frozen=True)
class ReferenceSnapshot:
    concept_lt: ConceptLT
    inventory: Inventory
    production_load: ProductionLoad

@dataclass(frozen=True)
class SimulationPlan:
    label: str
    ship_date: str
    lead_time_days: int
    allocation: str
    manufacturing_window: str
    risk: str
    note: str

@dataclass(frozen=True)
class SimilarCase:
    project: str
    quantity: int
    ship_date: str
    lead_time_days: int
    outcome: str
    note: str

@dataclass(frozen=True)
class ScheduleBlock:
    id: str
    time_frame: str
    focus: str
    owner: str
    status: BlockStatus
    note: str

    def confirmed(self) -> "ScheduleBlock":
        return self if self.status == CONFIRMED else replace(self, status=CONFIRMED)

@dataclass(frozen=True)
class SimulationProfile:
    default_quantity: int
    priority: Priority
    references: ReferenceSnapshot
    plans: Tuple[SimulationPlan, ...]
    history: Tuple[SimilarCase, ...] = ()
    schedule: Tuple[ScheduleBlock, ...] = ()

    def __post_init__(self):
        if not self.plans:
            raise ValueError("a simulation profile needs at least one plan")
        if self.default_quantity <= 0:
            raise ValueError("default_quantity must be positive")

    @property
    def primary_plan(self) -> SimulationPlan:
        return self.plans[0]

    @property
    def alternative_plans(self) -> Tuple[SimulationPlan, ...]:
        return self.plans[1:]


def _refs(lt, inv, load) -> ReferenceSnapshot:
    return ReferenceSnapshot(ConceptLT(*lt), Inventory(*inv), ProductionLoad(*load))

def _plans(*rows) -> Tuple[SimulationPlan, ...]:
    return tuple(SimulationPlan(*r) for r in rows)

def _cases(*rows) -> Tuple[SimilarCase, ...]:
    return tuple(SimilarCase(*r) for r in rows)

def _blocks(key: str, *rows) -> Tuple[ScheduleBlock, ...]:
    return tuple(ScheduleBlock(f"{key}-S{i}", *r) for i, r in enumerate(rows, start=1))


_LIBRARY = {
    "4CBTY2": SimulationProfile(
        default_quantity=8, priority="通常",
        references=_refs(
            ("LT-β / 7日", 7, "端末フレーム段取り替えに平均10hを見込む"),
            ("4CBTY2-構成ユニット", 10, 2, "安全在庫2台を保持。追加生産で即時補充可能。"),
            ("L2（筐体アセンブリ）", 68, "中負荷", "夜勤スロットが2枠空いており対応余地あり。"),
        ),
        plans=_plans(
            ("最短：在庫活用＋小ロット生産", "2025-11-15", 5, "在庫6台 + 追加生産2台",
             "11/11 夜勤で2台追加組立 → 11/13 QA", "夜勤増員が必要。対応確保済みなら低リスク。",
             "安全在庫は0台になるが週末でリカバリ予定。"),
            ("代替：全量通常シフト", "2025-11-18", 8, "通常シフトで8台新規生産",
             "11/12〜11/15 日勤で分散生産", "他案件を1日後ろ倒し。負荷平準化は確保。",
             "在庫は維持できるが納期は若干延伸。"),
        ),
        history=_cases(
            ("4CBTY2 東日本向け", 8, "2025-09-12", 6, "納期遵守", "夜勤2枠で追加組立し前倒し出荷。"),
            ("4CBTY2 代理店補充", 12, "2025-07-28", 9, "1日遅延", "QA待ちで出荷が翌日にずれ込んだ。"),
        ),
        schedule=_blocks("4CBTY2",
            ("11/11 夜勤", "追加2台の筐体組立", "L2 夜勤班", "調整中", "増員1名の確保待ち。"),
            ("11/13 日勤", "最終QA・梱包", "品質保証課", "要確認", "検査枠の予約が未確定。"),
            ("11/15 午前", "出荷・積込", "物流課", "確定", "トラック便手配済み。"),
        ),
    ),
    "4CBTYK4": SimulationProfile(
        default_quantity=4, priority="至急",
        references=_refs(
            ("LT-α / 4日", 4, "部品共通化が進んでおり即日アロケーション可能"),
            ("4CBTYK4-制御モジュール", 5, 1, "出荷待ち1台あり。顧客承認後なら振替可。"),
            ("L1（実装セル）", 82, "中負荷", "夜間のみ余力。検査工程は混雑していない。"),
        ),
        plans=_plans(
            ("最短：在庫全振り＋夜間検査", "2025-11-13", 3, "在庫4台（予約1台を差替え）",
             "11/12 夜間に最終検査のみ実施", "予約案件との調整が前提。営業承認が必要。",
             "至急フラグを維持しつつリードタイム最短化。"),
            ("代替：部分生産で補完", "2025-11-15", 5, "在庫3台 + 新規生産1台",
             "11/12〜11/13 夜間で1台増産", "増産分のQAが翌日にずれ込む可能性あり。",
             "予約在庫を1台残せるため他案件影響が小さい。"),
        ),
        history=_cases(
            ("4CBTYK4 至急補修対応", 3, "2025-10-02", 3, "納期遵守", "予約在庫の振替で即日引当。"),
            ("4CBTYK4 新規立上げ", 6, "2025-08-19", 5, "納期遵守", "夜間検査で2日短縮。"),
        ),
        schedule=_blocks("4CBTYK4",
            ("11/12 日中", "予約1台の振替承認", "営業部", "要確認", "顧客承認の回答待ち。"),
            ("11/12 夜間", "最終検査", "L1 検査班", "調整中", "夜間検査員の割当を調整中。"),
            ("11/13 午前", "出荷", "物流課", "確定", "至急便を確保済み。"),
        ),
    ),
    "4CBT2": SimulationProfile(
        default_quantity=6, priority="通常",
        references=_refs(
            ("LT-標準 / 6日", 6, "サブ組立ラインの段取りが1日必要"),
            ("4CBT2-ユニット", 4, 0, "補用品として2台を確保中。差し替え容易。"),
            ("L3（モジュール組立）", 54, "低負荷", "週内に余裕があり、追い越し対応が容易。"),
        ),
        plans=_plans(
            ("最短：在庫4台＋即時増産2台", "2025-11-16", 6, "在庫4台 + 新規生産2台",
             "11/11〜11/13 で2台生産 → 11/14 QA", "特記事項なし。負荷に余裕あり。",
             "在庫0台になるため補充計画を同時実行推奨。"),
            ("代替：増産を翌週へシフト", "2025-11-19", 9, "在庫4台 + 翌週日勤で2台",
             "11/15〜11/18 日勤枠", "納期は延びるが在庫1台を保持可能。",
             "月末の需要ピークに備えたい場合に適合。"),
        ),
        history=_cases(
            ("4CBT2 保守部品手配", 4, "2025-09-30", 5, "納期遵守", "在庫のみで対応。"),
        ),
        schedule=_blocks("4CBT2",
            ("11/11〜11/13", "追加2台のモジュール組立", "L3 日勤班", "確定", "段取り済み。"),
            ("11/14", "QA", "品質保証課", "調整中", "検査治具の返却待ち。"),
        ),
    ),
    "4CBT3": SimulationProfile(
        default_quantity=7, priority="通常",
        references=_refs(
            ("LT-β / 7日", 7, "制御基板の調整工程が48h必要"),
            ("4CBT3-制御基板", 5, 1, "品質確認待ち1台。リリース見込みは翌営業日。"),
            ("L4（電装組立）", 71, "中負荷", "週後半に大型案件が入り稼働率上昇見込み。"),
        ),
        plans=_plans(
            ("最短：在庫5台＋電装ライン夜勤2台", "2025-11-17", 7, "在庫5台 + 夜勤2台",
             "11/12〜11/14 夜勤枠で組立", "夜勤班のQA対応がタイト。補強が必要。",
             "週後半の大型案件開始前に完了可能。"),
            ("代替：全量通常シフトへの切替", "2025-11-20", 10, "日勤で7台順次生産",
             "11/13〜11/18 日勤枠", "在庫を温存できるが大型案件と競合。",
             "夜勤対応が難しい場合の安全策。"),
        ),
        history=_cases(
            ("4CBT3 在庫優先案", 6, "2025-10-10", 7, "納期遵守", "品質確認待ち在庫を前日にリリース。"),
            ("4CBT3 大型案件並行", 8, "2025-08-05", 11, "2日遅延", "電装ラインの競合で後ろ倒し。"),
        ),
        schedule=_blocks("4CBT3",
            ("11/12〜11/14 夜勤", "電装組立2台", "L4 夜勤班", "調整中", "QA補強要員を調整中。"),
            ("11/15", "基板調整・QA", "品質保証課", "要確認", "48h調整枠の確保が必要。"),
            ("11/17 午前", "出荷", "物流課", "確定", ""),
        ),
    ),
    "4CBTK4": SimulationProfile(
        default_quantity=5, priority="試作",
        references=_refs(
            ("LT-試作 / 8日", 8, "専用治具の調整とQAが長めに設定されている"),
            ("4CBTK4-試作キット", 6, 0, "試作セル用に常時6台をキープ中。"),
            ("L5（試作セル）", 38, "低負荷", "柔軟にスケジュール可能。週末メンテ前まで余裕。"),
        ),
        plans=_plans(
            ("最短：在庫引当＋QA重点", "2025-11-16", 6, "在庫5台を即時引当",
             "11/12〜11/14 で追加QA", "ファームウェア更新が11/13予定。遅延に注意。",
             "試験結果を早期取得したい場合に最適。"),
            ("代替：評価工程を追加", "2025-11-19", 9, "在庫5台 + 検証を48h延長",
             "11/12〜11/17 逐次検証", "納期は延びるが確認粒度が上がる。",
             "顧客レビュー前に精度を高めたい場合に推奨。"),
        ),
        history=_cases(
            ("4CBTK4 評価機", 3, "2025-09-08", 8, "納期遵守", "ファーム更新を先行実施。"),
        ),
        schedule=_blocks("4CBTK4",
            ("11/12", "試作キット引当", "試作セル", "確定", ""),
            ("11/13", "ファームウェア更新", "開発部", "要確認", "リリース日程の最終確認待ち。"),
            ("11/14", "追加QA", "品質保証課", "調整中", ""),
        ),
    ),
    "3CB5": SimulationProfile(
        default_quantity=5, priority="通常",
        references=_refs(
            ("LT-標準 / 5日", 5, "構造がシンプルで即日ライン投入が可能"),
            ("3CB5-ベースユニット", 7, 1, "サービスパーツ向けに1台予約。代替あり。"),
            ("L2（筐体アセンブリ）", 46, "低負荷", "増産に充分な余裕あり。交代要員も確保済み。"),
        ),
        plans=_plans(
            ("最短：在庫全引当", "2025-11-14", 4, "在庫5台をそのまま出荷",
             "11/12 QAで再確認のみ", "リスク極小。予約分は別SKUで代替予定。",
             "即日意思決定で翌営業日に出荷可能。"),
            ("代替：在庫3台＋増産2台", "2025-11-17", 7, "在庫3台 + 追加生産2台",
             "11/13〜11/15 で2台増産", "増産分のQA負荷増。対応は可能。",
             "在庫を一部残しておきたい場合に適合。"),
        ),
        history=_cases(
            ("3CB5 定期補充", 5, "2025-10-20", 4, "納期遵守", "在庫全引当で翌営業日出荷。"),
            ("3CB5 サービス向け", 2, "2025-09-01", 3, "納期遵守", ""),
        ),
        schedule=_blocks("3CB5",
            ("11/12", "QA再確認", "品質保証課", "確定", ""),
            ("11/14 午前", "出荷", "物流課", "調整中", "便の時間帯を調整中。"),
        ),
    ),
    "3CB10": SimulationProfile(
        default_quantity=7, priority="通常",
        references=_refs(
            ("LT-拡張 / 8日", 8, "大型筐体の物流調整に追加2日を見込む"),
            ("3CB10-大型ユニット", 6, 0, "大型機は在庫6台のみ。補充には4日必要。"),
            ("L6（大型セル）", 75, "中負荷", "フォークリフト手配が必要。夜間は作業不可。"),
        ),
        plans=_plans(
            ("最短：在庫6台＋日勤1台", "2025-11-18", 8, "在庫6台 + 日勤で1台",
             "11/12〜11/14 日勤枠で1台追加", "物流調整がタイト。前倒しで輸送便を確保済み。",
             "在庫ゼロとなるため補充便の手配が必要。"),
            ("代替：在庫保持＋翌週生産", "2025-11-21", 11, "在庫4台 + 翌週で3台増産",
             "11/18〜11/20 日勤枠", "物流便を翌週に再調整。コスト増。",
             "緊急案件とのバッファを残したい場合に。"),
        ),
        history=_cases(
            ("3CB10 製造負荷チェック", 7, "2025-10-15", 9, "1日遅延", "フォークリフト手配待ち。"),
        ),
        schedule=_blocks("3CB10",
            ("11/12〜11/14 日勤", "大型筐体1台組立", "L6 日勤班", "調整中", ""),
            ("11/15", "フォークリフト・輸送便手配", "物流課", "要確認", "大型車両の空き確認中。"),
            ("11/18 午前", "出荷", "物流課", "確定", ""),
        ),
    ),
    "4CBM10": SimulationProfile(
        default_quantity=6, priority="通常",
        references=_refs(
            ("LT-モジュール / 6日", 6, "モーター調整工程が24h必要"),
            ("4CBM10-モーターアッセン", 5, 1, "試験用に1台キープ。優先度次第で解放可。"),
            ("L3（モジュール組立）", 63, "中負荷", "ラインシフトを追加すれば当週内に対応可能。"),
        ),
        plans=_plans(
            ("最短：在庫5台＋短時間増産1台", "2025-11-16", 6, "在庫5台 + 追加生産1台",
             "11/12 夜勤で1台追加 → 11/14 QA", "夜勤工程の確保が前提。品質管理は通常通り。",
             "試験在庫を残すかは営業判断で調整可。"),
            ("代替：在庫優先で4台回答", "2025-11-14", 4, "在庫4台を先行出荷、残り2台は翌便",
             "11/16 日勤で残2台", "分割出荷で輸送コストが上昇。",
             "顧客都合で部分納入が許容される場合の選択肢。"),
        ),
        history=_cases(
            ("4CBM10 需要計画連携", 5, "2025-10-06", 6, "納期遵守", "需要計画と同期して増産。"),
            ("4CBM10 分割納入", 8, "2025-08-25", 7, "納期遵守", "4台先行、残りを翌便で納入。"),
        ),
        schedule=_blocks("4CBM10",
            ("11/12 夜勤", "モーターアッセン1台追加", "L3 夜勤班", "調整中", ""),
            ("11/13", "モーター調整（24h）", "生産技術課", "確定", ""),
            ("11/14", "QA", "品質保証課", "要確認", "試験在庫の扱いを営業と確認。"),
        ),
    ),
}

# declaration order is the match order
SIMULATION_LIBRARY: Mapping[str, SimulationProfile] = MappingProxyType(_LIBRARY)

DEFAULT_SIMULATION = SimulationProfile(
    default_quantity=5, priority="通常",
    references=_refs(
        ("LT-標準 / 6日", 6, "詳細未登録のため標準リードタイムを適用"),
        ("未登録型番", 6, 1, "暫定値です。案件登録後に在庫情報を更新してください。"),
        ("未割当ライン", 55, "中負荷", "詳細計画未設定。需要計画チームに確認が必要です。"),
    ),
    plans=_plans(
        ("最短：標準ロット適用", "2025-11-20", 10, "在庫3台 + 新規生産2台",
         "標準LTに基づく自動スケジュール", "前提情報が不足。担当者レビュー推奨。",
         "案件登録後に再計算してください。"),
    ),
    schedule=_blocks("DEFAULT",
        ("未定", "案件登録と需要計画レビュー", "需要計画チーム", "要確認", "型番登録後に再計算。"),
    ),
)
