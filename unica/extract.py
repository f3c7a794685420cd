# unica/extract.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional

EXPLICIT_NAME = re.compile(r"案件名\s*[:：]\s*([^\n\r]+)", re.I)
QUANTITY = re.compile(r"(\d{1,4})\s*(台|個|本|セット|set)", re.I)
BOILERPLATE = re.compile(r"出荷シミュレーション|納期回答|お願いします?|ください")
# a standalone quantity phrase plus its trailing particle ("8台で"); never the digits of a model code
QUANTITY_PHRASE = re.compile(r"(?<![0-9A-Za-z])\d{1,4}\s*(?:台|個|本|セット|set)(?![A-Za-z])[でをに]?", re.I)
EDGE_PUNCT = " \t/／、。・,，"

@dataclass(frozen=True)
class OrderInfo:
    project_name: Optional[str]
    quantity: Optional[int] = None


def _candidate(raw: str) -> Optional[str]:
    m = EXPLICIT_NAME.search(raw)
    name = m.group(1).strip() if m else None
    if not name:
        name = next((line.strip() for line in re.split(r"\r?\n", raw) if line.strip()), None)
    return name

def strip_boilerplate(name: str) -> str:
    """Drops request phrasing and the quantity phrase; falls back to the input if nothing is left."""
    cleaned = BOILERPLATE.sub("", name)
    cleaned = QUANTITY_PHRASE.sub("", cleaned)
    cleaned = re.sub(r"\s+", " ", cleaned).strip(EDGE_PUNCT)
    return cleaned if cleaned else name

def extract_quantity(raw: str) -> Optional[int]:
    m = QUANTITY.search(raw)
    return int(m.group(1)) if m else None

def extract_order_info(raw: str) -> OrderInfo:
    """Pulls a project name (型番) and an optional quantity out of a free-form request.

    The name comes from an explicit ``案件名:`` marker when present, otherwise from
    the first non-blank line. The quantity is the first ``<digits><unit>`` match
    anywhere in the text.
    """
    name = _candidate(raw or "")
    if name:
        name = strip_boilerplate(name)
    return OrderInfo(project_name=name or None, quantity=extract_quantity(raw or ""))
