"""
Prompt building and tolerant parsing for asset suggestions

Nothing here touches the network or the database. The parser never raises:
whatever the model sends back, all three fields come out populated.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from assetkeeper.schemas.ai import AiSuggestion

logger = logging.getLogger(__name__)

FIELDS = ("feasibility", "maintenance_prediction", "replacement_recommendation")

FIELD_KEYWORDS: Dict[str, Sequence[str]] = {
    "feasibility": ("feasibility", "kelayakan", "layak"),
    "maintenance_prediction": ("maintenance", "perawatan", "pemeliharaan"),
    "replacement_recommendation": ("replacement", "penggantian", "ganti"),
}

FALLBACKS: Dict[str, str] = {
    "feasibility": "Analisis kelayakan tidak tersedia. Periksa kondisi asset secara manual.",
    "maintenance_prediction": "Prediksi perawatan tidak tersedia. Lakukan perawatan rutin sesuai jadwal.",
    "replacement_recommendation": "Rekomendasi penggantian tidak tersedia. Evaluasi kondisi asset secara berkala.",
}


@dataclass
class AssetContext:
    """Everything the prompts say about one asset"""
    name: str
    category: str
    condition: str
    owner: str
    description: Optional[str]
    age_years: int
    complaint_count: int
    maintenance: List[str] = field(default_factory=list)
    history: List[str] = field(default_factory=list)


def _asset_block(ctx: AssetContext) -> str:
    lines = [
        f"Nama asset: {ctx.name}",
        f"Kategori: {ctx.category}",
        f"Kondisi saat ini: {ctx.condition}",
        f"Pemilik: {ctx.owner}",
        f"Deskripsi: {ctx.description or '-'}",
        f"Umur asset: {ctx.age_years} tahun",
    ]
    return "\n".join(lines)


def _bullets(items: List[str]) -> str:
    return "\n".join(f"- {item}" for item in items) if items else "- Tidak ada"


def build_suggestion_prompt(ctx: AssetContext) -> str:
    """Prompt asking for a JSON object with the three suggestion fields"""
    return (
        "Anda adalah ahli manajemen aset IT. Analisis asset berikut.\n\n"
        f"{_asset_block(ctx)}\n"
        f"Total keluhan: {ctx.complaint_count}\n"
        f"Total perawatan: {len(ctx.maintenance)}\n\n"
        f"Riwayat perawatan terbaru:\n{_bullets(ctx.maintenance)}\n\n"
        f"Riwayat perubahan terbaru:\n{_bullets(ctx.history)}\n\n"
        "Berikan jawaban HANYA dalam format JSON berikut:\n"
        "{\n"
        '  "feasibility": "analisis kelayakan penggunaan asset",\n'
        '  "maintenance_prediction": "prediksi kebutuhan perawatan",\n'
        '  "replacement_recommendation": "rekomendasi penggantian asset"\n'
        "}"
    )


def build_condition_prompt(ctx: AssetContext) -> str:
    return (
        "Anda adalah ahli manajemen aset IT. Analisis kondisi asset berikut "
        "dan jelaskan apakah asset masih layak digunakan.\n\n"
        f"{_asset_block(ctx)}\n"
        f"Total keluhan: {ctx.complaint_count}\n"
        f"Riwayat perubahan terbaru:\n{_bullets(ctx.history)}"
    )


def build_maintenance_prompt(ctx: AssetContext) -> str:
    return (
        "Anda adalah ahli manajemen aset IT. Prediksi kebutuhan perawatan "
        "asset berikut untuk beberapa bulan ke depan.\n\n"
        f"{_asset_block(ctx)}\n"
        f"Asset ini sudah menjalani {len(ctx.maintenance)} kali perawatan.\n"
        f"Riwayat perawatan terbaru:\n{_bullets(ctx.maintenance)}"
    )


def build_replacement_prompt(ctx: AssetContext) -> str:
    return (
        "Anda adalah ahli manajemen aset IT. Berikan rekomendasi apakah asset "
        "berikut perlu diganti, dengan mempertimbangkan biaya perbaikan.\n\n"
        f"{_asset_block(ctx)}\n"
        f"Total keluhan: {ctx.complaint_count}\n"
        f"Total perawatan: {len(ctx.maintenance)}"
    )


def _first_brace_span(text: str) -> Optional[str]:
    """First balanced ``{...}`` span, ignoring braces inside JSON strings"""
    start = text.find("{")
    if start < 0:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    return None


def try_parse_structured(text: str) -> Optional[AiSuggestion]:
    """Read the suggestion fields from the first JSON object in ``text``

    Returns None when there is no object or it does not parse. Fields that
    are missing or empty get their fallback phrase.
    """
    span = _first_brace_span(text or "")
    if span is None:
        return None
    try:
        data = json.loads(span)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None

    values = {}
    for name in FIELDS:
        value = data.get(name)
        value = str(value).strip() if value else ""
        values[name] = value or FALLBACKS[name]
    return AiSuggestion(**values)


def _strip_label(line: str) -> str:
    head, sep, tail = line.partition(":")
    if sep and len(head.split()) <= 4:
        return tail.strip()
    return line.strip()


def scan_for_fields(
    text: str,
    keywords: Optional[Dict[str, Sequence[str]]] = None,
) -> AiSuggestion:
    """Pick each field from the first line mentioning one of its keywords

    The matching line is joined with up to two following lines. Fields with
    no matching line get their fallback phrase.
    """
    keywords = keywords or FIELD_KEYWORDS
    lines = [line.strip() for line in (text or "").splitlines()]

    values = {}
    for name in FIELDS:
        words = [w.lower() for w in keywords.get(name, ())]
        value = ""
        for i, line in enumerate(lines):
            lowered = line.lower()
            if any(word in lowered for word in words):
                chunk = [_strip_label(line)] + [l for l in lines[i + 1:i + 3] if l]
                value = " ".join(part for part in chunk if part).strip()
                break
        values[name] = value or FALLBACKS[name]
    return AiSuggestion(**values)


def parse_suggestions(text: str) -> AiSuggestion:
    """Structured parse first, keyword scan second"""
    parsed = try_parse_structured(text)
    if parsed is not None:
        return parsed
    logger.info("Gemini response had no usable JSON object, scanning lines")
    return scan_for_fields(text)
