from __future__ import annotations
"""
Conversion from inspection API results into canonical config records.

Keeps the field mapping in one place:

    defindex     -> "Weapon ID"
    paintindex   -> "Paint Kit"
    paintseed    -> "Seed"
    floatvalue   -> "Wear"
    weapon_type  -> "Item Name"
    item_name    -> "Paint Kit Name"
    stickers     -> "Stickers" (id + slot, order kept)
"""

from typing import List, Optional

from .schemas import ApiSticker, CanonicalRecord, InspectionResult, OutputSticker

RECORD_SEPARATOR = ",\n"


def _convert_stickers(stickers: List[ApiSticker]) -> List[OutputSticker]:
    # Order is the visual stacking order, keep it
    return [OutputSticker(sticker_id=s.stickerId, slot=s.slot) for s in stickers]


def convert(result: InspectionResult, name_tag: Optional[str] = None) -> CanonicalRecord:
    info = result.iteminfo
    return CanonicalRecord(
        item_name=info.weapon_type,
        name_tag=name_tag,
        paint_kit=info.paintindex,
        paint_kit_name=info.item_name,
        seed=info.paintseed,
        stickers=_convert_stickers(info.stickers),
        weapon_id=info.defindex,
        wear=info.floatvalue,
    )


def serialize_record(record: CanonicalRecord) -> str:
    """Record text ready to be concatenated into a JSON list body."""
    return record.to_json() + RECORD_SEPARATOR
