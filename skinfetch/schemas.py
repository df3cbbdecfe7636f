from __future__ import annotations

"""
Pydantic models for the three JSON shapes the importer deals with:

* the inspection API result (``iteminfo`` / ``error`` payloads)
* the canonical output record written into the target config
* the community inventory snapshot (``rgInventory`` / ``rgDescriptions``)

Field names of ``CanonicalRecord`` are fixed by the consumers of the config
file and are exposed as aliases; the Python attribute names are ours.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------
# Inspection API
# ---------------------------

class ApiSticker(BaseModel):
    """One applied sticker as the inspection API reports it."""

    stickerId: int
    slot: int = Field(ge=0)
    codename: Optional[str] = None
    name: Optional[str] = None


class ItemInfo(BaseModel):
    defindex: int                   # weapon id      -> "Weapon ID"
    paintindex: int                 # paint kit id   -> "Paint Kit"
    paintseed: int                  # pattern seed   -> "Seed"
    floatvalue: float = Field(ge=0.0, le=1.0)  # -> "Wear"
    weapon_type: str                # e.g. "AWP"     -> "Item Name"
    item_name: str                  # e.g. "Medusa"  -> "Paint Kit Name"
    full_item_name: Optional[str] = None  # e.g. "AWP | Medusa (Well-Worn)"
    stickers: List[ApiSticker] = Field(default_factory=list)


class InspectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    iteminfo: ItemInfo


class ApiError(BaseModel):
    """Error body returned by the inspection API for a bad item."""

    error: str
    code: Optional[int] = None
    status: Optional[int] = None

    @field_validator("error", mode="before")
    @classmethod
    def _error_as_text(cls, value):
        return value if isinstance(value, str) else str(value)

    @field_validator("code", "status", mode="before")
    @classmethod
    def _drop_non_numeric(cls, value):
        # only logged; anything non-numeric is dropped
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value


# ---------------------------
# Canonical output record
# ---------------------------

class OutputSticker(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sticker_id: int = Field(alias="Sticker ID")
    slot: int = Field(alias="Slot")


class CanonicalRecord(BaseModel):
    """
    One item in the target config's ``"Items"`` list.

    Declaration order is serialization order and must not change.
    """

    model_config = ConfigDict(populate_by_name=True)

    item_name: str = Field(alias="Item Name")
    name_tag: Optional[str] = Field(default=None, alias="Name Tag")
    paint_kit: int = Field(alias="Paint Kit")
    paint_kit_name: str = Field(alias="Paint Kit Name")
    seed: int = Field(alias="Seed")
    stickers: List[OutputSticker] = Field(default_factory=list, alias="Stickers")
    weapon_id: int = Field(alias="Weapon ID")
    wear: float = Field(alias="Wear")

    def to_json(self) -> str:
        """Compact JSON; a missing name tag is written as ``null``."""
        return self.model_dump_json(by_alias=True)


# ---------------------------
# Inventory snapshot
# ---------------------------

class InventoryEntry(BaseModel):
    """An owned item; stacked duplicates differ only by ``id`` (asset id)."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    instanceid: str
    classid: str
    id: str

    @property
    def key(self) -> Tuple[str, str]:
        return (self.instanceid, self.classid)


class ItemAction(BaseModel):
    name: str = ""
    link: str


class ItemDescription(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    appid: str
    classid: str
    instanceid: str
    fraudwarnings: Optional[List[str]] = None
    actions: Optional[List[ItemAction]] = None

    @property
    def key(self) -> Tuple[str, str]:
        return (self.instanceid, self.classid)

    @property
    def inspect_template(self) -> Optional[str]:
        if not self.actions:
            return None
        return self.actions[0].link


class InventorySnapshot(BaseModel):
    success: bool
    rgInventory: Dict[str, InventoryEntry] = Field(default_factory=dict)
    rgDescriptions: Dict[str, ItemDescription] = Field(default_factory=dict)

    @field_validator("rgInventory", "rgDescriptions", mode="before")
    @classmethod
    def _empty_list_is_empty_map(cls, value):
        # The service sends [] instead of {} for an empty inventory
        if value is None or value == []:
            return {}
        return value

    @property
    def entries(self) -> List[InventoryEntry]:
        return list(self.rgInventory.values())

    @property
    def descriptions(self) -> List[ItemDescription]:
        return list(self.rgDescriptions.values())
