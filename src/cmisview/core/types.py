"""CMIS / QSFP-DD memory map constants and code tables.

References:
  - CMIS Rev. 4.0, section 8 (Module Memory Map)
  - QSFP-DD Hardware Specification Rev. 5.0
"""

from __future__ import annotations

from enum import Enum, IntEnum

# Size of one addressable page half
PAGE_SIZE = 0x80

# Page 0 lower + upper only
EEPROM_BASE_LEN = PAGE_SIZE * 2

# Page 0 lower + upper, pages 01h, 02h, 10h, 11h (upper halves)
EEPROM_5PAG_LEN = PAGE_SIZE * 6

MAX_LANES = 8

# Reserved cable assembly length byte meaning "longer than 6.3 km"
CABLE_LEN_MAX_SENTINEL = 0xFF

# First media technology code of the copper family
COPPER_FAMILY_THRESHOLD = 0x0A

# Page 0 lower byte 2, bit 5 advertises a CLEI code
CLEI_PRESENT_MASK = 0x20


class Page(Enum):
    """The 128-byte slots of the flattened module memory buffer, in order."""

    LOWER_0 = (0, "Page 00h (lower)")
    UPPER_0 = (1, "Page 00h (upper)")
    PAGE_1 = (2, "Page 01h (upper)")
    PAGE_2 = (3, "Page 02h (upper)")
    PAGE_16 = (4, "Page 10h (upper)")
    PAGE_17 = (5, "Page 11h (upper)")

    def __init__(self, slot: int, label: str) -> None:
        self.slot = slot
        self.label = label

    @property
    def base(self) -> int:
        """Absolute offset of this page's first byte in the flattened buffer."""
        return self.slot * PAGE_SIZE

    @property
    def required_length(self) -> int:
        """Minimum buffer length that carries this page."""
        return (self.slot + 1) * PAGE_SIZE


# CMIS page number -> upper-half slot
UPPER_PAGES: dict[int, Page] = {
    0x00: Page.UPPER_0,
    0x01: Page.PAGE_1,
    0x02: Page.PAGE_2,
    0x10: Page.PAGE_16,
    0x11: Page.PAGE_17,
}


class ThresholdKind(IntEnum):
    """Alarm/warning threshold categories, in memory order."""

    HIGH_ALARM = 0
    LOW_ALARM = 1
    HIGH_WARNING = 2
    LOW_WARNING = 3

    @property
    def label(self) -> str:
        return _THRESHOLD_LABELS[self]


_THRESHOLD_LABELS: dict[ThresholdKind, str] = {
    ThresholdKind.HIGH_ALARM: "high alarm",
    ThresholdKind.LOW_ALARM: "low alarm",
    ThresholdKind.HIGH_WARNING: "high warning",
    ThresholdKind.LOW_WARNING: "low warning",
}


class Direction(str, Enum):
    """Lane signal direction for alarm/warning flags."""

    TX = "tx"
    RX = "rx"


class ModuleType(IntEnum):
    """Module media type (CMIS Rev. 4, Table 8-7, byte 85)."""

    UNDEFINED = 0x00
    MMF = 0x01
    SMF = 0x02
    PASSIVE_COPPER = 0x03
    ACTIVE_CABLE = 0x04
    BASE_T = 0x05


OPTICAL_MODULE_TYPES: frozenset[int] = frozenset({ModuleType.MMF, ModuleType.SMF})


class MediaTechnology(IntEnum):
    """Media interface technology (CMIS Rev. 4, Table 8-24)."""

    VCSEL_850 = 0x00
    VCSEL_1310 = 0x01
    VCSEL_1550 = 0x02
    FP_1310 = 0x03
    DFB_1310 = 0x04
    DFB_1550 = 0x05
    EML_1310 = 0x06
    EML_1550 = 0x07
    OTHERS = 0x08
    DFB_1490 = 0x09
    COPPER_UNEQUALIZED = 0x0A
    COPPER_PASSIVE_EQUALIZED = 0x0B
    COPPER_NEAR_FAR_END_EQUALIZED = 0x0C
    COPPER_FAR_END_EQUALIZED = 0x0D
    COPPER_NEAR_END_EQUALIZED = 0x0E
    COPPER_LINEAR_EQUALIZED = 0x0F


MEDIA_TECHNOLOGY_LABELS: dict[MediaTechnology, str] = {
    MediaTechnology.VCSEL_850: "850 nm VCSEL",
    MediaTechnology.VCSEL_1310: "1310 nm VCSEL",
    MediaTechnology.VCSEL_1550: "1550 nm VCSEL",
    MediaTechnology.FP_1310: "1310 nm FP",
    MediaTechnology.DFB_1310: "1310 nm DFB",
    MediaTechnology.DFB_1550: "1550 nm DFB",
    MediaTechnology.EML_1310: "1310 nm EML",
    MediaTechnology.EML_1550: "1550 nm EML",
    MediaTechnology.OTHERS: "Others/Undefined",
    MediaTechnology.DFB_1490: "1490 nm DFB",
    MediaTechnology.COPPER_UNEQUALIZED: "Copper cable, unequalized",
    MediaTechnology.COPPER_PASSIVE_EQUALIZED: "Copper cable, passive equalized",
    MediaTechnology.COPPER_NEAR_FAR_END_EQUALIZED: (
        "Copper cable, near and far end limiting active equalizers"
    ),
    MediaTechnology.COPPER_FAR_END_EQUALIZED: (
        "Copper cable, far end limiting active equalizers"
    ),
    MediaTechnology.COPPER_NEAR_END_EQUALIZED: (
        "Copper cable, near end limiting active equalizers"
    ),
    MediaTechnology.COPPER_LINEAR_EQUALIZED: "Copper cable, linear active equalizers",
}

MODULE_TYPE_LABELS: dict[ModuleType, str] = {
    ModuleType.UNDEFINED: "Undefined",
    ModuleType.MMF: "Optical Interfaces: MMF",
    ModuleType.SMF: "Optical Interfaces: SMF",
    ModuleType.PASSIVE_COPPER: "Passive Cu",
    ModuleType.ACTIVE_CABLE: "Active Cables",
    ModuleType.BASE_T: "BASE-T",
}
