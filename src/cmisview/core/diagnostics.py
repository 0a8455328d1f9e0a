"""Diagnostics extraction: module monitors, thresholds and per-lane data.

References:
  - CMIS Rev. 4, section 8.2.4 (module-level monitors)
  - CMIS Rev. 4, section 8.5.1/8.5.2 (page 02h thresholds)
  - CMIS Rev. 4, sections 8.8.2, 8.8.3 (page 11h lane flags and monitors)
"""

from __future__ import annotations

from cmisview.core.decoders import (
    BIAS_UA,
    OPTICAL_POWER_UW,
    TEMPERATURE_C,
    VOLTAGE_MV,
    FixedPoint,
    read_bit_flag,
    read_field,
)
from cmisview.core.fields import get_field
from cmisview.core.types import (
    EEPROM_5PAG_LEN,
    MAX_LANES,
    OPTICAL_MODULE_TYPES,
    ThresholdKind,
)
from cmisview.models.diagnostics import (
    DiagnosticsRecord,
    FlagTable,
    LaneMonitor,
    ModuleThresholds,
    ThresholdSet,
)
from cmisview.utils.logging import get_logger

logger = get_logger(__name__)


def has_extended_diagnostics(buf: bytes) -> bool:
    """Whether thresholds and lane data can be decoded from ``buf``.

    Requires an optical (MMF or SMF) module and all five extended pages.
    Copper and passive modules legitimately lack these pages.
    """
    module_type = read_field(buf, get_field("module_type"))
    return module_type in OPTICAL_MODULE_TYPES and len(buf) == EEPROM_5PAG_LEN


def _thresholds(buf: bytes, name: str, scale: FixedPoint) -> ThresholdSet:
    field = get_field(name)
    return ThresholdSet.from_values(
        [scale.apply(read_field(buf, field, kind)) for kind in ThresholdKind]
    )


def decode_thresholds(buf: bytes) -> ModuleThresholds:
    """Decode the HA/LA/HW/LW thresholds of every monitored quantity."""
    return ModuleThresholds(
        temperature_c=_thresholds(buf, "temperature_thresholds", TEMPERATURE_C),
        voltage_mv=_thresholds(buf, "voltage_thresholds", VOLTAGE_MV),
        bias_ua=_thresholds(buf, "tx_bias_thresholds", BIAS_UA),
        tx_power_uw=_thresholds(buf, "tx_power_thresholds", OPTICAL_POWER_UW),
        rx_power_uw=_thresholds(buf, "rx_power_thresholds", OPTICAL_POWER_UW),
    )


def decode_lanes(buf: bytes) -> tuple[LaneMonitor, ...]:
    """Decode bias, tx power and rx power for each lane.

    Lane ``i`` of each monitor lives ``i * 2`` bytes past the lane 0 value.
    """
    bias = get_field("tx_bias")
    tx_power = get_field("tx_power")
    rx_power = get_field("rx_power")
    return tuple(
        LaneMonitor(
            lane=lane,
            bias_ua=BIAS_UA.apply(read_field(buf, bias, lane)),
            tx_power_uw=OPTICAL_POWER_UW.apply(read_field(buf, tx_power, lane)),
            rx_power_uw=OPTICAL_POWER_UW.apply(read_field(buf, rx_power, lane)),
        )
        for lane in range(MAX_LANES)
    )


def decode_flags(buf: bytes, name: str) -> FlagTable:
    """Decode a lane x ThresholdKind flag table.

    Each ThresholdKind has its own mask byte (element ``kind`` of the field);
    bit ``lane`` of that byte is the flag for that lane.
    """
    field = get_field(name)
    masks = [read_field(buf, field, kind) for kind in ThresholdKind]
    return FlagTable(
        flags=tuple(
            tuple(read_bit_flag(masks[kind], lane) for kind in ThresholdKind)
            for lane in range(MAX_LANES)
        )
    )


def extract_diagnostics(buf: bytes) -> DiagnosticsRecord:
    """Build a DiagnosticsRecord from a flattened module memory buffer.

    Current temperature and voltage are always decoded. Thresholds, lane
    monitors and flags are only decoded when ``has_extended_diagnostics``
    holds; otherwise they are left absent.
    """
    temperature = TEMPERATURE_C.apply(read_field(buf, get_field("temperature")))
    voltage = VOLTAGE_MV.apply(read_field(buf, get_field("voltage")))

    if not has_extended_diagnostics(buf):
        logger.debug(
            "extended_diagnostics_skipped",
            module_type=read_field(buf, get_field("module_type")),
            length=len(buf),
        )
        return DiagnosticsRecord(temperature_c=temperature, voltage_mv=voltage)

    return DiagnosticsRecord(
        temperature_c=temperature,
        voltage_mv=voltage,
        thresholds=decode_thresholds(buf),
        lanes=decode_lanes(buf),
        tx_flags=decode_flags(buf, "tx_flags"),
        rx_flags=decode_flags(buf, "rx_flags"),
    )
