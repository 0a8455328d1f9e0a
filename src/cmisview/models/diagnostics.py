"""Pydantic models for module thresholds and live lane diagnostics."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cmisview.core.types import MAX_LANES, ThresholdKind


class ThresholdSet(BaseModel):
    """The four thresholds of one measured quantity."""

    model_config = {"frozen": True}

    high_alarm: float = 0.0
    low_alarm: float = 0.0
    high_warning: float = 0.0
    low_warning: float = 0.0

    @classmethod
    def from_values(cls, values: list[float]) -> ThresholdSet:
        """Build from four values in HA, LA, HW, LW order."""
        ha, la, hw, lw = values
        return cls(high_alarm=ha, low_alarm=la, high_warning=hw, low_warning=lw)

    def get(self, kind: ThresholdKind) -> float:
        return self.as_tuple()[kind]

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.high_alarm, self.low_alarm, self.high_warning, self.low_warning)


class ModuleThresholds(BaseModel):
    """Module-level and lane-specific monitor thresholds (page 02h)."""

    model_config = {"frozen": True}

    temperature_c: ThresholdSet
    voltage_mv: ThresholdSet
    bias_ua: ThresholdSet
    tx_power_uw: ThresholdSet
    rx_power_uw: ThresholdSet


class LaneMonitor(BaseModel):
    """Live monitor values for one lane (0-based)."""

    model_config = {"frozen": True}

    lane: int = Field(ge=0, lt=MAX_LANES)
    bias_ua: float = 0.0
    tx_power_uw: float = 0.0
    rx_power_uw: float = 0.0

    @property
    def bias_ma(self) -> float:
        return self.bias_ua / 1000

    @property
    def tx_power_mw(self) -> float:
        return self.tx_power_uw / 1000

    @property
    def rx_power_mw(self) -> float:
        return self.rx_power_uw / 1000


class FlagTable(BaseModel):
    """Alarm/warning flags indexed by [lane][ThresholdKind]."""

    model_config = {"frozen": True}

    flags: tuple[tuple[bool, bool, bool, bool], ...] = ()

    def is_set(self, lane: int, kind: ThresholdKind) -> bool:
        return self.flags[lane][kind]

    def lanes_flagged(self, kind: ThresholdKind) -> list[int]:
        return [lane for lane, row in enumerate(self.flags) if row[kind]]

    @property
    def any_set(self) -> bool:
        return any(any(row) for row in self.flags)


class DiagnosticsRecord(BaseModel):
    """Decoded diagnostics snapshot.

    Temperature and voltage are always valid. Thresholds, lane monitors and
    flag tables are only present for optical modules read with all five
    extended pages.
    """

    model_config = {"frozen": True}

    temperature_c: float
    voltage_mv: float
    thresholds: ModuleThresholds | None = None
    lanes: tuple[LaneMonitor, ...] = ()
    tx_flags: FlagTable | None = None
    rx_flags: FlagTable | None = None

    @property
    def has_extended(self) -> bool:
        return self.thresholds is not None

    @property
    def voltage_v(self) -> float:
        return self.voltage_mv / 1000
