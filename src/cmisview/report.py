"""Plain-text module report in the ethtool ``-m`` layout.

Every line is ``\\t<label padded to label_width> : <value>``.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from cmisview.config import Settings
from cmisview.core.types import MAX_LANES, ThresholdKind
from cmisview.models.descriptor import CopperMedia, ModuleDescriptor
from cmisview.models.diagnostics import DiagnosticsRecord, FlagTable, ThresholdSet
from cmisview.models.module import ModuleInfo

_AW_LABELS: dict[ThresholdKind, str] = {
    ThresholdKind.HIGH_ALARM: "power high alarm   ",
    ThresholdKind.LOW_ALARM: "power low alarm    ",
    ThresholdKind.HIGH_WARNING: "power high warning ",
    ThresholdKind.LOW_WARNING: "power low warning  ",
}


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def _on_off(value: bool) -> str:
    return "On" if value else "Off"


def format_bias(microamps: float) -> str:
    return f"{microamps / 1000:.3f} mA"


def format_power(microwatts: float) -> str:
    milliwatts = microwatts / 1000
    dbm = 10 * math.log10(milliwatts) if milliwatts > 0 else -math.inf
    return f"{milliwatts:.4f} mW / {dbm:.2f} dBm"


def format_temperature(celsius: float) -> str:
    return f"{celsius:.2f} degrees C / {celsius * 1.8 + 32:.2f} degrees F"


def format_voltage(millivolts: float) -> str:
    return f"{millivolts / 1000:.4f} V"


class ReportBuilder:
    """Accumulates report lines with a fixed label width."""

    def __init__(self, label_width: int = 41) -> None:
        self._width = label_width
        self.lines: list[str] = []

    def add(self, label: str, value: str) -> None:
        self.lines.append(f"\t{label:<{self._width}} : {value}")


def _descriptor_head(rb: ReportBuilder, desc: ModuleDescriptor) -> None:
    rb.add("Identifier", f"0x{desc.identifier:02x}")
    rb.add("Power class", str(desc.power_class))
    rb.add("Max power", f"{desc.max_power_w:.2f}W")
    rb.add("Connector", f"0x{desc.connector:02x}")

    cable = desc.cable_length
    if cable.exceeds_max:
        rb.add("Cable assembly length", "> 6.3km")
    else:
        rb.add("Cable assembly length", f"{cable.kilometers:.2f}km")

    si = desc.signal_integrity
    if si is not None:
        rb.add("Tx CDR bypass control", _yes_no(si.tx_cdr_bypass_control))
        rb.add("Rx CDR bypass control", _yes_no(si.rx_cdr_bypass_control))
        rb.add("Tx CDR", _yes_no(si.tx_cdr))
        rb.add("Rx CDR", _yes_no(si.rx_cdr))

    media = desc.media
    rb.add("Transmitter technology", f"0x{media.technology_code:02x} ({media.technology})")
    if isinstance(media, CopperMedia):
        att = media.attenuation
        rb.add("Attenuation at 5GHz", f"{att.at_5ghz}db")
        rb.add("Attenuation at 7GHz", f"{att.at_7ghz}db")
        rb.add("Attenuation at 12.9GHz", f"{att.at_12p9ghz}db")
        rb.add("Attenuation at 25.8GHz", f"{att.at_25p8ghz}db")
    elif media.wavelength_nm is not None:
        rb.add("Laser wavelength", f"{media.wavelength_nm:.3f}nm")
        rb.add("Laser wavelength tolerance", f"{media.wavelength_tolerance_nm:.3f}nm")


def _flag_rows(rb: ReportBuilder, direction: str, table: FlagTable) -> None:
    for lane in range(MAX_LANES):
        for kind in ThresholdKind:
            label = f"{direction} {_AW_LABELS[kind]}(Channel {lane + 1})"
            rb.add(label, _on_off(table.is_set(lane, kind)))


def _threshold_rows(
    rb: ReportBuilder,
    prefix: str,
    values: ThresholdSet,
    fmt: Callable[[float], str],
) -> None:
    for kind in ThresholdKind:
        rb.add(f"{prefix} {kind.label} threshold", fmt(values.get(kind)))


def _diagnostics(rb: ReportBuilder, diag: DiagnosticsRecord) -> None:
    rb.add("Module temperature", format_temperature(diag.temperature_c))
    rb.add("Module voltage", format_voltage(diag.voltage_mv))

    if not diag.has_extended:
        return

    for lane in diag.lanes:
        rb.add(f"Tx bias current monitor (Channel {lane.lane + 1})", format_bias(lane.bias_ua))
    for lane in diag.lanes:
        rb.add(
            f"Tx output optical power (Channel {lane.lane + 1})",
            format_power(lane.tx_power_uw),
        )
    for lane in diag.lanes:
        rb.add(
            f"Rx input optical power (Channel {lane.lane + 1})",
            format_power(lane.rx_power_uw),
        )

    _flag_rows(rb, "Rx", diag.rx_flags)
    _flag_rows(rb, "Tx", diag.tx_flags)

    th = diag.thresholds
    _threshold_rows(rb, "Laser bias current", th.bias_ua, format_bias)
    _threshold_rows(rb, "Laser output power", th.tx_power_uw, format_power)
    _threshold_rows(rb, "Module temperature", th.temperature_c, format_temperature)
    _threshold_rows(rb, "Module voltage", th.voltage_mv, format_voltage)
    _threshold_rows(rb, "Laser rx power", th.rx_power_uw, format_power)


def _descriptor_tail(rb: ReportBuilder, desc: ModuleDescriptor) -> None:
    links = desc.link_lengths
    if links is not None:
        rb.add("Length (SMF)", f"{links.smf_km:.2f}km")
        rb.add("Length (OM5)", f"{links.om5_m}m")
        rb.add("Length (OM4)", f"{links.om4_m}m")
        rb.add("Length (OM3 50/125um)", f"{links.om3_m}m")
        rb.add("Length (OM2 50/125um)", f"{links.om2_m}m")

    vendor = desc.vendor
    rb.add("Vendor name", vendor.name)
    rb.add("Vendor OUI", vendor.oui)
    rb.add("Vendor PN", vendor.part_number)
    rb.add("Vendor rev", vendor.revision)
    rb.add("Vendor SN", vendor.serial_number)
    rb.add("Date code", vendor.date_code)
    if vendor.clei_code is not None:
        rb.add("CLEI code", vendor.clei_code)

    rb.add("Revision compliance", str(desc.revision))


def render_report(info: ModuleInfo, settings: Settings | None = None) -> list[str]:
    """Render a decoded module as report lines."""
    settings = settings or Settings()
    rb = ReportBuilder(label_width=settings.label_width)
    _descriptor_head(rb, info.descriptor)
    _diagnostics(rb, info.diagnostics)
    _descriptor_tail(rb, info.descriptor)
    return rb.lines
