"""Module descriptor assembly: identity, power, media and vendor fields.

References:
  - CMIS Rev. 4, section 8.2.1 (revision compliance), 8.3.9 (power),
    8.3.10 (cable assembly length), 8.3.14 (media interface technology)
  - CMIS Rev. 4, sections 8.4.2 - 8.4.4 (link length, wavelength),
    8.4.10 (signal integrity controls)
"""

from __future__ import annotations

from cmisview.core.decoders import (
    CABLE_LENGTH_MULTIPLIERS,
    MAX_POWER_W,
    SMF_LENGTH_MULTIPLIERS,
    WAVELENGTH_NM,
    WAVELENGTH_TOLERANCE_NM,
    decode_scaled_length,
    describe_code,
    read_bit_flag,
    read_field,
)
from cmisview.core.fields import get_field
from cmisview.core.pages import page_present
from cmisview.core.types import (
    CABLE_LEN_MAX_SENTINEL,
    CLEI_PRESENT_MASK,
    COPPER_FAMILY_THRESHOLD,
    MEDIA_TECHNOLOGY_LABELS,
    MODULE_TYPE_LABELS,
    MediaTechnology,
    ModuleType,
    Page,
)
from cmisview.models.descriptor import (
    CableLength,
    CopperAttenuation,
    CopperMedia,
    LinkLengths,
    ModuleDescriptor,
    OpticalMedia,
    RevisionCompliance,
    SignalIntegrity,
    VendorInfo,
)

# Bit positions in the page 01h signal integrity bytes
_CDR_IMPLEMENTED_BIT = 0
_CDR_BYPASS_BIT = 1


def _raw(buf: bytes, name: str, index: int = 0) -> int:
    return read_field(buf, get_field(name), index)


def _text(buf: bytes, name: str) -> str:
    return read_field(buf, get_field(name))


def decode_revision(buf: bytes) -> RevisionCompliance:
    rev = _raw(buf, "revision_compliance")
    return RevisionCompliance(major=(rev >> 4) & 0x0F, minor=rev & 0x0F)


def decode_power_class(buf: bytes) -> int:
    """Power class 1-8 from bits 7-5 of the power class byte."""
    return ((_raw(buf, "power_class") >> 5) & 0x07) + 1


def decode_max_power(buf: bytes) -> float:
    return MAX_POWER_W.apply(_raw(buf, "max_power"))


def decode_cable_length(buf: bytes) -> CableLength:
    km = decode_scaled_length(
        _raw(buf, "cable_assembly_length"),
        CABLE_LENGTH_MULTIPLIERS,
        sentinel=CABLE_LEN_MAX_SENTINEL,
    )
    if km is None:
        return CableLength(kilometers=None, exceeds_max=True)
    return CableLength(kilometers=km)


def decode_media(buf: bytes) -> OpticalMedia | CopperMedia:
    """Decode the media technology into its optical or copper variant.

    Copper codes carry attenuation from page 00h; optical codes carry the
    nominal wavelength and tolerance from page 01h when that page is present.
    """
    code = _raw(buf, "media_technology")
    label = describe_code(code, MediaTechnology, MEDIA_TECHNOLOGY_LABELS)

    if code >= COPPER_FAMILY_THRESHOLD:
        field = get_field("copper_attenuation")
        att = [read_field(buf, field, i) for i in range(field.count)]
        return CopperMedia(
            technology_code=code,
            technology=label,
            attenuation=CopperAttenuation(
                at_5ghz=att[0], at_7ghz=att[1], at_12p9ghz=att[2], at_25p8ghz=att[3],
            ),
        )

    if not page_present(Page.PAGE_1, len(buf)):
        return OpticalMedia(technology_code=code, technology=label)

    return OpticalMedia(
        technology_code=code,
        technology=label,
        wavelength_nm=WAVELENGTH_NM.apply(_raw(buf, "nominal_wavelength")),
        wavelength_tolerance_nm=WAVELENGTH_TOLERANCE_NM.apply(
            _raw(buf, "wavelength_tolerance")
        ),
    )


def decode_vendor(buf: bytes) -> VendorInfo:
    clei = None
    if _raw(buf, "clei_present") & CLEI_PRESENT_MASK:
        clei = _text(buf, "clei_code")

    return VendorInfo(
        name=_text(buf, "vendor_name"),
        oui=_text(buf, "vendor_oui"),
        part_number=_text(buf, "vendor_pn"),
        revision=_text(buf, "vendor_rev"),
        serial_number=_text(buf, "vendor_sn"),
        date_code=_text(buf, "date_code"),
        clei_code=clei,
    )


def decode_signal_integrity(buf: bytes) -> SignalIntegrity:
    tx = _raw(buf, "signal_integrity_tx")
    rx = _raw(buf, "signal_integrity_rx")
    return SignalIntegrity(
        tx_cdr=read_bit_flag(tx, _CDR_IMPLEMENTED_BIT),
        rx_cdr=read_bit_flag(rx, _CDR_IMPLEMENTED_BIT),
        tx_cdr_bypass_control=read_bit_flag(tx, _CDR_BYPASS_BIT),
        rx_cdr_bypass_control=read_bit_flag(rx, _CDR_BYPASS_BIT),
    )


def decode_link_lengths(buf: bytes) -> LinkLengths:
    smf = decode_scaled_length(_raw(buf, "smf_length"), SMF_LENGTH_MULTIPLIERS)
    return LinkLengths(
        smf_km=smf,
        om5_m=_raw(buf, "om5_length") * 2,
        om4_m=_raw(buf, "om4_length") * 2,
        om3_m=_raw(buf, "om3_length") * 2,
        om2_m=_raw(buf, "om2_length"),
    )


def decode_descriptor(buf: bytes) -> ModuleDescriptor:
    """Decode all top-level fields of a module memory buffer.

    Only page 00h is required; page 01h fields are None when the buffer
    stops after the base pages.
    """
    module_type = _raw(buf, "module_type")
    has_page_1 = page_present(Page.PAGE_1, len(buf))

    return ModuleDescriptor(
        identifier=_raw(buf, "identifier"),
        connector=_raw(buf, "connector"),
        module_type=module_type,
        module_type_label=describe_code(module_type, ModuleType, MODULE_TYPE_LABELS),
        revision=decode_revision(buf),
        power_class=decode_power_class(buf),
        max_power_w=decode_max_power(buf),
        cable_length=decode_cable_length(buf),
        media=decode_media(buf),
        vendor=decode_vendor(buf),
        signal_integrity=decode_signal_integrity(buf) if has_page_1 else None,
        link_lengths=decode_link_lengths(buf) if has_page_1 else None,
    )
