"""Unit tests for module descriptor assembly."""

from __future__ import annotations

import pytest

from cmisview.core.descriptor import (
    decode_cable_length,
    decode_descriptor,
    decode_media,
    decode_power_class,
)
from cmisview.models.descriptor import CopperMedia, OpticalMedia


class TestTopLevelFields:
    def test_identity(self, base_memory):
        desc = decode_descriptor(bytes(base_memory))
        assert desc.identifier == 0x18
        assert desc.connector == 0x07
        assert desc.module_type == 0x02
        assert desc.module_type_label == "Optical Interfaces: SMF"
        assert str(desc.revision) == "Rev. 4.0"

    def test_power(self, base_memory):
        desc = decode_descriptor(bytes(base_memory))
        assert desc.power_class == 4
        assert desc.max_power_w == 11.0

    @pytest.mark.parametrize(("byte", "expected"), [(0x00, 1), (0xE0, 8), (0xBF, 6)])
    def test_power_class_bits(self, base_memory, byte, expected):
        base_memory[0xC8] = byte
        assert decode_power_class(bytes(base_memory)) == expected

    def test_unknown_module_type_label(self, base_memory):
        base_memory[0x55] = 0x7E
        desc = decode_descriptor(bytes(base_memory))
        assert desc.module_type_label == "Unknown/Reserved (0x7e)"


class TestCableLength:
    def test_one_km(self, base_memory):
        length = decode_cable_length(bytes(base_memory))
        assert length.kilometers == 1.0
        assert length.exceeds_max is False

    def test_two_hundred_km(self, base_memory):
        base_memory[0xCA] = 0xC2
        assert decode_cable_length(bytes(base_memory)).kilometers == 200.0

    def test_sentinel(self, base_memory):
        base_memory[0xCA] = 0xFF
        length = decode_cable_length(bytes(base_memory))
        assert length.exceeds_max is True
        assert length.kilometers is None


class TestMediaInterface:
    def test_vcsel_takes_wavelength_path(self, optical_memory):
        optical_memory[0xD4] = 0x00
        media = decode_media(bytes(optical_memory))
        assert isinstance(media, OpticalMedia)
        assert media.technology == "850 nm VCSEL"
        assert media.wavelength_nm == pytest.approx(1310.0)
        assert media.wavelength_tolerance_nm == pytest.approx(6.5)

    def test_copper_takes_attenuation_path(self, copper_memory):
        media = decode_media(bytes(copper_memory))
        assert isinstance(media, CopperMedia)
        assert media.technology == "Copper cable, unequalized"
        assert media.attenuation.at_5ghz == 3
        assert media.attenuation.at_7ghz == 4
        assert media.attenuation.at_12p9ghz == 6
        assert media.attenuation.at_25p8ghz == 9

    def test_last_optical_code(self, optical_memory):
        optical_memory[0xD4] = 0x09
        assert isinstance(decode_media(bytes(optical_memory)), OpticalMedia)

    def test_unmapped_code_uses_copper_family(self, copper_memory):
        copper_memory[0xD4] = 0x20
        media = decode_media(bytes(copper_memory))
        assert isinstance(media, CopperMedia)
        assert media.technology == "Unknown/Reserved (0x20)"

    def test_optical_without_page_1_has_no_wavelength(self, base_memory):
        media = decode_media(bytes(base_memory))
        assert isinstance(media, OpticalMedia)
        assert media.wavelength_nm is None
        assert media.wavelength_tolerance_nm is None


class TestVendorInfo:
    def test_vendor_strings(self, base_memory):
        vendor = decode_descriptor(bytes(base_memory)).vendor
        assert vendor.name == "ACME OPTICS"
        assert vendor.oui == "00:90:65"
        assert vendor.part_number == "QDD-400G-FR4"
        assert vendor.revision == "A1"
        assert vendor.serial_number == "SN12345678"
        assert vendor.date_code == "230115"

    def test_clei_absent_without_presence_bit(self, base_memory):
        assert decode_descriptor(bytes(base_memory)).vendor.clei_code is None

    def test_clei_present(self, base_memory):
        base_memory[0x02] = 0x20
        assert decode_descriptor(bytes(base_memory)).vendor.clei_code == "WMOTCD0AAA"

    def test_empty_vendor_name(self, base_memory):
        base_memory[0x81:0x91] = bytes(16)
        assert decode_descriptor(bytes(base_memory)).vendor.name == ""


class TestPageOneFields:
    def test_absent_on_base_buffer(self, base_memory):
        desc = decode_descriptor(bytes(base_memory))
        assert desc.signal_integrity is None
        assert desc.link_lengths is None

    def test_signal_integrity(self, optical_memory):
        si = decode_descriptor(bytes(optical_memory)).signal_integrity
        assert si.tx_cdr is True
        assert si.tx_cdr_bypass_control is True
        assert si.rx_cdr is True
        assert si.rx_cdr_bypass_control is False

    def test_link_lengths(self, optical_memory):
        links = decode_descriptor(bytes(optical_memory)).link_lengths
        assert links.smf_km == 10.0
        assert links.om5_m == 100
        assert links.om4_m == 70
        assert links.om3_m == 50
        assert links.om2_m == 30

    def test_descriptor_independent_of_extended_pages(self, base_memory, optical_memory):
        short = decode_descriptor(bytes(base_memory))
        full = decode_descriptor(bytes(optical_memory))
        assert short.vendor == full.vendor
        assert short.cable_length == full.cable_length
        assert short.power_class == full.power_class
