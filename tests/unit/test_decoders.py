"""Unit tests for the stateless field decoders."""

from __future__ import annotations

import pytest

from cmisview.core.decoders import (
    BIAS_UA,
    CABLE_LENGTH_MULTIPLIERS,
    OPTICAL_POWER_UW,
    SMF_LENGTH_MULTIPLIERS,
    TEMPERATURE_C,
    VOLTAGE_MV,
    decode_ascii,
    decode_enum,
    decode_oui,
    decode_scaled_length,
    describe_code,
    read_bit_flag,
    read_field,
    read_s16,
    read_u16,
)
from cmisview.core.fields import get_field
from cmisview.core.types import (
    CABLE_LEN_MAX_SENTINEL,
    MEDIA_TECHNOLOGY_LABELS,
    MediaTechnology,
)
from cmisview.exceptions import PageNotPresentError


class TestFixedPoint:
    def test_u16_big_endian(self):
        assert read_u16(b"\x01\x90", 0) == 400

    def test_bias_scaling(self):
        assert BIAS_UA.apply(read_u16(b"\x01\x90", 0)) == 800.0

    def test_voltage_scaling(self):
        assert VOLTAGE_MV.apply(33000) == 3300.0

    def test_optical_power_scaling(self):
        assert OPTICAL_POWER_UW.apply(10000) == 1000.0

    def test_negative_temperature(self):
        raw = read_s16(b"\xff\xff", 0)
        assert raw == -1
        assert TEMPERATURE_C.apply(raw) == pytest.approx(-1 / 256)
        assert TEMPERATURE_C.apply(raw) < 0

    def test_positive_temperature(self):
        assert TEMPERATURE_C.apply(read_s16(b"\x1a\x80", 0)) == 26.5

    def test_unsigned_does_not_go_negative(self):
        assert read_u16(b"\xff\xff", 0) == 0xFFFF


class TestEnumerations:
    def test_known_code(self):
        assert decode_enum(0x00, MediaTechnology) is MediaTechnology.VCSEL_850

    def test_unmapped_code_returns_none(self):
        assert decode_enum(0x42, MediaTechnology) is None

    def test_describe_known(self):
        label = describe_code(0x0A, MediaTechnology, MEDIA_TECHNOLOGY_LABELS)
        assert label == "Copper cable, unequalized"

    def test_describe_unmapped(self):
        label = describe_code(0x42, MediaTechnology, MEDIA_TECHNOLOGY_LABELS)
        assert label == "Unknown/Reserved (0x42)"


class TestScaledLength:
    def test_multiplier_one(self):
        assert decode_scaled_length(0x41, CABLE_LENGTH_MULTIPLIERS) == 1.0

    def test_multiplier_hundred(self):
        assert decode_scaled_length(0xC2, CABLE_LENGTH_MULTIPLIERS) == 200.0

    def test_multiplier_tenth(self):
        assert decode_scaled_length(0x05, CABLE_LENGTH_MULTIPLIERS) == pytest.approx(0.5)

    def test_multiplier_ten(self):
        assert decode_scaled_length(0x83, CABLE_LENGTH_MULTIPLIERS) == 30.0

    def test_sentinel(self):
        result = decode_scaled_length(
            0xFF, CABLE_LENGTH_MULTIPLIERS, sentinel=CABLE_LEN_MAX_SENTINEL,
        )
        assert result is None

    def test_0xff_without_sentinel_is_numeric(self):
        assert decode_scaled_length(0xFF, CABLE_LENGTH_MULTIPLIERS) == 6300.0

    def test_smf_subset(self):
        assert decode_scaled_length(0x4A, SMF_LENGTH_MULTIPLIERS) == 10.0
        assert decode_scaled_length(0x0A, SMF_LENGTH_MULTIPLIERS) == pytest.approx(1.0)

    def test_smf_unmapped_multiplier_scales_by_one(self):
        assert decode_scaled_length(0x8A, SMF_LENGTH_MULTIPLIERS) == 10.0


class TestBitFlag:
    @pytest.mark.parametrize("lane", range(8))
    def test_single_lane(self, lane):
        mask = 1 << lane
        assert read_bit_flag(mask, lane) is True
        others = [read_bit_flag(mask, i) for i in range(8) if i != lane]
        assert not any(others)


class TestAscii:
    def test_trailing_spaces_trimmed(self):
        assert decode_ascii(b"ACME OPTICS     ") == "ACME OPTICS"

    def test_zero_filled(self):
        assert decode_ascii(b"\x00" * 16) == ""

    def test_inner_space_kept(self):
        assert decode_ascii(b"A B ") == "A B"

    def test_oui(self):
        assert decode_oui(bytes([0x00, 0x90, 0x65])) == "00:90:65"


class TestReadField:
    def test_reads_ascii_field(self, base_memory):
        assert read_field(bytes(base_memory), get_field("vendor_name")) == "ACME OPTICS"

    def test_reads_u16_lane_element(self, optical_memory):
        field = get_field("tx_bias")
        assert read_field(bytes(optical_memory), field, 0) == 400
        assert read_field(bytes(optical_memory), field, 7) == 470

    def test_extended_field_on_short_buffer(self, base_memory):
        with pytest.raises(PageNotPresentError):
            read_field(bytes(base_memory), get_field("tx_bias"))
