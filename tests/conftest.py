"""Pytest configuration and shared synthetic module memory fixtures.

Absolute offsets in the flattened buffer: page 00h bytes map 1:1, and an
upper-page byte at CMIS address ``a`` lands at ``a + 128`` (page 01h),
``a + 256`` (page 02h), ``a + 384`` (page 10h) or ``a + 512`` (page 11h).
"""

import struct

import pytest

PAGE_01H = 128
PAGE_02H = 256
PAGE_11H = 512

LANE_BIAS_RAW = [400 + i * 10 for i in range(8)]
LANE_TX_POWER_RAW = [5000 + i * 100 for i in range(8)]
LANE_RX_POWER_RAW = [4000 + i * 100 for i in range(8)]


def _put_ascii(buf: bytearray, pos: int, text: str, size: int) -> None:
    buf[pos:pos + size] = text.ljust(size).encode("ascii")


def _put_u16_run(buf: bytearray, pos: int, values: list[int]) -> None:
    for i, value in enumerate(values):
        struct.pack_into(">H", buf, pos + i * 2, value & 0xFFFF)


def _populate_base(buf: bytearray) -> None:
    buf[0x00] = 0x18  # QSFP-DD
    buf[0x01] = 0x40  # CMIS 4.0
    struct.pack_into(">h", buf, 0x0E, 0x1A80)  # 26.5 degC
    struct.pack_into(">H", buf, 0x10, 33000)  # 3300.0 mV
    buf[0x55] = 0x02  # SMF

    _put_ascii(buf, 0x81, "ACME OPTICS", 16)
    buf[0x91:0x94] = bytes([0x00, 0x90, 0x65])
    _put_ascii(buf, 0x94, "QDD-400G-FR4", 16)
    _put_ascii(buf, 0xA4, "A1", 2)
    _put_ascii(buf, 0xA6, "SN12345678", 16)
    _put_ascii(buf, 0xB6, "230115", 8)
    _put_ascii(buf, 0xBE, "WMOTCD0AAA", 10)

    buf[0xC8] = 0x60  # power class 4
    buf[0xC9] = 44  # 11.00 W
    buf[0xCA] = 0x41  # 1.00 km
    buf[0xCB] = 0x07  # LC
    buf[0xD4] = 0x04  # 1310 nm DFB


def _populate_extended(buf: bytearray) -> None:
    # Page 01h
    buf[PAGE_01H + 0x84] = 0x4A  # SMF 10 km
    buf[PAGE_01H + 0x85] = 50  # OM5 100 m
    buf[PAGE_01H + 0x86] = 35  # OM4 70 m
    buf[PAGE_01H + 0x87] = 25  # OM3 50 m
    buf[PAGE_01H + 0x88] = 30  # OM2 30 m
    struct.pack_into(">H", buf, PAGE_01H + 0x8A, 26200)  # 1310.000 nm
    struct.pack_into(">H", buf, PAGE_01H + 0x8C, 1300)  # 6.500 nm
    buf[PAGE_01H + 0xA1] = 0x03
    buf[PAGE_01H + 0xA2] = 0x01

    # Page 02h thresholds, HA/LA/HW/LW
    _put_u16_run(buf, PAGE_02H + 0x80, [0x4B00, 0xFB00, 0x4600, 0x0000])
    _put_u16_run(buf, PAGE_02H + 0x88, [36300, 29700, 34650, 31350])
    _put_u16_run(buf, PAGE_02H + 0xB0, [20000, 1000, 15000, 2000])
    _put_u16_run(buf, PAGE_02H + 0xB8, [6000, 500, 5000, 1000])
    _put_u16_run(buf, PAGE_02H + 0xC0, [25000, 300, 20000, 600])

    # Page 11h flags
    buf[PAGE_11H + 0x8B] = 0x01  # Tx HA: lane 0
    buf[PAGE_11H + 0x8C] = 0x00
    buf[PAGE_11H + 0x8D] = 0x81  # Tx HW: lanes 0, 7
    buf[PAGE_11H + 0x8E] = 0x00
    buf[PAGE_11H + 0x95] = 0x00
    buf[PAGE_11H + 0x96] = 0x02  # Rx LA: lane 1
    buf[PAGE_11H + 0x97] = 0x00
    buf[PAGE_11H + 0x98] = 0x10  # Rx LW: lane 4

    # Page 11h lane monitors
    _put_u16_run(buf, PAGE_11H + 0x9A, LANE_TX_POWER_RAW)
    _put_u16_run(buf, PAGE_11H + 0xAA, LANE_BIAS_RAW)
    _put_u16_run(buf, PAGE_11H + 0xBA, LANE_RX_POWER_RAW)


@pytest.fixture
def base_memory() -> bytearray:
    """A 256-byte SMF module memory (page 00h only)."""
    buf = bytearray(256)
    _populate_base(buf)
    return buf


@pytest.fixture
def optical_memory() -> bytearray:
    """A 768-byte SMF module memory with all extended pages populated."""
    buf = bytearray(768)
    _populate_base(buf)
    _populate_extended(buf)
    return buf


@pytest.fixture
def copper_memory() -> bytearray:
    """A 768-byte passive copper module memory."""
    buf = bytearray(768)
    _populate_base(buf)
    _populate_extended(buf)
    buf[0x55] = 0x03  # passive copper
    buf[0xD4] = 0x0A  # copper, unequalized
    buf[0xCC:0xD0] = bytes([3, 4, 6, 9])
    return buf


@pytest.fixture
def lane_monitor_raw() -> dict[str, list[int]]:
    """Raw page 11h lane monitor words written into the extended fixtures."""
    return {
        "bias": list(LANE_BIAS_RAW),
        "tx_power": list(LANE_TX_POWER_RAW),
        "rx_power": list(LANE_RX_POWER_RAW),
    }
