"""
Tests for day 16 (Packet Decoder).
"""

from __future__ import annotations

import pytest

from aoc2021.days.day16 import (
    LiteralPacket,
    OperatorPacket,
    OperatorType,
    challenge_one,
    challenge_two,
    evaluate,
    hex_to_bits,
    iter_packets,
    parse_input,
)


def test_hex_to_bits():
    assert hex_to_bits("D2FE28") == "110100101111111000101000"


def test_literal_packet():
    assert parse_input("D2FE28") == LiteralPacket(version=6, value=2021)


def test_operator_with_total_length():
    packet = parse_input("38006F45291200")
    assert isinstance(packet, OperatorPacket)
    assert packet.version == 1
    assert packet.type_id == OperatorType.LESS_THAN
    assert [child.value for child in packet.children] == [10, 20]


def test_operator_with_packet_count():
    packet = parse_input("EE00D40C823060")
    assert packet.version == 7
    assert packet.type_id == OperatorType.MAXIMUM
    assert [child.value for child in packet.children] == [1, 2, 3]


def test_iter_packets_is_depth_first():
    packets = list(iter_packets(parse_input("8A004A801A8002F478")))
    assert [p.version for p in packets] == [4, 1, 5, 6]
    assert isinstance(packets[-1], LiteralPacket)


@pytest.mark.parametrize(
    "transmission, version_sum",
    [
        ("8A004A801A8002F478", 16),
        ("620080001611562C8802118E34", 12),
        ("C0015000016115A2E0802F182340", 23),
        ("A0016C880162017C3686B18A3D4780", 31),
    ],
)
def test_version_sums(transmission, version_sum):
    assert challenge_one(parse_input(transmission)) == version_sum


@pytest.mark.parametrize(
    "transmission, value",
    [
        ("C200B40A82", 3),
        ("04005AC33890", 54),
        ("880086C3E88112", 7),
        ("CE00C43D881120", 9),
        ("D8005AC2A8F0", 1),
        ("F600BC2D8F", 0),
        ("9C005AC2F8F0", 0),
        ("9C0141080250320F1802104A08", 1),
    ],
)
def test_evaluate(transmission, value):
    assert challenge_two(parse_input(transmission)) == value


def test_evaluate_nested_literal():
    packet = OperatorPacket(0, OperatorType.PRODUCT, (LiteralPacket(0, 6), LiteralPacket(0, 7)))
    assert evaluate(packet) == 42


@pytest.mark.parametrize("transmission", ["", "XYZ", "D2FE"])
def test_bad_transmissions_raise(transmission):
    with pytest.raises(ValueError):
        parse_input(transmission)
