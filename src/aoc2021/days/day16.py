"""
Day 16: Packet Decoder

A BITS transmission is a hexadecimal string encoding one outermost packet.

Every packet starts with a 3-bit version and a 3-bit type ID.

- Type 4 is a literal value, written as groups of 5 bits: a continuation
  bit followed by 4 value bits.
- Any other type is an operator. A 1-bit length type ID follows: 0 means
  the next 15 bits give the total length in bits of the sub-packets, 1
  means the next 11 bits give the number of sub-packets.

Zero bits after the outermost packet are padding and are ignored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple, Union

from ..utils.cli import run_day

DAY = 16

LITERAL_TYPE = 4


class OperatorType(IntEnum):
    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7


COMPARISONS = (OperatorType.GREATER_THAN, OperatorType.LESS_THAN, OperatorType.EQUAL_TO)


@dataclass(frozen=True)
class LiteralPacket:
    version: int
    value: int


@dataclass(frozen=True)
class OperatorPacket:
    version: int
    type_id: OperatorType
    children: Tuple["Packet", ...]


Packet = Union[LiteralPacket, OperatorPacket]


def hex_to_bits(text: str) -> str:
    text = text.strip()
    if not text:
        raise ValueError("transmission is empty")
    try:
        return "".join(f"{int(c, 16):04b}" for c in text)
    except ValueError:
        raise ValueError(f"transmission is not hexadecimal: {text!r}") from None


class BitReader:
    def __init__(self, bits: str):
        self.bits = bits
        self.pos = 0

    def read(self, n: int) -> int:
        if self.pos + n > len(self.bits):
            raise ValueError(f"transmission truncated at bit {self.pos} (wanted {n} more)")
        value = int(self.bits[self.pos:self.pos + n], 2)
        self.pos += n
        return value

    def read_packet(self) -> Packet:
        version = self.read(3)
        type_id = self.read(3)

        if type_id == LITERAL_TYPE:
            value = 0
            more = 1
            while more:
                more = self.read(1)
                value = (value << 4) | self.read(4)
            return LiteralPacket(version, value)

        try:
            op = OperatorType(type_id)
        except ValueError:
            raise ValueError(f"unknown packet type {type_id} at bit {self.pos - 3}") from None

        children: List[Packet] = []
        if self.read(1) == 0:
            end = self.read(15) + self.pos
            while self.pos < end:
                children.append(self.read_packet())
            if self.pos != end:
                raise ValueError(f"sub-packets overran their length at bit {self.pos}")
        else:
            for _ in range(self.read(11)):
                children.append(self.read_packet())

        if op in COMPARISONS and len(children) != 2:
            raise ValueError(f"{op.name} packet needs 2 sub-packets, got {len(children)}")
        return OperatorPacket(version, op, tuple(children))


def parse_input(text: str) -> Packet:
    reader = BitReader(hex_to_bits(text))
    packet = reader.read_packet()
    if "1" in reader.bits[reader.pos:]:
        raise ValueError(f"unexpected data after the outermost packet at bit {reader.pos}")
    return packet


def iter_packets(packet: Packet) -> Iterator[Packet]:
    """
    Yield `packet` and all of its sub-packets, depth first.
    """
    yield packet
    if isinstance(packet, OperatorPacket):
        for child in packet.children:
            yield from iter_packets(child)


def evaluate(packet: Packet) -> int:
    if isinstance(packet, LiteralPacket):
        return packet.value

    values = [evaluate(child) for child in packet.children]
    op = packet.type_id
    if op == OperatorType.SUM:
        return sum(values)
    if op == OperatorType.PRODUCT:
        return math.prod(values)
    if op == OperatorType.MINIMUM:
        return min(values)
    if op == OperatorType.MAXIMUM:
        return max(values)
    if op == OperatorType.GREATER_THAN:
        return int(values[0] > values[1])
    if op == OperatorType.LESS_THAN:
        return int(values[0] < values[1])
    return int(values[0] == values[1])


def challenge_one(packet: Packet) -> int:
    return sum(p.version for p in iter_packets(packet))


def challenge_two(packet: Packet) -> int:
    return evaluate(packet)


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
