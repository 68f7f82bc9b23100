"""A single memory reference read from a trace file."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_UNSIGNED_LONG_MAX = 2**64 - 1
_UINT32_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class Instruction:
    """A trace entry: a hexadecimal address and an operation character."""

    address_text: str
    operation: str

    @classmethod
    def from_line(cls, line: str) -> Instruction:
        """Parse a line of the form ``<hex address> <operation>``.

        The operation is the first non-blank character after the address;
        missing fields are left empty.
        """
        parts = line.split(maxsplit=1)
        address_text = parts[0] if parts else ""
        operation = parts[1][0] if len(parts) > 1 else ""
        return cls(address_text, operation)

    def address(self) -> int:
        """Return the address as an unsigned 32-bit integer.

        Leading hexadecimal digits are used, with an optional ``0x``
        prefix; trailing characters are ignored.
        """
        match = _HEX_NUMBER.match(self.address_text)
        if match is None:
            raise ValueError(f"invalid hexadecimal address: {self.address_text!r}")
        sign, digits = match.groups()
        value = int(digits, 16)
        if value > _UNSIGNED_LONG_MAX:
            raise ValueError(f"address out of range: {self.address_text!r}")
        if sign == "-":
            value = (-value) % (_UNSIGNED_LONG_MAX + 1)
        return value & _UINT32_MASK

    def page_id(self, page_size: int) -> int:
        """Return the number of the page holding the address."""
        return self.address() // page_size

    def describe(self) -> str:
        """Return a one-line human readable description."""
        return f"Address: {self.address_text}, Operation: {self.operation}"