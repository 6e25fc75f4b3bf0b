"""Controller serial numbers."""

from __future__ import annotations


class SerialNumber(int):
    """An unsigned 32-bit controller serial number."""

    def __new__(cls, value: int = 0) -> SerialNumber:
        v = int(value)
        if not 0 <= v <= 0xFFFFFFFF:
            raise ValueError(f"serial number out of range ({v})")
        return super().__new__(cls, v)

    def __str__(self) -> str:
        return f"{int(self):<10d}"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec) if not spec or spec[-1] not in "dxXobn" else format(int(self), spec)

    def __repr__(self) -> str:
        return f"SerialNumber({int(self)})"

    def encode(self) -> bytes:
        """Encodes as four bytes, little endian."""
        return int(self).to_bytes(4, "little")

    @classmethod
    def decode(cls, data: bytes) -> SerialNumber:
        """Decodes the first four bytes of data, little endian."""
        if len(data) < 4:
            raise ValueError("serial number requires 4 bytes")
        return cls(int.from_bytes(bytes(data[:4]), "little"))