# netinterp/core/address.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class AddressKind(Enum):
    IPV4 = "ipv4"
    IPV6 = "ipv6"


@dataclass(frozen=True)
class AddressLiteral:
    """
    An IPv4 or IPv6 address literal that passed validation.
    `text` is the trimmed input, kept verbatim (no case folding, no padding).
    Build instances with AddressLiteral.parse().
    """
    kind: AddressKind
    text: str

    @classmethod
    def parse(cls, text: str) -> Optional["AddressLiteral"]:
        if text is None:
            return None
        trimmed = text.strip()
        if not trimmed:
            return None

        # a colon commits the literal to IPv6
        if ":" in trimmed:
            if is_valid_ipv6(trimmed):
                return cls(AddressKind.IPV6, trimmed)
            return None

        if is_valid_ipv4(trimmed):
            return cls(AddressKind.IPV4, trimmed)
        return None

    @property
    def is_ipv4(self) -> bool:
        return self.kind is AddressKind.IPV4

    @property
    def is_ipv6(self) -> bool:
        return self.kind is AddressKind.IPV6

    def __str__(self) -> str:
        return self.text


def is_valid_ipv4(text: str) -> bool:
    parts = text.split(".")
    if len(parts) != 4:
        return False
    for part in parts:
        # ASCII digits only
        if not part or not part.isascii() or not part.isdigit():
            return False
        if len(part) > 1 and part[0] == "0":
            return False
        if int(part) > 255:
            return False
    return True


def is_valid_ipv6(text: str) -> bool:
    if "::" in text:
        halves = text.split("::")
        if len(halves) != 2:
            return False
        left = halves[0].split(":") if halves[0] else []
        right = halves[1].split(":") if halves[1] else []
        missing = 8 - (len(left) + len(right))
        if missing < 0:
            return False
        groups = left + ["0"] * missing + right
    else:
        groups = text.split(":")

    if len(groups) != 8:
        return False
    return all(0 < len(g) <= 4 and all(c in HEX_DIGITS for c in g) for g in groups)
