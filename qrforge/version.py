"""QR code versions, their capacities, format and version information."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache

from qrforge.modes import EncMode

VERSION_COUNT = 40
FORMAT_INFO_BITS = 15
VERSION_INFO_BITS = 18


class ECLevel(IntEnum):
    """Error correction level."""

    LOW = 1
    MEDIUM = 2
    QUART = 3
    HIGHEST = 4


class VersionError(ValueError):
    """No version matches the request."""


# 15-bit format information, indexed by the 2 level bits and 3 mask bits.
FORMAT_BIT_SEQUENCE = (
    0x5412, 0x5125, 0x5E7C, 0x5B4B, 0x45F9, 0x40CE, 0x4F97, 0x4AA0,
    0x77C4, 0x72F3, 0x7DAA, 0x789D, 0x662F, 0x6318, 0x6C41, 0x6976,
    0x1689, 0x13BE, 0x1CE7, 0x19D0, 0x0762, 0x0255, 0x0D0C, 0x083B,
    0x355F, 0x3068, 0x3F31, 0x3A06, 0x24B4, 0x2183, 0x2EDA, 0x2BED,
)

# 18-bit version information, indexed by version.
VERSION_BIT_SEQUENCE = (
    0x00000, 0x00000, 0x00000, 0x00000, 0x00000, 0x00000, 0x00000, 0x07C94,
    0x085BC, 0x09A99, 0x0A4D3, 0x0BBF6, 0x0C762, 0x0D847, 0x0E60D, 0x0F928,
    0x10B78, 0x1145D, 0x12A17, 0x13532, 0x149A6, 0x15683, 0x168C9, 0x177EC,
    0x18EC4, 0x191E1, 0x1AFAB, 0x1B08E, 0x1CC1A, 0x1D33F, 0x1ED75, 0x1F250,
    0x209D5, 0x216F0, 0x228BA, 0x2379F, 0x24B0B, 0x2542E, 0x26A64, 0x27541, 0x28C69,
)

ALIGN_PATTERN_LOCATION: dict[int, tuple[int, ...]] = {
    2: (6, 18),
    3: (6, 22),
    4: (6, 26),
    5: (6, 30),
    6: (6, 34),
    7: (6, 22, 38),
    8: (6, 24, 42),
    9: (6, 26, 46),
    10: (6, 28, 50),
    11: (6, 30, 54),
    12: (6, 32, 58),
    13: (6, 34, 62),
    14: (6, 26, 46, 66),
    15: (6, 26, 48, 70),
    16: (6, 26, 50, 74),
    17: (6, 30, 54, 78),
    18: (6, 30, 56, 82),
    19: (6, 30, 58, 86),
    20: (6, 34, 62, 90),
    21: (6, 28, 50, 72, 94),
    22: (6, 26, 50, 74, 98),
    23: (6, 30, 54, 78, 102),
    24: (6, 28, 54, 80, 106),
    25: (6, 32, 58, 84, 110),
    26: (6, 30, 58, 86, 114),
    27: (6, 34, 62, 90, 118),
    28: (6, 26, 50, 74, 98, 122),
    29: (6, 30, 54, 78, 102, 126),
    30: (6, 26, 52, 78, 104, 130),
    31: (6, 30, 56, 82, 108, 134),
    32: (6, 34, 60, 86, 112, 138),
    33: (6, 30, 58, 86, 114, 142),
    34: (6, 34, 62, 90, 118, 146),
    35: (6, 30, 54, 78, 102, 126, 150),
    36: (6, 24, 50, 76, 102, 128, 154),
    37: (6, 28, 54, 80, 106, 132, 158),
    38: (6, 32, 58, 84, 110, 136, 162),
    39: (6, 26, 54, 82, 110, 138, 166),
    40: (6, 30, 58, 86, 114, 142, 170),
}

_FORMAT_LEVEL_BITS = {
    ECLevel.LOW: 0x08,
    ECLevel.MEDIUM: 0x00,
    ECLevel.QUART: 0x18,
    ECLevel.HIGHEST: 0x10,
}


def _to_bits(value: int, width: int) -> tuple[bool, ...]:
    return tuple(bool((value >> shift) & 1) for shift in range(width - 1, -1, -1))


@dataclass(frozen=True)
class Capacity:
    """Maximum number of characters per encoding mode."""

    numeric: int
    alphanumeric: int
    byte: int
    jp: int

    def for_mode(self, mode: EncMode) -> int:
        """Capacity for one encoding mode."""
        try:
            return {
                EncMode.NUMERIC: self.numeric,
                EncMode.ALPHANUMERIC: self.alphanumeric,
                EncMode.BYTE: self.byte,
                EncMode.JP: self.jp,
            }[mode]
        except KeyError:
            raise VersionError("could not match the encode type") from None


@dataclass(frozen=True)
class Group:
    """A run of equally sized data blocks."""

    num_blocks: int
    num_data_codewords: int
    ec_codewords_per_block: int


@dataclass(frozen=True)
class Location:
    """A module position."""

    x: int
    y: int


@dataclass(frozen=True)
class Version:
    """One version at one error correction level."""

    ver: int
    ec_level: ECLevel
    cap: Capacity
    remainder_bits: int
    groups: tuple[Group, ...]

    def dimension(self) -> int:
        """Modules per side."""
        return self.ver * 4 + 17

    def num_total_codewords(self) -> int:
        """Number of data codewords over all blocks."""
        return sum(g.num_blocks * g.num_data_codewords for g in self.groups)

    def num_groups(self) -> int:
        return len(self.groups)

    def total_num_blocks(self) -> int:
        return sum(g.num_blocks for g in self.groups)

    def version_info(self) -> tuple[bool, ...] | None:
        """The 18 version information bits, most significant first; None below version 7."""
        if self.ver < 7:
            return None
        return _to_bits(VERSION_BIT_SEQUENCE[self.ver], VERSION_INFO_BITS)

    def format_info(self, mask_pattern: int) -> tuple[bool, ...]:
        """The 15 format information bits for a mask pattern, most significant first."""
        try:
            level_bits = _FORMAT_LEVEL_BITS[ECLevel(self.ec_level)]
        except ValueError:
            raise ValueError(f"invalid level {self.ec_level}") from None
        if not 0 <= mask_pattern <= 7:
            raise ValueError(f"invalid mask pattern {mask_pattern}")
        return _to_bits(FORMAT_BIT_SEQUENCE[level_bits | mask_pattern], FORMAT_INFO_BITS)


def default_binary_compare(ver: int, ec_level: int) -> Callable[[Version], int]:
    """Comparison that is positive when the wanted version lies after the cursor."""

    def compare(cursor: Version) -> int:
        diff = ver - cursor.ver
        if diff:
            return diff
        return int(ec_level) - int(cursor.ec_level)

    return compare


def binary_search_version(
    versions: Sequence[Version],
    low: int,
    high: int,
    compare: Callable[[Version], int],
) -> Version | None:
    """Search versions[low..high] for the entry compare reports as a hit."""
    count = len(versions)
    if low > high or low > count or high < 0:
        return None
    low = max(low, 0)
    high = min(high, count - 1)

    while low <= high:
        mid = (low + high) // 2
        result = compare(versions[mid])
        if result == 0:
            return versions[mid]
        if result > 0:
            low = mid + 1
        else:
            high = mid - 1
    return None


def load_version(level: int, ec_level: int, versions: Sequence[Version]) -> Version:
    """The entry for a version number and level; each version has four consecutive entries."""
    if level >= 1:
        for candidate in versions[(level - 1) * 4 : level * 4]:
            if candidate.ec_level == ec_level:
                return candidate
    raise VersionError("could not match version")


def analyze_version(
    raw: bytes | str,
    ec_level: int,
    mode: EncMode,
    versions: Sequence[Version],
) -> Version:
    """The smallest version at this level whose capacity in this mode holds the data."""
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    try:
        step = ECLevel(ec_level) - ECLevel.LOW
    except ValueError:
        raise VersionError("invalid error correction level") from None

    want = len(raw)
    for candidate in versions[step : 4 * VERSION_COUNT : 4]:
        if candidate.cap.for_mode(mode) >= want:
            return candidate
    raise VersionError(
        "could not match version! check your content length is in limitation "
        "of encode mode and error correction level"
    )


def valid_alignment(x: int, y: int, dimension: int) -> bool:
    """Whether an alignment pattern centred at (x, y) stays clear of the finders."""
    if x - 2 < 7 and y - 2 < 7:
        return False
    if x + 2 > dimension - 7 and y - 2 < 7:
        return False
    if x - 2 < 7 and y + 2 > dimension - 7:
        return False
    return True


@lru_cache(maxsize=None)
def alignment_pattern_locations(ver: int) -> tuple[Location, ...]:
    """Centres of the alignment patterns of a version; none for version 1."""
    if ver < 2:
        return ()
    try:
        positions = ALIGN_PATTERN_LOCATION[ver]
    except KeyError:
        raise VersionError(f"could not find alignment at version: {ver}") from None

    dimension = ver * 4 + 17
    return tuple(
        Location(x, y)
        for x in positions
        for y in positions
        if valid_alignment(x, y, dimension)
    )