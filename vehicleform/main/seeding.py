# This file is part of VehicleForm.
#
# VehicleForm is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# VehicleForm is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with VehicleForm.  If not, see <https://www.gnu.org/licenses/>.

import struct
from collections import namedtuple

# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---
# CONFIGURATION
# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---

MASK32 = 0xFFFFFFFF

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193

# Substituted when the identity hashes to zero.
ZERO_SEED_FALLBACK = 1337

MULBERRY_INCREMENT = 0x6D2B79F5

# (low, high) per knob, in draw order.
PERSONALITY_RANGES = (
    ("stance", (0.92, 1.06)),  # wheelbase feel
    ("roof", (0.92, 1.08)),  # roof height
    ("nose", (0.90, 1.10)),  # front length
    ("tail", (0.90, 1.10)),  # rear length
    ("belt", (0.92, 1.06)),  # beltline contour
    ("ink", (0.72, 0.88)),  # line intensity
)

Personality = namedtuple("Personality", [name for name, _ in PERSONALITY_RANGES])


def _utf16_units(text):
    """Yields the UTF-16 code units of a string, surrogate pairs split."""
    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def hash32(text):
    """
    32-bit FNV-1a over the UTF-16 code units of ``text``.

    Returns an unsigned integer; zero is possible here, see ``derive_seed``.
    """
    h = FNV_OFFSET_BASIS
    for unit in _utf16_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & MASK32
    return h


def derive_seed(text):
    """Stable, never-zero 32-bit seed for an identity string."""
    return hash32(text) or ZERO_SEED_FALLBACK


def _imul(a, b):
    return (a * b) & MASK32


class Mulberry32:
    """Small seeded generator of reproducible floats in [0, 1)."""

    def __init__(self, seed):
        self.state = seed & MASK32

    def __call__(self):
        self.state = (self.state + MULBERRY_INCREMENT) & MASK32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return ((t ^ (t >> 14)) & MASK32) / 4294967296


def lerp(low, high, t):
    return low + (high - low) * t


def draw_personality(rng):
    """Consumes exactly one draw per knob, in the order of PERSONALITY_RANGES."""
    return Personality(*(lerp(low, high, rng()) for _, (low, high) in PERSONALITY_RANGES))
