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

from collections import namedtuple
from types import MappingProxyType

from vehicleform.main.deform import coordinate_tokens

Wheel = namedtuple("Wheel", ["cx", "cy", "r"])
Archetype = namedtuple("Archetype", ["kind", "body", "glass", "wheel_a", "wheel_b"])

SEDAN = "sedan"
SUV = "suv"
TRUCK = "truck"
HATCH = "hatch"
COUPE = "coupe"

KINDS = (SEDAN, SUV, TRUCK, HATCH, COUPE)

# Every template is written as explicit x,y pairs (M/L/C/Z only) so the
# deformation engine can tell x from y by position.


def _path(*segments):
    return " ".join(segments)


# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---
# Wheel placement
# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---

FRONT_WHEEL = Wheel(270, 360, 38)
REAR_WHEEL = Wheel(740, 360, 38)

# Short cab: the rear axle sits under the bed, well ahead of the tailgate.
TRUCK_FRONT_WHEEL = Wheel(250, 360, 38)
TRUCK_REAR_WHEEL = Wheel(640, 360, 38)

# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---
# Archetype catalogue
# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---

ARCHETYPES = MappingProxyType(
    {
        SEDAN: Archetype(
            kind=SEDAN,
            body=_path(
                "M150 330",
                "C170 275 230 230 310 220",
                "L430 190",
                "C490 175 560 175 620 190",
                "L740 220",
                "C820 230 880 275 900 330",
                "L915 360",
                "C920 375 910 392 892 392",
                "L158 392",
                "C140 392 130 375 135 360",
                "Z",
            ),
            glass=_path(
                "M300 260",
                "C320 230 350 215 390 205",
                "L470 185",
                "C500 178 530 178 560 185",
                "L640 205",
                "C680 215 710 230 730 260",
                "L745 295",
                "L285 295",
                "Z",
            ),
            wheel_a=FRONT_WHEEL,
            wheel_b=REAR_WHEEL,
        ),
        SUV: Archetype(
            kind=SUV,
            body=_path(
                "M140 330",
                "C160 268 225 220 320 210",
                "L460 192",
                "C510 185 570 185 620 192",
                "L760 210",
                "C855 220 920 268 940 330",
                "L958 362",
                "C966 377 956 394 936 394",
                "L144 394",
                "C124 394 114 377 122 362",
                "Z",
            ),
            glass=_path(
                "M290 262",
                "C310 224 350 205 410 198",
                "L485 190",
                "C510 187 540 187 565 190",
                "L650 198",
                "C710 205 750 224 770 262",
                "L780 296",
                "L280 296",
                "Z",
            ),
            wheel_a=FRONT_WHEEL,
            wheel_b=REAR_WHEEL,
        ),
        TRUCK: Archetype(
            kind=TRUCK,
            body=_path(
                "M140 340",
                "C155 285 205 240 270 225",
                "L430 190",
                "C470 182 510 182 550 190",
                "L630 207",
                "C680 218 710 250 720 290",
                "L735 340",
                "L920 340",
                "C940 340 950 360 944 378",
                "C938 392 924 400 908 400",
                "L140 400",
                "C124 400 110 392 104 378",
                "C98 360 108 340 128 340",
                "Z",
            ),
            glass=_path(
                "M300 270",
                "C315 235 345 215 385 206",
                "L465 188",
                "C495 182 525 182 555 188",
                "L595 198",
                "C620 205 640 225 650 250",
                "L660 290",
                "L285 290",
                "Z",
            ),
            wheel_a=TRUCK_FRONT_WHEEL,
            wheel_b=TRUCK_REAR_WHEEL,
        ),
        HATCH: Archetype(
            kind=HATCH,
            body=_path(
                "M150 332",
                "C170 270 235 228 330 218",
                "L470 196",
                "C520 188 570 188 620 196",
                "L740 218",
                "C825 235 875 280 895 332",
                "L912 360",
                "C920 374 910 392 892 392",
                "L158 392",
                "C140 392 130 374 138 360",
                "Z",
            ),
            glass=_path(
                "M310 266",
                "C330 228 370 210 430 202",
                "L500 192",
                "C520 190 540 190 560 192",
                "L645 202",
                "C700 210 735 228 755 266",
                "L768 296",
                "L295 296",
                "Z",
            ),
            wheel_a=FRONT_WHEEL,
            wheel_b=REAR_WHEEL,
        ),
        COUPE: Archetype(
            kind=COUPE,
            body=_path(
                "M160 334",
                "C190 270 260 230 350 218",
                "L470 194",
                "C520 184 570 184 620 194",
                "L730 218",
                "C800 235 850 275 875 334",
                "L892 360",
                "C902 374 892 392 874 392",
                "L166 392",
                "C148 392 138 374 148 360",
                "Z",
            ),
            glass=_path(
                "M340 270",
                "C370 232 420 214 480 206",
                "L525 200",
                "C540 198 555 198 570 200",
                "L640 210",
                "C690 218 725 236 745 270",
                "L756 296",
                "L330 296",
                "Z",
            ),
            wheel_a=FRONT_WHEEL,
            wheel_b=REAR_WHEEL,
        ),
    }
)


def get_archetype(kind):
    """Looks up an archetype, falling back to the sedan for unknown kinds."""
    return ARCHETYPES.get(kind, ARCHETYPES[SEDAN])


def _check_pairs():
    for archetype in ARCHETYPES.values():
        for name in ("body", "glass"):
            if len(coordinate_tokens(getattr(archetype, name))) % 2:
                raise ValueError(f"{archetype.kind} {name} template has an unpaired coordinate")


_check_pairs()
