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
"""
Seeded deformation of archetype outlines.

The engine never parses path commands. It walks the numeric tokens of a
path template in order and treats them as alternating x, y values, so a
template must be written as explicit coordinate pairs. Each token is
remapped by a few band rules driven by the personality knobs and written
back with one decimal; everything between the numbers is kept as is.
"""

import itertools
import math
import re

NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")

# Horizontal bands
X_CENTER = 490
FRONT_LIMIT = 340  # x below this is the nose
REAR_LIMIT = 640  # x above this is the tail

# Vertical bands (smaller y is higher on the canvas)
ROOFLINE = 260  # y above the roofline scales around it
BELT_TOP = 260
BELT_BOTTOM = 320
BELTLINE = 290


def coordinate_tokens(path):
    """Returns the numeric tokens of a path template, in order."""
    return NUMBER_RE.findall(path)


def deform_x(x, params):
    out = X_CENTER + (x - X_CENTER) * params.stance

    # Band membership is decided on the template value, scaling compounds.
    if x < FRONT_LIMIT:
        out = X_CENTER + (out - X_CENTER) * params.nose
    if x > REAR_LIMIT:
        out = X_CENTER + (out - X_CENTER) * params.tail
    return out


def deform_y(y, params):
    if y < ROOFLINE:
        return ROOFLINE + (y - ROOFLINE) * params.roof
    if BELT_TOP <= y <= BELT_BOTTOM:
        return BELTLINE + (y - BELTLINE) * params.belt
    return y


def deform_path(path, params):
    """
    Applies the personality knobs to every coordinate of a path template.

    Raises ValueError when the template does not hold whole x,y pairs or a
    coordinate comes out non-finite.
    """
    tokens = coordinate_tokens(path)
    if len(tokens) % 2:
        raise ValueError(f"Path template has {len(tokens)} coordinates, expected x,y pairs")

    position = itertools.count()

    def remap(match):
        value = float(match.group())
        if next(position) % 2 == 0:
            out = deform_x(value, params)
        else:
            out = deform_y(value, params)
        if not math.isfinite(out):
            raise ValueError(f"Coordinate {match.group()} deformed to {out}")
        return f"{out:.1f}"

    return NUMBER_RE.sub(remap, path)
