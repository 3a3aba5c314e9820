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

import logging
import re
from collections import namedtuple

from vehicleform.main.archetypes import COUPE, HATCH, SEDAN, SUV, TRUCK, get_archetype
from vehicleform.main.deform import deform_path
from vehicleform.main.seeding import Mulberry32, derive_seed, draw_personality
from vehicleform.main.sketch import build_sketch_svg

logger = logging.getLogger(__name__)

# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---
# CONFIGURATION
# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---

DEFAULT_LABEL = "Vehicle"
FALLBACK_SEED = 42
SEED_DELIMITER = "|"

# Anything outside the XML 1.0 Char production, lone surrogates included.
INVALID_XML_RE = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")

# Checked in order, first match wins.
KIND_RULES = (
    (TRUCK, ("pickup", "truck")),
    (SUV, ("sport utility", "suv", "utility")),
    (HATCH, ("hatchback", "hatch")),
    (COUPE, ("coupe",)),
)

DESCRIPTOR_FIELDS = ("make", "model", "year", "body_class", "vehicle_type")

VehicleDescriptor = namedtuple("VehicleDescriptor", DESCRIPTOR_FIELDS, defaults=("",) * len(DESCRIPTOR_FIELDS))
Rendering = namedtuple("Rendering", ["document", "kind", "label", "seed", "fallback"])


def clean(value):
    """Absent values become empty strings, everything else is trimmed text
    with characters that cannot appear in an XML document removed."""
    if value is None:
        return ""
    return INVALID_XML_RE.sub("", str(value)).strip()


def normalize_descriptor(descriptor):
    return VehicleDescriptor(*(clean(value) for value in descriptor))


def silhouette_kind(descriptor):
    """Maps a vehicle identity onto one of the archetype kinds."""
    text = f"{descriptor.body_class} {descriptor.vehicle_type} {descriptor.make} {descriptor.model}".lower()
    for kind, needles in KIND_RULES:
        if any(needle in text for needle in needles):
            return kind
    return SEDAN


def make_label(descriptor):
    parts = [part for part in (descriptor.year, descriptor.make, descriptor.model) if part]
    return " ".join(parts).strip() or DEFAULT_LABEL


def seed_text(descriptor):
    return SEED_DELIMITER.join(
        (descriptor.year, descriptor.make, descriptor.model, descriptor.body_class, descriptor.vehicle_type)
    )


def _render(label, kind, seed, fallback=False):
    rng = Mulberry32(seed)
    personality = draw_personality(rng)
    archetype = get_archetype(kind)

    body_path = deform_path(archetype.body, personality)
    glass_path = deform_path(archetype.glass, personality)

    document = build_sketch_svg(label, archetype, body_path, glass_path, personality, seed, rng, fallback=fallback)
    return Rendering(document, archetype.kind, label, seed, fallback)


# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---
# Main Generator Function
# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---


def render_vehicle(descriptor):
    """
    Renders the sketch of a vehicle identity and returns a Rendering.

    Never raises for bad input: any failure in the pipeline is logged and
    answered with the plain sedan silhouette labelled "Vehicle".
    """
    try:
        descriptor = normalize_descriptor(descriptor)
        kind = silhouette_kind(descriptor)
        seed = derive_seed(seed_text(descriptor))
        logger.debug("Rendering %s with seed %d", kind, seed)
        return _render(make_label(descriptor), kind, seed)
    except Exception:  # pylint: disable=broad-exception-caught
        logger.warning("Vehicle render failed for %r, serving fallback silhouette", descriptor, exc_info=True)

    return _render(DEFAULT_LABEL, SEDAN, FALLBACK_SEED, fallback=True)
