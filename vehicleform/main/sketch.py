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

from io import StringIO

import svgwrite

# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---
# CONFIGURATION
# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---

WIDTH = 980
HEIGHT = 520
CORNER_RADIUS = 24

FONT_FAMILY = "Arial, system-ui"
BRAND_CAPTION = "VINVOYANT · VEHICLE FORM"
PROVENANCE_CAPTION = (
    "Representative model render · Derived from decoded make/model/year · Not a photo of your exact vehicle"
)

GROUND_START = (150, 394)
GROUND_END = (830, 394)

# Peak-to-peak wobble of the vehicle group, in canvas units.
JITTER = 1.5

RIM_RATIO = 0.62
HUB_RATIO = 0.32

# Stroke alpha per element, multiplied by the ink knob.
BODY_INK = 0.32
GLASS_INK = 0.26
TIRE_INK = 0.22
RIM_INK = 0.12
HUB_INK = 0.10

WHITE = "255,255,255"
GLASS_BLUE = "170,210,255"

IDENTITY_MATRIX = "1 0 0 0 0 0 1 0 0 0 0 0 1 0 0 0 0 0 1 0"
PAPER_MATRIX = "0 0 0 0 0.9 0 0 0 0 0.9 0 0 0 0 0.9 0 0 0 .20 0"
FILTER_REGION = {"x": "-10%", "y": "-10%", "width": "120%", "height": "120%"}


def rgba(rgb, alpha):
    if isinstance(alpha, float):
        return f"rgba({rgb},{alpha:.3f})"
    return f"rgba({rgb},{alpha})"


# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---
# Drawing Functions
# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---


def draw_background(dwg):
    """Draws the rounded card with its diagonal gradient."""
    gradient = dwg.linearGradient(start=(0, 0), end=(1, 1), id="bg")
    gradient.add_stop_color(offset=0, color=rgba(WHITE, ".06"))
    gradient.add_stop_color(offset=1, color=rgba(WHITE, ".02"))
    dwg.defs.add(gradient)
    dwg.add(dwg.rect(insert=(0, 0), size=(WIDTH, HEIGHT), rx=CORNER_RADIUS, fill="url(#bg)"))


def add_sketch_filters(dwg, seed):
    """Defines the ink wobble and paper grain filters."""
    sketch = dwg.defs.add(dwg.filter(id="sketch", **FILTER_REGION))
    sketch.feTurbulence(type_="fractalNoise", baseFrequency=0.9, numOctaves=1, seed=seed % 997, result="noise")
    sketch.feDisplacementMap(
        in_="SourceGraphic",
        in2="noise",
        scale=1.2,
        xChannelSelector="R",
        yChannelSelector="G",
        result="wobble",
    )
    sketch.feColorMatrix(in_="wobble", type_="matrix", values=IDENTITY_MATRIX)

    paper = dwg.defs.add(dwg.filter(id="paper", **FILTER_REGION))
    paper.feTurbulence(
        type_="fractalNoise", baseFrequency=0.8, numOctaves=2, seed=(seed + 7) % 997, result="grain"
    )
    paper.feColorMatrix(in_="grain", type_="matrix", values=PAPER_MATRIX)


def draw_titles(dwg, label):
    dwg.add(
        dwg.text(
            BRAND_CAPTION,
            insert=(34, 56),
            fill=rgba(WHITE, ".70"),
            font_family=FONT_FAMILY,
            font_size=15,
            font_weight=800,
            letter_spacing=".10em",
        )
    )
    dwg.add(dwg.text(label, insert=(34, 82), fill=rgba(WHITE, ".55"), font_family=FONT_FAMILY, font_size=13))


def draw_wheel(dwg, wheel, ink):
    """Draws a wheel as tire, rim and hub circles."""
    glyph = dwg.g(class_="wheel")
    center = (wheel.cx, wheel.cy)
    glyph.add(
        dwg.circle(
            center=center, r=wheel.r, fill=rgba(WHITE, ".12"), stroke=rgba(WHITE, TIRE_INK * ink), stroke_width=2
        )
    )
    glyph.add(
        dwg.circle(
            center=center,
            r=round(wheel.r * RIM_RATIO, 2),
            fill="rgba(0,0,0,.30)",
            stroke=rgba(WHITE, RIM_INK * ink),
            stroke_width=2,
        )
    )
    glyph.add(
        dwg.circle(
            center=center,
            r=round(wheel.r * HUB_RATIO, 2),
            fill=rgba(WHITE, ".08"),
            stroke=rgba(GLASS_BLUE, HUB_INK * ink),
            stroke_width=1.6,
        )
    )
    return glyph


def draw_vehicle(dwg, body_path, glass_path, archetype, ink, offset, sketch_on):
    """Draws body, glass, wheels and ground line as one shifted group."""
    vehicle = dwg.g(id="vehicle", filter="url(#sketch)") if sketch_on else dwg.g(id="vehicle")
    vehicle.translate(*offset)

    vehicle.add(dwg.path(d=body_path, fill=rgba(WHITE, ".10"), stroke=rgba(WHITE, BODY_INK * ink), stroke_width=2.2))
    vehicle.add(
        dwg.path(d=glass_path, fill=rgba(WHITE, ".08"), stroke=rgba(GLASS_BLUE, GLASS_INK * ink), stroke_width=2)
    )

    wheels = dwg.g()
    wheels.add(draw_wheel(dwg, archetype.wheel_a, ink))
    wheels.add(draw_wheel(dwg, archetype.wheel_b, ink))
    vehicle.add(wheels)

    vehicle.add(
        dwg.line(
            start=GROUND_START, end=GROUND_END, stroke=rgba(WHITE, "0.10"), stroke_width=2, stroke_linecap="round"
        )
    )
    dwg.add(vehicle)


def draw_grain(dwg):
    dwg.add(
        dwg.rect(
            insert=(0, 0), size=(WIDTH, HEIGHT), rx=CORNER_RADIUS, filter="url(#paper)", opacity=0.25, id="grain"
        )
    )


def draw_provenance(dwg):
    caption = dwg.g()
    caption.add(
        dwg.text(
            PROVENANCE_CAPTION,
            insert=(34, HEIGHT - 26),
            fill=rgba(WHITE, ".46"),
            font_family=FONT_FAMILY,
            font_size=12,
        )
    )
    dwg.add(caption)


def jitter_offset(rng):
    """Two extra draws, x then y, each within +/- JITTER / 2."""
    # + 0.0 turns a rounded -0.0 into 0.0
    return tuple(round((rng() - 0.5) * JITTER, 3) + 0.0 for _ in range(2))


# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---
# Main Assembler Function
# --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- --- ---


def build_sketch_svg(label, archetype, body_path, glass_path, personality, seed, rng, fallback=False):
    """
    Assembles the complete SVG document and returns it as a string.

    Args:
        label (str): Plain subtitle text. The XML serializer escapes it, so it
                     must not be escaped by the caller.
        archetype (Archetype): Supplies the wheel geometry.
        body_path (str): Deformed body outline.
        glass_path (str): Deformed cabin outline.
        personality (Personality): Knobs already drawn from ``rng``.
        seed (int): Identity seed, also seeds the filter noise.
        rng (Mulberry32): Generator positioned after the personality draws.
        fallback (bool): Plain silhouette without filters, grain or jitter.
    """
    sketch_on = not fallback

    dwg = svgwrite.Drawing(
        size=(WIDTH, HEIGHT),
        viewBox=f"0 0 {WIDTH} {HEIGHT}",
        debug=False,
        role="img",
        aria_label=label,
    )

    # --- Drawing Order ---
    draw_background(dwg)
    if sketch_on:
        add_sketch_filters(dwg, seed)
    draw_titles(dwg, label)

    offset = jitter_offset(rng) if sketch_on else (0, 0)
    draw_vehicle(dwg, body_path, glass_path, archetype, personality.ink, offset, sketch_on)

    if sketch_on:
        draw_grain(dwg)
    draw_provenance(dwg)

    svg_io = StringIO()
    dwg.write(svg_io)
    return svg_io.getvalue()
