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

import math
import xml.etree.ElementTree as ET

import pytest

from vehicleform.main.archetypes import ARCHETYPES, SEDAN, TRUCK
from vehicleform.main.deform import deform_path
from vehicleform.main.seeding import Mulberry32, draw_personality
from vehicleform.main.sketch import BRAND_CAPTION, PROVENANCE_CAPTION, build_sketch_svg, jitter_offset

SVG = "{http://www.w3.org/2000/svg}"


def assemble(label="2022 Toyota Camry", kind=SEDAN, seed=1337, fallback=False):
    rng = Mulberry32(seed)
    personality = draw_personality(rng)
    archetype = ARCHETYPES[kind]
    body = deform_path(archetype.body, personality)
    glass = deform_path(archetype.glass, personality)
    return build_sketch_svg(label, archetype, body, glass, personality, seed, rng, fallback=fallback), rng


def parse(document):
    return ET.fromstring(document.encode("utf-8"))


def test_canvas_and_background():
    document, _ = assemble()
    root = parse(document)

    assert document.startswith("<?xml")
    assert root.get("width") == "980"
    assert root.get("height") == "520"
    assert root.get("viewBox") == "0 0 980 520"
    background = root.find(f"{SVG}rect")
    assert background.get("rx") == "24"
    assert background.get("fill") == "url(#bg)"
    assert root.find(f"{SVG}defs/{SVG}linearGradient").get("id") == "bg"


def test_captions_are_placed():
    root = parse(assemble()[0])
    texts = root.findall(f".//{SVG}text")

    assert [t.text for t in texts] == [BRAND_CAPTION, "2022 Toyota Camry", PROVENANCE_CAPTION]
    assert (texts[0].get("x"), texts[0].get("y")) == ("34", "56")
    assert (texts[1].get("x"), texts[1].get("y")) == ("34", "82")
    assert (texts[2].get("x"), texts[2].get("y")) == ("34", "494")
    assert root.get("aria-label") == "2022 Toyota Camry"


def test_vehicle_group_contents():
    root = parse(assemble(kind=TRUCK)[0])
    group = root.find(f"{SVG}g[@id='vehicle']")

    paths = group.findall(f"{SVG}path")
    assert len(paths) == 2
    circles = group.findall(f".//{SVG}circle")
    assert len(circles) == 6
    assert {c.get("cx") for c in circles} == {"250", "640"}

    ground = group.find(f"{SVG}line")
    assert (ground.get("x1"), ground.get("y1"), ground.get("x2"), ground.get("y2")) == ("150", "394", "830", "394")


def test_wheel_glyph_is_tire_rim_and_hub():
    root = parse(assemble()[0])
    wheel = root.find(f".//{SVG}g[@class='wheel']")
    radii = [c.get("r") for c in wheel.findall(f"{SVG}circle")]
    assert radii == ["38", "23.56", "12.16"]


def test_ink_scales_stroke_alpha():
    document, _ = assemble(seed=1337)
    ink = draw_personality(Mulberry32(1337)).ink
    assert f"rgba(255,255,255,{0.32 * ink:.3f})" in document
    assert f"rgba(170,210,255,{0.26 * ink:.3f})" in document


def test_sketch_mode_has_filters_grain_and_jitter():
    document, rng = assemble(seed=1337)
    root = parse(document)

    filter_ids = {f.get("id") for f in root.iter(f"{SVG}filter")}
    assert filter_ids == {"sketch", "paper"}
    group = root.find(f"{SVG}g[@id='vehicle']")
    assert group.get("filter") == "url(#sketch)"
    assert root.find(f"{SVG}rect[@id='grain']") is not None

    # jitter takes draws seven and eight
    reference = Mulberry32(1337)
    draws = [reference() for _ in range(8)]
    expected = [round((draw - 0.5) * 1.5, 3) for draw in draws[6:]]
    assert group.get("transform") == f"translate({expected[0]},{expected[1]})"
    assert rng() == reference()


def test_fallback_mode_is_plain():
    document, rng = assemble(label="Vehicle", seed=42, fallback=True)
    root = parse(document)

    assert root.find(f".//{SVG}filter") is None
    assert root.find(f"{SVG}rect[@id='grain']") is None
    group = root.find(f"{SVG}g[@id='vehicle']")
    assert group.get("filter") is None
    assert group.get("transform") == "translate(0,0)"
    assert PROVENANCE_CAPTION in document

    # no jitter draws were taken
    reference = Mulberry32(42)
    for _ in range(6):
        reference()
    assert rng() == reference()


@pytest.mark.parametrize("label", ["A&B <Motors>", 'The "Beast"', "O'Brien & Sons"])
def test_label_is_escaped_once(label):
    document, _ = assemble(label=label)
    root = parse(document)

    assert "&amp;amp;" not in document
    assert root.get("aria-label") == label
    assert root.findall(f".//{SVG}text")[1].text == label


def test_markup_characters_are_escaped_in_text():
    document, _ = assemble(label="A&B <Motors>")
    assert ">A&amp;B &lt;Motors&gt;</text>" in document
    assert 'aria-label="A&amp;B &lt;Motors&gt;"' in document


def test_quotes_and_apostrophes_stay_literal_in_text():
    document, _ = assemble(label="2020 O'Brien \"Beast\"")
    assert ">2020 O'Brien \"Beast\"</text>" in document
    assert 'aria-label="2020 O\'Brien &quot;Beast&quot;"' in document


def test_jitter_offset_has_no_negative_zero():
    offset = jitter_offset(lambda: 0.4999)
    assert offset == (0.0, 0.0)
    assert all(math.copysign(1, value) == 1 for value in offset)


def test_jitter_offset_is_rounded_to_three_decimals():
    assert jitter_offset(lambda: 1.0) == (0.75, 0.75)
    assert jitter_offset(lambda: 0.0) == (-0.75, -0.75)
