"""Tests for chamber/gen_chamber.py SVG generation."""
import pytest
from conftest import rep
from chamber.members import Member, Role
from chamber.layout import compute_layout
from chamber.gen_chamber import (
    ChamberData, build_chamber_data, render_chamber_svg,
    seat_glyph, dais_glyph, secretary_glyph, row_guide, legend, parse_args,
)
from chamber.rows import RowSpec
from shared.svg import make_svg_transform


_to_svg = make_svg_transform()


# ============================================================
# Helper unit tests
# ============================================================

class TestSeatGlyph:
    def test_rotated_numbered_circle(self, layout):
        out = []
        seat = layout.seats[0]
        seat_glyph(out, seat, _to_svg)
        joined = "\n".join(out)
        assert "<circle" in joined
        assert f"rotate({seat.rotation_degrees:.2f})" in joined
        assert f">{seat.seat_number}</text>" in joined
        assert 'fill="#EF4444"' in joined   # district 1 is Republican

    def test_escapes_name(self):
        seat = compute_layout([Member(1, "O'Hare & <Co>", Role.REPRESENTATIVE, "Democrat")]).seats[0]
        out = []
        seat_glyph(out, seat, _to_svg)
        assert "&amp; &lt;Co&gt;" in "\n".join(out)


class TestSpecialGlyphs:
    def test_dais(self, layout):
        out = []
        dais_glyph(out, layout.specials[0], _to_svg)
        joined = "\n".join(out)
        assert "<rect" in joined and "Brandon Johnson" in joined
        assert 'translate(400.0,520.0)' in joined

    def test_secretary(self, layout):
        out = []
        secretary_glyph(out, layout.specials[1], _to_svg)
        joined = "\n".join(out)
        assert "<ellipse" in joined and "City Clerk" in joined


class TestRowGuideAndLegend:
    def test_row_guide(self):
        out = []
        row_guide(out, RowSpec(100.0, (0, 3, 0)), (400.0, 450.0), _to_svg)
        assert len(out) == 1
        assert out[0].startswith("<polyline")
        assert out[0].count(",") == 41

    def test_legend(self):
        out = []
        legend(out, {"democrat": 3, "": 1}, 50, 570)
        joined = "\n".join(out)
        assert "Democrat (3)" in joined
        assert "Unaffiliated (1)" in joined
        assert joined.count("<circle") == 2


# ============================================================
# Integration tests
# ============================================================

@pytest.fixture(scope="module")
def chamber_data(roster):
    return build_chamber_data(roster)


@pytest.fixture(scope="module")
def rendered(chamber_data):
    return render_chamber_svg(chamber_data)


class TestBuildChamberData:
    def test_fields(self, chamber_data):
        assert isinstance(chamber_data, ChamberData)
        assert len(chamber_data.seats) == 50
        assert chamber_data.counts == {"democrat": 33, "republican": 17}
        assert chamber_data.title == "COUNCIL CHAMBER SEATING CHART"

    def test_party_filter(self, roster):
        data = build_chamber_data(roster, party="Republican")
        assert len(data.seats) == 17
        assert len(data.layout.seats) == 50
        assert data.title.endswith("(REPUBLICAN)")

    def test_none_party_is_all(self, roster):
        data = build_chamber_data(roster, party=None)
        assert len(data.seats) == 50
        assert data.title == "COUNCIL CHAMBER SEATING CHART"


class TestRenderChamberSvg:
    def test_svg_envelope(self, rendered):
        assert rendered.strip().startswith("<svg")
        assert rendered.strip().endswith("</svg>")

    def test_one_glyph_per_seat(self, rendered):
        assert rendered.count("data-member-id=") == 52   # 50 seats + dais + clerk

    def test_row_guides(self, rendered):
        assert rendered.count("<polyline") == 4

    def test_labels(self, rendered):
        for label in ["COUNCIL CHAMBER SEATING CHART", "Mayor", "City Clerk", "Democrat (33)", "Republican (17)"]:
            assert label in rendered, f"Missing label {label}"

    def test_filtered_render(self, roster):
        svg = render_chamber_svg(build_chamber_data(roster, party="Republican"))
        assert svg.count("data-member-id=") == 19
        assert "#3B82F6" not in svg

    def test_without_specials(self):
        svg = render_chamber_svg(build_chamber_data([rep(i) for i in range(1, 4)]))
        assert svg.count("data-member-id=") == 3
        assert "City Clerk" not in svg

    def test_string_role_specials(self):
        roster = [Member(1, "Ann", "Mayor", "Democrat"), Member(2, "Bo", "City Clerk", "Democrat"),
                  Member(3, "Cy", "Alderman", "Republican")]
        svg = render_chamber_svg(build_chamber_data(roster))
        assert svg.count("data-member-id=") == 3
        assert ">Mayor</text>" in svg and "City Clerk" in svg


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.roster is None
        assert args.party == "all"
        assert args.output is None

    def test_roster_party_and_output(self):
        args = parse_args(["roster.json", "--party", "Republican", "-o", "out.svg"])
        assert (args.roster, args.party, args.output) == ("roster.json", "Republican", "out.svg")
