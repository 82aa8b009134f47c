import pytest

from fluentkit.icon_table_e import ICONS_E
from fluentkit.icon_table_f import ICONS_F
from fluentkit.icons import FluentIcon, glyph


def test_pinned_code_points():
    assert FluentIcon(0xE700) is FluentIcon.GlobalNavButton
    assert glyph("Add") == "\ue710"
    assert glyph("ClickedOutLoudSolidBold") == "\uf8b3"


def test_glyph_of_member():
    assert glyph(FluentIcon.Add) == "\ue710"


def test_glyph_by_name_matches_member():
    assert glyph("Settings") == glyph(FluentIcon.Settings)
    assert glyph("eSIM") == chr(FluentIcon.eSIM.value)


def test_glyph_by_code_point_round_trip():
    for member in (FluentIcon.Wifi, FluentIcon.KnowledgeArticle, FluentIcon.Speech):
        assert ord(glyph(int(member))) == member.value


def test_every_name_from_tables_is_a_member():
    combined = {**ICONS_E, **ICONS_F}
    assert len(FluentIcon.__members__) == len(combined)
    for name, value in combined.items():
        assert glyph(name) == chr(value)


def test_all_glyphs_in_private_use_area():
    for member in FluentIcon:
        text = glyph(member)
        assert len(text) == 1
        assert 0xE000 <= ord(text) <= 0xF8FF


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        glyph("NoSuchIcon")


def test_unknown_code_point_raises():
    with pytest.raises(ValueError):
        glyph(0x41)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        glyph(1.5)