from keylyze.metadata import (
    COLLAPSED_ICON,
    EXPANDED_ICON,
    UNKNOWN,
    MetadataPanel,
)


def _labels(panel):
    return [label for label, _ in panel.rows()]


def test_collapsed_hides_missing_entries():
    panel = MetadataPanel(name="noctum")
    assert panel.rows() == [("Name", "noctum"), ("Languages", "")]
    assert panel.collapsed is True
    assert panel.info == COLLAPSED_ICON


def test_full_metadata_rows_in_order():
    panel = MetadataPanel(
        name="sturdy",
        authors=["alice", "bob"],
        description="a layout",
        year=2023,
        languages=[("english", 100), ("dutch", 50)],
        link="https://example.com/sturdy",
    )
    assert panel.rows() == [
        ("Name", "sturdy"),
        ("Authors", "alice, bob"),
        ("Year", "2023"),
        ("Description", "a layout"),
        ("Source", "https://example.com/sturdy"),
        ("Languages", "english: 100, dutch: 50"),
    ]


def test_expand_fills_unknown():
    panel = MetadataPanel(name="noctum", languages=[("english", 100)])
    assert panel.toggle() is False
    assert panel.info == EXPANDED_ICON
    rows = dict(panel.rows())
    assert _labels(panel) == [
        "Name",
        "Authors",
        "Year",
        "Description",
        "Source",
        "Languages",
    ]
    assert rows["Authors"] == UNKNOWN
    assert rows["Year"] == UNKNOWN
    assert rows["Description"] == UNKNOWN
    assert rows["Source"] == UNKNOWN
    assert rows["Name"] == "noctum"


def test_collapse_again_restores_original_rows():
    panel = MetadataPanel(name="noctum", year=2024, link="https://example.com/x")
    before = panel.rows()
    panel.toggle()
    assert panel.toggle() is True
    assert panel.info == COLLAPSED_ICON
    assert panel.rows() == before


def test_known_link_kept_when_expanded():
    panel = MetadataPanel(name="n", link="https://example.com/n")
    panel.toggle()
    assert dict(panel.rows())["Source"] == "https://example.com/n"


def test_repeated_toggles_alternate():
    panel = MetadataPanel(name="n")
    states = [panel.toggle() for _ in range(4)]
    assert states == [False, True, False, True]
    assert panel.rows() == [("Name", "n"), ("Languages", "")]


def test_value_literally_unknown_is_hidden_after_collapse():
    panel = MetadataPanel(name="n", description=UNKNOWN)
    assert ("Description", UNKNOWN) in panel.rows()
    panel.toggle()
    panel.toggle()
    assert "Description" not in _labels(panel)


def test_empty_authors_list_is_present():
    panel = MetadataPanel(name="n", authors=[])
    assert ("Authors", "") in panel.rows()