"""Tests Section + handles externes."""
from section_builder import ElementHandle, Section
from section_builder.handles import clone_handles, element_html, iter_handles


def test_section_ids_unique_and_increasing():
    a = Section(name="hero")
    b = Section(name="hero")
    assert a.id != b.id
    assert b.id > a.id


def test_section_id_not_reused_after_destroy():
    a = Section(name="hero")
    a.destroy()
    b = Section(name="hero")
    assert b.id != a.id


def test_section_aliases():
    s = Section(name="nav", schema={"title": "text"}, isHeader=True)
    assert s.section_schema == {"title": "text"}
    assert s.is_header is True


def test_section_missing_fields_stay_empty():
    s = Section()
    assert s.name == ""
    assert s.data == {}
    assert s.group is None


def test_destroy_releases_nested_handles():
    btn = ElementHandle("a", {"href": "#"}, text="Go")
    s = Section(name="content", data={"components": [{"name": "Button", "element": btn}]})
    s.destroy()
    assert btn.released
    assert s.destroyed


def test_destroy_twice_is_noop():
    btn = ElementHandle("a")
    s = Section(name="content", data={"el": btn})
    s.destroy()
    btn.released = False  # un second destroy ne doit plus toucher au handle
    s.destroy()
    assert btn.released is False


# ── Handles ───────────────────────────────────────────────────────────────

def test_clone_drops_runtime_state():
    root = ElementHandle("div", {"class": "box"})
    child = root.append(ElementHandle("span", text="hi"))
    child.on(lambda e: None)
    clone = root.clone()
    assert clone == {
        "tag": "div",
        "attrs": {"class": "box"},
        "text": "",
        "children": [{"tag": "span", "attrs": {}, "text": "hi", "children": []}],
    }
    # le parent (référence circulaire) reste côté handle vivant
    assert child.parent is root


def test_clone_handles_does_not_mutate_source():
    el = ElementHandle("p", text="x")
    data = {"components": [{"element": el}], "title": "T"}
    out = clone_handles(data)
    assert data["components"][0]["element"] is el
    assert out["components"][0]["element"] == el.clone()
    assert out["title"] == "T"


def test_iter_handles_finds_all_depths():
    a, b = ElementHandle("a"), ElementHandle("b")
    found = list(iter_handles({"x": [a, {"y": (b,)}], "z": 1}))
    assert found == [a, b]


def test_element_html_escapes_text_and_attrs():
    el = ElementHandle("a", {"title": 'say "hi"'}, text="<b>")
    html = element_html(el)
    assert html == '<a title="say &quot;hi&quot;">&lt;b&gt;</a>'


def test_element_html_from_clone():
    el = ElementHandle("div", children=[ElementHandle("span", text="ok")])
    assert element_html(el.clone()) == "<div><span>ok</span></div>"
