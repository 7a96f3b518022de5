# tests/auditor/test_structure_builder.py
from auditor.dom.builder import StructureBuilder


def test_builds_profile():
    html = """
    <header class="top"></header>
    <main>
      <h1>T</h1><h3>S</h3>
      <section></section><article></article><aside></aside>
      <ul><li>a</li></ul><ol></ol><dl></dl>
      <form action="/x"><label>L</label><input><fieldset><legend>G</legend></fieldset></form>
      <table><caption>C</caption><tr><th scope="col">H</th><th>I</th></tr></table>
      <button aria-label="Close">x</button><button>y</button>
      <img src="a.png" alt=""><img src="b.png">
    </main>
    """
    structure = StructureBuilder().build(html)

    assert structure.content_length == len(html)
    assert structure.has_main_landmark
    assert structure.has_header_landmark
    assert not structure.has_nav_landmark
    assert structure.heading_hierarchy == [1, 3]
    assert (structure.sections_count, structure.articles_count, structure.aside_count) == (1, 1, 1)

    lists = structure.list_structure
    assert (lists.unordered_lists, lists.ordered_lists, lists.definition_lists) == (1, 1, 1)
    assert lists.list_items == 1
    assert lists.orphan_list_items == 0
    assert lists.empty_lists == 1

    form = structure.form_structure
    assert (form.forms_count, form.forms_with_action, form.labels, form.inputs) == (1, 1, 1, 1)
    assert (form.fieldsets, form.legends) == (1, 1)

    table = structure.table_structure
    assert (table.tables_count, table.captions, table.headers, table.headers_with_scope) == (1, 1, 2, 1)

    aria = structure.aria_structure
    assert (aria.buttons, aria.buttons_with_aria_label) == (2, 1)
    assert (aria.images, aria.images_with_alt) == (2, 1)
    assert not aria.has_main_role


def test_landmark_hints():
    html = '<div class="masthead"></div><ul class="menu-list"></ul><div id="page_footer"></div>'
    assert StructureBuilder().build(html).landmark_hints == ["footer", "header", "nav"]


def test_hint_on_the_landmark_itself_is_ignored():
    assert StructureBuilder().build('<nav class="nav"></nav>').landmark_hints == []


def test_main_role():
    assert StructureBuilder().build('<div role="main"></div>').aria_structure.has_main_role
    assert StructureBuilder().build('<div aria-label="Main"></div>').aria_structure.has_main_role
