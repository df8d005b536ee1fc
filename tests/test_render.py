"""Tests for rendering trees to markup."""

from html.parser import HTMLParser

from markupbuilder import Convention, MarkupConfig, makeroot

HTML = MarkupConfig(convention=Convention.HTML)
XML1 = MarkupConfig(convention=Convention.XML1)
XHTML = MarkupConfig(convention=Convention.XHTML)


class ShapeParser(HTMLParser):
    """Collect (event, tag, attrs) tuples for comparing tree shape."""

    def __init__(self):
        super().__init__()
        self.events = []

    def handle_starttag(self, tag, attrs):
        self.events.append(("start", tag, sorted(attrs)))

    def handle_startendtag(self, tag, attrs):
        self.events.append(("void", tag, sorted(attrs)))

    def handle_endtag(self, tag):
        self.events.append(("end", tag, []))

    def handle_data(self, data):
        self.events.append(("data", data, []))


class TestEndToEnd:
    def test_example(self):
        root = makeroot("div", config=HTML)
        root.setAttribute("class", ["a", "b"])
        root.addElement("img").setAttribute("src", "x.png")
        root.text("Hi")
        assert str(root) == '<div class="a b"><img src="x.png"/>Hi</div>'

    def test_any_node_renders_whole_tree(self):
        root = makeroot("div")
        leaf = root.ul().li("x")
        assert str(leaf) == "<div><ul><li>x</li></ul></div>"
        assert leaf.render() == str(root)

    def test_outer_and_inner(self):
        root = makeroot("div")
        ul = root.ul()
        ul.li("x")
        assert ul.outerHTML == "<ul><li>x</li></ul>"
        assert ul.innerHTML == "<li>x</li>"

    def test_renderlist_joins_to_subtree(self):
        root = makeroot("div")
        ul = root.ul().li("x")()
        assert "".join(ul.renderlist()) == "<ul><li>x</li></ul>"

    def test_fragment_root(self):
        root = makeroot()
        root.p("a")
        root.p("b")
        assert str(root) == "<p>a</p><p>b</p>"

    def test_empty_element(self):
        assert str(makeroot("span")) == "<span></span>"

    def test_round_trip_shape(self):
        root = makeroot("div", config=HTML).setAttributes({"id": "m", "class": ["a", "b"]})
        ul = root.ul()
        ul.li({"data-n": "1"}, "one")
        ul.li({"data-n": "2"}, "two")
        root.br()
        parser = ShapeParser()
        parser.feed(str(root))
        parser.close()
        assert parser.events == [
            ("start", "div", [("class", "a b"), ("id", "m")]),
            ("start", "ul", []),
            ("start", "li", [("data-n", "1")]),
            ("data", "one", []),
            ("end", "li", []),
            ("start", "li", [("data-n", "2")]),
            ("data", "two", []),
            ("end", "li", []),
            ("end", "ul", []),
            ("void", "br", []),
            ("end", "div", []),
        ]


class TestVoidElements:
    def test_self_closing(self):
        assert str(makeroot("br")) == "<br/>"

    def test_children_not_rendered(self):
        root = makeroot("div")
        img = root.img({"src": "a.png"})
        img.span("hidden")
        img.text("hidden too")
        assert str(root) == '<div><img src="a.png"/></div>'

    def test_explicit_void_flag(self):
        root = makeroot("div")
        root.addElement(makeroot("x-icon", config=MarkupConfig(voidtag=lambda t: True)))
        assert str(root) == "<div><x-icon/></div>"


class TestBooleanAttributes:
    def test_true_html(self):
        root = makeroot("input", config=HTML).setAttribute("checked", True)
        assert str(root) == "<input checked/>"

    def test_true_xml(self):
        for config in (XML1, XHTML):
            root = makeroot("input", config=config).setAttribute("checked", True)
            assert str(root) == '<input checked="checked"/>'

    def test_false_html(self):
        root = makeroot("input", config=HTML).setAttributes({"disabled": False, "name": "q"})
        assert str(root) == '<input name="q"/>'

    def test_false_xml(self):
        for config in (XML1, XHTML):
            root = makeroot("input", config=config).setAttribute("disabled", False)
            assert str(root) == '<input disabled=""/>'

    def test_mixed_order_kept(self):
        root = makeroot("option", config=HTML)
        root.setAttributes({"value": "1", "selected": True, "label": "One"})
        assert str(root) == '<option value="1" selected label="One"></option>'


class TestAttributeValues:
    def test_list(self):
        root = makeroot("div").setAttribute("class", ["a", "b"])
        assert str(root) == '<div class="a b"></div>'

    def test_tuple(self):
        root = makeroot("div").setAttribute("class", ("a", "b", "c"))
        assert str(root) == '<div class="a b c"></div>'

    def test_empty_list(self):
        root = makeroot("div").setAttribute("class", [])
        assert str(root) == '<div class=""></div>'

    def test_numbers_stringified(self):
        root = makeroot("td").setAttributes({"colspan": 2, "width": 1.5})
        assert str(root) == '<td colspan="2" width="1.5"></td>'

    def test_empty_string(self):
        root = makeroot("a").setAttribute("href", "")
        assert str(root) == '<a href=""></a>'
