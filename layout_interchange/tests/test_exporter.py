"""Tests for the native to YOOtheme export direction."""
import unittest

from layout_interchange.model.elements import NativeElement, PageInfo, ProjectInfo, StoredElement
from layout_interchange.model.options import ExportOptions
from layout_interchange.renderer.exporter import export_project_to_yootheme, export_to_yootheme
from layout_interchange.renderer.layout_wrapper import LayoutWrapper
from layout_interchange.renderer.utils import style_to_props
from layout_interchange.renderer.yootheme_renderer import YOOthemeRenderer, map_native_type
from layout_interchange.utils.filenames import page_filename, project_filename


def column_children(section: dict) -> list:
    return section["children"][0]["children"][0].get("children", [])


class StyleToPropsTest(unittest.TestCase):
    """Pixel and percent values snap to the nearest token."""

    def test_exact_tokens(self) -> None:
        props = style_to_props({"marginTop": "20px", "marginBottom": "20px", "padding": "40px", "width": "33.333%"})
        self.assertEqual(props, {"margin": "default", "padding": "large", "width_default": "1-3"})

    def test_nearest_tokens(self) -> None:
        props = style_to_props({"marginBottom": "13px", "fontSize": "50px", "width": "45%"})
        self.assertEqual(props, {"margin": "small", "title_style": "heading-xlarge", "width_default": "1-2"})

    def test_heading_tokens_preferred(self) -> None:
        self.assertEqual(style_to_props({"fontSize": "36px"}), {"title_style": "heading-large"})
        self.assertEqual(style_to_props({"fontSize": "18px"}), {"title_style": "h6"})

    def test_passthrough_and_sticky(self) -> None:
        props = style_to_props({"textAlign": "center", "color": "#333", "backgroundColor": "#eee", "position": "sticky"})
        self.assertEqual(
            props,
            {"text_align": "center", "title_color": "#333", "background_color": "#eee", "position_sticky": True},
        )

    def test_unparsable_values_dropped(self) -> None:
        self.assertEqual(style_to_props({"marginTop": "auto", "width": "50px", "padding": "0", "fontSize": "1em"}), {})


class YOOthemeRendererTest(unittest.TestCase):
    """Content and attributes go back into props."""

    def setUp(self) -> None:
        self.renderer = YOOthemeRenderer()

    def test_type_inverse(self) -> None:
        self.assertEqual(map_native_type("heading"), "headline")
        self.assertEqual(map_native_type("container"), "panel")
        self.assertEqual(map_native_type("link"), "button")
        self.assertEqual(map_native_type("carousel"), "text")

    def test_heading_level(self) -> None:
        node = self.renderer.render(NativeElement("heading", "Hi", attributes={"level": 3}))
        self.assertEqual(node.type, "headline")
        self.assertEqual(dict(node.props), {"content": "Hi", "title_element": "h3"})

    def test_heading_default_element(self) -> None:
        node = self.renderer.render(NativeElement("heading", "Hi"))
        self.assertEqual(node.props["title_element"], "h2")
        node = YOOthemeRenderer(ExportOptions(default_heading_element="h1")).render(NativeElement("heading", "Hi"))
        self.assertEqual(node.props["title_element"], "h1")

    def test_button_link(self) -> None:
        node = self.renderer.render(
            NativeElement("button", "Buy", attributes={"href": "/shop", "target": "_blank"})
        )
        self.assertEqual(
            dict(node.props), {"text": "Buy", "style": "primary", "link": "/shop", "link_target": "_blank"}
        )

    def test_image_and_styles(self) -> None:
        node = self.renderer.render(NativeElement("image", "a.png", styles={"padding": "10px"}, attributes={"alt": "A"}))
        self.assertEqual(dict(node.props), {"padding": "small", "src": "a.png", "alt": "A"})

    def test_children_rendered_recursively(self) -> None:
        tree = NativeElement("container", children=[NativeElement("text", "a"), NativeElement("video", "v.mp4")])
        node = self.renderer.render(tree)
        self.assertEqual(node.type, "panel")
        self.assertEqual(dict(node.props), {})
        self.assertEqual([child.type for child in node.children], ["text", "video"])
        self.assertEqual(node.children[1].props["content"], "v.mp4")


class LayoutWrapperTest(unittest.TestCase):
    """Top-level grouping into section/row/column chains."""

    def test_empty_page_placeholder(self) -> None:
        layout = LayoutWrapper().wrap([]).to_dict()
        self.assertEqual(len(layout["children"]), 1)
        self.assertEqual(column_children(layout["children"][0]), [{"type": "text", "props": {"content": "Empty page"}}])

    def test_section_chain_shape(self) -> None:
        layout = LayoutWrapper().wrap([NativeElement("text", "a")]).to_dict()
        section = layout["children"][0]
        self.assertEqual(section["type"], "section")
        self.assertEqual(section["props"], {"style": "default", "width": "default", "padding": "default"})
        row = section["children"][0]
        self.assertEqual(row["type"], "row")
        self.assertEqual(row["children"][0]["type"], "column")
        self.assertEqual(row["children"][0]["props"], {"width_default": "1-1"})

    def test_containers_split_sections(self) -> None:
        roots = [
            NativeElement("heading", "A"),
            NativeElement("text", "B", order=1),
            NativeElement(
                "container",
                styles={"backgroundColor": "#000"},
                order=2,
                children=[NativeElement("text", "inner")],
            ),
            NativeElement("button", "C", order=3),
        ]
        sections = LayoutWrapper().wrap(roots).to_dict()["children"]
        self.assertEqual(len(sections), 3)
        self.assertEqual([c["type"] for c in column_children(sections[0])], ["headline", "text"])
        self.assertEqual(sections[1]["props"]["background_color"], "#000")
        self.assertEqual(column_children(sections[1]), [{"type": "text", "props": {"content": "inner"}}])
        self.assertEqual([c["type"] for c in column_children(sections[2])], ["button"])

    def test_empty_container_stays_inline(self) -> None:
        sections = LayoutWrapper().wrap([NativeElement("container"), NativeElement("text", "x")]).to_dict()["children"]
        self.assertEqual(len(sections), 1)
        self.assertEqual([c["type"] for c in column_children(sections[0])], ["panel", "text"])


class ExportEntryPointsTest(unittest.TestCase):
    """Page and project exports with suggested file names."""

    def setUp(self) -> None:
        self.elements = [
            StoredElement(id=10, element_type="heading", content="Welcome", attributes={"level": 1}),
            StoredElement(id=11, element_type="text", content="Body", order=1),
        ]

    def test_export_page(self) -> None:
        result = export_to_yootheme(PageInfo(id=1, name="Home", slug="home"), self.elements)
        self.assertEqual(result.filename, "home-yootheme.json")
        document = result.layout.to_dict()
        self.assertEqual(document["type"], "layout")
        self.assertEqual([c["props"]["content"] for c in column_children(document["children"][0])], ["Welcome", "Body"])

    def test_export_page_without_slug(self) -> None:
        result = export_to_yootheme(PageInfo(id=1), [])
        self.assertEqual(result.filename, "page-yootheme.json")

    def test_export_project_concatenates_sections(self) -> None:
        pages = [
            (PageInfo(id=1, slug="home"), self.elements),
            (PageInfo(id=2, slug="about"), []),
        ]
        result = export_project_to_yootheme(ProjectInfo(id=7, name="My Site!"), pages)
        self.assertEqual(result.filename, "my-site--yootheme.json")
        sections = result.layout.to_dict()["children"]
        self.assertEqual(len(sections), 2)
        self.assertEqual(column_children(sections[1])[0]["props"]["content"], "Empty page")

    def test_filenames(self) -> None:
        self.assertEqual(page_filename(""), "page-yootheme.json")
        self.assertEqual(project_filename("Acme Corp 2"), "acme-corp-2-yootheme.json")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
