"""
Tests for fragment, group and slice zone rendering.
"""

import pytest

from prismic_fragments.models import (
    CompositeSlice,
    Embed,
    Group,
    GroupDoc,
    Image,
    ImageView,
    SimpleSlice,
    SliceZone,
    Text,
)
from prismic_fragments.parser import parse_fragment, parse_slice_zone
from prismic_fragments.renderers import FragmentRenderer, HTMLRenderConfig, render_fragment


class TestSliceZone:
    """Slice zones parsed from JSON."""

    def test_parse_slice_kinds(self, load_fixture):
        zone = parse_slice_zone(load_fixture("slices.json"))

        assert [slice_.slice_type for slice_ in zone] == ["features", "text", "quote", "gallery"]
        assert isinstance(zone.slices[0], CompositeSlice)
        assert isinstance(zone.slices[1], SimpleSlice)
        assert zone.slices[2].label == "pull-quote"
        assert len(zone.slices[3].repeat) == 2

    def test_render_slice_zone(self, load_fixture):
        zone = parse_fragment("SliceZone", load_fixture("slices.json"))

        html = render_fragment(zone)

        assert html == (
            '<div data-slicetype="features" class="slice">'
            '<section data-field="illustration"><img alt="" src="https://example.com/features.png" '
            'width="4285" height="709" /></section>\n'
            '<section data-field="title"><span class="text">c\'est un bloc features</span></section>'
            '</div>'
            '<div data-slicetype="text" class="slice"><p>C\'est un bloc content</p></div>'
            '<div data-slicetype="quote" class="slice pull-quote"><span class="text">Simplicity &amp; clarity</span></div>'
            '<div data-slicetype="gallery" class="slice">'
            '<section data-field="caption"><span class="text">First</span></section>'
            '<section data-field="caption"><span class="text">Second</span></section>'
            '</div>'
        )

    def test_slice_without_value_is_omitted(self):
        zone = parse_slice_zone([{"slice_type": "empty"}, "junk"])

        assert len(zone) == 0

    def test_custom_slice_class(self):
        zone = SliceZone((SimpleSlice("text", Text("t")),))
        renderer = FragmentRenderer(config=HTMLRenderConfig(slice_class="section"))

        assert renderer.render(zone) == '<div data-slicetype="text" class="section"><span class="text">t</span></div>'


class TestGroups:
    """Groups of sub-documents."""

    def test_group_renders_each_entry(self):
        group = Group((
            GroupDoc({"name": Text("A"), "role": Text("Author")}),
            GroupDoc({"name": Text("B")}),
        ))

        html = render_fragment(group)

        assert html == (
            '<section data-field="name"><span class="text">A</span></section>\n'
            '<section data-field="role"><span class="text">Author</span></section>'
            '<section data-field="name"><span class="text">B</span></section>'
        )

    def test_group_doc_as_html(self):
        assert GroupDoc({"name": Text("<A>")}).as_html() == '<section data-field="name"><span class="text">&lt;A&gt;</span></section>'

    def test_composite_slice_without_non_repeat(self):
        slice_ = CompositeSlice("list", repeat=Group((GroupDoc({"item": Text("x")}),)))

        html = FragmentRenderer().render_slice(slice_)

        assert html == '<div data-slicetype="list" class="slice"><section data-field="item"><span class="text">x</span></section></div>'


class TestMediaFragments:
    """Images and embeds outside structured text."""

    def test_image_renders_main_view(self):
        image = Image(
            main=ImageView("https://example.com/main.png", 800, 600, alt="Main"),
            views={"icon": ImageView("https://example.com/icon.png", 10, 10)},
        )

        assert render_fragment(image) == '<img alt="Main" src="https://example.com/main.png" width="800" height="600" />'
        assert image.get_view("main") is image.main
        assert image.get_view("icon").ratio == 1.0

    def test_embed_without_provider(self):
        embed = Embed(type="Rich", url="https://example.com/e", html="<b>x</b>")

        assert render_fragment(embed) == '<div data-oembed="https://example.com/e" data-oembed-type="rich"><b>x</b></div>'

    def test_ratio_of_view_without_height(self):
        assert ImageView("https://example.com/a.png", 10, 0).ratio == 0.0
        assert ImageView("https://example.com/b.png", 300, 150).ratio == 2.0


class TestReadOnlyMappings:
    """Mapping fields of frozen models cannot be changed after construction."""

    def test_image_views(self):
        views = {"icon": ImageView("https://example.com/icon.png", 10, 10)}
        image = Image(main=ImageView("https://example.com/main.png", 800, 600), views=views)

        views["wide"] = ImageView("https://example.com/wide.png", 20, 10)
        with pytest.raises(TypeError):
            image.views["wide"] = views["wide"]

        assert list(image.views) == ["icon"]
        assert hash(image) == hash(Image(main=image.main))

    def test_embed_oembed(self):
        embed = Embed(type="video", url="https://example.com/v", html="<iframe></iframe>", oembed={"width": 480})

        with pytest.raises(TypeError):
            embed.oembed["width"] = 640

        assert embed.oembed == {"width": 480}

    def test_group_doc_fragments(self):
        entry = GroupDoc({"title": Text("a")})

        with pytest.raises(TypeError):
            entry.fragments["title"] = Text("b")

        assert entry.get_text("title") == "a"
