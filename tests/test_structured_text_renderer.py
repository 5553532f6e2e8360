"""
Tests for block-level structured text rendering.
"""

import pytest

from prismic_fragments.exceptions import RenderingError
from prismic_fragments.models import (
    DocumentLink,
    Embed,
    EmbedBlock,
    Heading,
    ImageBlock,
    ImageView,
    Label,
    ListItem,
    Paragraph,
    Preformatted,
    StructuredText,
    WebLink,
)
from prismic_fragments.renderers import StructuredTextRenderer, group_blocks, render_structured_text


def youtube_embed():
    return Embed(
        type="video",
        provider="YouTube",
        url="https://www.youtube.com/watch?v=baGfM6dBzs8",
        html='<iframe width="459" height="344" src="http://www.youtube.com/embed/baGfM6dBzs8?feature=oembed" '
             'frameborder="0" allowfullscreen></iframe>',
    )


class TestBlockGrouping:
    """Grouping of adjacent list items."""

    def test_no_list_items_keeps_blocks_ungrouped(self):
        blocks = [Heading("Title", level=2), Paragraph("One"), Paragraph("Two")]

        groups = group_blocks(blocks)

        assert [group.tag for group in groups] == [None, None, None]
        assert [group.blocks for group in groups] == [[block] for block in blocks]

    def test_adjacent_items_of_same_kind_share_a_group(self):
        blocks = [ListItem("a"), ListItem("b"), Paragraph("p"), ListItem("c", ordered=True)]

        groups = group_blocks(blocks)

        assert [group.tag for group in groups] == ["ul", None, "ol"]
        assert [len(group.blocks) for group in groups] == [2, 1, 1]

    def test_switching_list_kind_starts_a_new_group(self):
        groups = group_blocks([ListItem("a"), ListItem("b", ordered=True), ListItem("c", ordered=True)])

        assert [group.tag for group in groups] == ["ul", "ol"]

    def test_grouped_html(self):
        blocks = [ListItem("a"), ListItem("b"), Paragraph("p"), ListItem("c", ordered=True)]

        html = render_structured_text(blocks)

        assert html == "<ul><li>a</li><li>b</li></ul><p>p</p><ol><li>c</li></ol>"


class TestBlockTemplates:
    """Default markup of each block kind."""

    def test_headings(self):
        html = render_structured_text([Heading("One", level=1), Heading("Six", level=6)])

        assert html == "<h1>One</h1><h6>Six</h6>"

    def test_paragraph_and_preformatted(self):
        html = render_structured_text([Paragraph("a & b"), Preformatted("x < y\nz")])

        assert html == "<p>a &amp; b</p><pre>x &lt; y<br/>z</pre>"

    def test_label_becomes_class(self):
        html = render_structured_text([Paragraph("p", label="intro"), Heading("h", level=3, label="")])

        assert html == '<p class="intro">p</p><h3>h</h3>'

    def test_image_block(self):
        view = ImageView(url="http://fpoimg.com/199x300", width=300, height=199)

        html = render_structured_text([ImageBlock(view)])

        assert html == '<p class="block-img"><img alt="" src="http://fpoimg.com/199x300" width="300" height="199" /></p>'

    def test_image_block_with_label_and_alt(self):
        view = ImageView(url="http://fpoimg.com/10x10", width=10, height=10, alt='A "quoted" alt')

        html = render_structured_text([ImageBlock(view, label="wide")])

        assert html == (
            '<p class="block-img wide"><img alt="A &quot;quoted&quot; alt" '
            'src="http://fpoimg.com/10x10" width="10" height="10" /></p>'
        )

    def test_embed_block(self):
        html = render_structured_text([EmbedBlock(youtube_embed())])

        assert html == (
            '<div data-oembed="https://www.youtube.com/watch?v=baGfM6dBzs8" data-oembed-type="video" '
            'data-oembed-provider="youtube"><iframe width="459" height="344" '
            'src="http://www.youtube.com/embed/baGfM6dBzs8?feature=oembed" frameborder="0" allowfullscreen>'
            '</iframe></div>'
        )

    def test_embed_html_keeps_newlines(self):
        embed = Embed(type="rich", url="https://example.com", html="<p>a\nb</p>")

        html = render_structured_text([EmbedBlock(embed, label="media")])

        assert html == '<div data-oembed="https://example.com" data-oembed-type="rich" class="media"><p>a\nb</p></div>'

    def test_unknown_block_kind_raises(self):
        with pytest.raises(RenderingError):
            StructuredTextRenderer().render_block(object())


class TestLinkedImages:
    """Images linking to web pages and documents."""

    def test_linked_images(self, resolver):
        blocks = [
            Paragraph("Here is some introductory text."),
            Paragraph("The following image is linked."),
            ImageBlock(ImageView("http://fpoimg.com/129x260", 260, 129, link_to=WebLink("http://google.com/"))),
            Paragraph("More important stuff", spans=(Label(0, 20, "important"),)),
            ImageBlock(ImageView(
                "http://fpoimg.com/400x400", 400, 400,
                link_to=DocumentLink(id="UxCQFFFFFFFaaYAH", type="article", slug="something-fantastic"),
            )),
            ImageBlock(ImageView(
                "http://fpoimg.com/250x250", 250, 250,
                link_to=DocumentLink(id="UxCQFFFFFFFaaYAJ", type="article", slug="-", broken=True),
            )),
        ]

        html = render_structured_text(blocks, link_resolver=resolver)

        assert html == (
            '<p>Here is some introductory text.</p>'
            '<p>The following image is linked.</p>'
            '<p class="block-img"><a href="http://google.com/"><img alt="" src="http://fpoimg.com/129x260" '
            'width="260" height="129" /></a></p>'
            '<p><span class="important">More important stuff</span></p>'
            '<p class="block-img"><a href="/UxCQFFFFFFFaaYAH/something-fantastic"><img alt="" '
            'src="http://fpoimg.com/400x400" width="400" height="400" /></a></p>'
            '<p class="block-img"><a href="#broken"><img alt="" src="http://fpoimg.com/250x250" '
            'width="250" height="250" /></a></p>'
        )
        assert [link.id for link in resolver.calls] == ["UxCQFFFFFFFaaYAH"]


class TestBlockSerializer:
    """Custom serializer hook at block level."""

    def test_override_block(self):
        def serializer(element, content):
            if isinstance(element, Heading):
                return f'<h{element.level} class="title">{content}</h{element.level}>'
            return None

        html = render_structured_text([Heading("Big", level=2), Paragraph("text")], html_serializer=serializer)

        assert html == '<h2 class="title">Big</h2><p>text</p>'

    def test_override_receives_rendered_content(self):
        seen = []

        def serializer(element, content):
            if isinstance(element, Paragraph):
                seen.append(content)
            return None

        render_structured_text([Paragraph("a<b\nc")], html_serializer=serializer)

        assert seen == ["a&lt;b<br/>c"]

    def test_override_list_item_keeps_group_wrapper(self):
        html = render_structured_text(
            [ListItem("a"), ListItem("b")],
            html_serializer=lambda element, content: f"<li>* {content}</li>" if isinstance(element, ListItem) else None,
        )

        assert html == "<ul><li>* a</li><li>* b</li></ul>"

    def test_override_output_keeps_newlines(self):
        html = render_structured_text(
            [Paragraph("a\nb")],
            html_serializer=lambda element, content: "<div>\n" + content + "\n</div>" if isinstance(element, Paragraph) else None,
        )

        assert html == "<div>\na<br/>b\n</div>"


class TestStructuredTextModel:
    """StructuredText helpers."""

    def test_as_html(self):
        text = StructuredText((Heading("Title", level=1), Paragraph("Body")))

        assert text.as_html() == "<h1>Title</h1><p>Body</p>"

    def test_as_text_and_accessors(self):
        image = ImageBlock(ImageView("http://fpoimg.com/1x1", 1, 1))
        text = StructuredText((Heading("Title", level=1), image, Paragraph("First"), Paragraph("Second")))

        assert text.as_text() == "Title\nFirst\nSecond"
        assert text.get_title().text == "Title"
        assert text.get_first_paragraph().text == "First"
        assert text.get_first_preformatted() is None
        assert text.get_first_image() is image
