"""
Tests for the command-line interface.
"""

import json
import logging

import pytest

from prismic_fragments.cli import create_parser, main


@pytest.fixture
def document_path(fixtures_dir):
    return fixtures_dir / "document.json"


@pytest.fixture
def response_path(tmp_path, load_fixture):
    path = tmp_path / "response.json"
    second = {"id": "b", "type": "page", "data": {"page": {"title": {"type": "Text", "value": "Second"}}}}
    path.write_text(json.dumps({"results": [load_fixture("document.json"), second]}), encoding="utf-8")
    return path


class TestParser:
    """Argument parsing."""

    def test_render_defaults(self):
        args = create_parser().parse_args(["render", "doc.json"])

        assert args.command == "render"
        assert args.link_pattern == "/{type}/{id}"
        assert args.field is None
        assert args.output is None
        assert args.verbose is False

    def test_verbose_flag(self):
        args = create_parser().parse_args(["-v", "info", "doc.json", "--json"])

        assert args.verbose is True
        assert args.json is True


class TestRenderCommand:
    """render subcommand."""

    def test_render_field(self, document_path, capsys):
        code = main(["render", str(document_path), "--field", "article.title"])

        assert code == 0
        assert capsys.readouterr().out == "<h1>Hello &amp; welcome</h1>\n"

    def test_render_field_with_link_pattern(self, document_path, capsys):
        code = main(["render", str(document_path), "--field", "article.related", "--link-pattern", "/{lang}/{uid}"])

        assert code == 0
        assert capsys.readouterr().out == '<a href="/en-us/related">related-article</a>\n'

    def test_render_document_to_file(self, document_path, tmp_path):
        output = tmp_path / "out.html"

        code = main(["render", str(document_path), "-o", str(output)])

        html = output.read_text(encoding="utf-8")
        assert code == 0
        assert html.startswith('<section data-field="article.title">')
        assert '<a href="/article/UlfoxUnM0wkXYXbl">related article</a>' in html
        assert 'href="#broken"' in html

    def test_render_response(self, response_path, capsys):
        code = main(["render", str(response_path), "--field", "page.title"])

        # the first document has no page.title field
        assert code == 0
        assert capsys.readouterr().out == '\n<span class="text">Second</span>\n'

    def test_missing_file(self, tmp_path, capsys):
        code = main(["render", str(tmp_path / "missing.json")])

        assert code == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        code = main(["render", str(path)])

        assert code == 1
        assert "Invalid JSON payload" in capsys.readouterr().err

    def test_bad_link_pattern(self, document_path, capsys):
        code = main(["render", str(document_path), "--field", "article.related", "--link-pattern", "/{nope}"])

        assert code == 1
        assert "Invalid link pattern" in capsys.readouterr().err


class TestTextCommand:
    """text subcommand."""

    def test_text(self, document_path, capsys):
        code = main(["text", str(document_path), "--field", "article.body"])

        assert code == 0
        assert capsys.readouterr().out == "Read the related article.\nFirst\nSecond\n"

    def test_text_requires_field(self, document_path):
        with pytest.raises(SystemExit):
            main(["text", str(document_path)])


class TestInfoCommand:
    """info subcommand."""

    def test_info_json(self, document_path, capsys):
        code = main(["info", str(document_path), "--json"])

        (info,) = json.loads(capsys.readouterr().out)
        assert code == 0
        assert info["id"] == "UlfoxUnM0wkXYXbh"
        assert info["slug"] == "hello world"
        assert info["fields"]["article.body"] == "StructuredText"
        assert info["fields"]["article.gallery[0]"] == "Image"
        assert info["fields"]["article.related"] == "DocumentLink"

    def test_info_table(self, document_path, capsys):
        code = main(["info", str(document_path)])

        out = capsys.readouterr().out
        assert code == 0
        assert "UlfoxUnM0wkXYXbh" in out
        assert "article.authors" in out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "prismic-fragments" in capsys.readouterr().out


class TestUnreadableInput:
    """Inputs that exist but cannot be read fail with exit code 1 on every command."""

    @pytest.mark.parametrize("argv", [
        ["render"],
        ["text", "--field", "article.title"],
        ["info"],
    ])
    def test_directory(self, tmp_path, capsys, argv):
        code = main([argv[0], str(tmp_path), *argv[1:]])

        assert code == 1
        assert capsys.readouterr().err.startswith("Error: ")

    @pytest.mark.parametrize("argv", [
        ["render"],
        ["text", "--field", "article.title"],
        ["info", "--json"],
    ])
    def test_invalid_utf8(self, tmp_path, capsys, argv):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"id": "\xe9", "type": "page"}')

        code = main([argv[0], str(path), *argv[1:]])

        assert code == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_invalid_json_in_info(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("[1, 2", encoding="utf-8")

        assert main(["info", str(path)]) == 1
        assert "Invalid JSON payload" in capsys.readouterr().err


class TestLogging:
    """Rich logging setup."""

    def test_setup_logging_installs_rich_handler(self):
        from rich.logging import RichHandler

        from prismic_fragments.utils import setup_logging

        logger = setup_logging("DEBUG")

        assert logger.name == "prismic_fragments"
        assert logger.level == logging.DEBUG
        assert [type(handler) for handler in logger.handlers] == [RichHandler]

    def test_verbose_enables_debug(self, document_path):
        main(["-v", "text", str(document_path), "--field", "article.title"])

        assert logging.getLogger("prismic_fragments").level == logging.DEBUG
