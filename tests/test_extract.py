from pathlib import Path

from param_directive.parser.extract import DEFAULT_MARKER, extract_directives

FIXTURES = Path(__file__).parent / "fixtures"


class TestExtractDirectives:
    def test_finds_directives_in_fixture(self):
        comments = extract_directives(FIXTURES / "service.py")
        assert [c.line for c in comments] == [5, 9, 14]
        assert comments[0].text == "pet_id in=path type=int descr=Pet-identifier"
        assert comments[1].text == "limit type=int; offset type=int"

    def test_default_marker(self):
        assert DEFAULT_MARKER == "http:param"

    def test_slash_comments(self, tmp_path):
        f = tmp_path / "handler.go"
        f.write_text(
            "package pets\n"
            "\n"
            "// http:param id in=path\n"
            "func GetPet(id int) {}\n",
            encoding="utf-8",
        )
        comments = extract_directives(f)
        assert len(comments) == 1
        assert comments[0].line == 3
        assert comments[0].text == "id in=path"

    def test_empty_body_is_returned(self, tmp_path):
        f = tmp_path / "empty.py"
        f.write_text("# http:param\n# http:param   \n", encoding="utf-8")
        comments = extract_directives(f)
        assert [c.text for c in comments] == ["", ""]

    def test_custom_marker(self, tmp_path):
        f = tmp_path / "custom.py"
        f.write_text("# kok:param a in=path\n# http:param b\n", encoding="utf-8")
        comments = extract_directives(f, marker="kok:param")
        assert len(comments) == 1
        assert comments[0].text == "a in=path"

    def test_no_directives(self, tmp_path):
        f = tmp_path / "plain.py"
        f.write_text("x = 1  # http:param a\n", encoding="utf-8")
        assert extract_directives(f) == []
