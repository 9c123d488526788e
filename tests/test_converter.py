"""Tests for file conversion helpers."""

from pathlib import Path

import pytest

from mdtohtml.converter import (
    SUPPORTED_EXTENSIONS,
    ConversionResult,
    convert_file,
    convert_files,
    find_markdown_files,
    is_markdown_file,
    output_path_for,
    validate_file,
)
from mdtohtml.errors import ConversionError


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestExtensions:
    """Markdown file detection."""

    @pytest.mark.parametrize("ext", sorted(SUPPORTED_EXTENSIONS))
    def test_supported(self, ext: str) -> None:
        assert is_markdown_file(f"notes{ext}")

    def test_case_insensitive(self) -> None:
        assert is_markdown_file("README.MD")

    @pytest.mark.parametrize("name", ["notes.txt", "notes", "notes.md.bak", "notes.html"])
    def test_unsupported(self, name: str) -> None:
        assert not is_markdown_file(name)


class TestOutputPath:
    """Target path computation."""

    def test_next_to_input(self) -> None:
        assert output_path_for(Path("docs/guide.md")) == Path("docs/guide.html")

    def test_in_output_dir(self) -> None:
        assert output_path_for("docs/guide.markdown", "site") == Path("site/guide.html")


class TestValidateFile:
    """validate_file()."""

    def test_valid(self, tmp_path: Path) -> None:
        assert validate_file(write(tmp_path / "a.md", "# A"))

    def test_missing(self, tmp_path: Path) -> None:
        assert not validate_file(tmp_path / "missing.md")

    def test_directory(self, tmp_path: Path) -> None:
        folder = tmp_path / "dir.md"
        folder.mkdir()
        assert not validate_file(folder)

    def test_wrong_extension(self, tmp_path: Path) -> None:
        assert not validate_file(write(tmp_path / "a.txt", "# A"))


class TestConvertFile:
    """Single file conversion."""

    def test_writes_html_next_to_input(self, tmp_path: Path) -> None:
        source = write(tmp_path / "page.md", "# Title\n\nText")
        target = convert_file(source)

        assert target == tmp_path / "page.html"
        html = target.read_text(encoding="utf-8")
        assert "<h1>Title</h1>\n<p>Text</p>" in html
        assert html.startswith("<!DOCTYPE html>")

    def test_explicit_output_creates_parents(self, tmp_path: Path) -> None:
        source = write(tmp_path / "page.md", "x")
        target = convert_file(source, tmp_path / "out" / "nested" / "result.html")
        assert target.is_file()

    def test_options_applied(self, tmp_path: Path) -> None:
        source = write(tmp_path / "page.md", "x")
        html = convert_file(source, options={"theme": "dark"}).read_text(encoding="utf-8")
        assert 'class="dark-theme"' in html

    def test_utf8_round_trip(self, tmp_path: Path) -> None:
        source = write(tmp_path / "page.md", "# Café ☕")
        assert "<h1>Café ☕</h1>" in convert_file(source).read_text(encoding="utf-8")

    def test_missing_input(self, tmp_path: Path) -> None:
        source = tmp_path / "missing.md"
        with pytest.raises(ConversionError) as exc_info:
            convert_file(source)

        assert exc_info.value.path == source
        assert isinstance(exc_info.value.__cause__, OSError)
        assert not (tmp_path / "missing.html").exists()

    def test_undecodable_input(self, tmp_path: Path) -> None:
        source = tmp_path / "bad.md"
        source.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(ConversionError, match="cannot read input"):
            convert_file(source)
        assert not (tmp_path / "bad.html").exists()

    def test_unwritable_output(self, tmp_path: Path) -> None:
        source = write(tmp_path / "page.md", "x")
        blocker = write(tmp_path / "blocker", "not a directory")
        with pytest.raises(ConversionError, match="cannot write output"):
            convert_file(source, blocker / "page.html")

    def test_logs_written_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        source = write(tmp_path / "page.md", "x")
        with caplog.at_level("INFO", logger="mdtohtml"):
            convert_file(source)
        assert "Converted" in caplog.text


class TestConvertFiles:
    """Batch conversion."""

    def test_all_succeed(self, tmp_path: Path) -> None:
        paths = [write(tmp_path / "a.md", "# A"), write(tmp_path / "b.md", "# B")]
        out = tmp_path / "site"

        results = convert_files(paths, out)

        assert [r.success for r in results] == [True, True]
        assert [r.output_path for r in results] == [out / "a.html", out / "b.html"]
        assert all(r.error is None for r in results)
        assert "<h1>B</h1>" in (out / "b.html").read_text(encoding="utf-8")

    def test_failures_recorded_not_raised(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        good = write(tmp_path / "good.md", "ok")
        missing = tmp_path / "missing.md"
        wrong = write(tmp_path / "notes.txt", "x")

        with caplog.at_level("WARNING", logger="mdtohtml"):
            results = convert_files([good, missing, wrong])

        assert [r.input_path for r in results] == [good, missing, wrong]
        assert [r.success for r in results] == [True, False, False]
        assert "missing.md" in (results[1].error or "")
        assert "not a Markdown file" in (results[2].error or "")
        assert results[2].output_path is None
        assert caplog.text.count("WARNING") == 2

    def test_empty_batch(self) -> None:
        assert convert_files([]) == []

    def test_result_is_frozen(self) -> None:
        result = ConversionResult(Path("a.md"), Path("a.html"), success=True)
        with pytest.raises(AttributeError):
            result.success = False  # type: ignore[misc]


class TestFindMarkdownFiles:
    """Directory listing."""

    def test_non_recursive_sorted(self, tmp_path: Path) -> None:
        write(tmp_path / "b.md", "")
        write(tmp_path / "a.markdown", "")
        write(tmp_path / "c.txt", "")
        (tmp_path / "sub").mkdir()
        write(tmp_path / "sub" / "d.md", "")

        assert find_markdown_files(tmp_path) == [tmp_path / "a.markdown", tmp_path / "b.md"]
