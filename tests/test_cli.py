import textwrap
from pathlib import Path

import pytest

from RenderMark import cli


def _write(path: Path, text: str) -> Path:
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


def test_cli_writes_html_next_to_input(tmp_path: Path):
    source = _write(
        tmp_path / "notes.md",
        """
        # Notes

        Hello **world**.
        """,
    )
    cli.main([str(source)])
    html = (tmp_path / "notes.html").read_text(encoding="utf-8")
    assert '<h1 id="notes">Notes</h1>' in html
    assert "<strong>world</strong>" in html


def test_cli_toc_and_config(tmp_path: Path):
    source = _write(tmp_path / "doc.md", "# One\n## Two\n")
    config = _write(tmp_path / "opts.yaml", "heading_id_prefix: sec-\n")
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    cli.main([str(source), "-o", str(out_dir), "--config", str(config), "--toc"])
    html = (out_dir / "doc.html").read_text(encoding="utf-8")
    assert html.startswith('<nav class="toc">\n<ul>')
    assert '<a href="#sec-two" class="toc-link">Two</a>' in html
    assert '<h2 id="sec-two">Two</h2>' in html


def test_cli_missing_input(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        cli.main([str(tmp_path / "absent.md")])


def test_cli_ignores_byte_order_mark(tmp_path: Path):
    source = tmp_path / "bom.md"
    source.write_bytes("\ufeff# Title\n".encode("utf-8"))
    out = tmp_path / "nested" / "page.html"
    cli.main([str(source), "-o", str(out)])
    assert out.read_text(encoding="utf-8") == '<h1 id="title">Title</h1>\n'
