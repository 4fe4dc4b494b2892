from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

HTML_SUFFIX = ".html"


def configure_logging(verbose: bool = False) -> None:
    """Send engine and CLI messages to the console; DEBUG shows scanner decisions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_output_path(input_path: Path, output: Optional[str], suffix: str = HTML_SUFFIX) -> Path:
    if not output:
        return input_path.with_suffix(suffix)
    out_path = Path(output).expanduser()
    if out_path.is_dir():
        return out_path / f"{input_path.stem}{suffix}"
    return out_path


def read_markdown(path: Path) -> str:
    # utf-8-sig drops a leading BOM that would otherwise hide a first-line heading marker
    return path.read_text(encoding="utf-8-sig")


def write_html(path: Path, html: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html + "\n", encoding="utf-8")
