from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import markdown_parser, renderer_html
from .config import DEFAULT_OPTIONS, load_options_file
from .utils import configure_logging, read_markdown, resolve_output_path, write_html


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="RenderMark",
        description="Convert Markdown into an HTML fragment with a table of contents.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output HTML path")
    parser.add_argument("--config", type=str, help="YAML file with render options")
    parser.add_argument("--toc", action="store_true", help="Prepend the table of contents")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output)

    options = DEFAULT_OPTIONS
    if args.config:
        config_path = Path(args.config).expanduser()
        logging.info("Loading options from %s", config_path)
        options = load_options_file(config_path)

    logging.info("Reading %s", input_path)
    markdown_text = read_markdown(input_path)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Parsing markdown...")
    document = markdown_parser.parse_markdown(markdown_text)

    logging.info("Rendering HTML to %s", output_path)
    html, toc = renderer_html.render_document(document, options=options)
    if args.toc:
        html = f'<nav class="toc">\n{renderer_html.render_toc(toc)}\n</nav>\n{html}'
    write_html(output_path, html)

    logging.info("Done. Saved to %s (%d headings)", output_path, len(toc))


if __name__ == "__main__":
    main()
