from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml


@dataclass(frozen=True)
class RenderOptions:
    copy_button_label: str = "Copy Code"
    toggle_label: str = "Toggle"
    image_class: str = "expandable"
    heading_id_prefix: str = ""
    unique_heading_ids: bool = False
    external_link_rel: str = "noopener noreferrer"


DEFAULT_OPTIONS = RenderOptions()


def load_options(text: str) -> RenderOptions:
    """Parse a YAML mapping of option overrides into RenderOptions."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("Options YAML root must be a mapping.")

    known = {f.name: f for f in fields(RenderOptions)}
    overrides = {}
    for key, value in data.items():
        field_info = known.get(key)
        if field_info is None:
            raise ValueError(f"Unknown render option: {key!r}")
        expected = bool if field_info.type == "bool" else str
        if not isinstance(value, expected):
            raise ValueError(f"Render option {key!r} must be of type {expected.__name__}")
        overrides[key] = value
    return replace(DEFAULT_OPTIONS, **overrides)


def load_options_file(path: Path) -> RenderOptions:
    return load_options(path.read_text(encoding="utf-8"))
