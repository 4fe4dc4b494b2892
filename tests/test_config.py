import textwrap

import pytest

from RenderMark.config import DEFAULT_OPTIONS, RenderOptions, load_options, load_options_file


def test_empty_config_gives_defaults():
    assert load_options("") == DEFAULT_OPTIONS
    assert DEFAULT_OPTIONS.copy_button_label == "Copy Code"
    assert DEFAULT_OPTIONS.toggle_label == "Toggle"


def test_overrides_are_applied(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text(
        textwrap.dedent(
            """
            toggle_label: "Show more"
            unique_heading_ids: true
            heading_id_prefix: "h-"
            """
        ),
        encoding="utf-8",
    )
    options = load_options_file(path)
    assert options == RenderOptions(toggle_label="Show more", unique_heading_ids=True, heading_id_prefix="h-")


def test_root_must_be_mapping():
    with pytest.raises(ValueError):
        load_options("- a\n- b\n")


def test_unknown_option_is_rejected():
    with pytest.raises(ValueError, match="Unknown render option"):
        load_options("colour: red\n")


def test_wrong_type_is_rejected():
    with pytest.raises(ValueError, match="must be of type bool"):
        load_options("unique_heading_ids: yes please\n")
    with pytest.raises(ValueError, match="must be of type str"):
        load_options("toggle_label: 3\n")
