"""Tests for render configuration."""

from pathlib import Path

import pytest

from tabstijl.borders import BorderPreset
from tabstijl.config import (
    DEFAULT_PADDING,
    OPTION_NAMES,
    RenderConfig,
    build_config,
    load_config_file,
    parse_header_names,
)
from tabstijl.exceptions import ConfigFileError, ValidationError
from tabstijl.models import Alignment, Color, SeparatorMode, StyleSpec, TextStyle
from tabstijl.themes import THEMES


class TestRenderConfig:
    """Tests for RenderConfig."""

    def test_defaults(self) -> None:
        """Defaults are space separator, padding 2, single borders with a header."""
        config = RenderConfig()
        assert config.separator == SeparatorMode.SPACE
        assert config.padding == DEFAULT_PADDING == 2
        assert config.borders is True
        assert config.border_preset == BorderPreset.SINGLE
        assert config.table_color is None
        assert config.header == config.body == StyleSpec()
        assert config.header_names == ()
        assert not config.exclude_header
        assert not config.headerless
        assert config.show_separator

    def test_negative_padding_rejected(self) -> None:
        """Padding must not be negative."""
        with pytest.raises(ValidationError) as exc_info:
            RenderConfig(padding=-1)
        assert exc_info.value.field == "padding"
        assert exc_info.value.value == -1

    @pytest.mark.parametrize("padding", ["2", 1.5, True])
    def test_non_integer_padding_rejected(self, padding: object) -> None:
        """Padding must be a plain integer."""
        with pytest.raises(ValidationError, match="must be an integer"):
            RenderConfig(padding=padding)  # type: ignore[arg-type]

    def test_border_style_follows_preset(self) -> None:
        """border_style exposes the preset glyphs."""
        config = RenderConfig(border_preset=BorderPreset.HEAVY)
        assert config.border_style == BorderPreset.HEAVY.style

    def test_with_theme_keeps_separator_when_theme_has_none(self) -> None:
        """Themes without a separator leave the current one alone."""
        config = RenderConfig(separator=SeparatorMode.WHITESPACE).with_theme(THEMES["matrix"])
        assert config.separator == SeparatorMode.WHITESPACE
        assert config.border_preset == BorderPreset.HEAVY
        assert config.table_color == Color.GREEN

    def test_with_theme_sets_separator(self) -> None:
        """The sticky theme switches to tab separation."""
        config = RenderConfig().with_theme(THEMES["sticky"])
        assert config.separator == SeparatorMode.TAB


class TestBuildConfig:
    """Tests for build_config."""

    def test_no_options(self) -> None:
        """Without options the defaults apply."""
        assert build_config() == RenderConfig()

    def test_flags(self) -> None:
        """Boolean flags map to their config fields."""
        config = build_config(borderless=True, fusion=True)
        assert config.borders is False
        assert config.show_separator is False

    def test_simplify_sets_headerless_and_exclusion(self) -> None:
        """Simplify drops the first line and renders every row as body."""
        config = build_config(simplify=True)
        assert config.exclude_header
        assert config.headerless

    def test_values_are_case_insensitive(self) -> None:
        """String values are matched regardless of case."""
        config = build_config(tab_color="RED", border_style="Double", separator="TAB")
        assert config.table_color == Color.RED
        assert config.border_preset == BorderPreset.DOUBLE
        assert config.separator == SeparatorMode.TAB

    def test_enum_members_pass_through(self) -> None:
        """Library callers may pass enum members directly."""
        config = build_config(text_align=Alignment.RIGHT, separator=SeparatorMode.NEWLINE)
        assert config.header.align == config.body.align == Alignment.RIGHT
        assert config.separator == SeparatorMode.NEWLINE

    def test_shared_options_apply_to_both_sections(self) -> None:
        """text_* and bg_color style header and body alike."""
        config = build_config(text_color="cyan", bg_color="black", text_style="italic")
        expected = StyleSpec(fg=Color.CYAN, bg=Color.BLACK, decoration=TextStyle.ITALIC)
        assert config.header == config.body == expected

    def test_section_options_beat_shared_options(self) -> None:
        """Header/body-specific options override the shared ones."""
        config = build_config(
            text_color="red",
            htext_color="blue",
            text_align="center",
            btext_align="right",
        )
        assert config.header.fg == Color.BLUE
        assert config.body.fg == Color.RED
        assert config.header.align == Alignment.CENTER
        assert config.body.align == Alignment.RIGHT

    def test_options_override_theme(self) -> None:
        """Explicit options are applied on top of the theme."""
        config = build_config(theme="matrix", tab_color="red", btext_color="white")
        assert config.border_preset == BorderPreset.HEAVY
        assert config.table_color == Color.RED
        assert config.body.fg == Color.WHITE
        assert config.body.decoration == TextStyle.BOLD
        assert config.header == THEMES["matrix"].header

    def test_separator_option_overrides_theme(self) -> None:
        """An explicit separator beats the one a theme implies."""
        config = build_config(theme="sticky", separator="space")
        assert config.separator == SeparatorMode.SPACE

    def test_padding(self) -> None:
        """Padding is taken as given."""
        assert build_config(padding=0).padding == 0
        assert build_config(padding=5).padding == 5

    def test_negative_padding(self) -> None:
        """Negative padding is rejected."""
        with pytest.raises(ValidationError):
            build_config(padding=-3)

    def test_hdata(self) -> None:
        """hdata becomes the header name tuple."""
        assert build_config(hdata="perm,user,size").header_names == ("perm", "user", "size")

    @pytest.mark.parametrize(
        "option,value",
        [
            ("tab_color", "purple"),
            ("htext_color", "orange"),
            ("bbg_color", "grey"),
            ("text_style", "blink"),
            ("btext_align", "justify"),
            ("separator", "comma"),
            ("border_style", "dotted"),
        ],
    )
    def test_invalid_value_names_the_field(self, option: str, value: str) -> None:
        """Rejected values report which option was wrong."""
        with pytest.raises(ValidationError) as exc_info:
            build_config(**{option: value})
        assert exc_info.value.field == option
        assert exc_info.value.value == value
        assert "Must be one of" in exc_info.value.reason

    def test_theme_name_is_case_insensitive(self) -> None:
        """Theme names match regardless of case, like other options."""
        assert build_config(theme="Matrix") == build_config(theme="matrix")

    def test_unknown_theme(self) -> None:
        """Unknown themes are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            build_config(theme="neon")
        assert exc_info.value.field == "theme"

    def test_option_names_match_signature(self) -> None:
        """Every declared option name is accepted by build_config."""
        config = build_config(**{name: None for name in OPTION_NAMES if name != "hdata"})
        assert config.borders is True


class TestParseHeaderNames:
    """Tests for parse_header_names."""

    def test_split_on_commas(self) -> None:
        """Names are separated by commas."""
        assert parse_header_names("a,b,c") == ("a", "b", "c")

    def test_single_name(self) -> None:
        """A value without commas is one name."""
        assert parse_header_names("only") == ("only",)

    def test_trailing_comma_is_ignored(self) -> None:
        """One trailing comma does not add an empty name."""
        assert parse_header_names("a,b,") == ("a", "b")

    def test_inner_empty_names_are_kept(self) -> None:
        """Empty names between commas stay in place."""
        assert parse_header_names("a,,b") == ("a", "", "b")

    def test_spaces_are_kept(self) -> None:
        """Names are not stripped."""
        assert parse_header_names("first name,age") == ("first name", "age")

    def test_empty_value(self) -> None:
        """An empty header list is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            parse_header_names("")
        assert exc_info.value.field == "hdata"


class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_valid_file(self, tmp_path: Path) -> None:
        """Keys may use hyphens or underscores."""
        path = tmp_path / "tabstijl.yaml"
        path.write_text("border-style: heavy\ntab_color: green\npadding: 1\nfusion: true\n")
        assert load_config_file(path) == {
            "border_style": "heavy",
            "tab_color": "green",
            "padding": 1,
            "fusion": True,
        }

    def test_loaded_values_build_a_config(self, tmp_path: Path) -> None:
        """File contents can be passed straight to build_config."""
        path = tmp_path / "tabstijl.yaml"
        path.write_text("theme: myth\nhtext-align: left\n")
        config = build_config(**load_config_file(path))
        assert config.border_preset == BorderPreset.DOUBLE
        assert config.header.align == Alignment.LEFT

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file yields no defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is a config error."""
        with pytest.raises(ConfigFileError, match="Cannot load config file"):
            load_config_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Malformed YAML is reported."""
        path = tmp_path / "bad.yaml"
        path.write_text("padding: [1, 2\n")
        with pytest.raises(ConfigFileError, match="Invalid YAML"):
            load_config_file(path)

    def test_top_level_list(self, tmp_path: Path) -> None:
        """The document must be a mapping."""
        path = tmp_path / "list.yaml"
        path.write_text("- padding\n- fusion\n")
        with pytest.raises(ConfigFileError, match="must be a mapping"):
            load_config_file(path)

    def test_hdata_list_is_joined(self, tmp_path: Path) -> None:
        """A YAML list of header names becomes a comma-separated value."""
        path = tmp_path / "tabstijl.yaml"
        path.write_text("hdata:\n  - id\n  - first name\n")
        defaults = load_config_file(path)
        assert defaults == {"hdata": "id,first name"}
        assert build_config(**defaults).header_names == ("id", "first name")

    @pytest.mark.parametrize("text", ["padding: [1, 2]\n", "theme: {name: matrix}\n"])
    def test_non_scalar_value(self, tmp_path: Path, text: str) -> None:
        """Lists and mappings are rejected for single-value options."""
        path = tmp_path / "tabstijl.yaml"
        path.write_text(text)
        with pytest.raises(ConfigFileError, match="must be a single value"):
            load_config_file(path)

    def test_unknown_option(self, tmp_path: Path) -> None:
        """Unknown keys are rejected by name."""
        path = tmp_path / "unknown.yaml"
        path.write_text("colour: red\n")
        with pytest.raises(ConfigFileError) as exc_info:
            load_config_file(path)
        assert "Unknown option 'colour'" in str(exc_info.value)
        assert exc_info.value.path == str(path)
