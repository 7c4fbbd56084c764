"""Tests for palette_tool.core.engine — generation, naming, adjustment and shades."""

import numpy as np
import pytest
from palette_tool.core.colour import ColorValue
from palette_tool.core.engine import (
    HUE_NAMES,
    apply_adjustment,
    derive_shades,
    generate_color_name,
    generate_initial_palette,
    make_entry,
    name_for_hsl,
    rename_entry,
    replace_color,
    shade_offsets,
    shades_for_entry,
)
from palette_tool.core.errors import EmptyPalette, OutOfRangeAdjustment
from palette_tool.core.types import AdjustmentVector


class FixedHue:
    """Stands in for numpy's Generator: always draws the same base hue."""

    def __init__(self, hue: float) -> None:
        self.hue = hue

    def uniform(self, low: float, high: float) -> float:
        return self.hue


def _hue(hex_value: str) -> float:
    return ColorValue.from_hex(hex_value).to_hsl()[0]


class TestGenerateInitialPalette:
    def test_default_count(self) -> None:
        assert len(generate_initial_palette(rng=np.random.default_rng(1))) == 5

    def test_custom_count(self) -> None:
        assert len(generate_initial_palette(7, np.random.default_rng(1))) == 7
        assert len(generate_initial_palette(1, np.random.default_rng(1))) == 1

    def test_seed_is_deterministic(self) -> None:
        a = generate_initial_palette(5, np.random.default_rng(42))
        b = generate_initial_palette(5, np.random.default_rng(42))
        assert a == b

    def test_unseeded_still_works(self) -> None:
        assert len(generate_initial_palette()) == 5

    @pytest.mark.parametrize('count', [0, -1])
    def test_empty_count_rejected(self, count: int) -> None:
        with pytest.raises(EmptyPalette):
            generate_initial_palette(count, np.random.default_rng(1))

    def test_red_base(self) -> None:
        first = generate_initial_palette(5, FixedHue(0.0))[0]
        assert first.to_dict() == {
            'hex': '#d92626',
            'name': 'Vibrant Red',
            'rgb': 'rgb(217, 38, 38)',
            'hsl': 'hsl(0, 70%, 50%)',
            'hsv': 'hsv(0, 82%, 85%)',
            'cmyk': 'cmyk(0%, 82%, 82%, 15%)',
        }

    def test_fixed_thirty_degree_steps(self) -> None:
        palette = generate_initial_palette(5, FixedHue(15.0))
        hues = [_hue(e.hex) for e in palette]
        assert hues == pytest.approx([15, 45, 75, 105, 135], abs=1)

    def test_step_does_not_depend_on_count(self) -> None:
        palette = generate_initial_palette(12, FixedHue(15.0))
        assert _hue(palette[11].hex) == pytest.approx(345, abs=1)

    def test_names(self) -> None:
        names = [e.name for e in generate_initial_palette(5, FixedHue(15.0))]
        assert names == ['Vibrant Red', 'Vibrant Red', 'Vibrant Orange', 'Vibrant Orange', 'Vibrant Yellow']

    def test_saturation_and_lightness_fixed(self) -> None:
        for entry in generate_initial_palette(5, np.random.default_rng(7)):
            _h, s, l = ColorValue.from_hex(entry.hex).to_hsl()
            assert s == pytest.approx(0.7, abs=0.02)
            assert l == pytest.approx(0.5, abs=0.01)

    def test_derived_strings_match_hex(self) -> None:
        for entry in generate_initial_palette(5, np.random.default_rng(3)):
            assert entry.rgb == ColorValue.from_hex(entry.hex).to_rgb_string()


class TestNaming:
    @pytest.mark.parametrize(
        ('hue', 'expected'),
        [
            (0, 'Vibrant Red'),
            (60, 'Vibrant Orange'),
            (120, 'Vibrant Yellow'),
            (180, 'Vibrant Green'),
            (240, 'Vibrant Blue'),
            (300, 'Vibrant Purple'),
            (359.9, 'Vibrant Purple'),
            (360, 'Vibrant Red'),
        ],
    )
    def test_sector_starts(self, hue: float, expected: str) -> None:
        assert name_for_hsl(hue, 0.7, 0.5) == expected

    def test_saturation_split(self) -> None:
        assert name_for_hsl(200, 0.5, 0.5) == 'Muted Green'
        assert name_for_hsl(200, 0.51, 0.5) == 'Vibrant Green'

    def test_lightness_prefix(self) -> None:
        assert name_for_hsl(250, 0.8, 0.8) == 'Light Vibrant Blue'
        assert name_for_hsl(250, 0.2, 0.1) == 'Dark Muted Blue'

    def test_lightness_thresholds_are_exclusive(self) -> None:
        assert name_for_hsl(0, 0.7, 0.7) == 'Vibrant Red'
        assert name_for_hsl(0, 0.7, 0.3) == 'Vibrant Red'

    def test_from_colours(self) -> None:
        assert generate_color_name('#ffffff') == 'Light Muted Red'
        assert generate_color_name('#000000') == 'Dark Muted Red'
        assert generate_color_name('#00ffff') == 'Vibrant Green'
        assert generate_color_name(ColorValue.from_hex('#0000ff')) == 'Vibrant Blue'

    def test_deterministic(self) -> None:
        c = ColorValue.from_hex('#7f3a10')
        assert generate_color_name(c) == generate_color_name(c)

    def test_pink_never_chosen(self) -> None:
        assert HUE_NAMES[-1] == 'Pink'
        for hue in np.linspace(0, 359.999, 721):
            assert 'Pink' not in name_for_hsl(float(hue), 0.7, 0.5)


class TestApplyAdjustment:
    def test_hue_half_turn(self) -> None:
        palette = [make_entry('#d92626')]
        assert palette[0].name == 'Vibrant Red'
        adjusted = apply_adjustment(palette, AdjustmentVector(hue=180))
        assert adjusted[0].hex == '#26d9d9'
        assert adjusted[0].name == 'Vibrant Green'

    def test_hue_wraps_negative(self) -> None:
        adjusted = apply_adjustment([make_entry('#ff0000')], AdjustmentVector(hue=-120))
        assert adjusted[0].hex == '#0000ff'

    def test_zero_is_noop(self) -> None:
        palette = [make_entry(h) for h in ['#d92626', '#1e90ff', '#808080', '#000000', '#ffffff']]
        adjusted = apply_adjustment(palette, AdjustmentVector())
        assert [e.hex for e in adjusted] == [e.hex for e in palette]

    def test_saturation_clamps(self) -> None:
        palette = [make_entry('#d92626'), make_entry('#1e90ff')]
        for entry in apply_adjustment(palette, AdjustmentVector(saturation=-100)):
            assert ColorValue.from_hex(entry.hex).to_hsl()[1] == 0.0
        for entry in apply_adjustment(palette, AdjustmentVector(saturation=100)):
            assert ColorValue.from_hex(entry.hex).to_hsl()[1] == pytest.approx(1.0)

    def test_brightness_clamps(self) -> None:
        palette = [make_entry('#d92626'), make_entry('#1e90ff')]
        assert [e.hex for e in apply_adjustment(palette, AdjustmentVector(brightness=100))] == ['#ffffff'] * 2
        assert [e.hex for e in apply_adjustment(palette, AdjustmentVector(brightness=-100))] == ['#000000'] * 2

    def test_cumulative(self) -> None:
        palette = [make_entry('#808080')]
        step = AdjustmentVector(brightness=20)
        once = apply_adjustment(palette, step)
        twice = apply_adjustment(once, step)
        assert once[0].hex == '#b3b3b3'
        assert twice[0].hex == '#e6e6e6'

    def test_hue_round_trip(self) -> None:
        palette = [make_entry('#d92626')]
        step = AdjustmentVector(hue=180)
        assert apply_adjustment(apply_adjustment(palette, step), step)[0].hex == '#d92626'

    def test_does_not_mutate_input(self) -> None:
        palette = [make_entry('#d92626')]
        apply_adjustment(palette, AdjustmentVector(hue=90))
        assert palette[0].hex == '#d92626'

    def test_custom_names_are_regenerated(self) -> None:
        palette = [make_entry('#d92626', name='Brand')]
        assert apply_adjustment(palette, AdjustmentVector())[0].name == 'Vibrant Red'

    def test_empty_palette(self) -> None:
        assert apply_adjustment([], AdjustmentVector(hue=10)) == []


class TestAdjustmentVector:
    def test_bounds_inclusive(self) -> None:
        AdjustmentVector(hue=-180, saturation=-100, brightness=-100)
        AdjustmentVector(hue=180, saturation=100, brightness=100)

    @pytest.mark.parametrize(
        'kwargs',
        [{'hue': 181}, {'hue': -180.5}, {'saturation': 101}, {'brightness': -101}, {'hue': float('nan')}],
    )
    def test_out_of_range_rejected(self, kwargs: dict) -> None:
        with pytest.raises(OutOfRangeAdjustment):
            AdjustmentVector(**kwargs)

    def test_non_number_rejected(self) -> None:
        with pytest.raises(OutOfRangeAdjustment):
            AdjustmentVector(hue='10')

    def test_is_zero(self) -> None:
        assert AdjustmentVector().is_zero
        assert not AdjustmentVector(brightness=1).is_zero


class TestShades:
    def test_offsets(self) -> None:
        assert shade_offsets(5) == [-40, -20, 0, 20, 40]
        assert shade_offsets(4) == [-40, -20, 0, 20]
        assert shade_offsets(1) == [0]

    def test_offsets_reject_zero_steps(self) -> None:
        with pytest.raises(ValueError):
            shade_offsets(0)

    def test_mid_grey(self) -> None:
        shades = derive_shades('#808080')
        assert shades == ['#1a1a1a', '#4d4d4d', '#808080', '#b3b3b3', '#e6e6e6']
        lightness = [ColorValue.from_hex(s).to_hsl()[2] for s in shades]
        assert lightness == sorted(lightness)
        assert len(set(lightness)) == 5

    def test_middle_is_base(self) -> None:
        for hex_value in ['#d92626', '#1e90ff', '#7f3a10']:
            assert derive_shades(hex_value)[2] == hex_value

    def test_clamped_extremes_repeat(self) -> None:
        assert derive_shades('#000000') == ['#000000', '#000000', '#000000', '#333333', '#666666']
        assert derive_shades('#ffffff') == ['#999999', '#cccccc', '#ffffff', '#ffffff', '#ffffff']

    def test_steps(self) -> None:
        assert len(derive_shades('#1e90ff', 7)) == 7
        assert derive_shades('#1e90ff', 1) == ['#1e90ff']

    def test_invalid_colour(self) -> None:
        with pytest.raises(ValueError):
            derive_shades('not-a-colour')

    def test_for_entry(self) -> None:
        palette = [make_entry('#000000'), make_entry('#808080')]
        assert shades_for_entry(palette, 1) == derive_shades('#808080')

    def test_for_entry_empty_palette(self) -> None:
        with pytest.raises(EmptyPalette):
            shades_for_entry([], 0)


class TestSlotOperations:
    def setup_method(self) -> None:
        self.palette = [make_entry(h) for h in ['#d92626', '#1e90ff', '#808080']]

    def test_replace(self) -> None:
        result = replace_color(self.palette, 1, 'hsl(120, 100%, 50%)')
        assert result[1] == make_entry('#00ff00')
        assert result[0] is self.palette[0]
        assert result[2] is self.palette[2]
        assert self.palette[1].hex == '#1e90ff'

    def test_replace_with_colour_value(self) -> None:
        result = replace_color(self.palette, 0, ColorValue.from_hex('#ffffff'))
        assert result[0].name == 'Light Muted Red'

    def test_replace_with_translucent_colour_is_opaque(self) -> None:
        result = replace_color(self.palette, 0, 'rgba(0, 0, 255, 0.5)')
        assert result[0].to_dict() == {
            'hex': '#0000ff',
            'name': 'Vibrant Blue',
            'rgb': 'rgb(0, 0, 255)',
            'hsl': 'hsl(240, 100%, 50%)',
            'hsv': 'hsv(240, 100%, 100%)',
            'cmyk': 'cmyk(100%, 100%, 0%, 0%)',
        }
        assert make_entry(result[0].hex) == result[0]

    def test_rename(self) -> None:
        result = rename_entry(self.palette, 2, 'Concrete')
        assert result[2].name == 'Concrete'
        assert result[2].hex == '#808080'
        assert result[2].rgb == self.palette[2].rgb
        assert self.palette[2].name == 'Muted Red'

    @pytest.mark.parametrize('index', [3, -1])
    def test_bad_index(self, index: int) -> None:
        with pytest.raises(IndexError):
            replace_color(self.palette, index, '#000')
        with pytest.raises(IndexError):
            rename_entry(self.palette, index, 'x')

    def test_empty_palette(self) -> None:
        with pytest.raises(EmptyPalette):
            replace_color([], 0, '#000')
        with pytest.raises(EmptyPalette):
            rename_entry([], 0, 'x')
