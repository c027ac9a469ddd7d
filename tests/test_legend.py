import pytest
from matplotlib.figure import Figure

from vizutil.color.scale import linear_color_scale
from vizutil.viz.legend import LegendOptions, draw_color_legend, legend_values


@pytest.fixture
def scale():
    return linear_color_scale((0, 1_000_000), ("#ffffff", "#000000"))


@pytest.fixture
def ax():
    return Figure().add_subplot()


def test_one_swatch_per_tick(ax, scale):
    entries = draw_color_legend(ax, scale)
    assert [e.value for e in entries] == scale.ticks()
    assert len(ax.patches) == len(entries)
    assert entries[0].color == "#ffffff"
    assert entries[-1].color == "#000000"
    assert [t.get_text() for t in ax.texts] == [e.label for e in entries]


def test_steps_and_formatter(ax, scale):
    entries = draw_color_legend(ax, scale, {"steps": 3, "label_format": "big"})
    assert [e.value for e in entries] == [0, 500_000, 1_000_000]
    assert [e.label for e in entries] == ["0", "500K", "1000K"]


def test_explicit_ticks_win_over_steps(scale):
    opts = LegendOptions(steps=3, ticks=(10, 20))
    assert legend_values(scale, opts) == [10.0, 20.0]


def test_single_step(scale):
    assert legend_values(scale, LegendOptions(steps=1)) == [0.0]


def test_vertical_layout_runs_downward(ax, scale):
    opts = LegendOptions(steps=3, swatch_height=0.1, gap=0.02, origin=(0.1, 0.9))
    entries = draw_color_legend(ax, scale, opts)
    ys = [e.patch.get_y() for e in entries]
    assert ys == pytest.approx([0.8, 0.68, 0.56])
    assert all(e.patch.get_x() == pytest.approx(0.1) for e in entries)
    assert all(e.text.get_ha() == "left" for e in entries)


def test_horizontal_layout_runs_right(ax, scale):
    opts = LegendOptions(steps=3, orientation="horizontal", swatch_width=0.2, gap=0.05, origin=(0, 1))
    entries = draw_color_legend(ax, scale, opts)
    xs = [e.patch.get_x() for e in entries]
    assert xs == pytest.approx([0.0, 0.25, 0.5])
    assert all(e.text.get_va() == "top" for e in entries)


def test_label_inside_uses_contrast_color(ax, scale):
    entries = draw_color_legend(ax, scale, LegendOptions(steps=2, label_inside=True))
    assert entries[0].text.get_color() == "#000"
    assert entries[1].text.get_color() == "#fff"


def test_title(ax, scale):
    draw_color_legend(ax, scale, LegendOptions(steps=2, title="Population"))
    assert "Population" in [t.get_text() for t in ax.texts]


def test_creates_figure_when_ax_is_none(scale):
    entries = draw_color_legend(None, scale, {"steps": 2})
    assert isinstance(entries[0].patch.figure, Figure)


def test_bad_options(ax, scale):
    with pytest.raises(ValueError):
        draw_color_legend(ax, scale, {"orientation": "diagonal"})
    with pytest.raises(KeyError):
        draw_color_legend(ax, scale, {"label_format": "nope"})
