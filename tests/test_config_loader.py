import pytest
from pydantic import ValidationError

from vizutil.config.loader import load_config
from vizutil.geo.fit import FitOptions
from vizutil.viz.legend import LegendOptions


def test_packaged_defaults_match_model_defaults():
    cfg = load_config()
    assert cfg.fit == FitOptions()
    assert cfg.legend == LegendOptions()
    assert cfg.mercator.scale == 500
    assert cfg.mercator.translate == (480, 250)
    assert cfg.contrast.threshold == 152
    assert cfg.logging.level == "none"


def test_user_file_then_overrides(tmp_path):
    user = tmp_path / "vizutil.yaml"
    user.write_text("fit: {padding: 10}\nlegend: {label_format: big, origin: [0.1, 0.2]}\n")
    cfg = load_config(user, overrides={"fit": {"center": True}})
    assert cfg.fit == FitOptions(padding=10, center=True)
    assert cfg.legend.label_format == "big"
    assert cfg.legend.origin == (0.1, 0.2)
    assert cfg.legend.fontsize == 9


def test_overrides_win_over_file(tmp_path):
    user = tmp_path / "vizutil.yaml"
    user.write_text("fit:\n  padding: 10\n")
    cfg = load_config(user, overrides={"fit": {"padding": 3}})
    assert cfg.fit.padding == 3


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_top_level_must_be_mapping(tmp_path):
    user = tmp_path / "list.yaml"
    user.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_config(user)


def test_empty_file_is_defaults(tmp_path):
    user = tmp_path / "empty.yaml"
    user.write_text("")
    assert load_config(user) == load_config()


@pytest.mark.parametrize(
    "overrides",
    [
        {"typo": 1},
        {"fit": {"padding": -2}},
        {"legend": {"orientation": "diagonal"}},
        {"mercator": {"scale": 0}},
        {"contrast": {"light": "not-a-colour"}},
        {"logging": {"level": "trace"}},
    ],
)
def test_validation_errors(overrides):
    with pytest.raises(ValidationError):
        load_config(overrides=overrides)


def test_deep_update_merges_sections_without_touching_base():
    from vizutil.utils.dict_merge import deep_update

    base = {"legend": {"title": "a", "origin": [0, 0]}, "fit": {"padding": 1}}
    out = deep_update(base, {"legend": {"title": "b", "origin": [1, 2]}})
    assert out == {"legend": {"title": "b", "origin": [1, 2]}, "fit": {"padding": 1}}
    assert base["legend"] == {"title": "a", "origin": [0, 0]}
    out["fit"]["padding"] = 9
    assert base["fit"]["padding"] == 1
