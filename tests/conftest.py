import matplotlib
import pytest

from _geo_helpers import PlanarProjection

matplotlib.use("Agg")


@pytest.fixture
def planar():
    return PlanarProjection()


@pytest.fixture
def sample_geojson(tmp_path):
    import json
    from _geo_helpers import make_collection

    p = tmp_path / "usa.json"
    p.write_text(json.dumps(make_collection((-125, 25, -65, 50))))
    return p
