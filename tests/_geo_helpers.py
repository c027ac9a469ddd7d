from vizutil.geo.fit import projected_extent
from vizutil.geo.projection import Projection


class PlanarProjection(Projection):
    """x = k*lon + tx, y = k*lat + ty; keeps test arithmetic exact."""

    def project(self, lon, lat):
        tx, ty = self.translate()
        return (self.scale() * lon + tx, self.scale() * lat + ty)

    def invert(self, point):
        tx, ty = self.translate()
        return ((point[0] - tx) / self.scale(), (point[1] - ty) / self.scale())


def make_collection(*rects):
    """FeatureCollection of polygons, one per ``(x1, y1, x2, y2)``."""
    features = []
    for x1, y1, x2, y2 in rects:
        ring = [[x1, y1], [x2, y1], [x2, y2], [x1, y2], [x1, y1]]
        features.append({
            "type": "Feature",
            "properties": {},
            "geometry": {"type": "Polygon", "coordinates": [ring]},
        })
    return {"type": "FeatureCollection", "features": features}


def projected_box(proj, data):
    """Screen extent of ``data`` under the configured ``proj``."""
    return projected_extent(proj, data)
