# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, json, sys, pathlib

from .color.contrast import text_on_fill
from .color.scale import linear_color_scale
from .config.loader import load_config
from .format import FORMATTERS, get_formatter
from .geo.fit import fit_projection
from .geo.projection import MercatorOrigin
from .utils.logging import configure_logging, level_from_name, logger
from .viz.legend import draw_color_legend


def _load_json(p: str):
    with open(p, "r", encoding="utf-8") as f:
        return json.load(f)


def _setup(args):
    cfg = load_config(args.config)
    level = args.log_level or cfg.logging.level
    configure_logging(enabled=level != "none", level=level_from_name(level))
    return cfg


def cmd_fit(args):
    cfg = _setup(args)
    data = _load_json(args.geojson)

    proj = MercatorOrigin().origin(cfg.mercator.origin)
    if args.origin is not None:
        proj.origin((args.origin, 0.0))
    opts = cfg.fit
    if args.padding is not None:
        opts = opts.replace(padding=args.padding)
    if args.center:
        opts = opts.replace(center=True)

    x1, y1, x2, y2 = args.box
    fit_projection(proj, data, [[x1, y1], [x2, y2]], opts)
    out = {"scale": proj.scale(), "translate": list(proj.translate())}
    print(json.dumps(out))
    return 0


def cmd_project(args):
    cfg = _setup(args)
    m = cfg.mercator
    proj = MercatorOrigin().scale(m.scale).translate(m.translate).origin(m.origin)
    if args.invert:
        lon, lat = proj.invert((args.a, args.b))
        print(json.dumps({"lon": lon, "lat": lat}))
    else:
        x, y = proj((args.a, args.b))
        print(json.dumps({"x": x, "y": y}))
    return 0


def cmd_format(args):
    fmt = get_formatter(args.kind)
    for v in args.values:
        print(fmt(v))
    return 0


def cmd_contrast(args):
    cfg = _setup(args)
    c = cfg.contrast
    for color in args.colors:
        print(color, text_on_fill(color, threshold=c.threshold, light=c.light, dark=c.dark))
    return 0


def cmd_legend(args):
    cfg = _setup(args)
    if len(args.domain) != len(args.colors):
        raise SystemExit("--domain and --colors need the same number of values")

    scale = linear_color_scale(args.domain, args.colors)
    opts = cfg.legend
    if args.format:
        opts = opts.replace(label_format=args.format)
    if args.steps:
        opts = opts.replace(steps=args.steps)
    if args.title:
        opts = opts.replace(title=args.title)
    entries = draw_color_legend(None, scale, opts)
    fig = entries[0].patch.figure
    fig.set_size_inches(args.width, args.height)
    out = pathlib.Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out)
    logger.info("legend with %d entries written to %s", len(entries), out)
    return 0


def _add_common(p):
    p.add_argument("--config", default=None, help="YAML config merged over the packaged defaults")
    p.add_argument("--log-level", dest="log_level", choices=["none", "info", "debug"], default=None)


def make_parser():
    p = argparse.ArgumentParser(prog="vizutil")
    sub = p.add_subparsers(dest="cmd", required=True)

    pf = sub.add_parser("fit", help="Fit a Mercator projection to GeoJSON in a pixel box")
    pf.add_argument("--geojson", required=True, help="FeatureCollection JSON file")
    pf.add_argument("--box", required=True, type=float, nargs=4, metavar=("X1", "Y1", "X2", "Y2"))
    pf.add_argument("--padding", type=float, default=None)
    pf.add_argument("--center", action="store_true", help="center on the slack axis")
    pf.add_argument("--origin", type=float, default=None, help="origin longitude")
    _add_common(pf)
    pf.set_defaults(func=cmd_fit)

    pp = sub.add_parser("project", help="Project LON LAT (or invert X Y) with the configured Mercator")
    pp.add_argument("a", type=float, help="longitude, or x with --invert")
    pp.add_argument("b", type=float, help="latitude, or y with --invert")
    pp.add_argument("--invert", action="store_true")
    _add_common(pp)
    pp.set_defaults(func=cmd_project)

    pn = sub.add_parser("format", help="Format numbers")
    pn.add_argument("kind", choices=sorted(FORMATTERS))
    pn.add_argument("values", type=float, nargs="+")
    pn.set_defaults(func=cmd_format)

    pc = sub.add_parser("contrast", help="Pick black or white text for fill colours")
    pc.add_argument("colors", nargs="+")
    _add_common(pc)
    pc.set_defaults(func=cmd_contrast)

    pl = sub.add_parser("legend", help="Render a colour legend to an image")
    pl.add_argument("--domain", required=True, type=float, nargs="+")
    pl.add_argument("--colors", required=True, nargs="+")
    pl.add_argument("--out", required=True, help="output image, e.g. legend.png")
    pl.add_argument("--format", default=None, choices=sorted(FORMATTERS))
    pl.add_argument("--steps", type=int, default=None)
    pl.add_argument("--title", default=None)
    pl.add_argument("--width", type=float, default=2.0, help="inches")
    pl.add_argument("--height", type=float, default=3.0, help="inches")
    _add_common(pl)
    pl.set_defaults(func=cmd_legend)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
