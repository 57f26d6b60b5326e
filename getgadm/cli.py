import argparse

from getgadm import utils as gutil
from getgadm.fetch import fetch_map


def get_parser():
    parser = argparse.ArgumentParser(
        description="Download one adm-level of a country's GADM map and save it."
    )
    parser.add_argument("country", type=str.upper, help="Three-letter ISO country code")
    parser.add_argument(
        "--version", default=gutil.DEFAULT_VERSION, type=str, help="GADM release"
    )
    parser.add_argument("--layer", default=0, type=int, help="Adm-level")
    parser.add_argument(
        "--format", choices=gutil.FORMATS, default="gpkg", type=str, help="Source format"
    )
    parser.add_argument(
        "--out",
        default=None,
        type=str,
        help="Output path. Defaults to [country]_adm[layer].gpkg",
    )
    parser.add_argument("--quiet", action="store_true", help="Do not print progress")
    return parser


def main(args=None, **kwargs):
    """Entry point. Extra `kwargs` are passed on to ``fetch_map``"""
    args = get_parser().parse_args(args)
    out_path = args.out
    if out_path is None:
        out_path = f"{args.country}_adm{args.layer}.gpkg"

    gdf = fetch_map(
        format=args.format,
        country=args.country,
        version=args.version,
        layer=args.layer,
        verbose=not args.quiet,
        **kwargs,
    )
    gdf.to_file(out_path)
    if not args.quiet:
        print(f"Saved {len(gdf)} feature(s) to {out_path}")
    return out_path


if __name__ == "__main__":
    main()
