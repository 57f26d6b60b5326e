"""Download GADM administrative boundaries for a country and read one adm-level.

GADM (https://gadm.org) distributes each country as a zipped geopackage holding
one layer per adm-level, or as a zipped set of shapefiles named
``{version}_{iso3}_{level}``. Level 0 is the national boundary, level 1 the
first subdivision (state, province, region), and so on.
"""
from contextlib import contextmanager
import os
from pathlib import Path
import tempfile
import warnings

from getgadm import utils as gutil
from getgadm.readers import GeopandasReader


class LayerRangeError(ValueError):
    """Requested adm-level is not among the layers of a geopackage"""

    def __init__(self, n_layers, layer):
        self.n_layers = n_layers
        self.layer = layer
        super().__init__(
            f"Geopackage has only {n_layers} layers. Specify layer from 0 to "
            f"{n_layers - 1}. Got layer {layer}."
        )


def check_layer_in_range(layers, layer):
    n_layers = len(layers)
    if not 0 <= layer < n_layers:
        raise LayerRangeError(n_layers, layer)


@contextmanager
def _scoped_archive():
    fd, tmp = tempfile.mkstemp(prefix=gutil.TMP_PREFIX, suffix=".zip")
    os.close(fd)
    archive = Path(tmp)
    try:
        yield archive
    finally:
        if archive.exists():
            archive.unlink()


@contextmanager
def _extracted(url, workdir, downloader, extractor, verbose):
    """Download the zip at `url` and yield the directory it was extracted to.

    The downloaded archive is always deleted before this yields or raises. A
    fresh temporary directory is used (and removed afterwards) unless
    `workdir` is given, in which case files are extracted there and kept.
    """
    if workdir is None:
        with tempfile.TemporaryDirectory(prefix=gutil.TMP_PREFIX) as tmp_dir:
            _download_and_extract(url, tmp_dir, downloader, extractor, verbose)
            yield Path(tmp_dir)
    else:
        _download_and_extract(url, workdir, downloader, extractor, verbose)
        yield Path(workdir)


def _download_and_extract(url, out_dir, downloader, extractor, verbose):
    with _scoped_archive() as archive:
        if verbose:
            print(f"Downloading {url}...")
        downloader(url, archive)
        if verbose:
            print(f"Extracting to {out_dir}...")
        extractor(archive, out_dir)


def fetch_geopackage(
    country,
    version=gutil.DEFAULT_VERSION,
    layer=0,
    *,
    downloader=gutil.download_zip,
    extractor=gutil.extract_zip,
    reader=None,
    workdir=None,
    verbose=False,
):
    """Get one adm-level of a country's GADM geopackage

    Args:
        country (str): Three-letter ISO country code, e.g. "AFG"
        version (str): GADM release, e.g. "gadm3.6"
        layer (int): Adm-level to read. 0 is the country boundary
        downloader (callable): ``downloader(url, out_path)``
        extractor (callable): ``extractor(zip_path, out_dir)``
        reader (getgadm.readers.GeoArchiveReader): Defaults to ``GeopandasReader``
        workdir (str or pathlib.Path): Extract here instead of a temporary directory
        verbose (bool): Print progress

    Returns:
        geopandas.GeoDataFrame: Features of the requested layer

    Raises:
        LayerRangeError: If `layer` is outside ``[0, number of layers)``
    """
    reader = GeopandasReader() if reader is None else reader
    url = gutil.build_geopackage_url(country, version)
    with _extracted(url, workdir, downloader, extractor, verbose) as out_dir:
        dsn = out_dir / gutil.geopackage_filename(country, version)
        layers = reader.list_layers(dsn)
        check_layer_in_range(layers, layer)
        name = gutil.select_layer_name(layers, layer)
        if verbose:
            print(f"Reading layer {name}...")
        return reader.read_layer(dsn, name)


def fetch_shapefile(
    country,
    version=gutil.DEFAULT_VERSION,
    layer=0,
    *,
    downloader=gutil.download_zip,
    extractor=gutil.extract_zip,
    reader=None,
    workdir=None,
    verbose=False,
):
    """Get one adm-level of a country's GADM shapefiles

    Same arguments as ``fetch_geopackage``. `layer` is not checked here; a
    level missing from the archive fails inside the reader.
    """
    reader = GeopandasReader() if reader is None else reader
    url = gutil.build_shapefile_url(country, version)
    with _extracted(url, workdir, downloader, extractor, verbose) as out_dir:
        name = gutil.layer_filename(version, country, layer)
        if verbose:
            print(f"Reading layer {name}...")
        return reader.read_layer(out_dir, name)


def fetch_map(
    format=gutil.FORMATS, country=None, version=gutil.DEFAULT_VERSION, layer=0, **kwargs
):
    """Get one adm-level of a country's GADM map in either format

    Args:
        format (str or collection of str): "gpkg", "shp" or both. When both are
            given the shapefile is fetched first and the geopackage result is
            returned.
        country (str): Three-letter ISO country code
        version (str): GADM release
        layer (int): Adm-level to read
        **kwargs: Passed on to ``fetch_shapefile`` / ``fetch_geopackage``

    Returns:
        geopandas.GeoDataFrame
    """
    if country is None:
        raise ValueError("A three-letter ISO country code is required.")
    if not any(f in format for f in gutil.FORMATS):
        raise ValueError(
            f"Choice of value for ``format'' is not valid: {format!r}. "
            f"Options are {gutil.FORMATS}."
        )
    if "shp" in format and "gpkg" in format:
        warnings.warn(
            "Both formats requested; the shapefile result is discarded and the "
            "geopackage result is returned."
        )

    out = None
    if "shp" in format:
        out = fetch_shapefile(country, version, layer, **kwargs)
    if "gpkg" in format:
        out = fetch_geopackage(country, version, layer, **kwargs)
    return out
