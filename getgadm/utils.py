from pathlib import Path
import zipfile

import requests

GADM_BASE_URL = "https://biogeo.ucdavis.edu/data"
GPKG_URL_FMT = GADM_BASE_URL + "/{version}/gpkg/{version_nodots}_{country}_gpkg.zip"
SHP_URL_FMT = GADM_BASE_URL + "/{version}/shp/{version_nodots}_{country}_shp.zip"

gpkg_fname_fmt = "{version_nodots}_{country}.gpkg"
shp_layer_fmt = "{version_nodots}_{country}_{layer}"

DEFAULT_VERSION = "gadm3.6"
FORMATS = ("gpkg", "shp")

# GADM geopackages list their layers finest level first, so adm0 is the last one
LAYER_ORDER_REVERSED = True

TMP_PREFIX = "getgadm_"


def strip_version(version):
    return version.replace(".", "")


def build_geopackage_url(country, version=DEFAULT_VERSION):
    return GPKG_URL_FMT.format(
        version=version, version_nodots=strip_version(version), country=country
    )


def build_shapefile_url(country, version=DEFAULT_VERSION):
    return SHP_URL_FMT.format(
        version=version, version_nodots=strip_version(version), country=country
    )


def geopackage_filename(country, version=DEFAULT_VERSION):
    return gpkg_fname_fmt.format(
        version_nodots=strip_version(version), country=country
    )


def layer_filename(version, country, layer):
    """Name of the shapefile holding adm-level `layer`, e.g. ``gadm36_AFG_2``"""
    return shp_layer_fmt.format(
        version_nodots=strip_version(version), country=country, layer=layer
    )


def select_layer_name(layers, layer):
    """Translate an adm-level index into a layer name from `layers`.

    Args:
        layers (list of str): Layer names in the order the reader lists them
        layer (int): Requested adm-level, assumed to be in range

    Returns:
        str: Name of the selected layer
    """
    ordered = list(layers)
    if LAYER_ORDER_REVERSED:
        ordered = ordered[::-1]
    return ordered[layer]


def download_zip(url, out_path):
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    r = requests.get(url, allow_redirects=True)
    r.raise_for_status()
    with open(out_path, "wb") as f:
        f.write(r.content)


def extract_zip(zip_path, out_dir):
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(zip_path) as z:
        z.extractall(out_dir)
