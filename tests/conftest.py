from pathlib import Path
import zipfile

import geopandas as gpd
import pytest
from shapely.geometry import box

from getgadm.readers import GeoArchiveReader

VERSION = "gadm3.6"
COUNTRY = "XYZ"
N_LEVELS = 3


class FakeDownloader:
    """Writes `content` to the destination and remembers where it wrote"""

    def __init__(self, content=b"not a real zip", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def __call__(self, url, out_path):
        self.calls.append((url, Path(out_path)))
        with open(out_path, "wb") as f:
            f.write(self.content)
        if self.error is not None:
            raise self.error

    @property
    def archive(self):
        return self.calls[-1][1]


class FakeExtractor:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def __call__(self, zip_path, out_dir):
        assert Path(zip_path).exists()
        self.calls.append((Path(zip_path), Path(out_dir)))
        if self.error is not None:
            raise self.error

    @property
    def out_dir(self):
        return self.calls[-1][1]


class FakeReader(GeoArchiveReader):
    """Returns the name of the layer it was asked for instead of a GeoDataFrame"""

    def __init__(self, layers=(), error=None):
        self.layers = list(layers)
        self.error = error
        self.listed = []
        self.read = []

    def list_layers(self, path):
        self.listed.append(Path(path))
        return list(self.layers)

    def read_layer(self, path, name):
        self.read.append((Path(path), name))
        if self.error is not None:
            raise self.error
        return name


def adm_gdf(level):
    return gpd.GeoDataFrame(
        {"GID_0": [COUNTRY] * (level + 1), "level": [level] * (level + 1)},
        geometry=[box(i, 0, i + 1, 1) for i in range(level + 1)],
        crs="EPSG:4326",
    )


def zip_dir(src_dir, zip_path):
    with zipfile.ZipFile(zip_path, "w") as z:
        for p in sorted(Path(src_dir).iterdir()):
            z.write(p, arcname=p.name)
    return zip_path


@pytest.fixture
def gpkg_zip(tmp_path):
    """Zipped geopackage laid out like a GADM download, finest level first"""
    src = tmp_path / "gpkg_src"
    src.mkdir()
    dsn = src / "gadm36_XYZ.gpkg"
    for level in reversed(range(N_LEVELS)):
        adm_gdf(level).to_file(dsn, layer=f"gadm36_XYZ_{level}", driver="GPKG")
    return zip_dir(src, tmp_path / "gadm36_XYZ_gpkg.zip")


@pytest.fixture
def shp_zip(tmp_path):
    src = tmp_path / "shp_src"
    src.mkdir()
    for level in range(N_LEVELS):
        adm_gdf(level).to_file(src / f"gadm36_XYZ_{level}.shp")
    return zip_dir(src, tmp_path / "gadm36_XYZ_shp.zip")
