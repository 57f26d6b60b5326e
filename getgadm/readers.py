"""Readers that turn extracted GADM files into GeoDataFrames."""
import geopandas as gpd


class GeoArchiveReader:
    """Interface for listing and reading vector layers of a dataset.

    Subclasses implement ``list_layers`` and ``read_layer``. The order of
    ``list_layers`` matters: adm-level indices are resolved against it
    (see ``getgadm.utils.select_layer_name``).
    """

    def list_layers(self, path):
        """Return the layer names of the dataset at `path`, in native order"""
        raise NotImplementedError

    def read_layer(self, path, name):
        """Return layer `name` of the dataset at `path` as a GeoDataFrame"""
        raise NotImplementedError


class GeopandasReader(GeoArchiveReader):
    def list_layers(self, path):
        return gpd.list_layers(path)["name"].tolist()

    def read_layer(self, path, name):
        return gpd.read_file(path, layer=name)
