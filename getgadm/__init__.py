from getgadm.fetch import (
    LayerRangeError,
    fetch_geopackage,
    fetch_map,
    fetch_shapefile,
)
from getgadm.readers import GeoArchiveReader, GeopandasReader
