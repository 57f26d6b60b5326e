from setuptools import find_packages, setup

setup(
    name="getgadm",
    packages=find_packages(exclude=["tests"]),
    version="0.1.0",
    description="Download GADM administrative boundary maps as GeoDataFrames",
    author="Global Policy Lab",
    license="MIT",
    python_requires=">=3.8",
    install_requires=["geopandas>=1.0", "pyogrio", "requests"],
    extras_require={"test": ["pytest", "shapely"]},
    entry_points={"console_scripts": ["getgadm=getgadm.cli:main"]},
)
