# setup.py
from setuptools import setup, find_packages

setup(
    name="bencodec",
    version="0.1",
    description="Bencode (BitTorrent encoding) codec with a typed value model",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
)
