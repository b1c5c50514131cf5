import builtins

import setuptools
from setuptools import setup

builtins.__CANVASMAP_SETUP__ = True
import canvasmap


def setup_package():
    with open("README.md", "r", encoding="utf-8") as f:
        readme = f.read()

    setup(
        name="canvasmap",
        version=canvasmap.__version__,
        packages=setuptools.find_packages(exclude=["tests"]),
        license="BSD",
        description="Map cartesian data coordinates onto a painter's canvas",
        long_description=readme,
        long_description_content_type="text/markdown",
        classifiers=[
            "Intended Audience :: Developers",
            "Intended Audience :: Science/Research",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "License :: OSI Approved",
            "Topic :: Scientific/Engineering",
            "Topic :: Multimedia :: Graphics",
        ],
        python_requires=">=3.9",
        entry_points={
            "console_scripts": [
                "canvasmap-transform = canvasmap.cmdline:run_transform"
            ]
        },
        install_requires=[
            "numpy>=1.20",
            'typing_extensions;python_version<"3.11"',
        ],
        extras_require={
            "test": [
                "pytest>=6.2.5",
                "black",
            ],
            "development": ["pre-commit"],
        },
    )


if __name__ == "__main__":
    setup_package()

    del builtins.__CANVASMAP_SETUP__
