import setuptools
from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

exec(open("./pubspec_bump/metadata.py").read())

setup(
    name="pubspec-bump",
    version=__version__,
    author=__author__,
    author_email=__email__,
    description="Set a Flutter pubspec.yaml version and increment its build number.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.7",
    install_requires=[],
    extras_require={
        "test": ["pytest>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "update-pubspec-version=pubspec_bump.cli:main",
        ],
    },
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Build Tools",
    ],
)
