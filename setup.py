from setuptools import setup, find_packages

setup(
    name="radio-streams",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "typer[all]",
        "rich",
        "pymonad>=2.4.0",
        "PyYAML",
        "toolz",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-mock",
            "ruff",
            "setuptools",
            "wheel",
            "twine",
        ]
    },
    entry_points={
        "console_scripts": [
            "radio-streams = radio_streams.cli:app",
        ],
    },
    description="Loads a catalog of internet radio stations from M3U playlists.",
    long_description=open("README.adoc").read(),
    long_description_content_type="text/asciidoc",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    python_requires=">=3.9",
)
