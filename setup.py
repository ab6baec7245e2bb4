#!/usr/bin/env python3
"""
Setup configuration for lyrics-explorer
Fill in the missing lyrics of a local music library
"""

from setuptools import setup, find_packages

# Read README for long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Core requirements (always installed)
core_requirements = [
    "mutagen>=1.47.0",
    "rich-click>=1.7.0",
    "pyyaml>=6.0.1",
    "requests>=2.31.0",
    "lyricsgenius>=3.0.1,<3.12",
    "syncedlyrics>=0.4.0",
    "tqdm>=4.66.1",
    "python-dotenv>=1.0.0",
]

setup(
    name="lyrics-explorer",
    version="0.1.0",
    author="lyrics-explorer",
    description="Explore a music library and embed the missing lyrics into the audio files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    python_requires=">=3.10",
    install_requires=core_requirements,
    extras_require={
        "dev": [
            "pytest>=7.4.3",
        ],
    },
    entry_points={
        "console_scripts": [
            "lyrics-explorer=lyrics_explorer.cli:main",
        ],
    },
    include_package_data=True,
    package_data={
        "lyrics_explorer": ["resources/*.yaml", "resources/*.txt"],
    },
    keywords="music lyrics tags mutagen library cli",
)
