#!/usr/bin/env python3
from pathlib import Path

from setuptools import setup

version = (Path(__file__).parent / "timesheet_api" / "VERSION").read_text().strip()

setup(
    name="timesheet-api",
    version=version,
    python_requires=">=3.9",
    install_requires=[
        "click>=7.1",
        "sqlalchemy>=1.4",
        "fastapi>=0.100",
        "pydantic>=2.0",
        "uvicorn>=0.20",
    ],
    extras_require={
        "dev": [
            "black>=23.1.0",
            "ipython>=7.19.0",
            "pdbpp>=0.10.2",
            "pylint>=2.6.0",
        ],
        "full": [
            "PyYAML>=5.3",
            "toml>=0.10.2",
        ],
        "test": [
            "pytest>=7.0",
            "httpx>=0.24",
            "PyYAML>=5.3",
            "toml>=0.10.2",
        ],
    },
    include_package_data=True,
    package_data={"timesheet_api": ["VERSION"]},
    packages=["timesheet_api"],
    entry_points={
        "console_scripts": [
            "timesheet = timesheet_api.cli:run_cli",
        ]
    },
)
