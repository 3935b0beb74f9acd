#!/usr/bin/env python3
"""
Setup script for esimqa.

Install with `pip install .` or `pip install -e .`, then fetch the
browser engines once with `playwright install`.
"""

import sys

if sys.version_info < (3, 11):
    sys.exit("Error: esimqa requires Python 3.11 or higher.")

try:
    from setuptools import find_packages, setup
except ImportError:
    sys.exit("Error: setuptools is required. Install it with: pip install setuptools")

# Try to read version from __version__.py for consistency
try:
    import re
    from pathlib import Path

    version_file = Path(__file__).parent / "src" / "esimqa" / "__version__.py"
    version_content = version_file.read_text(encoding="utf-8")
    version_match = re.search(r'^__version__\s*=\s*["\']([^"\']+)["\']', version_content, re.M)
    version = version_match.group(1) if version_match else "0.1.0"
except OSError:
    version = "0.1.0"

long_description = "End-to-end and API regression suite for an eSIM marketplace"

# Core dependencies
install_requires = [
    "playwright>=1.40.0",
    "pydantic>=2.6.0",
    "pydantic-settings>=2.1.0",
    "pytest>=7.4.0",
    "pytest-asyncio>=0.24.0",
]

# Development dependencies
extras_require = {
    "dev": [
        "black>=23.0.0",
        "flake8>=6.1.0",
        "mypy>=1.7.0",
        "pytest-cov>=4.1.0",
    ],
}

setup(
    name="esimqa",
    version=version,
    description="End-to-end and API regression suite for an eSIM marketplace",
    long_description=long_description,
    long_description_content_type="text/plain",
    author="esimqa Team",
    license="MIT",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "esimqa=esimqa.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Framework :: Pytest",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Testing",
    ],
    keywords=["esim", "playwright", "e2e", "api", "testing"],
)
