"""Setup configuration for dc-sequence."""

from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="dc-sequence",
    version="1.0.0",
    description="Guided dc-cli export/import of hub configuration",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    python_requires=">=3.11",
    install_requires=[
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": ["pytest>=8.0.0"],
        "dev": ["pytest>=8.0.0", "ruff>=0.8.0"],
    },
    entry_points={
        "console_scripts": [
            "dc-sequence=dc_sequence.cli:main",
        ],
    },
    package_data={
        "dc_sequence": ["steps.yaml"],
    },
    include_package_data=True,
)
