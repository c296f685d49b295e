from setuptools import find_packages, setup

setup(
    name="gbu",
    version="0.3.0",
    description="Granule bulk update - OPeNDAP and S3 link reconciliation for ECHO10 and UMM-G metadata",
    author="GBU Developers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "lxml",  # ECHO10 tree parsing and serialization
        "pydantic>=2",  # Configuration and command output models
        "typer<0.26",  # CLI (0.26+ bundles its own click; the CLI relies on the shared click context)
        "click",  # Context lookup and usage errors in the CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "gbuc=gbu.cli:main",
        ],
    },
)
