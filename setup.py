from setuptools import find_packages, setup

setup(
    name="appuri",
    version="0.1.0",
    description="Persistable URIs for platform storage locations",
    packages=find_packages(include=["appuri", "appuri.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and command output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting on TTYs
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "appuri=appuri.cli:main",
        ],
    },
)
