from setuptools import find_packages, setup

setup(
    name="pearstate",
    version="0.1.0",
    description="Resolve the launch identity, storage and routing of an application instance",
    packages=find_packages(include=["pearstate", "pearstate.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Option and output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "PyYAML",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "pearstate=pearstate.cli:main",
        ],
    },
)
