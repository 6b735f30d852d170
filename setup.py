from setuptools import find_packages, setup

setup(
    name="linky",
    version="0.1.0",
    description="Extract links from Markdown files and check links for brokenness",
    packages=find_packages(include=["linky", "linky.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models
        "typer<0.26",  # CLI (0.26+ vendors its own click; main() catches click exceptions)
        "click",  # Imported directly by the CLI entry point
        "rich",  # Terminal formatting
        "requests",  # HTTP fetching
        "beautifulsoup4",  # HTML anchor extraction
        "charset-normalizer",  # Encoding detection for undeclared bodies
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "linky=linky.cli:main",
        ],
    },
)
