"""
Setup script for the cursor_recent package.
"""
from setuptools import setup, find_packages

setup(
    name="cursor_recent",
    version="0.1.0",
    description="Search and reopen folders recently opened in the Cursor editor",
    author="Cursor User",
    author_email="user@example.com",
    url="https://github.com/username/cursor-recent",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "cursor_recent": ["assets/*.png"],
    },
    install_requires=[
        "click>=8.0",
        "pandas>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.7",
    entry_points={
        "console_scripts": [
            "cursor-recent=cursor_recent.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
    ],
)
