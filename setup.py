from setuptools import setup, find_packages

setup(
    name="flexilog",
    version="0.1.0a0",
    description="Per-module log filtering and routing for Python's logging: compact level specs, stderr or trace-file output, pluggable formats",
    author="Dustin",
    author_email="6962246+djdarcy@users.noreply.github.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[],
    extras_require={
        "test": ["pytest>=7,<9", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "flexilog=flexilog.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
