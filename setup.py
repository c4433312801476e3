from setuptools import find_packages, setup


setup(
    name="launchopts",
    version="0.3.1",
    description="Table-driven launcher option parser with inheritable options and debug-message filters",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["launchopts=launchopts.cli:main"]},
)
