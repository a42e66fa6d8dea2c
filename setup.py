from setuptools import setup, find_packages


setup(
    name = "ordtree",
    version = "0.2.0",
    description = "Binary search tree ordered by a caller supplied comparator",
    packages = find_packages(exclude=["tests", "tests.*"]),
    python_requires = ">=3.8",
    install_requires = [],
    extras_require = {
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
            ],
        },
    entry_points = {
        "console_scripts": [
            "ordtree = ordtree.main:main",
            ],
        },
)
