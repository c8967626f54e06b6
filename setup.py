from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e .[test]'
"""

setup(
    name="light_bench",
    version="0.1.0",
    description="Micro-benchmarking harness with compiled report templates",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "msgspec>=0.18",
        "numpy>=1.24",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "light-bench=light_bench.cli:main",
        ],
    },
)
