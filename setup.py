from setuptools import setup, find_packages

setup(
    name="household-power-plots",
    version="0.1.0",
    description="Exploratory plots of two days of the UCI household power consumption dataset.",
    author="Christoph Eder",
    author_email="christoph.eder@ntnu.no",
    python_requires=">=3.10",
    packages=find_packages(where="src"),  # <-- find all packages under src/
    package_dir={"": "src"},
    package_data={"core": ["conf/*.yaml", "conf/*/*.yaml"]},
    install_requires=[
        "pandas>=2.0.0",
        "numpy>=1.26.0",
        "pyyaml>=6.0",
        "matplotlib>=3.7",
        "requests>=2.31",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pillow>=10.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "power-plots=core.main:main",
            "plot2=core.main:plot2",
            "plot4=core.main:plot4",
        ],
    },
)
