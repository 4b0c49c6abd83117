from setuptools import setup, find_packages

setup(
    name="eventsim",
    version="0.1.0",
    description="Deterministic discrete event simulation core with event-based and time-weighted statistics",
    author="adamfilli",
    packages=find_packages(include=["eventsim", "eventsim.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
