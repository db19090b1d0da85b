from setuptools import setup, find_packages

setup(
    name="distinctcount",
    version="0.1.0",
    description="HyperLogLog distinct-count estimation in bounded memory",
    author="adamfilli",
    packages=find_packages(include=["distinctcount", "distinctcount.*"]),
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
