from setuptools import find_packages, setup

setup(
    name="polycoll",
    version="0.1.0",
    description="Persistent vectors, sets and maps with a module-per-kind function library",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["hypothesis"],
    },
)
