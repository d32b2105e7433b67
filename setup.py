# setup.py
from setuptools import setup, find_packages

setup(
    name="stacklang",
    version="1.11.0",
    description="Execution core of a stack-oriented, homoiconic scripting language",
    packages=find_packages(include=["stacklang", "stacklang.*"]),
    package_data={"stacklang": ["prelude/*.stk"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
