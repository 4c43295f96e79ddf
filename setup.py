# setup.py
from setuptools import setup, find_packages

setup(
    name="steel",
    version="0.1.0",
    description="Tree-walking Scheme evaluator with interned syntax and tail calls",
    python_requires=">=3.10",
    packages=find_packages(include=["steel", "steel.*"]),
    package_data={"steel": ["prelude/*.scm"]},
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["steel=steel.__main__:main"],
    },
    zip_safe=False,
)
