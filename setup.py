# setup.py
from setuptools import setup, find_packages

setup(
    name="scheme",
    version="0.1.0",
    description="Tree-walking evaluator for a small Scheme dialect",
    packages=find_packages(include=["scheme", "scheme.*"]),
    package_data={"scheme": ["prelude/*.scm"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["scheme = scheme.__main__:main"]},
    zip_safe=False,
)
