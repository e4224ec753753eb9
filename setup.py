from setuptools import setup, find_packages

setup(
    name="dicetable",       # Name on PyPI (if published)
    version="0.1.0",          # Version
    package_dir={"": "src"},  # Tell setuptools to look in src/
    packages=find_packages(where="src"),  # Find packages in src/
    install_requires=["numpy>=1.20", "rich"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",  # Python version compatibility
)
