# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="archivetree",
    version="1.0.0",
    description="Hierarchical, randomly indexable tree view over the entries of a zip archive",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["archivetree", "archivetree.*"]),
    python_requires=">=3.8",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'archivetree=archivetree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
