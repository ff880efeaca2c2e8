# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treeutil",
    version="1.0.0",
    description="Filesystem tree toolkit: copy, move, size, parse size literals and delete trees",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treeutil", "treeutil.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treeutil=treeutil.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
