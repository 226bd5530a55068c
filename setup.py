# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="importtracker",
    version="1.0.0",
    description="Incremental import-dependency tracking for stylesheet builds",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["importtracker*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'importtracker=importtracker.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
