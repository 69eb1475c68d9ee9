# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="routehealth",
    version="1.0.0",
    description="Scan multi-project workspaces and report source-file health as an aggregated tree",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["routehealth*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'routehealth=routehealth.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
