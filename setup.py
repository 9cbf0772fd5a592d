# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="wordtracker",
    version="1.0.0",
    description="Persistent word/line occurrence index for text files, backed by a binary search tree",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["wordtracker*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'wordtracker=wordtracker.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
