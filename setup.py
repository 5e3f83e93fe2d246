# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="docscompiler",
    version="0.1.0",
    description="Compile multi-language documentation trees into a static HTML site",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["docscompiler", "docscompiler.*"]),
    python_requires=">=3.8",
    install_requires=[
        "Markdown>=3.4",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'docscompiler=docscompiler.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
