from setuptools import setup, find_packages

setup(
    name="pairalign",
    version="0.1.0",
    description="Global and local pairwise alignment with enumeration of all optimal alignments",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"pairalign": ["data/*"]},
    include_package_data=True,

    install_requires=[
        "numpy",
        "biopython",
    ],
    extras_require={
        "plot": [
            "matplotlib",
            "seaborn",
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
        ],
        "all": [
            "matplotlib",
            "seaborn",
            "pytest>=7.0",
            "pytest-cov",
        ]
    },
    entry_points={
        "console_scripts": [
            "pairalign=pairalign.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.9',
)
