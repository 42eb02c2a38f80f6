from setuptools import setup, find_packages

setup(
    name="syntax_scoring",
    version="0.1.0",
    description="Classify, autocomplete and score lines of ()[]{}<> chunks, with rich CLI output",
    packages=find_packages(include=["syntax_scoring", "syntax_scoring.*"]),
    install_requires=[
        "rich>=10.0.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "syntax-score=syntax_scoring.cli:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
