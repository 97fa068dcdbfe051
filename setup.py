"""
Setup script for wordquest-scheduler.

WordQuest Scheduler is the word-selection engine behind the WordQuest
vocabulary app. It serves two roles:

1. Session Builder - Picks the words for each learning session
2. Review Scheduler - Decides when each word may reappear

The 'wordquest' command is a developer CLI over the same engine.
"""

from setuptools import find_packages, setup

setup(
    name="wordquest-scheduler",
    version="1.0.0",
    description="Adaptive word selection and spaced repetition for children's vocabulary learning",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="WordQuest",
    packages=find_packages(include=["wordquest", "wordquest.*"]),
    py_modules=["config"],
    package_data={"wordquest": ["data/*.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wordquest=wordquest.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning spaced-repetition vocabulary education scheduling",
)
