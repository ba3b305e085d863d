"""
Setup script for practice-scheduler.

The Adaptive Practice Scheduler decides, per learner event:

1. Which skill to present next (interleaving)
2. Whether to vary the question's form (variation)
3. Whether to insert a restorative microbreak (attention)
4. Whether retrieval practice beats restudy (retrieval)

The 'practice-scheduler' command exposes these decisions from the terminal.
"""

from setuptools import find_packages, setup

setup(
    name="practice-scheduler",
    version="1.0.0",
    description="Adaptive practice scheduler - interleaving, microbreaks and retrieval planning",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
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
        "test": [
            "pytest>=7.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "practice-scheduler=practice_scheduler.cli:main",
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
    keywords="learning interleaving microbreaks retrieval-practice education cognitive",
)
