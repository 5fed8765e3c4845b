from setuptools import setup, find_packages

setup(
    name="shared-diff",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">=3.10",
    description="Unified diff parser: changed files, added/removed lines and hunks.",
)
