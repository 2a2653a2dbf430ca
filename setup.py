from setuptools import setup, find_packages

setup(
    name="pinline",
    version="0.1.0",
    description="Stream output to a terminal above a pinned status line and prompt",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit>=3.0.29",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "pyte",
        ],
    },
    python_requires=">=3.11",
)
