from setuptools import setup, find_packages

setup(
    name="envconfig",
    version="0.1.0",
    description="Typed dataclass config populated from environment variables and .env files",
    packages=find_packages(include=["envconfig", "envconfig.*"]),
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "envconfig=envconfig.__main__:main",
        ],
    },
    python_requires=">=3.10",
)
