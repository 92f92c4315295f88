from setuptools import setup, find_packages

setup(
    name="connectfour",
    version="0.1.0",
    description="Rules engine for Connect Four",
    packages=find_packages(include=["connectfour", "connectfour.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
)
