"""
Setup script for the Password Security Toolkit package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="password-security-toolkit",
    version="0.1.0",
    author="Password Toolkit Team",
    author_email="example@example.com",
    description="Hash, brute-force, strength-check and generate passwords",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/password-security-toolkit",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Security",
        "Topic :: Utilities",
    ],
    python_requires=">=3.8",
    install_requires=[
        "tqdm>=4.50.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "password-toolkit=password_toolkit.cli:main",
        ],
    },
)
