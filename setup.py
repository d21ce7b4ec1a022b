"""Build siblings package."""
import setuptools

with open("README.md") as f:
    long_desc = f.read()

setuptools.setup(
    name="siblings",
    version="0.1.0",
    description="Region-aware endpoint resolution for sibling services",
    long_description=long_desc,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "click<8.2",
        "pydantic>=2",
        "python-dotenv>=1.0",
        "redis>=3.4",
        "tomli ; python_version<'3.11'",
        "tomli-w",
        "typing-extensions>=4.3.0 ; python_version<'3.11'",
    ],
    extras_require={
        "dev": [
            "pytest>=7",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "siblings = siblings.cli:cli",
        ],
    },
)
