"""
Setup configuration for namescope.

Scoped, collision-free identifier allocation for source code generators.
"""

from setuptools import setup, find_packages
import os


# Read version from package
def get_version():
    """Extract version from package __init__.py"""
    version_file = os.path.join(os.path.dirname(__file__), "namescope", "__init__.py")
    with open(version_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip("\"'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    """Read long description from README.md if available"""
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return "namescope: scoped identifier allocation for code generators"


setup(
    name="namescope",
    version=get_version(),
    author="Namescope Team",
    author_email="namescope@example.com",
    description="Scoped, collision-free identifier allocation for code generators",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*", "examples*", "docs*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
    install_requires=[
        "torch>=2.0.0",
        "pyyaml>=5.4",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=22.0",
            "isort>=5.0",
            "mypy>=0.900",
            "flake8>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "namescope-info=namescope.utils.info:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="codegen, identifiers, naming, scope, pytorch, fx",
)
