import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="design_token_preprocessor",
    version="1.0.0",
    description="Resolve references and type inheritance in DTCG design token files before JSON Schema validation",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Pre-processors",
        "Topic :: Text Processing",
        "Intended Audience :: Developers",
    ],
    keywords="design tokens dtcg json schema references preprocessing",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jsonschema>=4.18.0",
        "referencing>=0.28.0",
        "structlog>=23.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "design_token_preprocessor=design_token_preprocessor.design_token_preprocessor:design_token_preprocessor",
        ],
    },
    include_package_data=True,
    package_data={
        "design_token_preprocessor": ["tests/test_data/**/*.json"],
    },
    zip_safe=False,
)
