# setup.py
from setuptools import setup, find_packages

setup(
    name="ethscope",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "tabulate>=0.9",
        "fastapi>=0.100.0",
        "uvicorn>=0.22.0",
        "web3>=6.0.0",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "prometheus-client>=0.17.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "pytest-cov>=4.1",
            "pytest-mock>=3.10",
            "httpx>=0.24",
            "hexbytes>=0.3",
            "black>=23.0",
            "isort>=5.12",
            "flake8>=6.0",
            "mypy>=1.0"
        ],
    },
    entry_points={
        "console_scripts": [
            "ethscope=ethscope.cli.cli:main",
        ],
    },
    author="Your Name",
    author_email="your.email@example.com",
    description="Ethereum block and transaction explorer backed by the Alchemy API",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/ethscope",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
