from setuptools import setup, find_packages

setup(
    name="rocketapi-async",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.0",
        "structlog>=23.1",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "pytest-httpx",
        ],
    },
    description="Async client for the RocketAPI Instagram and Threads proxy.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://docs.rocketapi.io/api/",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
