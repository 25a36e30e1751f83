import setuptools

try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "Fixed-capacity LRU cache on an arena-backed doubly linked list"

setuptools.setup(
    name="lrukit",
    version="0.1.0",
    description="Fixed-capacity LRU cache on an arena-backed doubly linked list",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src", include=["lrukit", "lrukit.*"]),
    install_requires=[
        "python-dotenv",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
