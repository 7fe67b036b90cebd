from setuptools import setup, find_packages

setup(
    name="argbind",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"argbind": ["py.typed"]},
    install_requires=[
        "pydantic>=2.0",
        "structlog>=23.1",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    author="argbind contributors",
    description="Bind command-line flags, options and positionals to typed storage cells.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
