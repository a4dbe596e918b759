from setuptools import setup, find_packages

setup(
    name="cliopts",
    version="0.1.0",
    description="Lenient command-line option scanner with flat help rendering.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["cliopts", "cliopts.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13",
        "pydantic>=2",
        "pyyaml>=6",
        "toml>=0.10",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["cliopts=cliopts.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
