from setuptools import setup, find_packages

setup(
    name="minitrace",
    version="0.3.0b0",
    description="Deferred console tracing: indented enter/leave lines printed at exit",
    author="Jorge Ramos",
    author_email="jramos@pobox.com",
    url="https://github.com/jramos-br/minitrace",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={
        "test": ["pytest", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "minitrace=minitrace.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)
