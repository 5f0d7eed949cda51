from setuptools import setup, find_packages

setup(
    name="mkdocs-funcref",
    version="1.0.0",
    description="MkDocs plugin generating pipeline function reference partials",
    keywords="mkdocs pipeline functions reference mdx documentation python",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "mkdocs>=1.4",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Documentation",
        "Topic :: Software Development :: Documentation",
        "Framework :: MkDocs",
    ],
    entry_points={
        "mkdocs.plugins": [
            "funcref = mkdocs_funcref.plugin:FuncRefPlugin",
        ],
        "console_scripts": [
            "mkdocs-funcref = mkdocs_funcref.generate:main",
        ],
    },
)
