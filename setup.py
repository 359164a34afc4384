# setup.py
from setuptools import setup, find_packages

setup(
    name="ember",
    version="0.1.0",
    description="Reader and writer for a small Lisp data notation, with a REPL and language server",
    packages=find_packages(include=["ember", "ember.*", "ember_lsp", "ember_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "ember=ember.__main__:main",
        ],
    },
    zip_safe=False,
)
