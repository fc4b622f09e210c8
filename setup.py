# setup.py
from setuptools import setup, find_packages

setup(
    name="polish",
    version="0.1.0",
    description="Prefix-notation interpreter whose grammar is driven by function arity",
    packages=find_packages(include=["polish", "polish.*", "polish_lsp", "polish_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor>=2.1",
        "pygls>=2.0",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "polish=polish.cli:main",
            "polish-ls=polish_lsp.server:main",
        ],
    },
    zip_safe=False,
)
