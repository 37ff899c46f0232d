# setup.py
from setuptools import setup, find_packages

setup(
    name="scm",
    version="0.1.0",
    description="A small Scheme-like interpreter with a tail-call-safe evaluator",
    packages=find_packages(include=["scm", "scm.*", "scm_lsp", "scm_lsp.*"]),
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
            "scm=scm.repl:main",
            "scm-ls=scm_lsp.server:main",
        ],
    },
    zip_safe=False,
)
