# setup.py
from setuptools import setup, find_packages

setup(
    name="keybench",
    version="0.1.0",
    description="Lookup cost and identity of text, interned and integer keys",
    packages=find_packages(include=["keybench", "keybench.*"]),
    python_requires=">=3.9",
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["keybench=keybench.__main__:main"]},
    zip_safe=False,
)
