from setuptools import setup, find_packages

setup(
    name="justify-layout",
    version="0.1.0",
    description="A Qt layout that wraps widgets into rows and justifies each row",
    author="",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "PySide6>=6.6.0",
    ],
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "justify-demo=justify_layout.main:main",
        ],
    },
)
