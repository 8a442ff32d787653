from setuptools import setup, find_packages

setup(
    name="SeaLife",
    version="0.1",
    packages=find_packages(include=["sealife", "sealife.*"]),
    description="Grid-based sea life simulation of sharks, barracudas, tuna, sardines, jellyfish and algae under a day/night cycle.",
    author="P. van Doesburg",
    author_email="petervandoesburg11@gmail.com",
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",
        "pygame",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
