from setuptools import setup, find_packages

setup(
    name="equity_statistics",
    version="0.1",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        'pandas',
        'numpy',
        'pydantic>=2'
    ],
    extras_require={
        'test': ['pytest']
    }
)
