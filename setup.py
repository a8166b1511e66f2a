from setuptools import setup, find_namespace_packages

setup(
    name="torus_solver",
    version="0.1.0",
    packages=find_namespace_packages(include=["torus_solver*"]),
    package_data={"torus_solver.configs": ["*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.24",
        "numpy>=1.22",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "torus-solver=torus_solver.scripts.run_challenge:main",
        ]
    },
)
