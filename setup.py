from pathlib import Path
from setuptools import find_packages, setup


PROJECT_ROOT = Path(__file__).resolve().parent


def read_long_description() -> str:
    readme_path = PROJECT_ROOT / "README.md"
    if readme_path.exists():
        return readme_path.read_text(encoding="utf-8")
    return ""


setup(
    name="knn-vote",
    version="0.1.0",
    description="Majority-vote k-nearest-neighbour classifier for comma-delimited feature files",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    author="GRAIL Simulation Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "knn-vote=knnvote.cli:main_entry",
        ],
    },
    include_package_data=True,
)
