import re
from pathlib import Path

from setuptools import find_packages, setup

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")


def load_requirements(filename="requirements.txt"):
    requirements_path = this_directory / filename
    if not requirements_path.exists():
        print(f"Warning: {filename} not found. Proceeding without it.")
        return []
    with open(requirements_path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]


def get_version(package_init_file_path: Path) -> str:
    """
    Reads the __version__ string from the given package's __init__.py file.
    """
    if not package_init_file_path.exists():
        raise RuntimeError(
            f"Package __init__.py not found at: {package_init_file_path}"
        )

    init_py_content = package_init_file_path.read_text(encoding="utf-8")
    match = re.search(
        r"^__version__\s*=\s*['\"]([^'\"]*)['\"]", init_py_content, re.MULTILINE
    )
    if match:
        return match.group(1)
    raise RuntimeError(
        f"Unable to find __version__ string in {package_init_file_path}"
    )


VERSION = get_version(this_directory / "game_launcher" / "__init__.py")

setup(
    name="game-launcher",
    version=VERSION,
    author="Game Launcher Team",
    author_email="dev@example.com",
    description="Desktop game launcher with automatic archive updates.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(
        exclude=["tests*", "build*", "dist*", "*.egg-info*", "scripts*"]
    ),
    py_modules=["main"],
    include_package_data=True,
    install_requires=load_requirements(),
    extras_require={
        "test": load_requirements("requirements-test.txt"),
    },
    python_requires=">=3.8",
    entry_points={
        "gui_scripts": [
            "game-launcher=main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Games/Entertainment",
        "Environment :: X11 Applications :: Qt",
        "Framework :: AsyncIO",
    ],
    keywords="game launcher updater PySide6 aiohttp",
)
