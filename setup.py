from pathlib import Path

from setuptools import find_packages, setup

version = (Path(__file__).parent / "menuprobe/VERSION").read_text("ascii").strip()


install_requires = [
    "Twisted>=21.7.0",
]
extras_require = {
    "test": [
        "pytest",
        "testfixtures",
    ],
}


setup(
    name="menuprobe",
    version=version,
    description="Dump the desktop files used to build freedesktop.org menus",
    long_description=open("README.rst", encoding="utf-8").read(),
    license="BSD",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"menuprobe": ["VERSION"]},
    include_package_data=True,
    zip_safe=False,
    entry_points={"console_scripts": ["menuprobe = menuprobe.cmdline:execute"]},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: BSD License",
        "Operating System :: POSIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Desktop Environment",
        "Topic :: Utilities",
    ],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
)
