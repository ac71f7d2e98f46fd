import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pngchunks",
    version="0.0.1",
    author="Gianluca Pacchiella",
    author_email="gp@ktln2.org",
    description="Read, add and remove chunks of PNG files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/gipi/pngchunks",
    packages=setuptools.find_packages(exclude=['tests']),
    scripts=['scripts/pngsecret.py'],
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
            'pillow',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
)
