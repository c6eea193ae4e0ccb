from setuptools import setup, find_packages

main_ns = {}
with open("src/numeral_converter/_version.py") as ver_file:
    exec(ver_file.read(), main_ns)

setup(
    name="numeral-converter",
    version=main_ns["__version__"],
    author="Jon Connell",
    author_email="python@figsandfudge.com",
    description="Convert between integers and Roman numerals",
    license="MIT",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    entry_points={
        "console_scripts": [
            "roman-numerals=numeral_converter._convert_numerals:main",
        ],
    },
    install_requires=[],
    extras_require={
        "test": ["pytest", "pytest-check", "pytest-console-scripts", "roman"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
