from setuptools import setup

with open("version.txt") as f:
    version = f.read().strip()

with open("README.md", encoding="utf-8") as f:
    long_description = f.read().strip()

setup(
    name="syncfetch",
    version=version,
    description="URL, header and query-string types with a small blocking fetch",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="unlicense",
    packages=["syncfetch"],
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=["httpx"],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
