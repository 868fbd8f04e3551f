from setuptools import setup, find_packages

setup(
    name="VertexBSP",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "samples"]),
    python_requires=">=3.8",
    include_package_data=True,  # Force additional files into the package
)
