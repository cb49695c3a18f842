from setuptools import setup, find_namespace_packages

long_description = """
Interchangeable in-memory representations of a directed graph over a fixed
vertex set: adjacency lists, a dense boolean matrix, an arc list and hash sets.
Any representation can be built from any other, and a breadth-first traversal
works on all of them.
"""

setup(name="graphrep",
        version="0.0.1",
        description="Interchangeable directed graph representations",
        long_description=long_description,
        license="MIT",
        packages=find_namespace_packages(include=["graphrep"]),
        python_requires=">=3.8",
        install_requires=[
            "numpy",
            "graphviz"],
        zip_safe=False)
