from setuptools import setup, find_packages

setup(
    name="dna_cst_package",
    version="0.1.0",
    description="Compressed suffix trie search and LCS similarity for DNA sequences",
    packages=find_packages(where='.', include=['dna_cst_package', 'dna_cst_package.*']),
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.19.0',
        'loguru>=0.7.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
        # Only needed for benchmark.py at the repository root
        'benchmark': ['pandas', 'matplotlib', 'seaborn'],
    },
    zip_safe=False
)
