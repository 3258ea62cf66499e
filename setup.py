from setuptools import setup, find_packages

setup(
    name="srt-parser",
    version="0.1.0",
    description="Parse and serialize SubRip (.srt) subtitle text",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[],
    extras_require={
        'test': [
            'pytest>=6.0',
            'pysubs2>=1.8.0',
        ],
        'dev': [
            'pytest>=6.0',
            'pysubs2>=1.8.0',
            'black>=21.0',
            'isort>=5.0',
            'mypy>=0.900',
        ],
    },
    python_requires='>=3.8',
)
