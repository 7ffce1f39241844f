#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import (
    setup,
    find_packages,
)

extras_require = {
    'test': [
        "pytest>=7.0.0",
        "pytest-xdist",
        "tox>=4.0.0",
        "hypothesis>=6.0.0,<7",
        "crc>=4.0.0,<8",
    ],
    'lint': [
        "flake8>=6.0.0",
        "black>=23.1.0",
        "mypy>=1.0.0",
    ],
    'dev': [
        "bump-my-version",
        "pytest-watch>=4.1.0,<5",
        "wheel",
        "twine",
        "ipython",
    ],
}

extras_require['dev'] = (
    extras_require['dev'] +
    extras_require['test'] +
    extras_require['lint']
)

with open('README.md', encoding='utf-8') as readme_file:
    long_description = readme_file.read()

setup(
    name='py-pngchunk',
    # *IMPORTANT*: Don't manually change the version here. Use `bump-my-version`, as described in readme
    version='0.1.0-alpha.1',
    description="""py-pngchunk: A pure python codec for PNG style length-prefixed, type-tagged, CRC-32 checked chunks""",
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='py-pngchunk contributors',
    include_package_data=True,
    install_requires=[],
    python_requires='>=3.8, <4',
    extras_require=extras_require,
    license="MIT",
    zip_safe=False,
    keywords='png chunk crc32 codec',
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: PyPy',
    ],
)
