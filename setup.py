#!/usr/bin/env python3
import os

from setuptools import find_packages, setup


def read_version():
    version = {}
    path = os.path.join(os.path.dirname(os.path.realpath(__file__)),
                        'src', 'seqdsp', '_version.py')
    with open(path) as f:
        exec(f.read(), version)
    return version['version']


setup(
    name='seqdsp',
    version=read_version(),
    author='seqdsp developers',
    description='Elementary operations on 1-D numeric sequences, compiled with numba',
    long_description='',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.9',
    install_requires=[
        'colorlog',
        'numba',
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    zip_safe=False,
)
