#!/usr/bin/env python

from setuptools import setup, find_packages

setup (
    name='sshpki',
    version='1.0.0',
    description='SSH public/private key handling',
    author='Sam Rushing, Eric Huss, IronPort Engineering',
    author_email='sam-coro@rushing.nightmare.com',
    license="MIT",
    url="http://github.com/ironport/shrapnel",
    packages=find_packages(exclude=['test', 'test.*']),
    python_requires='>=3.6',
    install_requires=['pycryptodome>=3.9'],
    extras_require={'test': ['pytest']},
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Security :: Cryptography',
    ],
)
