#!/usr/bin/env python

from setuptools import setup
import io

setup(
    name='pdftree',
    version='0.1',
    description='Print the object graph of a PDF file as a tree',
    long_description=io.open('README.rst', encoding='utf-8').read(),
    author='The pdftree authors',
    platforms='Independent',
    packages=['pdftree', 'pdftree.objects'],
    install_requires=['pdfrw', 'colorama'],
    extras_require={'test': ['pytest']},
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Debuggers',
        'Topic :: Text Processing',
        'Topic :: Utilities',
    ],
    keywords='pdf debug tree object graph content stream',
)
