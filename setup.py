#!/usr/bin/python3
from os import system

from setuptools import Command
from setuptools import find_packages
from setuptools import setup


# taken from http://stackoverflow.com/a/3780822
class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


setup(
    name='persistent-tst',
    version='0.1.0',
    license='MIT',
    description='Persistent ternary search trees with structural sharing.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Text Processing :: Indexing',
    ],
    keywords=[
        'ternary search tree', 'persistent', 'immutable', 'trie', 'prefix'
    ],
    install_requires=[
        'numpy', 'psutil'
    ],
    extras_require={
        'test': ['pytest'],
    },
    cmdclass={
        'clean': CleanCommand,
    },
)
