from setuptools import setup, find_packages

setup(
    name='crimson-interpreter',
    version='0.1.0',
    description='Crimson language interpreter: line-oriented lexer and single-pass executor',
    author='Crimson contributors',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'click>=8.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'crm = crimson.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
