from setuptools import setup

with open('README.rst', 'r') as fh:
    long_description = fh.read()

# The lines below are parsed by `docs/conf.py`.
name = 'chaumian'
version = '0.1.0'

setup(
    name=name,
    version=version,
    packages=[name,],
    package_dir={'': 'src'},
    python_requires='>=3.8',
    install_requires=[
        'ecdsa>=0.18'
    ],
    extras_require={
        'coincurve': [
            'coincurve>=18.0'
        ],
        'docs': [
            'sphinx~=7.2',
            'sphinx-rtd-theme~=2.0'
        ],
        'test': [
            'fountains>=1.3',
            'pytest>=7.0',
            'pytest-cov>=3.0'
        ],
        'lint': [
            'pylint~=3.1'
        ],
        'coveralls': [
            'coveralls~=4.0'
        ],
        'publish': [
            'setuptools~=69.0',
            'wheel~=0.43',
            'twine~=5.0'
        ]
    },
    license='MIT',
    author='chaumian contributors',
    description='Python library that serves as an API for the elliptic ' + \
                'curve primitives used to implement Chaumian ecash ' + \
                '(blind signature) protocols.',
    long_description=long_description,
    long_description_content_type='text/x-rst',
)
