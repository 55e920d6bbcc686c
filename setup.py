from setuptools import setup, find_packages

setup(
    name='fwrange',
    version='0.1-dev',
    description='A fixed-width interval abstract domain for integer '
                'value-range analysis.',
    install_requires=['funcy'],
    extras_require={
        'test': ['pytest']
    },
    packages=find_packages(include=['fwrange*']),
)
