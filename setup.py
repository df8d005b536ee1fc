from setuptools import setup, find_packages

with open('README.md') as f:
    readme = f.read()

setup(
    name='markupbuilder',
    version='0.1.0',
    description='markupbuilder module',
    long_description=readme,
    long_description_content_type='text/markdown',
    author='Paul Webb',
    author_email='p@technobok.org',
    python_requires='>=3.9',
    packages=find_packages(exclude=('tests', 'docs')),
    extras_require={
        'test': ['pytest'],
    },
)
