from setuptools import setup


with open('README.rst', 'r') as f:
    # skip the banners
    lines = f.readlines()[6:]
    long_desc = ''.join(lines)

setup(
    name='pyblossom',
    version='1.0.0',
    description='Maximum-cardinality matchings in general graphs via Edmonds\' blossom algorithm',
    long_description=long_desc,
    long_description_content_type='text/x-rst',
    license='BSD 2-Clause',
    packages=['pyblossom'],
    install_requires=[
        'numpy>=1.9',
        'scipy>=1.8.0',
    ],
    extras_require={
        'experiments': ['matplotlib'],
    },
    python_requires='>=3.9'
)
