"""
Setup configuration for h2_sizing package.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / 'README.md'
long_description = readme_path.read_text() if readme_path.exists() else ''

setup(
    name='h2_sizing',
    version='1.0.0',
    description='Hourly dispatch simulation and storage sizing for hydrogen production plants',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Hydrogen Production Team',
    author_email='team@h2plant.example.com',

    packages=find_packages(exclude=['tests', 'tests.*', 'configs']),
    package_data={
        'h2_sizing.data': ['base_profile.csv'],
        'h2_sizing.config': ['schemas/*.json'],
    },
    include_package_data=True,

    install_requires=[
        'numpy>=1.21.0',
        'pandas>=1.5.0',
        'pyyaml>=6.0',
        'jsonschema>=4.0.0',
        'pydantic>=2.0.0',
    ],

    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=3.0.0',
            'pytest-mock>=3.10.0',
            'mypy>=0.990',
            'black>=22.0.0',
            'flake8>=5.0.0',
        ],
    },

    entry_points={
        'console_scripts': [
            'h2-size=h2_sizing.simulation.runner:main',
        ],
    },

    python_requires='>=3.10',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
