#!/usr/bin/env python3

from setuptools import setup, find_packages


setup(name='assertmatch',
      version='0.1.0',
      description='Composable argument matchers for python test assertions',
      author='JJGG',
      license='MIT',
      packages=find_packages(exclude=['tests', 'tests.*']),
      install_requires=[
          'structlog>=23.1',
          'pydantic>=2.0',
          'pydantic-settings>=2.0',
      ],
      extras_require={
          'test': [
              'pytest>=7.0',
          ],
      },
      python_requires='>=3.8',
)
