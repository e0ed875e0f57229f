#!/usr/bin/env python3

import os
from setuptools import setup, find_packages


BASE_DIR = os.path.abspath(os.path.dirname(__file__))
try:
    with open(os.path.join(BASE_DIR, 'README.rst')) as fp:
        README = fp.read()
except IOError:
    README = ''

setup(name='promathx',
      version='0.1.0',
      description='Arithmetic expression calculator with HTTP API and telegram bot',
      long_description=README,
      classifiers=[
          'Development Status :: 3 - Alpha'
      ],
      keywords='calculator expression evaluator',
      license='MIT',
      packages=find_packages(include=('promathx*',)),
      entry_points={
          'console_scripts': ['promathx=promathx.cli:main'],
      },
      install_requires=[
          'python-telegram-bot[socks]>=21.0',
          'Flask>=2.2',
          'Flask-Cors>=4.0',
          'Werkzeug'
      ],
      extras_require={
          'dev': [
              'pytest',
              'pytest-mock',
              'coverage',
              'twine>=1.8.1',
              'wheel'
          ]
      },
      python_requires='>=3.8',
      include_package_data=True,
      zip_safe=False)
