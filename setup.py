from setuptools import find_packages, setup

setup(
  name = 'redactcheck',
  version = '2.0.0',
  license='GNU',
  description = 'command line tool to check files for secrets and network identifiers before they are shared',
  package_dir = {'': 'src'},
  packages = find_packages(where='src'),
  python_requires = '>=3.11',
  keywords = ['redaction', 'secrets', 'compliance', 'scanner'],
  install_requires=[
"charset-normalizer>=3.0",
"pydantic>=2.0",
"pydantic-settings>=2.0",
"PyYAML>=6.0",
"rich>=13.0",
"typer>=0.9",
      ],
  extras_require={
    'test': [
"pytest>=7.0",
    ],
  },
  entry_points={
    'console_scripts': [
      'redactcheck=redactcheck.cli.main:run_cli',
    ],
  },
  classifiers=[
    'Development Status :: 4 - Beta',
    'Intended Audience :: Information Technology',
    'Topic :: Security',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
  ],
)
