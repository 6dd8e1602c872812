from setuptools import setup, find_packages

setup(name='quatkit',
      version='1.0.0',
      description='Quaternion arithmetic, conversions, and vector rotation built on numpy',
      packages=find_packages(include=['quatkit', 'quatkit.*']),
      python_requires='>=3.11',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']})
