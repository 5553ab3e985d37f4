import io

from setuptools import find_packages, setup

with io.open('lc3vm/_version.py', encoding="utf-8") as fid:
    for line in fid:
        if line.startswith('__version__'):
            __version__ = line.strip().split()[-1][1:-1]
            break

with open('README.md') as f:
    readme = f.read()

setup(name='lc3vm',
      version=__version__,
      description='A virtual machine for LC-3 object images, with a Jupyter kernel based on MetaKernel',
      long_description=readme,
      long_description_content_type='text/markdown',
      install_requires=["metakernel", "ipykernel", "jupyter_client"],
      extras_require={"test": ["pytest"]},
      packages=find_packages(include=["lc3vm", "lc3vm.*"]),
      entry_points={
          'console_scripts': ['lc3vm = lc3vm.__main__:main'],
      },
      python_requires='>=3.7',
      classifiers = [
          'Framework :: IPython',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
          'Topic :: System :: Emulators',
      ]
)
