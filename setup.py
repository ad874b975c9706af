from pathlib import Path
from setuptools import setup


def get_version(root_path):
    version_file = root_path / 'crudbuilder' / '__init__.py'
    with version_file.open() as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=')[1].strip().strip('"').strip("'")


ROOT_PATH = Path(__file__).parent
README = ROOT_PATH / 'README.rst'

setup(
    name='crudbuilder',
    version=get_version(ROOT_PATH),
    description='A fluent builder of parameterized SELECT, INSERT, UPDATE and DELETE statements.',
    long_description=README.read_text(),
    long_description_content_type='text/x-rst',
    license="MIT",
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Database',
    ],
    packages=['crudbuilder'],
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
)
