from setuptools import setup, find_packages
import lobe


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='lobe',
    description="A brainfuck parser and bytecode interpreter in pure Python",
    long_description=long_description,
    version=lobe.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    python_requires='>=3.6',
    extras_require={
        'test': ['hypothesis'],
    },
    entry_points={
        'console_scripts': [
            'lobe-dump = lobe.cli.dump:dump',
            'lobe-run = lobe.cli.run:run',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Interpreters',
    ]
)
