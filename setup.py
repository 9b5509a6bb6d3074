from setuptools import setup, find_packages

setup(
    name='harvestsheet',
    version='0.1.0',
    description='A CLI tool for turning Harvest time entries into semi-monthly timesheet CSVs and invoices.',
    author='René Lachmann',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'harvestsheet=harvestsheet.__main__:main',
        ],
    },
    include_package_data=True,
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
