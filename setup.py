from setuptools import setup, find_packages

setup(
    name="icalkit",
    version="0.1.0",
    description="iCalendar event property serialization",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"icalkit": ["py.typed"]},
    python_requires=">=3.11",
    install_requires=[
        'icalendar>=5.0,<7',
        'PyYAML>=6.0',
        'typing_extensions>=4.0',
        'tzdata>=2023.3'
    ],
    extras_require={
        'test': [
            'pytest>=7.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'icalkit=icalkit.cli:main'
        ]
    }
)
