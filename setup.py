from pathlib import Path
from setuptools import setup, find_packages

root = Path(__file__).parent
version_text = root.joinpath('src', 'gamelog', 'version.py').read_text()
version = version_text.split('VERSION = ', 1)[-1].strip().replace('-', '').replace("'", '')

setup(
    name='gamelog',
    version=version,
    description='Level-filtered logging facade with per-caller colored tags, lazy messages and an editor-only channel',
    long_description=root.joinpath('SPEC_FULL.md').read_text(),
    long_description_content_type='text/markdown',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=[
        'loguru>=0.7.0',
        'pydantic>=2.0',
        'pydantic-settings>=2.0',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires='>=3.11',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Topic :: System :: Logging',
    ],
)
