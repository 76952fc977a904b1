from setuptools import setup, find_packages

def read_requirements(path='requirements.txt'):
    """Read requirements from a requirements file."""
    with open(path, 'r') as f:
        return [line.strip() for line in f if line.strip() and not line.startswith('#')]

setup(
    name="consolelog",
    version="1.0.0",
    packages=find_packages(include=['consolelog', 'consolelog.*']),
    install_requires=read_requirements(),
    extras_require={
        'test': read_requirements('requirements-test.txt'),
    },
    python_requires=">=3.11",
    entry_points={
        'console_scripts': [
            'consolelog-demo=consolelog.main:main',
        ],
    },
    # Modern packaging configuration
    setup_requires=['setuptools>=64.0.0'],
)
