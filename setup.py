from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name='antflow',
    version='0.1',
    packages=find_packages(exclude=['tests']),
    py_modules=['run_turn'],
    description='Per-turn routing and unit allocation engine for the CodinGame ants contest.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    install_requires=required,
    extras_require={'test': ['pytest']},
    python_requires='>=3.8',
)
