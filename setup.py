from setuptools import setup, find_packages
import os


VERSION_PATH = os.path.join(os.path.dirname(__file__), 'braket', 'VERSION')
with open(VERSION_PATH) as version_file:
    VERSION = version_file.read().strip()


setup(
    name='braket',
    version=VERSION,
    packages=find_packages(exclude=['test', 'test.*', 'experiments']),
    package_data={
        'braket': ['VERSION'],
    },
    install_requires=[
        'numpy>=1.17',
    ],
)
