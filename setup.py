"""
Setup file

"""

from setuptools import setup, find_packages

setup(
    name = "asymvortex",
    version = '1.0.0',
    packages=find_packages(exclude=['tests']),
    py_modules=['vortexevent'],
    scripts=['vortexevent.py'],
    include_package_data=True,
    package_data = {
        '' : ['example/*'],
    },

    install_requires = [
    'numpy',
    'tqdm'],

    extras_require = {
        'test': ['pytest'],
    },

    # metadata:
    description = "Asymmetric Holland vortex model for storm surge forcing",
    keywords = "Tropical cyclone hurricane vortex wind pressure",

    )
