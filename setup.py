"""
Build script for textops.
"""

# std
import os

# third-party
from setuptools import Command, find_packages, setup


# Setuptools
# ---------------------------------------------------------------------------- #

class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        os.system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


# Main
# ---------------------------------------------------------------------------- #

setup(
    packages=find_packages('src', exclude=['tests', 'tests.*']),
    package_dir={'': 'src'},
    include_package_data=True,
    package_data={'textops': ['config.yaml']},
    cmdclass={'clean': CleanCommand}
)
