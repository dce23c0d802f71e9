import os

from setuptools import find_packages, setup  # noqa: H301

DESCRIPTION = "Translate flat job configuration to and from Rundeck job definitions"

# Try to read description, otherwise fallback to short description
try:
    with open(os.path.abspath("README.md")) as filey:
        LONG_DESCRIPTION = filey.read()
except Exception:
    LONG_DESCRIPTION = DESCRIPTION

# Read in the version
with open(os.path.join("rundeckjob", "__init__.py")) as fd:
    version = fd.read().strip().replace("__version__ = ", "").replace('"', "")

################################################################################
# MAIN #########################################################################
################################################################################

if __name__ == "__main__":
    setup(
        name="rundeck-job-python",
        version=version,
        packages=find_packages(exclude=["tests", "tests.*"]),
        include_package_data=True,
        zip_safe=False,
        license="MIT",
        description=DESCRIPTION,
        long_description=LONG_DESCRIPTION,
        long_description_content_type="text/markdown",
        keywords="rundeck, jobs, scheduler, configuration",
        install_requires=["jsonschema", "pyyaml"],
        extras_require={"tests": ["pytest", "pytest-cov"]},
        tests_require=["pytest", "pytest-cov"],
        classifiers=[
            "Intended Audience :: Developers",
            "Intended Audience :: System Administrators",
            "License :: OSI Approved :: MIT License",
            "Programming Language :: Python",
            "Topic :: Software Development",
            "Topic :: System :: Systems Administration",
            "Operating System :: Unix",
            "Programming Language :: Python :: 3.8",
        ],
        entry_points={
            "console_scripts": [
                "rundeck-job=rundeckjob.client:run_rundeck_job",
            ]
        },
    )
