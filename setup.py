import setuptools
from pathlib import Path

with open("README.md", "r") as fh:
    long_description = fh.read()


requirements = Path('requirements.txt').read_text().splitlines()
test_requirements = Path('requirements-dev.txt').read_text().splitlines()


setuptools.setup(
    name="awskeyid",
    keywords='aws access-key account-id',
    version="0.1.0",
    description="Decode the AWS account ID and resource type from an AWS access key ID without any AWS API calls.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['awskeyid', 'awskeyid.*']),
    entry_points = {
        'console_scripts': ['awskeyid=awskeyid.__main__:main'],
    },
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
    },
    tests_require=test_requirements,
    python_requires='>=3.7',
    classifiers=(
        'Development Status :: 4 - Beta',
        'Intended Audience :: Information Technology',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Natural Language :: English',
        'Topic :: Security',
        'Programming Language :: Python :: 3',
    ),
)
