#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name='hackhub',
    version='1.0.0',
    description='A web application to run multi-stage hackathons',
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    include_package_data=True,
    python_requires='>=3.9',
    install_requires=[
        'Django>=4.2',
        'sentry-sdk',
        'haikunator',
        'requests',
        'boto3',
        'botocore',
    ],
    extras_require={
        'mysql': ['mysqlclient'],
        'test': ['pytest', 'pytest-django'],
    },
    license='MIT License'
)
