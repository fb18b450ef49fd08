#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup

with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()


setup(
    name='jaeger-sender',
    version='1.0.0',
    description="Resolves how a tracing client sends spans: HTTP collector or UDP agent.",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=[
        'jaeger_sender',
        'jaeger_sender.config',
        'jaeger_sender.senders',
    ],
    package_dir={'jaeger_sender': 'jaeger_sender'},
    entry_points={
        'console_scripts': [
            'jaeger-sender=jaeger_sender.cli:cli'
        ]
    },
    include_package_data=True,
    install_requires=[
        'click>=8.0',
        'httpx>=0.24',
        'rich',
        'tenacity>=8.2',
        'typer>=0.9',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires=">=3.8",
    license="MIT license",
    zip_safe=False,
    keywords='jaeger tracing opentracing sender',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ]
)
