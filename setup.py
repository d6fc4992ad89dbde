from setuptools import find_packages, setup

setup(
    name="pagerduty-api",
    version="0.1.0",
    license="Apache License 2.0",

    python_requires=">=3.11",
    description="Client library for the PagerDuty REST API v1 and the "
                "PagerDuty Events API.",

    packages=find_packages(include=("pagerduty_api", "pagerduty_api.*")),

    install_requires=[
        "Click>=8.0,<9.0",
        "httpx>=0.27,<1.0",
        "prometheus-client>=0.20,<1.0",
        "pydantic>=2.7,<3.0",
        "pydantic-settings>=2.3,<3.0",
        "python-json-logger>=3.1,<4.0",
        "PyYAML>=6.0,<7.0",
        "structlog>=24.1",
        "tabulate>=0.9,<0.10",
        "tzdata",
    ],

    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-mock>=3.12",
        ],
    },

    test_suite="tests",

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.12',
    ],
    entry_points={
        'console_scripts': [
            'pagerduty-api = pagerduty_api.cli:root',
        ],
    },
)
