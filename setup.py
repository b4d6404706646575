from setuptools import setup

setup(
    name='ircline',
    version='1.0.0',
    packages=[
        'ircline',
        'ircline.rfc1459',
        'ircline.ircv3',
    ],
    install_requires=[],
    extras_require={
        'tests': 'pytest',             # collect and run tests
        'coverage': 'pytest-cov'       # get test case coverage
    },

    keywords='irc ircv3 ctcp message parser protocol python3',
    description='A compact, standards-abiding IRC message parser and serializer for Python 3.',
    license='BSD',
    python_requires='>=3.6',

    zip_safe=True,
    test_suite='tests'
)
