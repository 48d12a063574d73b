from setuptools import setup

setup(
    name='tmiline',
    version='0.1.0',
    packages=[
        'tmiline',
        'tmiline.utils'
    ],
    install_requires=[],
    extras_require={
        'docs': 'sphinx_rtd_theme',    # the Sphinx theme we use
        'tests': 'pytest',             # collect and run tests
        'coverage': 'pytest-cov'       # get test case coverage
    },
    entry_points={
        'console_scripts': [
            'tmiline = tmiline.utils.run:main',
            'tmiline-split = tmiline.utils.split:main'
        ]
    },

    url='https://github.com/tmiline/tmiline',
    keywords='irc twitch tmi chat parser tokenizer python3',
    description='A compact tokenizer and line toolkit for the IRC-based Twitch chat protocol.',
    license='BSD',

    zip_safe=True,
    test_suite='tests'
)
