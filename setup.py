#!/usr/bin/env python
from setuptools import setup

setup(
    name='wsgi-prerender',
    version='0.1.0',
    description='Serve Prerender snapshots to crawlers from any WSGI application',
    long_description=open('README.rst').read(),
    license='BSD',
    packages=['wsgi_prerender'],
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Internet :: WWW/HTTP :: WSGI :: Middleware',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    install_requires=['scrapy', 'httpx'],
    extras_require={
        'test': ['pytest'],
    },
)
