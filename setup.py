"""
Setup for the storefront theming service.

The Django project resolves the theme of every request from the reseller registered for the request's domain,
and locates themed templates and assets with a fallback to the default theme.
"""
from setuptools import find_packages, setup

with open('README.rst') as readme:
    long_description = readme.read()

setup(
    name='storefront-theming',
    version='0.1.0',
    description='Per-domain theme and template resolution for a multi-tenant storefront',
    long_description=long_description,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet',
        'Intended Audience :: Developers',
        'Environment :: Web Environment',
        'Framework :: Django',
    ],
    keywords='storefront themes resellers',
    license='AGPL',
    packages=find_packages(include=['storefront', 'storefront.*']),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'Django',
        'django-threadlocals',
        'django-waffle',
        'edx-django-utils',
        'path',
    ],
    extras_require={
        'test': [
            'ddt',
            'mock',
            'pytest',
            'pytest-django',
        ],
    },
)
