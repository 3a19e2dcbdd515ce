from setuptools import setup, find_packages


install_requires = [
    'botocore>=1.28.0',
    'typing-extensions>=4; python_version<"3.11"',
]

setup(
    name='pynamotable',
    version=__import__('pynamotable').__version__,
    packages=find_packages(exclude=('examples', 'tests',)),
    description='Declarative, idempotent creation and deletion of DynamoDB tables',
    long_description=open('README.rst').read(),
    long_description_content_type='text/x-rst',
    zip_safe=False,
    license='MIT',
    keywords='python dynamodb amazon',
    python_requires=">=3.7",
    install_requires=install_requires,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'License :: OSI Approved :: MIT License',
    ],
    extras_require={
        'test': ['pytest>=6'],
    },
)
